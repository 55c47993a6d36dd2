"""
mwchain — ASGI Middleware Chains
=================================

What:  Register cross-cutting middleware once, then wrap any number of ASGI
       apps with them in a fixed order, optionally adding per-app middleware
       on top.

    from mwchain import Chain

    chain = Chain(request_id, access_log)
    chain.add(auth)
    app = chain.wrap(api, audit)   # request_id → access_log → auth → audit → api
"""

__version__ = "1.0.0"

from mwchain.adapters import from_starlette, http_middleware, middleware
from mwchain.chain import Chain, Handler, Middleware
from mwchain.exceptions import InvalidMiddlewareError, MWChainError

__all__ = [
    "Chain",
    "Handler",
    "InvalidMiddlewareError",
    "MWChainError",
    "Middleware",
    "from_starlette",
    "http_middleware",
    "middleware",
]
