"""
mwchain — Starlette Adapters
=============================

What:  Turn the usual Starlette middleware declarations into chain entries.
How:   Each helper returns a ``(app) -> app`` callable that instantiates the
       Starlette middleware around the app it is given. No middleware logic
       lives here.

    chain = Chain(
        middleware(CORSMiddleware, allow_origins=["https://example.com"]),
        http_middleware(timing),                    # async def timing(request, call_next)
        from_starlette(Middleware(GZipMiddleware, minimum_size=500)),
    )
"""

from typing import Any, Awaitable, Callable

from starlette.middleware import Middleware as StarletteMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from mwchain.chain import Middleware
from mwchain.exceptions import InvalidMiddlewareError

DispatchFunction = Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]


def middleware(cls: Callable[..., ASGIApp], *args: Any, **kwargs: Any) -> Middleware:
    """
    Build a chain entry from a middleware class and its options.

    ``cls`` is called as ``cls(app, *args, **kwargs)``, the constructor
    shape shared by ``CORSMiddleware``, ``GZipMiddleware`` and every
    ``BaseHTTPMiddleware`` subclass.
    """
    if not callable(cls):
        raise InvalidMiddlewareError(cls)

    def apply(app: ASGIApp) -> ASGIApp:
        return cls(app, *args, **kwargs)

    apply.__qualname__ = getattr(cls, "__qualname__", type(cls).__name__)
    return apply


def http_middleware(dispatch: DispatchFunction) -> Middleware:
    """Build a chain entry from an ``async def dispatch(request, call_next)`` function."""
    if not callable(dispatch):
        raise InvalidMiddlewareError(dispatch)
    apply = middleware(BaseHTTPMiddleware, dispatch=dispatch)
    apply.__qualname__ = getattr(dispatch, "__qualname__", "dispatch")
    return apply


def from_starlette(item: StarletteMiddleware) -> Middleware:
    """Build a chain entry from a ``starlette.middleware.Middleware`` declaration."""
    cls, args, kwargs = item
    return middleware(cls, *args, **kwargs)
