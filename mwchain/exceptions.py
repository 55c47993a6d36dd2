"""
mwchain — Exception Hierarchy
==============================

What:  Errors raised while registering middleware on a chain.
How:   Each exception carries a message and an optional context dict, the
       same shape used throughout the package.
When:  Only at registration time (Chain(), Chain.add(), Chain.wrap()).
       Composition never raises, and errors raised by handlers or wrappers
       while serving a request propagate untouched.

Exception Hierarchy:
    MWChainError (base)
    └── InvalidMiddlewareError   → entry is not a (Handler) -> Handler callable
"""

from typing import Any, Dict, Optional


class MWChainError(Exception):
    """
    Base exception for all mwchain errors.

    Attributes:
        message:  Human-readable description of the problem
        context:  Extra debug info (position of the entry, its type, ...)
    """

    def __init__(
        self,
        message: str = "A middleware chain error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidMiddlewareError(MWChainError, TypeError):
    """
    Raised when an entry cannot be used as a middleware.

    When:    A non-callable entry is registered, or a ``None`` entry is
             registered on a strict chain.
    Context: ``index`` of the offending entry and its ``type`` name.

    Also a ``TypeError`` so callers treating a bad argument type the
    usual way keep working.
    """

    def __init__(
        self,
        entry: Any = None,
        index: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if entry is None:
            message = "None is not allowed as a middleware on a strict chain"
        else:
            message = (
                f"Middleware must be a callable taking an ASGI app, "
                f"got {type(entry).__name__!r}"
            )
        ctx = context or {}
        ctx["type"] = type(entry).__name__
        if index is not None:
            ctx["index"] = index
        super().__init__(message=message, context=ctx)
        self.entry = entry
        self.index = index
