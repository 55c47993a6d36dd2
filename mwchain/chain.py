"""
mwchain — Middleware Chain
===========================

What:  An ordered, append-only list of ASGI middleware that can be wrapped
       around any number of ASGI apps.
How:   A middleware is any callable ``(app) -> app``. ``Chain.wrap`` applies
       the call-site middleware first, then the chain's own, each group in
       reverse so that the first registered middleware ends up outermost.

Execution order (chain = [A, B], call-site = [C]):

    Request  → A → B → C → app
    Response ← A ← B ← C ← app

    i.e. "before" logic runs in registration order and "after" logic runs
    in exact reverse.

Thread Safety:
    The stored middleware live in an immutable tuple. ``add`` builds a new
    tuple under a lock and swaps the reference, and ``wrap`` reads the
    reference once, so a composition never sees a half-applied ``add``.
    Handlers already returned by ``wrap`` keep the middleware they were
    built with.
"""

import logging
import threading
from typing import Callable, Iterator, Optional, Tuple

from starlette.types import ASGIApp

from mwchain.config import settings
from mwchain.exceptions import InvalidMiddlewareError

logger = logging.getLogger(__name__)

Handler = ASGIApp
Middleware = Callable[[ASGIApp], ASGIApp]


class Chain:
    """
    Ordered collection of middleware applied around ASGI apps.

    Usage:
        chain = Chain(request_id, access_log)
        chain.add(auth)

        app = chain.wrap(notes_app)              # request_id → access_log → auth
        admin = chain.wrap(admin_app, audit)     # ... → auth → audit

    ``None`` entries are skipped when composing. Pass ``strict=True`` (or
    set ``MWCHAIN_STRICT``) to reject them at registration instead.
    """

    def __init__(self, *middlewares: Optional[Middleware], strict: Optional[bool] = None):
        self.strict = settings.strict if strict is None else strict
        self._lock = threading.Lock()
        self._middlewares: Tuple[Optional[Middleware], ...] = self._validate(middlewares)

    # ── Registration ──────────────────────────────────────────────────────

    def add(self, *middlewares: Optional[Middleware]) -> None:
        """
        Append middleware after everything already registered.

        The whole batch is validated before anything is stored; an invalid
        entry leaves the chain unchanged.
        """
        if not middlewares:
            return
        validated = self._validate(middlewares)
        with self._lock:
            self._middlewares = self._middlewares + validated
            total = len(self._middlewares)
        logger.debug("Added %d middleware to chain (now %d)", len(validated), total)

    # ── Composition ───────────────────────────────────────────────────────

    def wrap(self, app: Handler, *middlewares: Optional[Middleware]) -> Handler:
        """
        Return ``app`` wrapped by the call-site ``middlewares`` and then by
        the chain.

        The call-site group sits inside the chain group: the chain's
        middleware run first on the way in, then ``middlewares`` in the
        order given. Neither the chain nor ``middlewares`` is modified, and
        with nothing to apply ``app`` itself is returned.
        """
        handler_specific = self._validate(middlewares)
        stored = self._middlewares

        wrapped = _apply(app, handler_specific)
        wrapped = _apply(wrapped, stored)

        logger.debug(
            "Wrapped %s with %d chain + %d handler middleware",
            _name(app),
            len(stored),
            len(handler_specific),
        )
        return wrapped

    # ── Inspection ────────────────────────────────────────────────────────

    @property
    def middlewares(self) -> Tuple[Optional[Middleware], ...]:
        """Snapshot of the registered middleware, in registration order."""
        return self._middlewares

    def __len__(self) -> int:
        return len(self._middlewares)

    def __iter__(self) -> Iterator[Optional[Middleware]]:
        return iter(self._middlewares)

    def __repr__(self) -> str:
        names = ", ".join(_name(mw) for mw in self._middlewares)
        return f"{type(self).__name__}({names})"

    # ── Internals ─────────────────────────────────────────────────────────

    def _validate(self, middlewares) -> Tuple[Optional[Middleware], ...]:
        for index, mw in enumerate(middlewares):
            if mw is None:
                if self.strict:
                    raise InvalidMiddlewareError(mw, index=index)
                continue
            if not callable(mw):
                raise InvalidMiddlewareError(mw, index=index)
        return tuple(middlewares)


def _apply(app: Handler, middlewares: Tuple[Optional[Middleware], ...]) -> Handler:
    # Last entry innermost, first entry outermost.
    for mw in reversed(middlewares):
        if mw is None:
            logger.debug("Skipping None middleware")
            continue
        app = mw(app)
    return app


def _name(obj) -> str:
    if obj is None:
        return "None"
    return getattr(obj, "__qualname__", None) or type(obj).__name__
