"""
mwchain — Demo Service
=======================

What:  A small FastAPI service whose cross-cutting behavior is supplied by a
       ``Chain`` instead of ``app.add_middleware``.
How:   ``create_app()`` builds the FastAPI app, then returns
       ``chain.wrap(app)``. The default chain is Starlette's own CORS and
       GZip middleware, configured from ``settings``.
Who:   ``uvicorn mwchain.main:app``

Middleware order (default chain):
    Request  → [CORS] → [GZip] → FastAPI
    Response ← [CORS] ← [GZip] ← FastAPI
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.types import ASGIApp

from mwchain import __version__
from mwchain.adapters import middleware
from mwchain.chain import Chain
from mwchain.config import settings
from mwchain.schemas import HealthResponse

logger = logging.getLogger(__name__)

_start_time = time.time()


# ══════════════════════════════════════════════════════════════════════════
# Logging
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging from ``settings.log_level``.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info(
        "mwchain demo starting with %d middleware: %r",
        len(app.state.chain),
        app.state.chain,
    )
    yield
    logger.info("mwchain demo shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def default_chain() -> Chain:
    """The service-wide chain used when ``create_app`` is given none."""
    return Chain(
        middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_methods=["*"],
            allow_headers=["*"],
        ),
        middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size),
    )


def create_app(chain: Optional[Chain] = None) -> ASGIApp:
    """
    Create the demo FastAPI app and wrap it with ``chain``.

    Returns the wrapped ASGI app. The unwrapped FastAPI instance is not
    exposed; route handlers reach the chain through ``request.app.state``.
    """
    if chain is None:
        chain = default_chain()

    api = FastAPI(
        title="mwchain demo",
        version=__version__,
        lifespan=lifespan,
    )
    api.state.chain = chain

    @api.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=__version__,
            middleware=len(request.app.state.chain),
            uptime_seconds=round(time.time() - _start_time, 2),
        )

    return chain.wrap(api)


app = create_app()
