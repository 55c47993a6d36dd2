"""
mwchain — Test Configuration (conftest.py)
===========================================

What:  Shared fixtures for the test suite.
How:   Middleware are observed the same way throughout: each numbered
       middleware appends its number to the ``X-Middleware-Number`` request
       header on the way in and to the response header on the way out, so
       the two headers spell out the execution order.

Fixtures:
    mw:          Factory for numbered tracing middleware
    echo_app:    FastAPI app that echoes the request trace back as JSON
    traces:      Sends one request through an app, returns (request, response) traces
    client_for:  Opens an httpx AsyncClient against any ASGI app
"""

import os
from contextlib import asynccontextmanager
from typing import List, Optional

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.datastructures import MutableHeaders

# Override settings for testing BEFORE any mwchain imports
os.environ["MWCHAIN_LOG_LEVEL"] = "WARNING"
os.environ.pop("MWCHAIN_STRICT", None)

from mwchain.chain import Middleware  # noqa: E402

TRACE_HEADER = "x-middleware-number"


def numbered(number: int, events: Optional[List[str]] = None) -> Middleware:
    """
    Tracing middleware tagged with ``number``.

    Request phase:  appends ``number`` to the request trace header.
    Response phase: appends ``number`` to the response trace header.
    ``events`` (optional) records "before N" / "after N" around the call.
    """

    def wrapper(app):
        async def traced(scope, receive, send):
            if scope["type"] != "http":
                await app(scope, receive, send)
                return

            headers = MutableHeaders(scope=scope)
            headers[TRACE_HEADER] = headers.get(TRACE_HEADER, "") + str(number)

            async def send_wrapper(message):
                if message["type"] == "http.response.start":
                    response_headers = MutableHeaders(scope=message)
                    response_headers[TRACE_HEADER] = (
                        response_headers.get(TRACE_HEADER, "") + str(number)
                    )
                await send(message)

            if events is not None:
                events.append(f"before {number}")
            await app(scope, receive, send_wrapper)
            if events is not None:
                events.append(f"after {number}")

        return traced

    wrapper.__qualname__ = f"mw{number}"
    return wrapper


@pytest.fixture
def mw():
    """Factory fixture: ``mw(3)`` returns the numbered middleware for 3."""
    return numbered


@pytest.fixture
def echo_app() -> FastAPI:
    """FastAPI app whose ``GET /`` returns the request trace it received."""
    api = FastAPI()

    @api.get("/")
    async def echo(request: Request):
        return {"request_trace": request.headers.get(TRACE_HEADER, "")}

    return api


@pytest.fixture
def client_for():
    """Open an httpx AsyncClient routed straight to an ASGI app."""

    @asynccontextmanager
    async def _open(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return _open


@pytest.fixture
def traces(client_for):
    """Send ``GET /`` through ``app``; return (request trace, response trace)."""

    async def _traces(app):
        async with client_for(app) as client:
            response = await client.get("/")
        assert response.status_code == 200
        return response.json()["request_trace"], response.headers.get(TRACE_HEADER, "")

    return _traces
