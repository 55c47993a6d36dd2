"""
mwchain — Demo Service Tests
=============================

What:  ``create_app`` serves /health through the configured chain.
"""

import pytest
from fastapi import FastAPI

from mwchain import __version__
from mwchain.chain import Chain
from mwchain.main import create_app, default_chain


@pytest.mark.asyncio
async def test_health_through_default_chain(client_for):
    async with client_for(create_app()) as client:
        response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == __version__
    assert body["middleware"] == len(default_chain()) == 2
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_default_chain_applies_cors(client_for):
    async with client_for(create_app()) as client:
        response = await client.get("/health", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


@pytest.mark.asyncio
async def test_custom_chain(mw, client_for):
    async with client_for(create_app(Chain(mw(1), mw(2)))) as client:
        response = await client.get("/health")

    assert response.json()["middleware"] == 2
    assert response.headers["x-middleware-number"] == "21"


def test_empty_chain_returns_fastapi_app():
    assert isinstance(create_app(Chain()), FastAPI)
