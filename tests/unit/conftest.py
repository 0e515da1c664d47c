"""
Shared fixtures for the unit suite.
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from canvas_core.canvas_client import CanvasClient
from canvas_core.settings import CanvasSettings
from tests.unit.fakes import BASE_URL, NOW, TOKEN, FakeCanvas


@pytest.fixture
def fake_canvas():
    return FakeCanvas()


@pytest.fixture
def settings():
    return CanvasSettings(access_token=TOKEN, base_url=BASE_URL)


@pytest.fixture
def make_client(fake_canvas, settings):
    """Factory for CanvasClients wired to the fake Canvas."""
    def factory():
        return CanvasClient(settings, transport=httpx.MockTransport(fake_canvas.handle))
    return factory


@pytest.fixture
def frozen_now():
    with patch("canvas_core.clock.utcnow", return_value=NOW):
        yield NOW


@pytest.fixture
def call_handler(make_client):
    """Run a canvas_core handler against the fake Canvas and return its dict."""
    def call(handler, **kwargs):
        async def go():
            async with make_client() as client:
                return await handler(client, **kwargs)
        return asyncio.run(go())
    return call
