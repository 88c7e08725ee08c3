"""Pytest configuration and fixtures for Key Light Air adapter tests."""

import json
import socket
import sys
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.adapter import KEY_LIGHT_AIR_ID, KeyLightAdapter
from core.service import KeyLightService
from core.settings_schema import LightSettings


class RecordingManager:
    """Host stand-in that records every hook call."""

    def __init__(self) -> None:
        self.adapters: list = []
        self.added: list = []
        self.removed: list = []
        self.changes: list[tuple[str, Any]] = []

    def add_adapter(self, adapter) -> None:
        self.adapters.append(adapter)

    def handle_device_added(self, device) -> None:
        self.added.append(device)

    def handle_device_removed(self, device) -> None:
        self.removed.append(device)

    def property_changed(self, prop) -> None:
        self.changes.append((prop.name, prop.current_value()))


class FakeKeyLight:
    """Records requests made to /elgato/lights and answers like the lamp."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.status = 200
        self.state = {"on": 1, "brightness": 20, "temperature": 143}

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r["body"]) for r in self.requests if r["method"] == "PUT"]

    async def handle_put(self, request: web.Request) -> web.Response:
        body = await request.text()
        self.requests.append(
            {"method": "PUT", "headers": dict(request.headers), "body": body}
        )
        return web.json_response(json.loads(body), status=self.status)

    async def handle_get(self, request: web.Request) -> web.Response:
        self.requests.append({"method": "GET", "headers": dict(request.headers), "body": ""})
        return web.json_response(
            {"numberOfLights": 1, "lights": [self.state]}, status=self.status
        )


def unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def manager() -> RecordingManager:
    return RecordingManager()


@pytest.fixture
def fake_light() -> FakeKeyLight:
    return FakeKeyLight()


@pytest_asyncio.fixture
async def light_settings(aiohttp_server, fake_light) -> LightSettings:
    """Settings pointing at a local server playing the Key Light."""
    app = web.Application()
    app.router.add_put("/elgato/lights", fake_light.handle_put)
    app.router.add_get("/elgato/lights", fake_light.handle_get)
    server = await aiohttp_server(app)
    return LightSettings(host=server.host, port=server.port)


@pytest.fixture
def offline_settings() -> LightSettings:
    """Settings pointing at a port nothing listens on."""
    return LightSettings(host="127.0.0.1", port=unused_port())


@pytest.fixture
def adapter(manager, offline_settings) -> KeyLightAdapter:
    """Adapter whose light is unreachable, for tests that never need a response."""
    return KeyLightAdapter(manager, "test-adapter", KeyLightService(offline_settings))


@pytest.fixture
def device(adapter):
    return adapter.devices[KEY_LIGHT_AIR_ID]


@pytest_asyncio.fixture
async def live_adapter(manager, light_settings) -> KeyLightAdapter:
    return KeyLightAdapter(manager, "test-adapter", KeyLightService(light_settings))


@pytest_asyncio.fixture
async def live_device(live_adapter):
    return live_adapter.devices[KEY_LIGHT_AIR_ID]
