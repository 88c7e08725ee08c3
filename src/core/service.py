from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from .models import KeyLight
from .settings_schema import LightSettings

logger = logging.getLogger(__name__)


class KeyLightService:
    """HTTP service for interacting with an Elgato Key Light."""

    def __init__(self, settings: Optional[LightSettings] = None) -> None:
        self._settings = settings or LightSettings()

    @property
    def settings(self) -> LightSettings:
        return self._settings

    def _session(self) -> aiohttp.ClientSession:
        if self._settings.http_timeout_s is None:
            return aiohttp.ClientSession()
        timeout = aiohttp.ClientTimeout(total=self._settings.http_timeout_s)
        return aiohttp.ClientSession(timeout=timeout)

    async def set_light_state(self, keylight: KeyLight) -> int:
        """Send the full light state to the device.

        Any HTTP response counts as delivered; its status is returned but not
        checked. Transport errors propagate to the caller.
        """
        data = keylight.to_payload()
        logger.debug("PUT %s %s", self._settings.url, data)
        async with self._session() as session:
            async with session.put(self._settings.url, json=data) as response:
                logger.debug("STATUS: %s", response.status)
                logger.debug("HEADERS: %s", dict(response.headers))
                return response.status

    async def fetch_light_state(self) -> Optional[dict]:
        """Fetch current device state. Returns the first light or None."""
        async with self._session() as session:
            async with session.get(self._settings.url) as response:
                if response.status != 200:
                    logger.warning("Fetching state from %s returned %s", self._settings.url, response.status)
                    return None
                data = await response.json()
        lights = data.get("lights") or []
        return lights[0] if lights else None
