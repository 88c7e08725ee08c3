"""Hooks the gateway host provides to the adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .adapter import KeyLightAdapter
    from .device import KeyLightAirDevice
    from .property import Property

logger = logging.getLogger(__name__)


class AddonManager(Protocol):
    def add_adapter(self, adapter: KeyLightAdapter) -> None:
        ...

    def handle_device_added(self, device: KeyLightAirDevice) -> None:
        ...

    def handle_device_removed(self, device: KeyLightAirDevice) -> None:
        ...

    def property_changed(self, prop: Property) -> None:
        ...


class LoggingAddonManager:
    """Stand-in host used when the adapter runs outside the gateway."""

    def __init__(self) -> None:
        self.adapters: list = []

    def add_adapter(self, adapter: KeyLightAdapter) -> None:
        self.adapters.append(adapter)
        logger.info("Adapter %s (%s) added", adapter.name, adapter.id)

    def handle_device_added(self, device: KeyLightAirDevice) -> None:
        logger.info("Device %s added", device.id)

    def handle_device_removed(self, device: KeyLightAirDevice) -> None:
        logger.info("Device %s removed", device.id)

    def property_changed(self, prop: Property) -> None:
        logger.info("%s.%s is now %r", prop.device.id, prop.name, prop.current_value())
