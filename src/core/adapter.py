from __future__ import annotations

import logging
from typing import Dict, Optional

from .device import KeyLightAirDevice
from .errors import DeviceExistsError, DeviceNotFoundError, KeyLightError
from .host import AddonManager
from .models import DeviceDescription, key_light_air_description
from .service import KeyLightService

logger = logging.getLogger(__name__)

KEY_LIGHT_AIR_ID = "key-light-air"


class KeyLightAdapter:
    """Registers the Key Light Air with the host and owns the device table.

    There is no discovery protocol: the single device is created on
    construction, so pairing hooks only log.
    """

    def __init__(
        self,
        manager: AddonManager,
        addon_id: str,
        service: Optional[KeyLightService] = None,
        name: str = "KeyLightAdapter",
    ) -> None:
        self.manager = manager
        self.id = addon_id
        self.name = name
        self.service = service or KeyLightService()
        self.devices: Dict[str, KeyLightAirDevice] = {}
        manager.add_adapter(self)

        if KEY_LIGHT_AIR_ID not in self.devices:
            device = KeyLightAirDevice(
                self, KEY_LIGHT_AIR_ID, key_light_air_description(), self.service
            )
            self.handle_device_added(device)

    def handle_device_added(self, device: KeyLightAirDevice) -> None:
        self.devices[device.id] = device
        device.add_listener(self.manager.property_changed)
        self.manager.handle_device_added(device)

    def handle_device_removed(self, device: KeyLightAirDevice) -> None:
        del self.devices[device.id]
        device.remove_listener(self.manager.property_changed)
        self.manager.handle_device_removed(device)

    def get_device(self, device_id: str) -> KeyLightAirDevice:
        device = self.devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    async def add_device(self, device_id: str, description: DeviceDescription) -> KeyLightAirDevice:
        if device_id in self.devices:
            raise DeviceExistsError(device_id)
        device = KeyLightAirDevice(self, device_id, description, self.service)
        self.handle_device_added(device)
        return device

    async def remove_device(self, device_id: str) -> KeyLightAirDevice:
        device = self.get_device(device_id)
        self.handle_device_removed(device)
        return device

    def start_pairing(self, timeout_seconds: float) -> None:
        logger.info("%s: id %s pairing started", self.name, self.id)

    def cancel_pairing(self) -> None:
        logger.info("%s: id %s pairing cancelled", self.name, self.id)

    async def remove_thing(self, device: KeyLightAirDevice) -> None:
        logger.info("%s: id %s removeThing(%s) started", self.name, self.id, device.id)
        try:
            await self.remove_device(device.id)
        except KeyLightError as e:
            logger.error("%s: unpairing %s failed: %s", self.name, device.id, e)
            return
        logger.info("%s: device %s was unpaired.", self.name, device.id)

    def cancel_remove_thing(self, device: KeyLightAirDevice) -> None:
        logger.info("%s: id %s cancelRemoveThing(%s)", self.name, self.id, device.id)
