"""Define adapter errors."""

from __future__ import annotations


class KeyLightError(Exception):
    """A base error."""


class DeviceExistsError(KeyLightError):
    """Raised when adding a device whose id is already registered."""

    def __init__(self, device_id: str) -> None:
        super().__init__(f"Device: {device_id} already exists.")
        self.device_id = device_id


class DeviceNotFoundError(KeyLightError):
    """Raised when removing a device that isn't registered."""

    def __init__(self, device_id: str) -> None:
        super().__init__(f"Device: {device_id} not found.")
        self.device_id = device_id


class UnknownPropertyError(KeyLightError):
    """Raised when a device has no property with the requested name."""

    def __init__(self, device_id: str, name: str) -> None:
        super().__init__(f"Device: {device_id} has no property {name}.")
        self.device_id = device_id
        self.name = name
