from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from utils.color_utils import clamp

from .models import PropertyDescription

if TYPE_CHECKING:
    from .device import KeyLightAirDevice

logger = logging.getLogger(__name__)

TRUE_STRINGS = ("1", "true", "on", "yes")
FALSE_STRINGS = ("0", "false", "off", "no")


def parse_bool(value: Any) -> bool:
    """Accept bools, 0/1 and the usual on/off strings; reject anything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise ValueError(f"Not a boolean: {value!r}")


class Property:
    """A single controllable attribute of a device with a cached value.

    Writes go through request_change(): the value is coerced and clamped into
    the cache, the owning device pushes its whole state to the light, and
    listeners are notified once the light has answered.
    """

    def __init__(self, device: KeyLightAirDevice, description: PropertyDescription) -> None:
        self.device = device
        self.name = description.name
        self.description = description
        self._value: Any = None
        self.set_cached_value(description.value)

    def current_value(self) -> Any:
        return self._value

    def coerce(self, value: Any) -> Any:
        if self.description.type == "boolean":
            return parse_bool(value)
        if self.description.type == "integer":
            return int(clamp(int(value), self.description.minimum, self.description.maximum))
        return value

    def set_cached_value(self, value: Any) -> Any:
        """Store value in the cache and return what was actually stored."""
        accepted = self.coerce(value)
        if accepted != value:
            logger.debug("%s: %r adjusted to %r", self.name, value, accepted)
        self._value = accepted
        return accepted

    async def request_change(self, value: Any) -> Any:
        """Write value to the light, returning the accepted value.

        Raises whatever the transport raised if the request never got a
        response. The cache keeps the accepted value in that case.
        """
        accepted = self.set_cached_value(value)
        await self.device.send_state()
        self.device.notify_property_changed(self)
        return accepted

    def as_dict(self) -> dict:
        description = self.description.as_dict()
        description["value"] = self._value
        return description

    def __repr__(self) -> str:
        return f"<Property {self.name}={self._value!r}>"
