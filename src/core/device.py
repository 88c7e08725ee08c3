from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List

import aiohttp

from utils.color_utils import elgato_to_kelvin, kelvin_to_elgato

from .errors import UnknownPropertyError
from .models import DeviceDescription, KeyLight
from .property import Property
from .service import KeyLightService

if TYPE_CHECKING:
    from .adapter import KeyLightAdapter

logger = logging.getLogger(__name__)

PropertyListener = Callable[[Property], None]


class KeyLightAirDevice:
    """A Key Light Air exposed as on, brightness and temperature properties."""

    def __init__(
        self,
        adapter: KeyLightAdapter,
        device_id: str,
        description: DeviceDescription,
        service: KeyLightService,
    ) -> None:
        self.adapter = adapter
        self.id = device_id
        self.name = description.name
        self.type = description.at_type
        self.description = description.description
        self.service = service
        self.properties: Dict[str, Property] = {}
        self._listeners: List[PropertyListener] = []
        for name, property_description in description.properties.items():
            self.properties[name] = Property(self, property_description)

    def add_listener(self, listener: PropertyListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PropertyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_property_changed(self, prop: Property) -> None:
        for listener in list(self._listeners):
            listener(prop)

    def get_property(self, name: str) -> Property:
        try:
            return self.properties[name]
        except KeyError:
            raise UnknownPropertyError(self.id, name) from None

    def light_state(self) -> KeyLight:
        """Merge the cached values into one state, in Elgato units."""
        temperature = self.get_property("temperature")
        return KeyLight(
            on=bool(self.get_property("on").current_value()),
            brightness=self.get_property("brightness").current_value(),
            temperature=kelvin_to_elgato(
                temperature.current_value(),
                temperature.description.minimum,
                temperature.description.maximum,
            ),
        )

    async def send_state(self) -> None:
        state = self.light_state()
        try:
            await self.service.set_light_state(state)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Error updating %s: %s", self.name, e)
            raise

    async def set_property(self, name: str, value: Any) -> Any:
        return await self.get_property(name).request_change(value)

    async def refresh(self) -> None:
        """Read the light's state back into the cache."""
        light_data = await self.service.fetch_light_state()
        if light_data is None:
            return
        temperature = self.get_property("temperature")
        fresh: Dict[str, Any] = {}
        if "on" in light_data:
            fresh["on"] = bool(light_data["on"])
        if "brightness" in light_data:
            fresh["brightness"] = light_data["brightness"]
        if "temperature" in light_data:
            fresh["temperature"] = elgato_to_kelvin(
                light_data["temperature"],
                temperature.description.minimum,
                temperature.description.maximum,
            )
        missing = {"on", "brightness", "temperature"} - set(fresh)
        if missing:
            logger.warning("%s state is missing %s", self.name, ", ".join(sorted(missing)))
        for name, value in fresh.items():
            prop = self.get_property(name)
            if prop.current_value() != prop.coerce(value):
                prop.set_cached_value(value)
                self.notify_property_changed(prop)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.name,
            "@type": list(self.type),
            "description": self.description,
            "properties": {name: prop.as_dict() for name, prop in self.properties.items()},
        }

    def __repr__(self) -> str:
        return f"<KeyLightAirDevice {self.id}>"
