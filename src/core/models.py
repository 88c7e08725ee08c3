from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class KeyLight:
    """Represents the full state of a Key Light, in Elgato units."""
    on: bool = False
    brightness: int = 50
    temperature: int = 244  # 143-344 (Elgato units, ~7000K-2900K)

    def to_payload(self) -> dict:
        return {
            "lights": [
                {
                    "brightness": self.brightness,
                    "temperature": self.temperature,
                    "on": 1 if self.on else 0,
                }
            ],
            "numberOfLights": 1,
        }


@dataclass
class PropertyDescription:
    """Metadata the host needs to render and validate a property."""
    name: str
    type: str
    value: Any
    label: str = ""
    at_type: Optional[str] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    unit: Optional[str] = None
    read_only: bool = False

    def as_dict(self) -> Dict[str, Any]:
        description: Dict[str, Any] = {
            "name": self.name,
            "title": self.label,
            "type": self.type,
            "readOnly": self.read_only,
        }
        if self.at_type:
            description["@type"] = self.at_type
        if self.minimum is not None:
            description["minimum"] = self.minimum
        if self.maximum is not None:
            description["maximum"] = self.maximum
        if self.unit:
            description["unit"] = self.unit
        return description


@dataclass
class DeviceDescription:
    name: str
    description: str = ""
    at_type: List[str] = field(default_factory=list)
    properties: Dict[str, PropertyDescription] = field(default_factory=dict)


def key_light_air_description() -> DeviceDescription:
    """Static description of the Key Light Air and its three properties."""
    return DeviceDescription(
        name="Key Light Air",
        description="Elgato Key Light Air",
        at_type=["OnOffSwitch", "Light"],
        properties={
            "on": PropertyDescription(
                name="on",
                type="boolean",
                value=False,
                label="On/Off",
                at_type="OnOffProperty",
            ),
            "brightness": PropertyDescription(
                name="brightness",
                type="integer",
                value=50,
                label="Brightness",
                at_type="BrightnessProperty",
                minimum=3,
                maximum=100,
                unit="percent",
            ),
            "temperature": PropertyDescription(
                name="temperature",
                type="integer",
                value=4950,
                label="Color Temperature",
                at_type="ColorTemperatureProperty",
                minimum=2900,
                maximum=7000,
                unit="kelvin",
            ),
        },
    )
