from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


DEFAULT_ADDON_ID = "elgato-key-light-air-adapter"


@dataclass
class LightSettings:
    host: str = "elgato-key-light-air-90de.local"
    port: int = 9123
    path: str = "/elgato/lights"
    http_timeout_s: Optional[float] = None  # None keeps aiohttp's default

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}{self.path}"


@dataclass
class AdvancedSettings:
    enable_debug_logging: bool = False


def defaults_dict() -> Dict[str, Any]:
    light = LightSettings()
    a = AdvancedSettings()
    return {
        # Light
        "light.host": light.host,
        "light.port": light.port,
        "light.path": light.path,
        "light.http_timeout_s": light.http_timeout_s,
        # Advanced
        "advanced.enable_debug_logging": a.enable_debug_logging,
    }


# Accepted JSON types per key; bool is never accepted where a number is expected
SETTING_TYPES: Dict[str, Tuple[type, ...]] = {
    "light.host": (str,),
    "light.port": (int,),
    "light.path": (str,),
    "light.http_timeout_s": (int, float, type(None)),
    "advanced.enable_debug_logging": (bool,),
}


def is_valid_setting(key: str, value: Any) -> bool:
    expected = SETTING_TYPES.get(key)
    if expected is None:
        return False
    if isinstance(value, bool) and bool not in expected:
        return False
    if not isinstance(value, expected):
        return False
    if key == "light.port":
        return 0 < value < 65536
    if key == "light.http_timeout_s" and value is not None:
        return value > 0
    return True
