from __future__ import annotations

import math

ELGATO_MIN = 143
ELGATO_MAX = 344
KELVIN_MIN = 2900
KELVIN_MAX = 7000


def kelvin_to_elgato(value: int, minimum: int = KELVIN_MIN, maximum: int = KELVIN_MAX) -> int:
    """Convert a Kelvin value in [minimum, maximum] to Elgato units (344-143).

    The Elgato scale is inverted: the warmest Kelvin value maps to 344.
    Halves round up.
    """
    fraction = (value - minimum) / (maximum - minimum)
    return math.floor((ELGATO_MAX - ELGATO_MIN) * (1 - fraction) + ELGATO_MIN + 0.5)


def elgato_to_kelvin(value: int, minimum: int = KELVIN_MIN, maximum: int = KELVIN_MAX) -> int:
    """Convert Elgato temperature value (143-344) to Kelvin (~2900K-7000K)."""
    fraction = (ELGATO_MAX - value) / (ELGATO_MAX - ELGATO_MIN)
    return math.floor(minimum + (maximum - minimum) * fraction + 0.5)


def clamp(value: float, minimum: float | None, maximum: float | None) -> float:
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value
