"""
Temperature unit conversion

Kelvin uses an offset of 273 (not 273.15); the response contract depends on it.
"""
from typing import Tuple

KELVIN_OFFSET = 273


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def convert(celsius: float) -> Tuple[float, float]:
    """Return (fahrenheit, kelvin) for a Celsius reading, unrounded"""
    return celsius_to_fahrenheit(celsius), celsius_to_kelvin(celsius)


__all__ = ["KELVIN_OFFSET", "celsius_to_fahrenheit", "celsius_to_kelvin", "convert"]
