"""
Temperature conversion.

Celsius, Fahrenheit and Kelvin are related by affine functions, so the table
holds a function per pair instead of a rate. Same-unit pairs are absent.
"""

from enum import Enum

from convkit.units.base import FunctionTable, UnitLike


class TemperatureUnit(str, Enum):
    """Temperature units."""
    C = "C"  # Celsius
    F = "F"  # Fahrenheit
    K = "K"  # Kelvin


TEMPERATURE_FUNCTIONS = {
    "C": {
        "F": lambda value: value * 9 / 5 + 32,
        "K": lambda value: value + 273.15,
    },
    "F": {
        "C": lambda value: (value - 32) * 5 / 9,
        "K": lambda value: (value - 32) * 5 / 9 + 273.15,
    },
    "K": {
        "C": lambda value: value - 273.15,
        "F": lambda value: (value - 273.15) * 9 / 5 + 32,
    },
}

TEMPERATURE_TABLE = FunctionTable("temperature", TemperatureUnit, TEMPERATURE_FUNCTIONS)


def convert_temperature(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a temperature from one unit to another.

    Args:
        value: Temperature in from_unit
        from_unit: 'C', 'F' or 'K'
        to_unit: 'C', 'F' or 'K'

    Returns:
        Converted temperature

    Raises:
        ConversionUnsupported: If the pair is not tabulated (including from == to)

    Example:
        >>> convert_temperature(100, 'C', 'K')
        373.15
    """
    return TEMPERATURE_TABLE.convert(value, from_unit, to_unit)
