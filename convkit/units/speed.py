"""Speed conversion."""

from enum import Enum

from convkit.units.base import RateTable, UnitLike


class SpeedUnit(str, Enum):
    """Speed units."""
    MPS = "m/s"
    KPH = "km/h"
    MPH = "mi/h"
    FPS = "ft/s"
    KN = "kn"  # knots


SPEED_RATES = {
    "m/s": {"km/h": 3.6, "mi/h": 2.23694, "ft/s": 3.28084, "kn": 1.94384},
    "km/h": {"m/s": 0.277778, "mi/h": 0.621371, "ft/s": 0.911344, "kn": 0.539957},
    "mi/h": {"m/s": 0.44704, "km/h": 1.60934, "ft/s": 1.46667, "kn": 0.868976},
    "ft/s": {"m/s": 0.3048, "km/h": 1.09728, "mi/h": 0.681818, "kn": 0.592484},
    "kn": {"m/s": 0.514444, "km/h": 1.852, "mi/h": 1.15078, "ft/s": 1.68781},
}

SPEED_TABLE = RateTable("speed", SpeedUnit, SPEED_RATES)


def convert_speed(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a value from one speed unit to another.

    Example:
        >>> convert_speed(10, 'm/s', 'km/h')
        36.0
    """
    return SPEED_TABLE.convert(value, from_unit, to_unit)
