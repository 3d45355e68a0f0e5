"""Area conversion."""

from enum import Enum

from convkit.units.base import RateTable, UnitLike


class AreaUnit(str, Enum):
    """Area units."""
    M2 = "m2"  # square meter
    KM2 = "km2"  # square kilometer
    CM2 = "cm2"  # square centimeter
    MM2 = "mm2"  # square millimeter
    IN2 = "in2"  # square inch
    FT2 = "ft2"  # square foot
    MI2 = "mi2"  # square mile
    AC = "ac"  # acre
    HA = "ha"  # hectare


AREA_RATES = {
    "m2": {"km2": 0.000001, "cm2": 10000, "mm2": 1000000, "in2": 1550, "ft2": 10.7639, "mi2": 0.000000386102, "ac": 0.000247105, "ha": 0.0001},
    "km2": {"m2": 1000000, "cm2": 10000000000, "mm2": 1000000000000, "in2": 1550000000, "ft2": 10763900, "mi2": 0.386102, "ac": 247.105, "ha": 100},
    "cm2": {"m2": 0.0001, "km2": 0.0000000001, "mm2": 100, "in2": 0.155, "ft2": 0.00107639, "mi2": 0.0000000000386102, "ac": 0.000000247105, "ha": 0.0000001},
    "mm2": {"m2": 0.000001, "km2": 0.000000000001, "cm2": 0.01, "in2": 0.00155, "ft2": 0.0000107639, "mi2": 0.000000000000386102, "ac": 0.000000000247105, "ha": 0.0000000001},
    "in2": {"m2": 0.00064516, "km2": 0.00000000064516, "cm2": 6.4516, "mm2": 645.16, "ft2": 0.00694444, "mi2": 0.000000000249097, "ac": 0.000159, "ha": 0.0000645},
    "ft2": {"m2": 0.092903, "km2": 0.000000092903, "cm2": 929.03, "mm2": 92903, "in2": 144, "mi2": 0.0000000358701, "ac": 0.0000229568, "ha": 0.0000092903},
    "mi2": {"m2": 2589990, "km2": 2.58999, "cm2": 25899900000, "mm2": 2589990000000, "in2": 4014489600, "ft2": 27878400, "ac": 640, "ha": 258.999},
    "ac": {"m2": 4046.86, "km2": 0.00404686, "cm2": 40468600, "mm2": 4046860000, "in2": 6272640, "ft2": 43560, "mi2": 0.0015625, "ha": 0.404686},
    "ha": {"m2": 10000, "km2": 0.01, "cm2": 100000000, "mm2": 10000000000, "in2": 15500031, "ft2": 107639, "mi2": 0.00386102, "ac": 2.47105},
}

AREA_TABLE = RateTable("area", AreaUnit, AREA_RATES)


def convert_area(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a value from one area unit to another.

    Raises:
        ConversionUnsupported: If the pair is not tabulated (including from == to)

    Example:
        >>> convert_area(1000, 'm2', 'km2')
        0.001
    """
    return AREA_TABLE.convert(value, from_unit, to_unit)
