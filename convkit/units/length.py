"""
Length conversion.

Rates are the published pairwise values, tabulated independently per pair
(not derived from a base unit), so a -> b -> a round trips are only
approximately consistent.
"""

from enum import Enum

from convkit.units.base import RateTable, UnitLike


class LengthUnit(str, Enum):
    """Length units."""
    M = "m"  # meters
    KM = "km"  # kilometers
    CM = "cm"  # centimeters
    MM = "mm"  # millimeters
    UM = "µm"  # micrometers (micro sign)
    NM = "nm"  # nanometers
    IN = "in"  # inches
    FT = "ft"  # feet
    YD = "yd"  # yards
    MI = "mi"  # miles
    NMI = "nmi"  # nautical miles
    LY = "ly"  # light years


LENGTH_RATES = {
    "m": {"km": 0.001, "cm": 100, "mm": 1000, "µm": 1e6, "nm": 1e9, "in": 39.3701, "ft": 3.28084, "yd": 1.09361, "mi": 0.000621371, "nmi": 0.000539957, "ly": 1.057e-16},
    "km": {"m": 1000, "cm": 100000, "mm": 1e6, "µm": 1e9, "nm": 1e12, "in": 39370.1, "ft": 3280.84, "yd": 1093.61, "mi": 0.621371, "nmi": 0.539957, "ly": 1.057e-13},
    "cm": {"m": 0.01, "km": 0.00001, "mm": 10, "µm": 1e4, "nm": 1e7, "in": 0.393701, "ft": 0.0328084, "yd": 0.0109361, "mi": 0.0000062137, "nmi": 0.00000539957, "ly": 1.057e-18},
    "mm": {"m": 0.001, "km": 0.000001, "cm": 0.1, "µm": 1000, "nm": 1e6, "in": 0.0393701, "ft": 0.00328084, "yd": 0.00109361, "mi": 0.00000062137, "nmi": 0.000000539957, "ly": 1.057e-19},
    "µm": {"m": 1e-6, "km": 1e-9, "cm": 0.0001, "mm": 0.001, "nm": 1000, "in": 3.93701e-5, "ft": 3.28084e-6, "yd": 1.09361e-6, "mi": 6.2137e-10, "nmi": 5.39957e-10, "ly": 1.057e-22},
    "nm": {"m": 1e-9, "km": 1e-12, "cm": 1e-7, "mm": 1e-6, "µm": 0.001, "in": 3.93701e-8, "ft": 3.28084e-9, "yd": 1.09361e-9, "mi": 6.2137e-13, "nmi": 5.39957e-13, "ly": 1.057e-25},
    "in": {"m": 0.0254, "km": 0.0000254, "cm": 2.54, "mm": 25.4, "µm": 25400, "nm": 25400000, "ft": 0.0833333, "yd": 0.0277778, "mi": 0.0000157828, "nmi": 0.0000137149, "ly": 2.68478e-17},
    "ft": {"m": 0.3048, "km": 0.0003048, "cm": 30.48, "mm": 304.8, "µm": 304800, "nm": 304800000, "in": 12, "yd": 0.333333, "mi": 0.000189394, "nmi": 0.000164579, "ly": 3.22174e-16},
    "yd": {"m": 0.9144, "km": 0.0009144, "cm": 91.44, "mm": 914.4, "µm": 914400, "nm": 914400000, "in": 36, "ft": 3, "mi": 0.000568182, "nmi": 0.000493737, "ly": 9.66523e-16},
    "mi": {"m": 1609.34, "km": 1.60934, "cm": 160934, "mm": 1609340, "µm": 1.60934e9, "nm": 1.60934e12, "in": 63360, "ft": 5280, "yd": 1760, "nmi": 0.868976, "ly": 1.70108e-13},
    "nmi": {"m": 1852, "km": 1.852, "cm": 185200, "mm": 1852000, "µm": 1.852e9, "nm": 1.852e12, "in": 72913.4, "ft": 6076.12, "yd": 2025.37, "mi": 1.15078, "ly": 2.25919e-13},
    "ly": {"m": 9.461e15, "km": 9.461e12, "cm": 9.461e17, "mm": 9.461e18, "µm": 9.461e21, "nm": 9.461e24, "in": 3.725e17, "ft": 3.104e16, "yd": 1.035e16, "mi": 5.87863e12, "nmi": 4.41755e12},
}

LENGTH_TABLE = RateTable("length", LengthUnit, LENGTH_RATES)


def convert_length(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a value from one length unit to another.

    Args:
        value: Value to convert (sign is preserved)
        from_unit: Source unit, LengthUnit or identifier ('m', 'km', ...)
        to_unit: Target unit

    Returns:
        value * published rate, unrounded

    Raises:
        ConversionUnsupported: If the pair is not tabulated (including from == to)

    Example:
        >>> convert_length(1000, 'm', 'km')
        1.0
    """
    return LENGTH_TABLE.convert(value, from_unit, to_unit)
