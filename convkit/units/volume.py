"""
Volume conversion: metric capacity, cubic and US customary units.

US customary rows (gal, qt, pt, fl-oz, tbsp, tsp) use US liquid measures; the
cup row uses the 240 ml metric cup, so cup <-> pt rates are not exact inverses.
"""

from enum import Enum

from convkit.units.base import RateTable, UnitLike


class VolumeUnit(str, Enum):
    """Volume units."""
    ML = "ml"  # milliliter
    CL = "cl"  # centiliter
    DL = "dl"  # deciliter
    L = "l"  # liter
    KL = "kl"  # kiloliter
    M3 = "m3"  # cubic meter
    MM3 = "mm3"  # cubic millimeter
    CM3 = "cm3"  # cubic centimeter
    DM3 = "dm3"  # cubic decimeter
    HM3 = "hm3"  # cubic hectometer
    KM3 = "km3"  # cubic kilometer
    IN3 = "in3"  # cubic inch
    FT3 = "ft3"  # cubic foot
    YD3 = "yd3"  # cubic yard
    GAL = "gal"  # gallon
    QT = "qt"  # quart
    PT = "pt"  # pint
    CUP = "cup"  # cup
    FL_OZ = "fl-oz"  # fluid ounce
    TBSP = "tbsp"  # tablespoon
    TSP = "tsp"  # teaspoon


VOLUME_RATES = {
    "ml": {"cl": 0.1, "dl": 0.01, "l": 0.001, "kl": 0.000001, "m3": 0.000001, "mm3": 1000, "cm3": 1, "dm3": 0.001, "hm3": 0.000000001, "km3": 0.000000000001, "in3": 0.0610237, "ft3": 0.0000353147, "yd3": 0.00000130795, "gal": 0.000264172, "qt": 0.00105669, "pt": 0.00211338, "cup": 0.00416667, "fl-oz": 0.033814, "tbsp": 0.067628, "tsp": 0.202884},
    "cl": {"ml": 10, "dl": 0.1, "l": 0.01, "kl": 0.00001, "m3": 0.00001, "mm3": 10000, "cm3": 10, "dm3": 0.01, "hm3": 0.00000001, "km3": 0.00000000001, "in3": 0.610237, "ft3": 0.00353147, "yd3": 0.000130795, "gal": 0.0264172, "qt": 0.105669, "pt": 0.211338, "cup": 0.416667, "fl-oz": 3.3814, "tbsp": 6.7628, "tsp": 20.2884},
    "dl": {"ml": 100, "cl": 10, "l": 0.1, "kl": 0.0001, "m3": 0.0001, "mm3": 100000, "cm3": 100, "dm3": 0.1, "hm3": 0.0000001, "km3": 0.0000000001, "in3": 6.10237, "ft3": 0.0353147, "yd3": 0.00130795, "gal": 0.264172, "qt": 1.05669, "pt": 2.11338, "cup": 4.16667, "fl-oz": 33.814, "tbsp": 67.628, "tsp": 202.884},
    "l": {"ml": 1000, "cl": 100, "dl": 10, "kl": 0.001, "m3": 0.001, "mm3": 1000000, "cm3": 1000, "dm3": 1, "hm3": 0.000001, "km3": 0.000000001, "in3": 61.0237, "ft3": 0.0353147, "yd3": 0.00130795, "gal": 0.264172, "qt": 1.05669, "pt": 2.11338, "cup": 4.16667, "fl-oz": 33.814, "tbsp": 67.628, "tsp": 202.884},
    "kl": {"ml": 1000000, "cl": 100000, "dl": 10000, "l": 1000, "m3": 1, "mm3": 1000000000, "cm3": 1000000, "dm3": 1000, "hm3": 0.001, "km3": 0.000001, "in3": 61023.7, "ft3": 35.3147, "yd3": 1.30795, "gal": 264.172, "qt": 1056.69, "pt": 2113.38, "cup": 4166.67, "fl-oz": 33814, "tbsp": 67628, "tsp": 202884},
    "m3": {"ml": 1000000, "cl": 100000, "dl": 10000, "l": 1000, "kl": 1, "mm3": 1000000000, "cm3": 1000000, "dm3": 1000, "hm3": 0.001, "km3": 0.000001, "in3": 61023.7, "ft3": 35.3147, "yd3": 1.30795, "gal": 264.172, "qt": 1056.69, "pt": 2113.38, "cup": 4166.67, "fl-oz": 33814, "tbsp": 67628, "tsp": 202884},
    "mm3": {"ml": 0.001, "cl": 0.0001, "dl": 0.00001, "l": 0.000001, "kl": 0.000000001, "m3": 0.000000001, "cm3": 0.001, "dm3": 0.000001, "hm3": 0.000000000001, "km3": 0.000000000000001, "in3": 0.0000610237, "ft3": 0.0000000353147, "yd3": 0.00000000130795, "gal": 0.000000264172, "qt": 0.00000105669, "pt": 0.00000211338, "cup": 0.00000416667, "fl-oz": 0.000033814, "tbsp": 0.000067628, "tsp": 0.000202884},
    "cm3": {"ml": 1, "cl": 0.1, "dl": 0.01, "l": 0.001, "kl": 0.000001, "m3": 0.000001, "mm3": 1000, "dm3": 0.001, "hm3": 0.000000001, "km3": 0.000000000001, "in3": 0.0610237, "ft3": 0.0000353147, "yd3": 0.00000130795, "gal": 0.000264172, "qt": 0.00105669, "pt": 0.00211338, "cup": 0.00416667, "fl-oz": 0.033814, "tbsp": 0.067628, "tsp": 0.202884},
    "dm3": {"ml": 1000, "cl": 100, "dl": 10, "l": 1, "kl": 0.001, "m3": 0.001, "mm3": 1000000, "cm3": 1000, "hm3": 0.000001, "km3": 0.000000001, "in3": 61.0237, "ft3": 0.0353147, "yd3": 0.00130795, "gal": 0.264172, "qt": 1.05669, "pt": 2.11338, "cup": 4.16667, "fl-oz": 33.814, "tbsp": 67.628, "tsp": 202.884},
    "hm3": {"ml": 1000000000, "cl": 100000000, "dl": 10000000, "l": 1000000, "kl": 1000, "m3": 1000, "mm3": 1000000000000, "cm3": 1000000000, "dm3": 1000000, "km3": 0.001, "in3": 61023700, "ft3": 35314.7, "yd3": 1307.95, "gal": 264172, "qt": 1056690, "pt": 2113380, "cup": 4166670, "fl-oz": 338140, "tbsp": 676280, "tsp": 2028840},
    "km3": {"ml": 1000000000000, "cl": 100000000000, "dl": 10000000000, "l": 1000000000, "kl": 1000000, "m3": 1000000, "mm3": 1000000000000000, "cm3": 1000000000000, "dm3": 1000000000, "hm3": 1000, "in3": 61023700000, "ft3": 353147, "yd3": 13079500, "gal": 2641720000, "qt": 10566900000, "pt": 21133800000, "cup": 41666700000, "fl-oz": 338140000, "tbsp": 676280000, "tsp": 2028840000},
    "in3": {"ml": 16.3871, "cl": 1.63871, "dl": 0.163871, "l": 0.0163871, "kl": 0.0000163871, "m3": 0.0000163871, "mm3": 16387.1, "cm3": 16.3871, "dm3": 0.0163871, "hm3": 0.0000000163871, "km3": 0.0000000000163871, "ft3": 0.000578704, "yd3": 0.0000214335, "gal": 0.004329, "qt": 0.017316, "pt": 0.034632, "cup": 0.0682794, "fl-oz": 0.554113, "tbsp": 1.10823, "tsp": 3.32469},
    "ft3": {"ml": 28316.8, "cl": 2831.68, "dl": 283.168, "l": 28.3168, "kl": 0.0283168, "m3": 0.0283168, "mm3": 28316800, "cm3": 28316.8, "dm3": 28.3168, "hm3": 0.0000283168, "km3": 0.0000000283168, "in3": 1728, "yd3": 0.037037, "gal": 7.48052, "qt": 29.9221, "pt": 59.8442, "cup": 118.294, "fl-oz": 957.506, "tbsp": 1915.01, "tsp": 5745.03},
    "yd3": {"ml": 764554.857, "cl": 76455.4857, "dl": 7645.54857, "l": 764.554857, "kl": 0.764554857, "m3": 0.764554857, "mm3": 764554857, "cm3": 764554.857, "dm3": 764.554857, "hm3": 0.000764554857, "km3": 0.000000764554857, "in3": 46656, "ft3": 27, "gal": 201.974, "qt": 807.896, "pt": 1615.79, "cup": 3178.87, "fl-oz": 25852.7, "tbsp": 51705.5, "tsp": 155116},
    "gal": {"ml": 3785.41, "cl": 378.541, "dl": 37.8541, "l": 3.78541, "kl": 0.00378541, "m3": 0.00378541, "mm3": 3785410, "cm3": 3785.41, "dm3": 3.78541, "hm3": 0.00000378541, "km3": 0.00000000378541, "in3": 231, "ft3": 0.133681, "yd3": 0.00495113, "qt": 4, "pt": 8, "cup": 15.7725, "fl-oz": 128, "tbsp": 256, "tsp": 768},
    "qt": {"ml": 946.353, "cl": 94.6353, "dl": 9.46353, "l": 0.946353, "kl": 0.000946353, "m3": 0.000946353, "mm3": 946353, "cm3": 946.353, "dm3": 0.946353, "hm3": 0.000000946353, "km3": 0.000000000946353, "in3": 57.75, "ft3": 0.0334201, "yd3": 0.0012378, "gal": 0.25, "pt": 2, "cup": 3.94314, "fl-oz": 31.5, "tbsp": 63, "tsp": 189},
    "pt": {"ml": 473.176, "cl": 47.3176, "dl": 4.73176, "l": 0.473176, "kl": 0.000473176, "m3": 0.000473176, "mm3": 473176, "cm3": 473.176, "dm3": 0.473176, "hm3": 0.000000473176, "km3": 0.000000000473176, "in3": 28.875, "ft3": 0.0167101, "yd3": 0.000618891, "gal": 0.125, "qt": 0.5, "cup": 1.97157, "fl-oz": 16, "tbsp": 32, "tsp": 96},
    "cup": {"ml": 240, "cl": 24, "dl": 2.4, "l": 0.24, "kl": 0.00024, "m3": 0.00024, "mm3": 240000, "cm3": 240, "dm3": 0.24, "hm3": 0.00000024, "km3": 0.00000000024, "in3": 14.4375, "ft3": 0.00835503, "yd3": 0.000309353, "gal": 0.0625, "qt": 0.25, "pt": 0.50721, "fl-oz": 8, "tbsp": 16, "tsp": 48},
    "fl-oz": {"ml": 29.5735, "cl": 2.95735, "dl": 0.295735, "l": 0.0295735, "kl": 0.0000295735, "m3": 0.0000295735, "mm3": 29573.5, "cm3": 29.5735, "dm3": 0.0295735, "hm3": 0.0000000295735, "km3": 0.0000000000295735, "in3": 1.80469, "ft3": 0.00104438, "yd3": 0.0000386807, "gal": 0.0078125, "qt": 0.03125, "pt": 0.0625, "cup": 0.125, "tbsp": 2, "tsp": 6},
    "tbsp": {"ml": 14.7868, "cl": 1.47868, "dl": 0.147868, "l": 0.0147868, "kl": 0.0000147868, "m3": 0.0000147868, "mm3": 14786.8, "cm3": 14.7868, "dm3": 0.0147868, "hm3": 0.0000000147868, "km3": 0.0000000000147868, "in3": 0.902344, "ft3": 0.00052219, "yd3": 0.0000193368, "gal": 0.00390625, "qt": 0.015625, "pt": 0.03125, "cup": 0.0625, "fl-oz": 0.5, "tsp": 3},
    "tsp": {"ml": 4.92892, "cl": 0.492892, "dl": 0.0492892, "l": 0.00492892, "kl": 0.00000492892, "m3": 0.00000492892, "mm3": 4928.92, "cm3": 4.92892, "dm3": 0.00492892, "hm3": 0.00000000492892, "km3": 0.00000000000492892, "in3": 0.300781, "ft3": 0.000173611, "yd3": 0.0000064307, "gal": 0.00130208, "qt": 0.00520833, "pt": 0.0104167, "cup": 0.0208333, "fl-oz": 0.166667, "tbsp": 0.333333},
}

VOLUME_TABLE = RateTable("volume", VolumeUnit, VOLUME_RATES)


def convert_volume(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a value from one volume unit to another.

    Raises:
        ConversionUnsupported: If the pair is not tabulated (including from == to)

    Example:
        >>> convert_volume(1000, 'ml', 'l')
        1.0
    """
    return VOLUME_TABLE.convert(value, from_unit, to_unit)
