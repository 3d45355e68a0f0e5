"""
Weight conversion.

Covers metric, avoirdupois, troy and historical units. The historical rows
(lb-t, lb-l, l-t, l-l) are kept exactly as published, including values that
disagree with their own inverses; see DESIGN.md for the flagged entries.
"""

from enum import Enum

from convkit.units.base import RateTable, UnitLike


class WeightUnit(str, Enum):
    """Weight units."""
    G = "g"  # grams
    KG = "kg"  # kilograms
    LB = "lb"  # pounds
    OZ = "oz"  # ounces
    MG = "mg"  # milligrams
    TON = "ton"  # metric tons
    CT = "ct"  # carats
    STONE = "stone"  # stones
    GR = "gr"  # grains
    DWT = "dwt"  # pennyweights
    T = "t"  # tonnes
    OZT = "ozt"  # troy ounces
    MTON = "mton"  # megatons
    CWT = "cwt"  # hundredweights
    QTR = "qtr"  # quarters (imperial)
    ST = "st"  # short tons (US)
    LB_T = "lb-t"  # long tons (imperial)
    LB_L = "lb-l"  # pounds (livre, historical)
    L_T = "l-t"  # metric tonnes (quintal, historical)
    L_L = "l-l"  # libra (historical)


WEIGHT_RATES = {
    "g": {
        "kg": 0.001, "lb": 0.00220462, "oz": 0.035274, "mg": 1000,
        "ton": 0.000001, "ct": 5, "stone": 0.000157473, "gr": 15.4324,
        "dwt": 0.64301493, "t": 1e-6, "ozt": 3.21507466e-5,
        "mton": 1e-9, "cwt": 0.0000196841, "qtr": 0.0000393682,
        "st": 0.000157473, "lb-t": 0.0000022046, "lb-l": 0.0022046,
        "l-t": 0.000001, "l-l": 1,
    },
    "kg": {
        "g": 1000, "lb": 2.20462, "oz": 35.274, "mg": 1000000,
        "ton": 0.001, "ct": 5000, "stone": 0.157473, "gr": 15432.3584,
        "dwt": 643.01493, "t": 0.001, "ozt": 32.1507466,
        "mton": 0.000001, "cwt": 0.0196841315, "qtr": 0.039368263,
        "st": 0.157473, "lb-t": 0.00220462, "lb-l": 2.20462,
        "l-t": 0.001, "l-l": 1000,
    },
    "lb": {
        "g": 453.592, "kg": 0.453592, "oz": 16, "mg": 453592,
        "ton": 0.000453592, "ct": 2267.96185, "stone": 0.0714286,
        "gr": 7000, "dwt": 291.666667, "t": 0.000453592, "ozt": 14.5833333,
        "mton": 0.000000454, "cwt": 0.00892857143, "qtr": 0.0178571429,
        "st": 0.0714286, "lb-t": 0.0001, "lb-l": 1,
        "l-t": 0.000453592, "l-l": 453.592,
    },
    "oz": {
        "g": 28.3495, "kg": 0.0283495, "lb": 0.0625, "mg": 28349.5,
        "ton": 0.00003125, "ct": 141.748, "stone": 0.00446429,
        "gr": 437.5, "dwt": 18.2291667, "t": 0.0000283495, "ozt": 1,
        "mton": 2.83495e-8, "cwt": 0.00551000383, "qtr": 0.0110200077,
        "st": 0.00446429, "lb-t": 6.25e-5, "lb-l": 0.0625,
        "l-t": 2.83495e-5, "l-l": 28.3495,
    },
    "mg": {
        "g": 0.001, "kg": 0.000001, "lb": 0.0000022046, "oz": 0.000035274,
        "ton": 1e-9, "ct": 0.005, "stone": 1.57473e-7, "gr": 0.0154324,
        "dwt": 6.43015e-7, "t": 1e-9, "ozt": 3.21507e-8,
        "mton": 1e-12, "cwt": 1.96841e-8, "qtr": 3.93682e-8,
        "st": 1.57473e-7, "lb-t": 2.2046e-9, "lb-l": 2.2046e-6,
        "l-t": 1e-9, "l-l": 0.001,
    },
    "ton": {
        "g": 1e+6, "kg": 1000, "lb": 2204.62, "oz": 35274,
        "mg": 1e+9, "ct": 5e+6, "stone": 157.473, "gr": 1.54324e+6,
        "dwt": 6.43015e+7, "t": 1, "ozt": 3.21507e+7,
        "mton": 0.001, "cwt": 1968.41, "qtr": 3936.82,
        "st": 157.473, "lb-t": 2204.62, "lb-l": 2.20462e+6,
        "l-t": 1000, "l-l": 1e+6,
    },
    "ct": {
        "g": 0.2, "kg": 0.0002, "lb": 0.000440925, "oz": 0.00705479,
        "mg": 200, "ton": 0.0000002, "stone": 0.00003125,
        "gr": 3.08647, "dwt": 0.1286, "t": 2e-7, "ozt": 0.005,
        "mton": 2e-10, "cwt": 0.0000396843, "qtr": 0.0000793686,
        "st": 0.00003125, "lb-t": 0.000000440925, "lb-l": 0.000440925,
        "l-t": 0.0000002, "l-l": 0.2,
    },
    "stone": {
        "g": 6350.29, "kg": 6.35029, "lb": 14, "oz": 224,
        "mg": 6350290, "ton": 0.00635029, "ct": 32000,
        "gr": 98000, "dwt": 4032, "t": 0.00635029, "ozt": 204.1162,
        "mton": 6.35029e-6, "cwt": 12.5, "qtr": 25,
        "st": 1, "lb-t": 0.014, "lb-l": 14,
        "l-t": 0.00635029, "l-l": 6350.29,
    },
    "gr": {
        "g": 0.0647989, "kg": 6.47989e-5, "lb": 0.000142857, "oz": 0.00228571,
        "mg": 64.7989, "ton": 6.47989e-8, "ct": 0.323994,
        "stone": 0.0000102041, "dwt": 0.0416667, "t": 6.47989e-8, "ozt": 0.00321507,
        "mton": 6.47989e-11, "cwt": 6.47989e-5, "qtr": 0.000129598,
        "st": 0.0000102041, "lb-t": 1.42857e-7, "lb-l": 0.000142857,
        "l-t": 6.47989e-8, "l-l": 0.0647989,
    },
    "dwt": {
        "g": 1.55517, "kg": 0.00155517, "lb": 0.00342857, "oz": 0.0548571,
        "mg": 1555.17, "ton": 0.00000155517, "ct": 7.77699,
        "stone": 0.000393757, "gr": 24, "t": 0.00155517, "ozt": 49.614,
        "mton": 1.55517e-9, "cwt": 0.00306108, "qtr": 0.00612216,
        "st": 0.000393757, "lb-t": 0.00548214, "lb-l": 0.00342857,
        "l-t": 0.00155517, "l-l": 1555.17,
    },
    "t": {
        "g": 1e+9, "kg": 1e+6, "lb": 2204620, "oz": 35274000,
        "mg": 1e+12, "ton": 1000, "ct": 5e+9, "stone": 15747300,
        "gr": 1.54324e+7, "dwt": 6.43015e+10, "ozt": 3.21507e+10,
        "mton": 1, "cwt": 1968410, "qtr": 3936820,
        "st": 15747300, "lb-t": 2204620, "lb-l": 2.20462e+9,
        "l-t": 1000, "l-l": 1e+9,
    },
    "ozt": {
        "g": 31.1035, "kg": 0.0311035, "lb": 0.0685714, "oz": 1.09714,
        "mg": 31103.5, "ton": 0.0000311035, "ct": 155.517, "stone": 0.0049335,
        "gr": 480, "dwt": 20, "t": 0.0000311035,
        "mton": 3.11035e-8, "cwt": 0.0610689, "qtr": 0.122138,
        "st": 0.0049335, "lb-t": 6.85714e-5, "lb-l": 0.0685714,
        "l-t": 3.11035e-5, "l-l": 31.1035,
    },
    "mton": {
        "g": 1e+12, "kg": 1e+9, "lb": 2204620000, "oz": 3.5274e+10,
        "mg": 1e+15, "ton": 1000, "ct": 5e+12, "stone": 1.57473e+8,
        "gr": 1.54324e+9, "dwt": 6.43015e+12, "ozt": 3.21507e+12,
        "cwt": 1.96841e+9, "qtr": 3.93682e+9,
        "st": 1.57473e+8, "lb-t": 2204620000, "lb-l": 2.20462e+12,
        "l-t": 1000000, "l-l": 1e+12,
    },
    "cwt": {
        "g": 50802.3, "kg": 50.8023, "lb": 112, "oz": 1792,
        "mg": 50802300, "ton": 0.0508023, "ct": 254011.5, "stone": 8,
        "gr": 78400, "dwt": 32399.2, "t": 0.0508023, "ozt": 1600,
        "mton": 5.08023e-5, "qtr": 2,
        "st": 8, "lb-t": 0.112, "lb-l": 112,
        "l-t": 0.0508023, "l-l": 50802.3,
    },
    "qtr": {
        "g": 25401.2, "kg": 25.4012, "lb": 56, "oz": 896,
        "mg": 25401200, "ton": 0.0254012, "ct": 127005.75, "stone": 4,
        "gr": 39200, "dwt": 16199.6, "t": 0.0254012, "ozt": 800,
        "mton": 2.54012e-5, "cwt": 0.5,
        "st": 4, "lb-t": 0.056, "lb-l": 56,
        "l-t": 0.0254012, "l-l": 25401.2,
    },
    "st": {
        "g": 6350.29, "kg": 6.35029, "lb": 14, "oz": 224,
        "mg": 6350290, "ton": 0.00635029, "ct": 32000, "stone": 0.0714286,
        "gr": 98000, "dwt": 4032, "t": 0.00635029, "ozt": 204.1162,
        "mton": 6.35029e-6, "cwt": 12.5, "qtr": 25,
        "lb-t": 0.014, "lb-l": 14,
        "l-t": 0.00635029, "l-l": 6350.29,
    },
    "lb-t": {
        "g": 453592, "kg": 453.592, "lb": 1000, "oz": 16000,
        "mg": 4.53592e+8, "ton": 0.453592, "ct": 2.26796e+6,
        "stone": 71.4286, "gr": 7000000, "dwt": 291666.667,
        "t": 0.000453592, "ozt": 14583.3333,
        "mton": 4.53592e-7, "cwt": 8.92857143, "qtr": 17.8571429,
        "st": 71.4286, "lb-l": 1000,
        "l-t": 0.000453592, "l-l": 453.592,
    },
    "lb-l": {
        "g": 453.592, "kg": 0.453592, "lb": 1, "oz": 16,
        "mg": 453592, "ton": 0.000453592, "ct": 2267.96185,
        "stone": 0.0714286, "gr": 7000, "dwt": 291.666667,
        "t": 0.000453592, "ozt": 14.5833333,
        "mton": 4.53592e-7, "cwt": 0.00892857143, "qtr": 0.0178571429,
        "st": 0.0714286, "lb-t": 0.001,
        "l-t": 0.000453592, "l-l": 1,
    },
    "l-t": {
        "g": 1000000, "kg": 1000, "lb": 2204.62, "oz": 35274,
        "mg": 1e+9, "ton": 0.001, "ct": 5e+6, "stone": 157.473,
        "gr": 1.54324e+6, "dwt": 6.43015e+7, "t": 1, "ozt": 3.21507e+7,
        "mton": 0.000001, "cwt": 1968.41, "qtr": 3936.82,
        "st": 157.473, "lb-t": 2204.62, "lb-l": 2.20462e+6,
        "l-l": 1000000,
    },
    "l-l": {
        "g": 1, "kg": 0.001, "lb": 0.00220462, "oz": 0.035274,
        "mg": 1000, "ton": 0.000001, "ct": 5, "stone": 0.000157473,
        "gr": 15.4324, "dwt": 0.64301493, "t": 1e-6, "ozt": 3.21507466e-5,
        "mton": 1e-9, "cwt": 0.0000196841, "qtr": 0.0000393682,
        "st": 0.000157473, "lb-t": 0.0000022046, "lb-l": 0.0022046,
        "l-t": 0.000001,
    },
}

WEIGHT_TABLE = RateTable("weight", WeightUnit, WEIGHT_RATES)


def convert_weight(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a value from one weight unit to another.

    Raises:
        ConversionUnsupported: If the pair is not tabulated (including from == to)

    Example:
        >>> convert_weight(1000, 'g', 'kg')
        1.0
    """
    return WEIGHT_TABLE.convert(value, from_unit, to_unit)
