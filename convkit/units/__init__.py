"""
ConvKit Unit Conversion Engine

Six independent quantities, each a closed unit enumeration plus a table of
published pairwise rates (temperature: pairwise functions). Every entry point
has the same contract: look the pair up, apply it, or raise
ConversionUnsupported.
"""

from convkit.units.base import FunctionTable, RateTable, unit_name
from convkit.units.length import LengthUnit, LENGTH_TABLE, convert_length
from convkit.units.weight import WeightUnit, WEIGHT_TABLE, convert_weight
from convkit.units.temperature import TemperatureUnit, TEMPERATURE_TABLE, convert_temperature
from convkit.units.volume import VolumeUnit, VOLUME_TABLE, convert_volume
from convkit.units.speed import SpeedUnit, SPEED_TABLE, convert_speed
from convkit.units.area import AreaUnit, AREA_TABLE, convert_area
from convkit.units.converter import Quantity, UnitConverter, get_unit_converter

__all__ = [
    # Engines
    "convert_length",
    "convert_weight",
    "convert_temperature",
    "convert_volume",
    "convert_speed",
    "convert_area",
    # Units
    "LengthUnit",
    "WeightUnit",
    "TemperatureUnit",
    "VolumeUnit",
    "SpeedUnit",
    "AreaUnit",
    # Tables
    "RateTable",
    "FunctionTable",
    "LENGTH_TABLE",
    "WEIGHT_TABLE",
    "TEMPERATURE_TABLE",
    "VOLUME_TABLE",
    "SPEED_TABLE",
    "AREA_TABLE",
    "unit_name",
    # Facade
    "Quantity",
    "UnitConverter",
    "get_unit_converter",
]
