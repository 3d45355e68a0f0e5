"""
ConvKit: stateless unit conversion and formatting utilities
===========================================================

- Unit conversion across length, weight, temperature, volume, speed and area
  from published pairwise tables
- Number formatting (thousands separators, radix, percentages, rounding)
- String case formatting (camelCase, snake_case, kebab-case, ...)
"""

from ._version import __version__

from convkit.exceptions import (
    ConvKitException,
    ConversionException,
    ConversionUnsupported,
    UnknownQuantity,
    ConfigurationError,
)
from convkit.config import (
    get_config,
    override_config,
    configure_logging,
)
from convkit.units import (
    convert_length,
    convert_weight,
    convert_temperature,
    convert_volume,
    convert_speed,
    convert_area,
    LengthUnit,
    WeightUnit,
    TemperatureUnit,
    VolumeUnit,
    SpeedUnit,
    AreaUnit,
    Quantity,
    UnitConverter,
    get_unit_converter,
)
from convkit.formatting import *  # noqa: F401,F403
from convkit.formatting import __all__ as _formatting_all

__all__ = [
    "__version__",
    # Exceptions
    "ConvKitException",
    "ConversionException",
    "ConversionUnsupported",
    "UnknownQuantity",
    "ConfigurationError",
    # Config
    "get_config",
    "override_config",
    "configure_logging",
    # Unit conversion
    "convert_length",
    "convert_weight",
    "convert_temperature",
    "convert_volume",
    "convert_speed",
    "convert_area",
    "LengthUnit",
    "WeightUnit",
    "TemperatureUnit",
    "VolumeUnit",
    "SpeedUnit",
    "AreaUnit",
    "Quantity",
    "UnitConverter",
    "get_unit_converter",
    # Formatting
    *_formatting_all,
]
