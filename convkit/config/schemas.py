"""
ConvKit Configuration Schemas
=============================

Type-safe Pydantic models for the few knobs ConvKit exposes. Configuration is
built in code only; nothing is read from the environment or from files.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NumberFormatConfig(BaseModel):
    """Defaults for the number formatting functions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    thousands_separator: str = Field(
        default=",",
        min_length=1,
        description="Separator inserted between digit groups",
    )
    percentage_decimals: int = Field(
        default=2,
        ge=0,
        le=20,
        description="Decimal places used by to_percentage when none are given",
    )


class LoggingConfig(BaseModel):
    """Settings applied by configure_logging to the 'convkit' logger."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field(default="WARNING", description="Logging level name")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Handler format string",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept standard level names in any case."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class ConvKitConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    number_format: NumberFormatConfig = Field(default_factory=NumberFormatConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def create_test_config(**overrides: Any) -> ConvKitConfig:
    """
    Build a config for tests.

    Example:
        >>> config = create_test_config(number_format={"percentage_decimals": 1})
        >>> config.number_format.percentage_decimals
        1
    """
    return ConvKitConfig(**overrides)
