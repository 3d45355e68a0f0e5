"""
ConvKit Configuration Package
=============================

Type-safe Pydantic schemas and a thread-safe manager with a test override
mechanism.
"""

from convkit.config.schemas import (
    ConvKitConfig,
    NumberFormatConfig,
    LoggingConfig,
    create_test_config,
)

from convkit.config.manager import (
    ConfigManager,
    get_config,
    override_config,
    reset_config,
    configure_logging,
)


__all__ = [
    # Schemas
    "ConvKitConfig",
    "NumberFormatConfig",
    "LoggingConfig",
    "create_test_config",
    # Manager
    "ConfigManager",
    "get_config",
    "override_config",
    "reset_config",
    "configure_logging",
]
