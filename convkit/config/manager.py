"""
ConvKit Configuration Manager
=============================

Process-wide configuration with:
- Thread-safe singleton
- Validation through the Pydantic schemas
- Nestable override mechanism for testing
- Logging setup for the 'convkit' logger
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from convkit.config.schemas import ConvKitConfig
from convkit.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "convkit"


# ==============================================================================
# Configuration Manager
# ==============================================================================

class ConfigManager:
    """
    Centralized configuration manager.

    Usage:
        >>> manager = ConfigManager.get_instance()
        >>> manager.get_config().number_format.percentage_decimals
        2
        >>> with manager.override(number_format={"percentage_decimals": 4}):
        ...     manager.get_config().number_format.percentage_decimals
        4
    """

    _instance: Optional[ConfigManager] = None
    _lock = threading.Lock()

    def __init__(self):
        """Initialize config manager (use get_instance() instead)."""
        self._config: ConvKitConfig = ConvKitConfig()
        self._override_stack: List[Dict[str, Any]] = []
        self._config_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> ConfigManager:
        """Get singleton instance of ConfigManager."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton instance (for testing)."""
        with cls._lock:
            cls._instance = None

    def get_config(self) -> ConvKitConfig:
        """
        Get current configuration.

        Returns:
            Current configuration with any active overrides applied
        """
        with self._config_lock:
            if self._override_stack:
                return self._apply_overrides(self._config)
            return self._config

    def configure(self, **values: Any) -> ConvKitConfig:
        """
        Replace configuration values permanently.

        Example:
            >>> ConfigManager.get_instance().configure(logging={"level": "debug"})

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        with self._config_lock:
            self._config = self._build(self._config, values)
            logger.info(f"Configuration updated: {sorted(values)}")
            return self._config

    def _apply_overrides(self, config: ConvKitConfig) -> ConvKitConfig:
        merged: Dict[str, Any] = {}
        for overrides in self._override_stack:
            self._deep_update(merged, copy.deepcopy(overrides))
        return self._build(config, merged)

    def _build(self, base: ConvKitConfig, updates: Dict[str, Any]) -> ConvKitConfig:
        config_dict = base.model_dump()
        self._deep_update(config_dict, copy.deepcopy(updates))
        try:
            return ConvKitConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid configuration",
                context={"updates": updates, "errors": [err["msg"] for err in e.errors()]},
                cause=e,
            ) from e

    def _deep_update(self, base: dict, updates: dict):
        """Deep update dict (modifies base in-place)."""
        for key, value in updates.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_update(base[key], value)
            else:
                base[key] = value

    # ==========================================================================
    # Context Manager for Overrides
    # ==========================================================================

    def override(self, **overrides: Any) -> ConfigOverrideContext:
        """
        Create context manager for temporary config overrides.

        Overrides are validated on entry, so an invalid override raises before
        the block runs.
        """
        return ConfigOverrideContext(self, overrides)

    def _push_overrides(self, overrides: Dict[str, Any]):
        with self._config_lock:
            self._override_stack.append(copy.deepcopy(overrides))
            try:
                self._apply_overrides(self._config)
            except ConfigurationError:
                self._override_stack.pop()
                raise

    def _pop_overrides(self):
        with self._config_lock:
            if self._override_stack:
                self._override_stack.pop()

    def __repr__(self) -> str:
        return f"ConfigManager(overrides={len(self._override_stack)})"


# ==============================================================================
# Config Override Context Manager
# ==============================================================================

class ConfigOverrideContext:
    """Context manager for temporary config overrides."""

    def __init__(self, manager: ConfigManager, overrides: Dict[str, Any]):
        self.manager = manager
        self.overrides = overrides

    def __enter__(self) -> ConvKitConfig:
        self.manager._push_overrides(self.overrides)
        return self.manager.get_config()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.manager._pop_overrides()
        return False


# ==============================================================================
# Global Convenience Functions
# ==============================================================================

def get_config() -> ConvKitConfig:
    """Get current configuration."""
    return ConfigManager.get_instance().get_config()


def override_config(**overrides: Any) -> ConfigOverrideContext:
    """
    Override configuration temporarily.

    Example:
        >>> with override_config(number_format={"thousands_separator": "."}):
        ...     get_config().number_format.thousands_separator
        '.'
    """
    return ConfigManager.get_instance().override(**overrides)


def reset_config():
    """Drop the current configuration and any overrides."""
    ConfigManager.reset_instance()


def configure_logging(config: Optional[ConvKitConfig] = None) -> logging.Logger:
    """
    Apply LoggingConfig to the 'convkit' logger.

    Installs a single stream handler; calling again updates its level and
    format instead of adding another handler. The root logger is untouched.

    Args:
        config: Configuration to apply (current configuration if omitted)

    Returns:
        The 'convkit' logger
    """
    config = config or get_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.logging.level)

    handler = next(
        (h for h in package_logger.handlers if getattr(h, "_convkit_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._convkit_handler = True
        package_logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.logging.format))

    logger.debug(f"Logging configured at {config.logging.level}")
    return package_logger
