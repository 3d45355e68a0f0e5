"""Tests for the configuration schemas and manager."""

import logging
import threading

import pytest
from pydantic import ValidationError

from convkit.config import (
    ConfigManager,
    ConvKitConfig,
    LoggingConfig,
    NumberFormatConfig,
    configure_logging,
    create_test_config,
    get_config,
    override_config,
    reset_config,
)
from convkit.exceptions import ConfigurationError


# ==============================================================================
# Schemas
# ==============================================================================

class TestSchemas:
    """Pydantic models."""

    def test_defaults(self):
        config = ConvKitConfig()
        assert config.number_format.thousands_separator == ","
        assert config.number_format.percentage_decimals == 2
        assert config.logging.level == "WARNING"

    def test_frozen(self):
        config = ConvKitConfig()
        with pytest.raises(ValidationError):
            config.number_format.percentage_decimals = 3

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            NumberFormatConfig(decimal_separator=".")

    @pytest.mark.parametrize("decimals", [-1, 21])
    def test_percentage_decimals_range(self, decimals):
        with pytest.raises(ValidationError):
            NumberFormatConfig(percentage_decimals=decimals)

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError):
            NumberFormatConfig(thousands_separator="")

    def test_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")

    def test_create_test_config(self):
        config = create_test_config(number_format={"percentage_decimals": 1})
        assert config.number_format.percentage_decimals == 1
        assert config.number_format.thousands_separator == ","


# ==============================================================================
# Manager
# ==============================================================================

class TestConfigManager:
    """Singleton, configure and overrides."""

    def test_singleton(self):
        assert ConfigManager.get_instance() is ConfigManager.get_instance()

    def test_singleton_across_threads(self):
        instances = []

        def grab():
            instances.append(ConfigManager.get_instance())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(i is instances[0] for i in instances)

    def test_reset_instance(self):
        first = ConfigManager.get_instance()
        reset_config()
        assert ConfigManager.get_instance() is not first

    def test_configure(self):
        manager = ConfigManager.get_instance()
        manager.configure(number_format={"thousands_separator": " "})
        assert get_config().number_format.thousands_separator == " "
        assert get_config().number_format.percentage_decimals == 2

    def test_configure_logs_change(self, caplog):
        with caplog.at_level(logging.INFO, logger="convkit.config.manager"):
            ConfigManager.get_instance().configure(logging={"level": "info"})
        assert "Configuration updated" in caplog.text

    def test_configure_invalid(self):
        manager = ConfigManager.get_instance()
        with pytest.raises(ConfigurationError) as exc_info:
            manager.configure(number_format={"percentage_decimals": 99})
        assert exc_info.value.context["cause_type"] == "ValidationError"
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert get_config().number_format.percentage_decimals == 2

    def test_override_restores(self):
        with override_config(number_format={"percentage_decimals": 5}) as config:
            assert config.number_format.percentage_decimals == 5
            assert get_config().number_format.percentage_decimals == 5
        assert get_config().number_format.percentage_decimals == 2

    def test_nested_overrides(self):
        with override_config(number_format={"percentage_decimals": 5}):
            with override_config(number_format={"thousands_separator": "'"}):
                config = get_config()
                assert config.number_format.percentage_decimals == 5
                assert config.number_format.thousands_separator == "'"
            assert get_config().number_format.thousands_separator == ","
        assert get_config().number_format.percentage_decimals == 2

    def test_nested_override_leaves_outer_dict_untouched(self):
        outer = {"number_format": {"percentage_decimals": 5}}
        with override_config(**outer):
            with override_config(number_format={"thousands_separator": "'"}):
                pass
            assert get_config().number_format.thousands_separator == ","
            assert get_config().number_format.percentage_decimals == 5
        assert outer == {"number_format": {"percentage_decimals": 5}}

    def test_override_copies_caller_dict(self):
        number_format = {"thousands_separator": "."}
        with override_config(number_format=number_format):
            number_format["thousands_separator"] = " "
            assert get_config().number_format.thousands_separator == "."

    def test_configure_copies_caller_dict(self):
        number_format = {"thousands_separator": "."}
        ConfigManager.get_instance().configure(number_format=number_format)
        assert number_format == {"thousands_separator": "."}

    def test_override_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with override_config(number_format={"percentage_decimals": 0}):
                raise RuntimeError("boom")
        assert get_config().number_format.percentage_decimals == 2

    def test_invalid_override_raises_on_entry(self):
        with pytest.raises(ConfigurationError):
            with override_config(number_format={"percentage_decimals": -3}):
                pytest.fail("block must not run")
        assert repr(ConfigManager.get_instance()) == "ConfigManager(overrides=0)"


# ==============================================================================
# Logging
# ==============================================================================

class TestConfigureLogging:
    """Package logger setup."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        package_logger = logging.getLogger("convkit")
        handlers = list(package_logger.handlers)
        level = package_logger.level
        yield
        package_logger.handlers = handlers
        package_logger.setLevel(level)

    def test_applies_level(self):
        logger = configure_logging(create_test_config(logging={"level": "DEBUG"}))
        assert logger.name == "convkit"
        assert logger.level == logging.DEBUG

    def test_single_handler(self):
        configure_logging()
        configure_logging()
        package_logger = logging.getLogger("convkit")
        installed = [h for h in package_logger.handlers if getattr(h, "_convkit_handler", False)]
        assert len(installed) == 1

    def test_uses_current_config(self):
        with override_config(logging={"level": "ERROR"}):
            logger = configure_logging()
        assert logger.level == logging.ERROR

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        configure_logging()
        assert logging.getLogger().handlers == root_handlers

    def test_unsupported_conversion_logged_at_debug(self, caplog):
        from convkit.units import convert_speed
        from convkit.exceptions import ConversionUnsupported

        with caplog.at_level(logging.DEBUG, logger="convkit.units.base"):
            with pytest.raises(ConversionUnsupported):
                convert_speed(1, "kn", "mach")
        assert "Unsupported speed conversion: kn -> mach" in caplog.text
