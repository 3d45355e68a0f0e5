# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import json
import random
from pathlib import Path

import pytest

from convkit.config import ConfigManager
from convkit.units import UnitConverter


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the default configuration."""
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


@pytest.fixture(scope="session")
def test_data_dir():
    """Get the test fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def published_rates(test_data_dir):
    """Published rate rows per quantity: {quantity: {from: {to: rate}}}."""
    with open(test_data_dir / "published_rates.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def converter():
    """Fresh UnitConverter."""
    return UnitConverter()


@pytest.fixture
def seeded_rng():
    """Deterministic random source for shuffle tests."""
    return random.Random(1234)
