"""Tests for the UnitConverter facade."""

import pytest

from convkit.exceptions import ConversionUnsupported, UnknownQuantity
from convkit.units import (
    LENGTH_TABLE,
    TEMPERATURE_TABLE,
    LengthUnit,
    Quantity,
    UnitConverter,
    get_unit_converter,
)


class TestConvert:
    """Dispatch by quantity."""

    @pytest.mark.parametrize("quantity,value,from_unit,to_unit,expected", [
        ("length", 1, "mi", "m", 1609.34),
        ("weight", 1000, "g", "kg", 1),
        ("temperature", 100, "C", "K", 373.15),
        ("volume", 1, "gal", "l", 3.78541),
        ("speed", 1, "m/s", "km/h", 3.6),
        ("area", 1, "ac", "m2", 4046.86),
    ])
    def test_each_quantity(self, converter, quantity, value, from_unit, to_unit, expected):
        assert converter.convert(quantity, value, from_unit, to_unit) == pytest.approx(expected)

    def test_quantity_enum(self, converter):
        assert converter.convert(Quantity.LENGTH, 1, LengthUnit.KM, LengthUnit.M) == pytest.approx(1000)

    def test_quantity_name_is_normalized(self, converter):
        assert converter.convert(" Length ", 1, "km", "m") == pytest.approx(1000)

    def test_unknown_quantity(self, converter):
        with pytest.raises(UnknownQuantity) as exc_info:
            converter.convert("luminosity", 1, "cd", "lm")
        exc = exc_info.value
        assert str(exc) == "Unknown quantity: luminosity"
        assert exc.context["available_quantities"] == [
            "length", "weight", "temperature", "volume", "speed", "area",
        ]

    def test_unsupported_pair_propagates(self, converter):
        with pytest.raises(ConversionUnsupported) as exc_info:
            converter.convert("temperature", 1, "K", "K")
        assert exc_info.value.quantity == "temperature"

    def test_unit_of_other_quantity(self, converter):
        with pytest.raises(ConversionUnsupported):
            converter.convert("length", 1, "kg", "g")


class TestCatalogue:
    """Unit and pair listings."""

    def test_is_supported(self, converter):
        assert converter.is_supported("length", "m", "km")
        assert not converter.is_supported("length", "m", "m")
        assert not converter.is_supported("weight", "mton", "t")
        assert not converter.is_supported("mass", "g", "kg")

    def test_list_supported_units_all(self, converter):
        units = converter.list_supported_units()
        assert list(units) == ["length", "weight", "temperature", "volume", "speed", "area"]
        assert units["temperature"] == ["C", "F", "K"]
        assert units["speed"] == ["m/s", "km/h", "mi/h", "ft/s", "kn"]
        assert "µm" in units["length"]
        assert len(units["weight"]) == 20
        assert len(units["volume"]) == 21

    def test_list_supported_units_filtered(self, converter):
        assert converter.list_supported_units("area") == {
            "area": ["m2", "km2", "cm2", "mm2", "in2", "ft2", "mi2", "ac", "ha"],
        }

    def test_list_supported_units_unknown(self, converter):
        with pytest.raises(UnknownQuantity):
            converter.list_supported_units("energy")

    def test_list_conversions(self, converter):
        pairs = converter.list_conversions("temperature")
        assert sorted(pairs) == [
            ("C", "F"), ("C", "K"), ("F", "C"), ("F", "K"), ("K", "C"), ("K", "F"),
        ]

    def test_list_conversions_matches_table(self, converter):
        assert len(converter.list_conversions("length")) == len(LENGTH_TABLE)

    @pytest.mark.parametrize("unit,expected", [
        ("m", ["length"]),
        ("t", ["weight"]),
        ("C", ["temperature"]),
        ("m3", ["volume"]),
        ("kn", ["speed"]),
        ("ha", ["area"]),
        ("parsec", []),
    ])
    def test_get_unit_quantities(self, converter, unit, expected):
        assert converter.get_unit_quantities(unit) == expected

    def test_get_table(self, converter):
        assert converter.get_table("temperature") is TEMPERATURE_TABLE


class TestSharedConverter:
    """Process-wide instance."""

    def test_same_instance(self):
        assert get_unit_converter() is get_unit_converter()

    def test_is_unit_converter(self):
        assert isinstance(get_unit_converter(), UnitConverter)
