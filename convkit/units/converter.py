"""
Unit Converter

Single entry point over the per-quantity conversion tables. Dispatches on a
quantity name and answers catalogue questions (which units, which pairs).

Supports:
- Length: m, km, cm, mm, µm, nm, in, ft, yd, mi, nmi, ly
- Weight: g, kg, lb, oz, mg, ton, ct, stone, gr, dwt, t, ozt, mton, cwt, qtr, st, lb-t, lb-l, l-t, l-l
- Temperature: C, F, K
- Volume: ml, cl, dl, l, kl, m3, mm3, cm3, dm3, hm3, km3, in3, ft3, yd3, gal, qt, pt, cup, fl-oz, tbsp, tsp
- Speed: m/s, km/h, mi/h, ft/s, kn
- Area: m2, km2, cm2, mm2, in2, ft2, mi2, ac, ha
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from convkit.exceptions import UnknownQuantity
from convkit.units.area import AREA_TABLE
from convkit.units.base import Table, UnitLike, unit_name
from convkit.units.length import LENGTH_TABLE
from convkit.units.speed import SPEED_TABLE
from convkit.units.temperature import TEMPERATURE_TABLE
from convkit.units.volume import VOLUME_TABLE
from convkit.units.weight import WEIGHT_TABLE


class Quantity(str, Enum):
    """Physical quantities with a conversion table."""
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    SPEED = "speed"
    AREA = "area"


QuantityLike = Union[Quantity, str]


class UnitConverter:
    """
    Dispatching unit converter.

    Usage:
        >>> converter = UnitConverter()
        >>> converter.convert('length', 1, 'mi', 'm')
        1609.34
        >>> converter.is_supported('temperature', 'C', 'C')
        False
    """

    def __init__(self):
        """Initialize unit converter"""
        self.conversion_tables: Dict[Quantity, Table] = {
            Quantity.LENGTH: LENGTH_TABLE,
            Quantity.WEIGHT: WEIGHT_TABLE,
            Quantity.TEMPERATURE: TEMPERATURE_TABLE,
            Quantity.VOLUME: VOLUME_TABLE,
            Quantity.SPEED: SPEED_TABLE,
            Quantity.AREA: AREA_TABLE,
        }

    def get_table(self, quantity: QuantityLike) -> Table:
        """
        Table for a quantity.

        Args:
            quantity: Quantity or its name ('length', 'weight', ...)

        Raises:
            UnknownQuantity: If the quantity is not registered
        """
        try:
            key = Quantity(quantity.lower().strip() if isinstance(quantity, str) else quantity)
        except ValueError:
            raise UnknownQuantity(
                unit_name(quantity),
                available=[q.value for q in self.conversion_tables],
            ) from None
        return self.conversion_tables[key]

    def convert(
        self,
        quantity: QuantityLike,
        value: float,
        from_unit: UnitLike,
        to_unit: UnitLike,
    ) -> float:
        """
        Convert value from one unit to another within a quantity.

        Args:
            quantity: Quantity name (e.g., 'volume')
            value: Numerical value to convert
            from_unit: Source unit (e.g., 'gal')
            to_unit: Target unit (e.g., 'l')

        Returns:
            Converted value as float

        Raises:
            UnknownQuantity: If the quantity is not registered
            ConversionUnsupported: If the pair is not tabulated
        """
        return self.get_table(quantity).convert(value, from_unit, to_unit)

    def is_supported(self, quantity: QuantityLike, from_unit: UnitLike, to_unit: UnitLike) -> bool:
        """
        Check if a pair can be converted.

        Returns:
            True if the pair is tabulated, False otherwise (including unknown quantity)
        """
        try:
            table = self.get_table(quantity)
        except UnknownQuantity:
            return False
        return table.supports(from_unit, to_unit)

    def get_unit_quantities(self, unit: UnitLike) -> List[str]:
        """
        Quantities declaring a unit identifier.

        Args:
            unit: Unit identifier (e.g., 'km')

        Returns:
            Quantity names, empty if no quantity knows the unit
        """
        return [
            quantity.value
            for quantity, table in self.conversion_tables.items()
            if unit in table
        ]

    def list_supported_units(self, quantity: Optional[QuantityLike] = None) -> Dict[str, List[str]]:
        """
        List all supported units.

        Args:
            quantity: Optional quantity filter ('length', 'volume', etc.)

        Returns:
            Dictionary mapping quantity names to unit identifiers
        """
        if quantity is not None:
            table = self.get_table(quantity)
            return {table.quantity: [unit_name(u) for u in table.units]}

        return {
            q.value: [unit_name(u) for u in table.units]
            for q, table in self.conversion_tables.items()
        }

    def list_conversions(self, quantity: QuantityLike) -> List[Tuple[str, str]]:
        """Every tabulated (from, to) pair of a quantity."""
        table = self.get_table(quantity)
        return [(unit_name(a), unit_name(b)) for a, b in table.pairs()]


_converter: Optional[UnitConverter] = None


def get_unit_converter() -> UnitConverter:
    """Return the shared UnitConverter (created on first use)."""
    global _converter
    if _converter is None:
        _converter = UnitConverter()
    return _converter
