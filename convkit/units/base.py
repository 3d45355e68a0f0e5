"""
Conversion table machinery shared by every quantity module.

A quantity is a closed ``str`` enum of unit identifiers plus a table keyed by
``(from_unit, to_unit)``. Rate tables multiply, function tables apply an
affine function (temperature). Tables are built once from literal data and
exposed read-only.

Unit strings are coerced to the enum at the lookup boundary. An identifier
outside the enumeration fails exactly like a pair missing from the table:
``ConversionUnsupported``. Identity pairs are never tabulated, so
``from_unit == to_unit`` fails the same way.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional, Tuple, Type, Union

from convkit.exceptions import ConversionUnsupported

logger = logging.getLogger(__name__)

UnitLike = Union[Enum, str]


def unit_name(unit: object) -> str:
    """Identifier of a unit as shown to callers ("km", not "LengthUnit.KM")."""
    if isinstance(unit, Enum):
        return str(unit.value)
    return str(unit)


class _QuantityTable:
    """Enum-keyed two-level mapping shared by rate and function tables."""

    def __init__(
        self,
        quantity: str,
        unit_type: Type[Enum],
        entries: Mapping[str, Mapping[str, object]],
    ):
        """
        Build the table from literal data.

        Args:
            quantity: Quantity name used in errors and logs (e.g. 'length')
            unit_type: Enum declaring the quantity's units
            entries: {from_identifier: {to_identifier: entry}}

        Raises:
            ValueError: If an identifier is not a member of unit_type, or a
                unit is mapped to itself
        """
        self.quantity = quantity
        self.unit_type = unit_type

        table = {}
        for from_id, row in entries.items():
            from_unit = unit_type(from_id)
            built = {}
            for to_id, entry in row.items():
                to_unit = unit_type(to_id)
                if to_unit is from_unit:
                    raise ValueError(f"{quantity}: unit '{from_id}' mapped to itself")
                built[to_unit] = entry
            table[from_unit] = MappingProxyType(built)
        self._table = MappingProxyType(table)

    @property
    def units(self) -> Tuple[Enum, ...]:
        """All units of the quantity, in declaration order."""
        return tuple(self.unit_type)

    def coerce(self, unit: UnitLike) -> Optional[Enum]:
        """Map a unit or identifier onto the enumeration, None if outside it."""
        if isinstance(unit, self.unit_type):
            return unit
        try:
            return self.unit_type(unit)
        except ValueError:
            return None

    def _lookup(self, from_unit: UnitLike, to_unit: UnitLike):
        source = self.coerce(from_unit)
        target = self.coerce(to_unit)
        entry = None
        if source is not None and target is not None:
            entry = self._table.get(source, {}).get(target)
        if entry is None:
            logger.debug(
                f"Unsupported {self.quantity} conversion: "
                f"{unit_name(from_unit)} -> {unit_name(to_unit)}"
            )
            raise ConversionUnsupported(
                unit_name(from_unit), unit_name(to_unit), quantity=self.quantity
            )
        return entry

    def supports(self, from_unit: UnitLike, to_unit: UnitLike) -> bool:
        """True if the pair is tabulated."""
        source = self.coerce(from_unit)
        target = self.coerce(to_unit)
        if source is None or target is None:
            return False
        return target in self._table.get(source, {})

    def pairs(self) -> Iterator[Tuple[Enum, Enum]]:
        """Every tabulated (from, to) pair."""
        for source, row in self._table.items():
            for target in row:
                yield source, target

    def targets(self, from_unit: UnitLike) -> List[Enum]:
        """Units reachable from from_unit in one lookup."""
        source = self.coerce(from_unit)
        if source is None:
            return []
        return list(self._table.get(source, {}))

    def __contains__(self, unit: object) -> bool:
        return self.coerce(unit) is not None

    def __len__(self) -> int:
        return sum(len(row) for row in self._table.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(quantity={self.quantity!r}, pairs={len(self)})"


class RateTable(_QuantityTable):
    """Table of multiplicative rates: value_in_to = value_in_from * rate."""

    def rate(self, from_unit: UnitLike, to_unit: UnitLike) -> float:
        """
        Published rate for the pair.

        Raises:
            ConversionUnsupported: If the pair is not tabulated
        """
        return self._lookup(from_unit, to_unit)

    def convert(self, value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
        return value * self.rate(from_unit, to_unit)


class FunctionTable(_QuantityTable):
    """Table of conversion functions, for quantities with additive offsets."""

    def function(self, from_unit: UnitLike, to_unit: UnitLike) -> Callable[[float], float]:
        return self._lookup(from_unit, to_unit)

    def convert(self, value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
        return self.function(from_unit, to_unit)(value)


Table = Union[RateTable, FunctionTable]
