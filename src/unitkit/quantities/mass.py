# This file is generated by unitkit.generator from mass.yaml. Do not edit.
"""Mass quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import MassUnit


class Mass:
    """
    In physics, mass is a property of a physical body.
    """

    __slots__ = ("_kilograms",)

    unit_type = MassUnit
    base_unit = MassUnit.Kilogram
    display_unit = MassUnit.Kilogram

    def __init__(self, kilograms: float = 0.0) -> None:
        self._kilograms = float(kilograms)

    @property
    def grams(self) -> float:
        """Get Mass in Grams."""
        return self._kilograms / 0.001

    @property
    def kilograms(self) -> float:
        """Get Mass in Kilograms."""
        return self._kilograms

    @property
    def long_tons(self) -> float:
        """Get Mass in LongTons."""
        return self._kilograms / 1016.0469088

    @property
    def micrograms(self) -> float:
        """Get Mass in Micrograms."""
        return self._kilograms / 1e-09

    @property
    def milligrams(self) -> float:
        """Get Mass in Milligrams."""
        return self._kilograms / 1e-06

    @property
    def ounces(self) -> float:
        """Get Mass in Ounces."""
        return self._kilograms / 0.028349523125

    @property
    def pounds(self) -> float:
        """Get Mass in Pounds."""
        return self._kilograms / 0.45359237

    @property
    def short_tons(self) -> float:
        """Get Mass in ShortTons."""
        return self._kilograms / 907.18474

    @property
    def tonnes(self) -> float:
        """Get Mass in Tonnes."""
        return self._kilograms / 1000.0

    @classmethod
    def zero(cls) -> Mass:
        return cls()

    @staticmethod
    def units() -> tuple[MassUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_grams(cls, grams: float) -> Mass:
        """Get Mass from Grams."""
        return cls(grams * 0.001)

    @classmethod
    def from_kilograms(cls, kilograms: float) -> Mass:
        """Get Mass from Kilograms."""
        return cls(kilograms)

    @classmethod
    def from_long_tons(cls, long_tons: float) -> Mass:
        """Get Mass from LongTons."""
        return cls(long_tons * 1016.0469088)

    @classmethod
    def from_micrograms(cls, micrograms: float) -> Mass:
        """Get Mass from Micrograms."""
        return cls(micrograms * 1e-09)

    @classmethod
    def from_milligrams(cls, milligrams: float) -> Mass:
        """Get Mass from Milligrams."""
        return cls(milligrams * 1e-06)

    @classmethod
    def from_ounces(cls, ounces: float) -> Mass:
        """Get Mass from Ounces."""
        return cls(ounces * 0.028349523125)

    @classmethod
    def from_pounds(cls, pounds: float) -> Mass:
        """Get Mass from Pounds."""
        return cls(pounds * 0.45359237)

    @classmethod
    def from_short_tons(cls, short_tons: float) -> Mass:
        """Get Mass from ShortTons."""
        return cls(short_tons * 907.18474)

    @classmethod
    def from_tonnes(cls, tonnes: float) -> Mass:
        """Get Mass from Tonnes."""
        return cls(tonnes * 1000.0)

    @classmethod
    def from_unit(cls, value: float, unit: MassUnit) -> Mass:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, MassUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Mass", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: MassUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: MassUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, MassUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Mass", unit)
        return accessor(self)

    def __neg__(self) -> Mass:
        return Mass(-self._kilograms)

    def __add__(self, other: Any) -> Mass:
        if not isinstance(other, Mass):
            return NotImplemented
        return Mass(self._kilograms + other._kilograms)

    def __sub__(self, other: Any) -> Mass:
        if not isinstance(other, Mass):
            return NotImplemented
        return Mass(self._kilograms - other._kilograms)

    def __mul__(self, other: Any) -> Mass:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Mass(self._kilograms * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Mass | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Mass):
            return self._kilograms / other._kilograms
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Mass(self._kilograms / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Mass):
            raise QuantityTypeError("Mass", other)
        return (self._kilograms > other._kilograms) - (self._kilograms < other._kilograms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._kilograms == other._kilograms

    def __hash__(self) -> int:
        return hash(self._kilograms)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._kilograms < other._kilograms

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._kilograms <= other._kilograms

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._kilograms > other._kilograms

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._kilograms >= other._kilograms

    def to_string(
        self,
        unit: MassUnit | None = None,
        culture: str | None = None,
        fmt: str | None = None,
        *args: Any,
    ) -> str:
        """Render the value in ``unit`` followed by its abbreviation in ``culture``.

        Without ``fmt`` the value is rounded to two fractional digits. With
        ``fmt``, ``{0}`` is the converted value, ``{1}`` the abbreviation and
        ``args`` follow as ``{2}`` onwards.
        """
        target = self.display_unit if unit is None else unit
        value = self.as_unit(target)
        abbreviation = get_cached(culture).get_default_abbreviation(target)
        return format_quantity(value, abbreviation, fmt, args)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Mass({self._kilograms!r})"


_FROM_UNIT = {
    MassUnit.Gram: Mass.from_grams,
    MassUnit.Kilogram: Mass.from_kilograms,
    MassUnit.LongTon: Mass.from_long_tons,
    MassUnit.Microgram: Mass.from_micrograms,
    MassUnit.Milligram: Mass.from_milligrams,
    MassUnit.Ounce: Mass.from_ounces,
    MassUnit.Pound: Mass.from_pounds,
    MassUnit.ShortTon: Mass.from_short_tons,
    MassUnit.Tonne: Mass.from_tonnes,
}

_AS_UNIT = {
    MassUnit.Gram: Mass.grams.fget,
    MassUnit.Kilogram: Mass.kilograms.fget,
    MassUnit.LongTon: Mass.long_tons.fget,
    MassUnit.Microgram: Mass.micrograms.fget,
    MassUnit.Milligram: Mass.milligrams.fget,
    MassUnit.Ounce: Mass.ounces.fget,
    MassUnit.Pound: Mass.pounds.fget,
    MassUnit.ShortTon: Mass.short_tons.fget,
    MassUnit.Tonne: Mass.tonnes.fget,
}

__all__ = ["Mass"]
