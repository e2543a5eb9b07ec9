# This file is generated by unitkit.generator from force.yaml. Do not edit.
"""Force quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.constants import STANDARD_GRAVITY
from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import ForceUnit


class Force:
    """
    Force is an influence that changes the motion of an object.
    """

    __slots__ = ("_newtons",)

    unit_type = ForceUnit
    base_unit = ForceUnit.Newton
    display_unit = ForceUnit.Newton

    def __init__(self, newtons: float = 0.0) -> None:
        self._newtons = float(newtons)

    @property
    def dynes(self) -> float:
        """Get Force in Dynes."""
        return self._newtons / 1e-05

    @property
    def kilograms_force(self) -> float:
        """Get Force in KilogramsForce."""
        return self._newtons / STANDARD_GRAVITY

    @property
    def kilonewtons(self) -> float:
        """Get Force in Kilonewtons."""
        return self._newtons / 1000.0

    @property
    def kilo_ponds(self) -> float:
        """Get Force in KiloPonds."""
        return self._newtons / STANDARD_GRAVITY

    @property
    def newtons(self) -> float:
        """Get Force in Newtons."""
        return self._newtons

    @property
    def poundals(self) -> float:
        """Get Force in Poundals."""
        return self._newtons / 0.138254954376

    @property
    def pounds_force(self) -> float:
        """Get Force in PoundsForce."""
        return self._newtons / 4.4482216152605

    @classmethod
    def zero(cls) -> Force:
        return cls()

    @staticmethod
    def units() -> tuple[ForceUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_dynes(cls, dynes: float) -> Force:
        """Get Force from Dynes."""
        return cls(dynes * 1e-05)

    @classmethod
    def from_kilograms_force(cls, kilograms_force: float) -> Force:
        """Get Force from KilogramsForce."""
        return cls(kilograms_force * STANDARD_GRAVITY)

    @classmethod
    def from_kilonewtons(cls, kilonewtons: float) -> Force:
        """Get Force from Kilonewtons."""
        return cls(kilonewtons * 1000.0)

    @classmethod
    def from_kilo_ponds(cls, kilo_ponds: float) -> Force:
        """Get Force from KiloPonds."""
        return cls(kilo_ponds * STANDARD_GRAVITY)

    @classmethod
    def from_newtons(cls, newtons: float) -> Force:
        """Get Force from Newtons."""
        return cls(newtons)

    @classmethod
    def from_poundals(cls, poundals: float) -> Force:
        """Get Force from Poundals."""
        return cls(poundals * 0.138254954376)

    @classmethod
    def from_pounds_force(cls, pounds_force: float) -> Force:
        """Get Force from PoundsForce."""
        return cls(pounds_force * 4.4482216152605)

    @classmethod
    def from_unit(cls, value: float, unit: ForceUnit) -> Force:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, ForceUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Force", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: ForceUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: ForceUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, ForceUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Force", unit)
        return accessor(self)

    def __neg__(self) -> Force:
        return Force(-self._newtons)

    def __add__(self, other: Any) -> Force:
        if not isinstance(other, Force):
            return NotImplemented
        return Force(self._newtons + other._newtons)

    def __sub__(self, other: Any) -> Force:
        if not isinstance(other, Force):
            return NotImplemented
        return Force(self._newtons - other._newtons)

    def __mul__(self, other: Any) -> Force:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Force(self._newtons * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Force | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Force):
            return self._newtons / other._newtons
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Force(self._newtons / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Force):
            raise QuantityTypeError("Force", other)
        return (self._newtons > other._newtons) - (self._newtons < other._newtons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return self._newtons == other._newtons

    def __hash__(self) -> int:
        return hash(self._newtons)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return self._newtons < other._newtons

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return self._newtons <= other._newtons

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return self._newtons > other._newtons

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return self._newtons >= other._newtons

    def to_string(
        self,
        unit: ForceUnit | None = None,
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
        return f"Force({self._newtons!r})"


_FROM_UNIT = {
    ForceUnit.Dyne: Force.from_dynes,
    ForceUnit.KilogramForce: Force.from_kilograms_force,
    ForceUnit.Kilonewton: Force.from_kilonewtons,
    ForceUnit.KiloPond: Force.from_kilo_ponds,
    ForceUnit.Newton: Force.from_newtons,
    ForceUnit.Poundal: Force.from_poundals,
    ForceUnit.PoundForce: Force.from_pounds_force,
}

_AS_UNIT = {
    ForceUnit.Dyne: Force.dynes.fget,
    ForceUnit.KilogramForce: Force.kilograms_force.fget,
    ForceUnit.Kilonewton: Force.kilonewtons.fget,
    ForceUnit.KiloPond: Force.kilo_ponds.fget,
    ForceUnit.Newton: Force.newtons.fget,
    ForceUnit.Poundal: Force.poundals.fget,
    ForceUnit.PoundForce: Force.pounds_force.fget,
}

__all__ = ["Force"]
