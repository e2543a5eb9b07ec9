# This file is generated by unitkit.generator from angle.yaml. Do not edit.
"""Angle quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.constants import DEGREES_PER_RADIAN
from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import AngleUnit


class Angle:
    """
    Angle is the figure formed by two rays sharing a common endpoint.
    """

    __slots__ = ("_degrees",)

    unit_type = AngleUnit
    base_unit = AngleUnit.Degree
    display_unit = AngleUnit.Degree

    def __init__(self, degrees: float = 0.0) -> None:
        self._degrees = float(degrees)

    @property
    def arcminutes(self) -> float:
        """Get Angle in Arcminutes."""
        return self._degrees / (1 / 60)

    @property
    def arcseconds(self) -> float:
        """Get Angle in Arcseconds."""
        return self._degrees / (1 / 3600)

    @property
    def degrees(self) -> float:
        """Get Angle in Degrees."""
        return self._degrees

    @property
    def gradians(self) -> float:
        """Get Angle in Gradians."""
        return self._degrees / 0.9

    @property
    def radians(self) -> float:
        """Get Angle in Radians."""
        return self._degrees / DEGREES_PER_RADIAN

    @classmethod
    def zero(cls) -> Angle:
        return cls()

    @staticmethod
    def units() -> tuple[AngleUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_arcminutes(cls, arcminutes: float) -> Angle:
        """Get Angle from Arcminutes."""
        return cls(arcminutes * (1 / 60))

    @classmethod
    def from_arcseconds(cls, arcseconds: float) -> Angle:
        """Get Angle from Arcseconds."""
        return cls(arcseconds * (1 / 3600))

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        """Get Angle from Degrees."""
        return cls(degrees)

    @classmethod
    def from_gradians(cls, gradians: float) -> Angle:
        """Get Angle from Gradians."""
        return cls(gradians * 0.9)

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        """Get Angle from Radians."""
        return cls(radians * DEGREES_PER_RADIAN)

    @classmethod
    def from_unit(cls, value: float, unit: AngleUnit) -> Angle:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, AngleUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Angle", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: AngleUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: AngleUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, AngleUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Angle", unit)
        return accessor(self)

    def __neg__(self) -> Angle:
        return Angle(-self._degrees)

    def __add__(self, other: Any) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self._degrees + other._degrees)

    def __sub__(self, other: Any) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self._degrees - other._degrees)

    def __mul__(self, other: Any) -> Angle:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Angle(self._degrees * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Angle | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Angle):
            return self._degrees / other._degrees
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Angle(self._degrees / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Angle):
            raise QuantityTypeError("Angle", other)
        return (self._degrees > other._degrees) - (self._degrees < other._degrees)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash(self._degrees)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees < other._degrees

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees <= other._degrees

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees > other._degrees

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees >= other._degrees

    def to_string(
        self,
        unit: AngleUnit | None = None,
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
        return f"Angle({self._degrees!r})"


_FROM_UNIT = {
    AngleUnit.Arcminute: Angle.from_arcminutes,
    AngleUnit.Arcsecond: Angle.from_arcseconds,
    AngleUnit.Degree: Angle.from_degrees,
    AngleUnit.Gradian: Angle.from_gradians,
    AngleUnit.Radian: Angle.from_radians,
}

_AS_UNIT = {
    AngleUnit.Arcminute: Angle.arcminutes.fget,
    AngleUnit.Arcsecond: Angle.arcseconds.fget,
    AngleUnit.Degree: Angle.degrees.fget,
    AngleUnit.Gradian: Angle.gradians.fget,
    AngleUnit.Radian: Angle.radians.fget,
}

__all__ = ["Angle"]
