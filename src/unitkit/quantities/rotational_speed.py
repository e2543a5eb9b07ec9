# This file is generated by unitkit.generator from rotational_speed.yaml. Do not edit.
"""RotationalSpeed quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import RotationalSpeedUnit


class RotationalSpeed:
    """
    Rotational speed is the number of turns of an object per unit time.
    """

    __slots__ = ("_revolutions_per_second",)

    unit_type = RotationalSpeedUnit
    base_unit = RotationalSpeedUnit.RevolutionPerSecond
    display_unit = RotationalSpeedUnit.RevolutionPerSecond

    def __init__(self, revolutions_per_second: float = 0.0) -> None:
        self._revolutions_per_second = float(revolutions_per_second)

    @property
    def degrees_per_second(self) -> float:
        """Get RotationalSpeed in DegreesPerSecond."""
        return self._revolutions_per_second / (1 / 360)

    @property
    def revolutions_per_minute(self) -> float:
        """Get RotationalSpeed in RevolutionsPerMinute."""
        return self._revolutions_per_second / (1 / 60)

    @property
    def revolutions_per_second(self) -> float:
        """Get RotationalSpeed in RevolutionsPerSecond."""
        return self._revolutions_per_second

    @classmethod
    def zero(cls) -> RotationalSpeed:
        return cls()

    @staticmethod
    def units() -> tuple[RotationalSpeedUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_degrees_per_second(cls, degrees_per_second: float) -> RotationalSpeed:
        """Get RotationalSpeed from DegreesPerSecond."""
        return cls(degrees_per_second * (1 / 360))

    @classmethod
    def from_revolutions_per_minute(cls, revolutions_per_minute: float) -> RotationalSpeed:
        """Get RotationalSpeed from RevolutionsPerMinute."""
        return cls(revolutions_per_minute * (1 / 60))

    @classmethod
    def from_revolutions_per_second(cls, revolutions_per_second: float) -> RotationalSpeed:
        """Get RotationalSpeed from RevolutionsPerSecond."""
        return cls(revolutions_per_second)

    @classmethod
    def from_unit(cls, value: float, unit: RotationalSpeedUnit) -> RotationalSpeed:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, RotationalSpeedUnit) else None
        if factory is None:
            raise UnimplementedUnitError("RotationalSpeed", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: RotationalSpeedUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: RotationalSpeedUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, RotationalSpeedUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("RotationalSpeed", unit)
        return accessor(self)

    def __neg__(self) -> RotationalSpeed:
        return RotationalSpeed(-self._revolutions_per_second)

    def __add__(self, other: Any) -> RotationalSpeed:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return RotationalSpeed(self._revolutions_per_second + other._revolutions_per_second)

    def __sub__(self, other: Any) -> RotationalSpeed:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return RotationalSpeed(self._revolutions_per_second - other._revolutions_per_second)

    def __mul__(self, other: Any) -> RotationalSpeed:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return RotationalSpeed(self._revolutions_per_second * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> RotationalSpeed | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, RotationalSpeed):
            return self._revolutions_per_second / other._revolutions_per_second
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return RotationalSpeed(self._revolutions_per_second / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, RotationalSpeed):
            raise QuantityTypeError("RotationalSpeed", other)
        return (self._revolutions_per_second > other._revolutions_per_second) - (self._revolutions_per_second < other._revolutions_per_second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return self._revolutions_per_second == other._revolutions_per_second

    def __hash__(self) -> int:
        return hash(self._revolutions_per_second)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return self._revolutions_per_second < other._revolutions_per_second

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return self._revolutions_per_second <= other._revolutions_per_second

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return self._revolutions_per_second > other._revolutions_per_second

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, RotationalSpeed):
            return NotImplemented
        return self._revolutions_per_second >= other._revolutions_per_second

    def to_string(
        self,
        unit: RotationalSpeedUnit | None = None,
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
        return f"RotationalSpeed({self._revolutions_per_second!r})"


_FROM_UNIT = {
    RotationalSpeedUnit.DegreePerSecond: RotationalSpeed.from_degrees_per_second,
    RotationalSpeedUnit.RevolutionPerMinute: RotationalSpeed.from_revolutions_per_minute,
    RotationalSpeedUnit.RevolutionPerSecond: RotationalSpeed.from_revolutions_per_second,
}

_AS_UNIT = {
    RotationalSpeedUnit.DegreePerSecond: RotationalSpeed.degrees_per_second.fget,
    RotationalSpeedUnit.RevolutionPerMinute: RotationalSpeed.revolutions_per_minute.fget,
    RotationalSpeedUnit.RevolutionPerSecond: RotationalSpeed.revolutions_per_second.fget,
}

__all__ = ["RotationalSpeed"]
