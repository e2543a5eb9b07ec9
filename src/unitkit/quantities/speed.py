# This file is generated by unitkit.generator from speed.yaml. Do not edit.
"""Speed quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import SpeedUnit


class Speed:
    """
    Speed is the magnitude of the velocity of an object.
    """

    __slots__ = ("_meters_per_second",)

    unit_type = SpeedUnit
    base_unit = SpeedUnit.MeterPerSecond
    display_unit = SpeedUnit.MeterPerSecond

    def __init__(self, meters_per_second: float = 0.0) -> None:
        self._meters_per_second = float(meters_per_second)

    @property
    def feet_per_second(self) -> float:
        """Get Speed in FeetPerSecond."""
        return self._meters_per_second / 0.3048

    @property
    def kilometers_per_hour(self) -> float:
        """Get Speed in KilometersPerHour."""
        return self._meters_per_second / (5 / 18)

    @property
    def knots(self) -> float:
        """Get Speed in Knots."""
        return self._meters_per_second / (463 / 900)

    @property
    def meters_per_second(self) -> float:
        """Get Speed in MetersPerSecond."""
        return self._meters_per_second

    @property
    def miles_per_hour(self) -> float:
        """Get Speed in MilesPerHour."""
        return self._meters_per_second / 0.44704

    @classmethod
    def zero(cls) -> Speed:
        return cls()

    @staticmethod
    def units() -> tuple[SpeedUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_feet_per_second(cls, feet_per_second: float) -> Speed:
        """Get Speed from FeetPerSecond."""
        return cls(feet_per_second * 0.3048)

    @classmethod
    def from_kilometers_per_hour(cls, kilometers_per_hour: float) -> Speed:
        """Get Speed from KilometersPerHour."""
        return cls(kilometers_per_hour * (5 / 18))

    @classmethod
    def from_knots(cls, knots: float) -> Speed:
        """Get Speed from Knots."""
        return cls(knots * (463 / 900))

    @classmethod
    def from_meters_per_second(cls, meters_per_second: float) -> Speed:
        """Get Speed from MetersPerSecond."""
        return cls(meters_per_second)

    @classmethod
    def from_miles_per_hour(cls, miles_per_hour: float) -> Speed:
        """Get Speed from MilesPerHour."""
        return cls(miles_per_hour * 0.44704)

    @classmethod
    def from_unit(cls, value: float, unit: SpeedUnit) -> Speed:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, SpeedUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Speed", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: SpeedUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: SpeedUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, SpeedUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Speed", unit)
        return accessor(self)

    def __neg__(self) -> Speed:
        return Speed(-self._meters_per_second)

    def __add__(self, other: Any) -> Speed:
        if not isinstance(other, Speed):
            return NotImplemented
        return Speed(self._meters_per_second + other._meters_per_second)

    def __sub__(self, other: Any) -> Speed:
        if not isinstance(other, Speed):
            return NotImplemented
        return Speed(self._meters_per_second - other._meters_per_second)

    def __mul__(self, other: Any) -> Speed:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Speed(self._meters_per_second * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Speed | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Speed):
            return self._meters_per_second / other._meters_per_second
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Speed(self._meters_per_second / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Speed):
            raise QuantityTypeError("Speed", other)
        return (self._meters_per_second > other._meters_per_second) - (self._meters_per_second < other._meters_per_second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Speed):
            return NotImplemented
        return self._meters_per_second == other._meters_per_second

    def __hash__(self) -> int:
        return hash(self._meters_per_second)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Speed):
            return NotImplemented
        return self._meters_per_second < other._meters_per_second

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Speed):
            return NotImplemented
        return self._meters_per_second <= other._meters_per_second

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Speed):
            return NotImplemented
        return self._meters_per_second > other._meters_per_second

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Speed):
            return NotImplemented
        return self._meters_per_second >= other._meters_per_second

    def to_string(
        self,
        unit: SpeedUnit | None = None,
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
        return f"Speed({self._meters_per_second!r})"


_FROM_UNIT = {
    SpeedUnit.FootPerSecond: Speed.from_feet_per_second,
    SpeedUnit.KilometerPerHour: Speed.from_kilometers_per_hour,
    SpeedUnit.Knot: Speed.from_knots,
    SpeedUnit.MeterPerSecond: Speed.from_meters_per_second,
    SpeedUnit.MilePerHour: Speed.from_miles_per_hour,
}

_AS_UNIT = {
    SpeedUnit.FootPerSecond: Speed.feet_per_second.fget,
    SpeedUnit.KilometerPerHour: Speed.kilometers_per_hour.fget,
    SpeedUnit.Knot: Speed.knots.fget,
    SpeedUnit.MeterPerSecond: Speed.meters_per_second.fget,
    SpeedUnit.MilePerHour: Speed.miles_per_hour.fget,
}

__all__ = ["Speed"]
