# This file is generated by unitkit.generator from flow.yaml. Do not edit.
"""Flow quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import FlowUnit


class Flow:
    """
    Volumetric flow rate, the volume of fluid passing a surface per unit time.
    """

    __slots__ = ("_cubic_meters_per_second",)

    unit_type = FlowUnit
    base_unit = FlowUnit.CubicMeterPerSecond
    display_unit = FlowUnit.CubicMeterPerSecond

    def __init__(self, cubic_meters_per_second: float = 0.0) -> None:
        self._cubic_meters_per_second = float(cubic_meters_per_second)

    @property
    def cubic_feet_per_second(self) -> float:
        """Get Flow in CubicFeetPerSecond."""
        return self._cubic_meters_per_second / 0.028316846592

    @property
    def cubic_meters_per_hour(self) -> float:
        """Get Flow in CubicMetersPerHour."""
        return self._cubic_meters_per_second / (1 / 3600)

    @property
    def cubic_meters_per_second(self) -> float:
        """Get Flow in CubicMetersPerSecond."""
        return self._cubic_meters_per_second

    @property
    def liters_per_minute(self) -> float:
        """Get Flow in LitersPerMinute."""
        return self._cubic_meters_per_second / (1 / 60000)

    @property
    def us_gallons_per_minute(self) -> float:
        """Get Flow in UsGallonsPerMinute."""
        return self._cubic_meters_per_second / (157725491 / 2500000000000)

    @classmethod
    def zero(cls) -> Flow:
        return cls()

    @staticmethod
    def units() -> tuple[FlowUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_cubic_feet_per_second(cls, cubic_feet_per_second: float) -> Flow:
        """Get Flow from CubicFeetPerSecond."""
        return cls(cubic_feet_per_second * 0.028316846592)

    @classmethod
    def from_cubic_meters_per_hour(cls, cubic_meters_per_hour: float) -> Flow:
        """Get Flow from CubicMetersPerHour."""
        return cls(cubic_meters_per_hour * (1 / 3600))

    @classmethod
    def from_cubic_meters_per_second(cls, cubic_meters_per_second: float) -> Flow:
        """Get Flow from CubicMetersPerSecond."""
        return cls(cubic_meters_per_second)

    @classmethod
    def from_liters_per_minute(cls, liters_per_minute: float) -> Flow:
        """Get Flow from LitersPerMinute."""
        return cls(liters_per_minute * (1 / 60000))

    @classmethod
    def from_us_gallons_per_minute(cls, us_gallons_per_minute: float) -> Flow:
        """Get Flow from UsGallonsPerMinute."""
        return cls(us_gallons_per_minute * (157725491 / 2500000000000))

    @classmethod
    def from_unit(cls, value: float, unit: FlowUnit) -> Flow:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, FlowUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Flow", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: FlowUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: FlowUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, FlowUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Flow", unit)
        return accessor(self)

    def __neg__(self) -> Flow:
        return Flow(-self._cubic_meters_per_second)

    def __add__(self, other: Any) -> Flow:
        if not isinstance(other, Flow):
            return NotImplemented
        return Flow(self._cubic_meters_per_second + other._cubic_meters_per_second)

    def __sub__(self, other: Any) -> Flow:
        if not isinstance(other, Flow):
            return NotImplemented
        return Flow(self._cubic_meters_per_second - other._cubic_meters_per_second)

    def __mul__(self, other: Any) -> Flow:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Flow(self._cubic_meters_per_second * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Flow | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Flow):
            return self._cubic_meters_per_second / other._cubic_meters_per_second
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Flow(self._cubic_meters_per_second / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Flow):
            raise QuantityTypeError("Flow", other)
        return (self._cubic_meters_per_second > other._cubic_meters_per_second) - (self._cubic_meters_per_second < other._cubic_meters_per_second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._cubic_meters_per_second == other._cubic_meters_per_second

    def __hash__(self) -> int:
        return hash(self._cubic_meters_per_second)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._cubic_meters_per_second < other._cubic_meters_per_second

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._cubic_meters_per_second <= other._cubic_meters_per_second

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._cubic_meters_per_second > other._cubic_meters_per_second

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._cubic_meters_per_second >= other._cubic_meters_per_second

    def to_string(
        self,
        unit: FlowUnit | None = None,
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
        return f"Flow({self._cubic_meters_per_second!r})"


_FROM_UNIT = {
    FlowUnit.CubicFootPerSecond: Flow.from_cubic_feet_per_second,
    FlowUnit.CubicMeterPerHour: Flow.from_cubic_meters_per_hour,
    FlowUnit.CubicMeterPerSecond: Flow.from_cubic_meters_per_second,
    FlowUnit.LiterPerMinute: Flow.from_liters_per_minute,
    FlowUnit.UsGallonPerMinute: Flow.from_us_gallons_per_minute,
}

_AS_UNIT = {
    FlowUnit.CubicFootPerSecond: Flow.cubic_feet_per_second.fget,
    FlowUnit.CubicMeterPerHour: Flow.cubic_meters_per_hour.fget,
    FlowUnit.CubicMeterPerSecond: Flow.cubic_meters_per_second.fget,
    FlowUnit.LiterPerMinute: Flow.liters_per_minute.fget,
    FlowUnit.UsGallonPerMinute: Flow.us_gallons_per_minute.fget,
}

__all__ = ["Flow"]
