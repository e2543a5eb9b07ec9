# This file is generated by unitkit.generator from duration.yaml. Do not edit.
"""Duration quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import DurationUnit


class Duration:
    """
    Time elapsed between two events.
    """

    __slots__ = ("_seconds",)

    unit_type = DurationUnit
    base_unit = DurationUnit.Second
    display_unit = DurationUnit.Second

    def __init__(self, seconds: float = 0.0) -> None:
        self._seconds = float(seconds)

    @property
    def days(self) -> float:
        """Get Duration in Days."""
        return self._seconds / 86400.0

    @property
    def hours(self) -> float:
        """Get Duration in Hours."""
        return self._seconds / 3600.0

    @property
    def microseconds(self) -> float:
        """Get Duration in Microseconds."""
        return self._seconds / 1e-06

    @property
    def milliseconds(self) -> float:
        """Get Duration in Milliseconds."""
        return self._seconds / 0.001

    @property
    def minutes(self) -> float:
        """Get Duration in Minutes."""
        return self._seconds / 60.0

    @property
    def months(self) -> float:
        """Get Duration in Months."""
        return self._seconds / 2592000.0

    @property
    def nanoseconds(self) -> float:
        """Get Duration in Nanoseconds."""
        return self._seconds / 1e-09

    @property
    def seconds(self) -> float:
        """Get Duration in Seconds."""
        return self._seconds

    @property
    def weeks(self) -> float:
        """Get Duration in Weeks."""
        return self._seconds / 604800.0

    @property
    def years(self) -> float:
        """Get Duration in Years."""
        return self._seconds / 31536000.0

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @staticmethod
    def units() -> tuple[DurationUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_days(cls, days: float) -> Duration:
        """Get Duration from Days."""
        return cls(days * 86400.0)

    @classmethod
    def from_hours(cls, hours: float) -> Duration:
        """Get Duration from Hours."""
        return cls(hours * 3600.0)

    @classmethod
    def from_microseconds(cls, microseconds: float) -> Duration:
        """Get Duration from Microseconds."""
        return cls(microseconds * 1e-06)

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> Duration:
        """Get Duration from Milliseconds."""
        return cls(milliseconds * 0.001)

    @classmethod
    def from_minutes(cls, minutes: float) -> Duration:
        """Get Duration from Minutes."""
        return cls(minutes * 60.0)

    @classmethod
    def from_months(cls, months: float) -> Duration:
        """Get Duration from Months."""
        return cls(months * 2592000.0)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: float) -> Duration:
        """Get Duration from Nanoseconds."""
        return cls(nanoseconds * 1e-09)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        """Get Duration from Seconds."""
        return cls(seconds)

    @classmethod
    def from_weeks(cls, weeks: float) -> Duration:
        """Get Duration from Weeks."""
        return cls(weeks * 604800.0)

    @classmethod
    def from_years(cls, years: float) -> Duration:
        """Get Duration from Years."""
        return cls(years * 31536000.0)

    @classmethod
    def from_unit(cls, value: float, unit: DurationUnit) -> Duration:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, DurationUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Duration", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: DurationUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: DurationUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, DurationUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Duration", unit)
        return accessor(self)

    def __neg__(self) -> Duration:
        return Duration(-self._seconds)

    def __add__(self, other: Any) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._seconds + other._seconds)

    def __sub__(self, other: Any) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._seconds - other._seconds)

    def __mul__(self, other: Any) -> Duration:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Duration(self._seconds * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Duration | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Duration):
            return self._seconds / other._seconds
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Duration(self._seconds / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Duration):
            raise QuantityTypeError("Duration", other)
        return (self._seconds > other._seconds) - (self._seconds < other._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds >= other._seconds

    def to_string(
        self,
        unit: DurationUnit | None = None,
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
        return f"Duration({self._seconds!r})"


_FROM_UNIT = {
    DurationUnit.Day: Duration.from_days,
    DurationUnit.Hour: Duration.from_hours,
    DurationUnit.Microsecond: Duration.from_microseconds,
    DurationUnit.Millisecond: Duration.from_milliseconds,
    DurationUnit.Minute: Duration.from_minutes,
    DurationUnit.Month: Duration.from_months,
    DurationUnit.Nanosecond: Duration.from_nanoseconds,
    DurationUnit.Second: Duration.from_seconds,
    DurationUnit.Week: Duration.from_weeks,
    DurationUnit.Year: Duration.from_years,
}

_AS_UNIT = {
    DurationUnit.Day: Duration.days.fget,
    DurationUnit.Hour: Duration.hours.fget,
    DurationUnit.Microsecond: Duration.microseconds.fget,
    DurationUnit.Millisecond: Duration.milliseconds.fget,
    DurationUnit.Minute: Duration.minutes.fget,
    DurationUnit.Month: Duration.months.fget,
    DurationUnit.Nanosecond: Duration.nanoseconds.fget,
    DurationUnit.Second: Duration.seconds.fget,
    DurationUnit.Week: Duration.weeks.fget,
    DurationUnit.Year: Duration.years.fget,
}

__all__ = ["Duration"]
