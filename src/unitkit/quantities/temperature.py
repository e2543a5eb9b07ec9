# This file is generated by unitkit.generator from temperature.yaml. Do not edit.
"""Temperature quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import TemperatureUnit


class Temperature:
    """
    Temperature is a physical quantity expressing hot and cold.
    """

    __slots__ = ("_kelvins",)

    unit_type = TemperatureUnit
    base_unit = TemperatureUnit.Kelvin
    display_unit = TemperatureUnit.Kelvin

    def __init__(self, kelvins: float = 0.0) -> None:
        self._kelvins = float(kelvins)

    @property
    def degrees_celsius(self) -> float:
        """Get Temperature in DegreesCelsius."""
        return self._kelvins - 273.15

    @property
    def degrees_fahrenheit(self) -> float:
        """Get Temperature in DegreesFahrenheit."""
        return (self._kelvins - (45967 / 180)) / (5 / 9)

    @property
    def degrees_rankine(self) -> float:
        """Get Temperature in DegreesRankine."""
        return self._kelvins / (5 / 9)

    @property
    def kelvins(self) -> float:
        """Get Temperature in Kelvins."""
        return self._kelvins

    @classmethod
    def zero(cls) -> Temperature:
        return cls()

    @staticmethod
    def units() -> tuple[TemperatureUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_degrees_celsius(cls, degrees_celsius: float) -> Temperature:
        """Get Temperature from DegreesCelsius."""
        return cls(degrees_celsius + 273.15)

    @classmethod
    def from_degrees_fahrenheit(cls, degrees_fahrenheit: float) -> Temperature:
        """Get Temperature from DegreesFahrenheit."""
        return cls(degrees_fahrenheit * (5 / 9) + (45967 / 180))

    @classmethod
    def from_degrees_rankine(cls, degrees_rankine: float) -> Temperature:
        """Get Temperature from DegreesRankine."""
        return cls(degrees_rankine * (5 / 9))

    @classmethod
    def from_kelvins(cls, kelvins: float) -> Temperature:
        """Get Temperature from Kelvins."""
        return cls(kelvins)

    @classmethod
    def from_unit(cls, value: float, unit: TemperatureUnit) -> Temperature:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, TemperatureUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Temperature", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: TemperatureUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: TemperatureUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, TemperatureUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Temperature", unit)
        return accessor(self)

    def __neg__(self) -> Temperature:
        return Temperature(-self._kelvins)

    def __add__(self, other: Any) -> Temperature:
        if not isinstance(other, Temperature):
            return NotImplemented
        return Temperature(self._kelvins + other._kelvins)

    def __sub__(self, other: Any) -> Temperature:
        if not isinstance(other, Temperature):
            return NotImplemented
        return Temperature(self._kelvins - other._kelvins)

    def __mul__(self, other: Any) -> Temperature:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Temperature(self._kelvins * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Temperature | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Temperature):
            return self._kelvins / other._kelvins
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Temperature(self._kelvins / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Temperature):
            raise QuantityTypeError("Temperature", other)
        return (self._kelvins > other._kelvins) - (self._kelvins < other._kelvins)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._kelvins == other._kelvins

    def __hash__(self) -> int:
        return hash(self._kelvins)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._kelvins < other._kelvins

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._kelvins <= other._kelvins

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._kelvins > other._kelvins

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._kelvins >= other._kelvins

    def to_string(
        self,
        unit: TemperatureUnit | None = None,
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
        return f"Temperature({self._kelvins!r})"


_FROM_UNIT = {
    TemperatureUnit.DegreeCelsius: Temperature.from_degrees_celsius,
    TemperatureUnit.DegreeFahrenheit: Temperature.from_degrees_fahrenheit,
    TemperatureUnit.DegreeRankine: Temperature.from_degrees_rankine,
    TemperatureUnit.Kelvin: Temperature.from_kelvins,
}

_AS_UNIT = {
    TemperatureUnit.DegreeCelsius: Temperature.degrees_celsius.fget,
    TemperatureUnit.DegreeFahrenheit: Temperature.degrees_fahrenheit.fget,
    TemperatureUnit.DegreeRankine: Temperature.degrees_rankine.fget,
    TemperatureUnit.Kelvin: Temperature.kelvins.fget,
}

__all__ = ["Temperature"]
