# This file is generated by unitkit.generator from area.yaml. Do not edit.
"""Area quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import AreaUnit


class Area:
    """
    Area is the extent of a two-dimensional surface in the plane.
    """

    __slots__ = ("_square_meters",)

    unit_type = AreaUnit
    base_unit = AreaUnit.SquareMeter
    display_unit = AreaUnit.SquareMeter

    def __init__(self, square_meters: float = 0.0) -> None:
        self._square_meters = float(square_meters)

    @property
    def hectares(self) -> float:
        """Get Area in Hectares."""
        return self._square_meters / 10000.0

    @property
    def square_centimeters(self) -> float:
        """Get Area in SquareCentimeters."""
        return self._square_meters / 0.0001

    @property
    def square_decimeters(self) -> float:
        """Get Area in SquareDecimeters."""
        return self._square_meters / 0.01

    @property
    def square_feet(self) -> float:
        """Get Area in SquareFeet."""
        return self._square_meters / 0.09290304

    @property
    def square_inches(self) -> float:
        """Get Area in SquareInches."""
        return self._square_meters / 0.00064516

    @property
    def square_kilometers(self) -> float:
        """Get Area in SquareKilometers."""
        return self._square_meters / 1000000.0

    @property
    def square_meters(self) -> float:
        """Get Area in SquareMeters."""
        return self._square_meters

    @property
    def square_miles(self) -> float:
        """Get Area in SquareMiles."""
        return self._square_meters / 2589988.110336

    @property
    def square_millimeters(self) -> float:
        """Get Area in SquareMillimeters."""
        return self._square_meters / 1e-06

    @property
    def square_yards(self) -> float:
        """Get Area in SquareYards."""
        return self._square_meters / 0.83612736

    @classmethod
    def zero(cls) -> Area:
        return cls()

    @staticmethod
    def units() -> tuple[AreaUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_hectares(cls, hectares: float) -> Area:
        """Get Area from Hectares."""
        return cls(hectares * 10000.0)

    @classmethod
    def from_square_centimeters(cls, square_centimeters: float) -> Area:
        """Get Area from SquareCentimeters."""
        return cls(square_centimeters * 0.0001)

    @classmethod
    def from_square_decimeters(cls, square_decimeters: float) -> Area:
        """Get Area from SquareDecimeters."""
        return cls(square_decimeters * 0.01)

    @classmethod
    def from_square_feet(cls, square_feet: float) -> Area:
        """Get Area from SquareFeet."""
        return cls(square_feet * 0.09290304)

    @classmethod
    def from_square_inches(cls, square_inches: float) -> Area:
        """Get Area from SquareInches."""
        return cls(square_inches * 0.00064516)

    @classmethod
    def from_square_kilometers(cls, square_kilometers: float) -> Area:
        """Get Area from SquareKilometers."""
        return cls(square_kilometers * 1000000.0)

    @classmethod
    def from_square_meters(cls, square_meters: float) -> Area:
        """Get Area from SquareMeters."""
        return cls(square_meters)

    @classmethod
    def from_square_miles(cls, square_miles: float) -> Area:
        """Get Area from SquareMiles."""
        return cls(square_miles * 2589988.110336)

    @classmethod
    def from_square_millimeters(cls, square_millimeters: float) -> Area:
        """Get Area from SquareMillimeters."""
        return cls(square_millimeters * 1e-06)

    @classmethod
    def from_square_yards(cls, square_yards: float) -> Area:
        """Get Area from SquareYards."""
        return cls(square_yards * 0.83612736)

    @classmethod
    def from_unit(cls, value: float, unit: AreaUnit) -> Area:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, AreaUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Area", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: AreaUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: AreaUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, AreaUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Area", unit)
        return accessor(self)

    def __neg__(self) -> Area:
        return Area(-self._square_meters)

    def __add__(self, other: Any) -> Area:
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self._square_meters + other._square_meters)

    def __sub__(self, other: Any) -> Area:
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self._square_meters - other._square_meters)

    def __mul__(self, other: Any) -> Area:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Area(self._square_meters * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Area | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Area):
            return self._square_meters / other._square_meters
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Area(self._square_meters / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Area):
            raise QuantityTypeError("Area", other)
        return (self._square_meters > other._square_meters) - (self._square_meters < other._square_meters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._square_meters == other._square_meters

    def __hash__(self) -> int:
        return hash(self._square_meters)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._square_meters < other._square_meters

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._square_meters <= other._square_meters

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._square_meters > other._square_meters

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._square_meters >= other._square_meters

    def to_string(
        self,
        unit: AreaUnit | None = None,
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
        return f"Area({self._square_meters!r})"


_FROM_UNIT = {
    AreaUnit.Hectare: Area.from_hectares,
    AreaUnit.SquareCentimeter: Area.from_square_centimeters,
    AreaUnit.SquareDecimeter: Area.from_square_decimeters,
    AreaUnit.SquareFoot: Area.from_square_feet,
    AreaUnit.SquareInch: Area.from_square_inches,
    AreaUnit.SquareKilometer: Area.from_square_kilometers,
    AreaUnit.SquareMeter: Area.from_square_meters,
    AreaUnit.SquareMile: Area.from_square_miles,
    AreaUnit.SquareMillimeter: Area.from_square_millimeters,
    AreaUnit.SquareYard: Area.from_square_yards,
}

_AS_UNIT = {
    AreaUnit.Hectare: Area.hectares.fget,
    AreaUnit.SquareCentimeter: Area.square_centimeters.fget,
    AreaUnit.SquareDecimeter: Area.square_decimeters.fget,
    AreaUnit.SquareFoot: Area.square_feet.fget,
    AreaUnit.SquareInch: Area.square_inches.fget,
    AreaUnit.SquareKilometer: Area.square_kilometers.fget,
    AreaUnit.SquareMeter: Area.square_meters.fget,
    AreaUnit.SquareMile: Area.square_miles.fget,
    AreaUnit.SquareMillimeter: Area.square_millimeters.fget,
    AreaUnit.SquareYard: Area.square_yards.fget,
}

__all__ = ["Area"]
