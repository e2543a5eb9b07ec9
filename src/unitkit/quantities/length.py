# This file is generated by unitkit.generator from length.yaml. Do not edit.
"""Length quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import LengthUnit


class Length:
    """
    Length is the extent of something along its greatest dimension.
    """

    __slots__ = ("_meters",)

    unit_type = LengthUnit
    base_unit = LengthUnit.Meter
    display_unit = LengthUnit.Meter

    def __init__(self, meters: float = 0.0) -> None:
        self._meters = float(meters)

    @property
    def centimeters(self) -> float:
        """Get Length in Centimeters."""
        return self._meters / 0.01

    @property
    def decimeters(self) -> float:
        """Get Length in Decimeters."""
        return self._meters / 0.1

    @property
    def feet(self) -> float:
        """Get Length in Feet."""
        return self._meters / 0.3048

    @property
    def inches(self) -> float:
        """Get Length in Inches."""
        return self._meters / 0.0254

    @property
    def kilometers(self) -> float:
        """Get Length in Kilometers."""
        return self._meters / 1000.0

    @property
    def meters(self) -> float:
        """Get Length in Meters."""
        return self._meters

    @property
    def micrometers(self) -> float:
        """Get Length in Micrometers."""
        return self._meters / 1e-06

    @property
    def miles(self) -> float:
        """Get Length in Miles."""
        return self._meters / 1609.344

    @property
    def millimeters(self) -> float:
        """Get Length in Millimeters."""
        return self._meters / 0.001

    @property
    def nanometers(self) -> float:
        """Get Length in Nanometers."""
        return self._meters / 1e-09

    @property
    def yards(self) -> float:
        """Get Length in Yards."""
        return self._meters / 0.9144

    @classmethod
    def zero(cls) -> Length:
        return cls()

    @staticmethod
    def units() -> tuple[LengthUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_centimeters(cls, centimeters: float) -> Length:
        """Get Length from Centimeters."""
        return cls(centimeters * 0.01)

    @classmethod
    def from_decimeters(cls, decimeters: float) -> Length:
        """Get Length from Decimeters."""
        return cls(decimeters * 0.1)

    @classmethod
    def from_feet(cls, feet: float) -> Length:
        """Get Length from Feet."""
        return cls(feet * 0.3048)

    @classmethod
    def from_inches(cls, inches: float) -> Length:
        """Get Length from Inches."""
        return cls(inches * 0.0254)

    @classmethod
    def from_kilometers(cls, kilometers: float) -> Length:
        """Get Length from Kilometers."""
        return cls(kilometers * 1000.0)

    @classmethod
    def from_meters(cls, meters: float) -> Length:
        """Get Length from Meters."""
        return cls(meters)

    @classmethod
    def from_micrometers(cls, micrometers: float) -> Length:
        """Get Length from Micrometers."""
        return cls(micrometers * 1e-06)

    @classmethod
    def from_miles(cls, miles: float) -> Length:
        """Get Length from Miles."""
        return cls(miles * 1609.344)

    @classmethod
    def from_millimeters(cls, millimeters: float) -> Length:
        """Get Length from Millimeters."""
        return cls(millimeters * 0.001)

    @classmethod
    def from_nanometers(cls, nanometers: float) -> Length:
        """Get Length from Nanometers."""
        return cls(nanometers * 1e-09)

    @classmethod
    def from_yards(cls, yards: float) -> Length:
        """Get Length from Yards."""
        return cls(yards * 0.9144)

    @classmethod
    def from_unit(cls, value: float, unit: LengthUnit) -> Length:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, LengthUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Length", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: LengthUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: LengthUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, LengthUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Length", unit)
        return accessor(self)

    def __neg__(self) -> Length:
        return Length(-self._meters)

    def __add__(self, other: Any) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self._meters + other._meters)

    def __sub__(self, other: Any) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self._meters - other._meters)

    def __mul__(self, other: Any) -> Length:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Length(self._meters * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Length | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Length):
            return self._meters / other._meters
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Length(self._meters / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Length):
            raise QuantityTypeError("Length", other)
        return (self._meters > other._meters) - (self._meters < other._meters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._meters == other._meters

    def __hash__(self) -> int:
        return hash(self._meters)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._meters < other._meters

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._meters <= other._meters

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._meters > other._meters

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._meters >= other._meters

    def to_string(
        self,
        unit: LengthUnit | None = None,
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
        return f"Length({self._meters!r})"


_FROM_UNIT = {
    LengthUnit.Centimeter: Length.from_centimeters,
    LengthUnit.Decimeter: Length.from_decimeters,
    LengthUnit.Foot: Length.from_feet,
    LengthUnit.Inch: Length.from_inches,
    LengthUnit.Kilometer: Length.from_kilometers,
    LengthUnit.Meter: Length.from_meters,
    LengthUnit.Micrometer: Length.from_micrometers,
    LengthUnit.Mile: Length.from_miles,
    LengthUnit.Millimeter: Length.from_millimeters,
    LengthUnit.Nanometer: Length.from_nanometers,
    LengthUnit.Yard: Length.from_yards,
}

_AS_UNIT = {
    LengthUnit.Centimeter: Length.centimeters.fget,
    LengthUnit.Decimeter: Length.decimeters.fget,
    LengthUnit.Foot: Length.feet.fget,
    LengthUnit.Inch: Length.inches.fget,
    LengthUnit.Kilometer: Length.kilometers.fget,
    LengthUnit.Meter: Length.meters.fget,
    LengthUnit.Micrometer: Length.micrometers.fget,
    LengthUnit.Mile: Length.miles.fget,
    LengthUnit.Millimeter: Length.millimeters.fget,
    LengthUnit.Nanometer: Length.nanometers.fget,
    LengthUnit.Yard: Length.yards.fget,
}

__all__ = ["Length"]
