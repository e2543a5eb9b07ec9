# This file is generated by unitkit.generator from volume.yaml. Do not edit.
"""Volume quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import VolumeUnit


class Volume:
    """
    Volume is the quantity of three-dimensional space enclosed by a boundary.
    """

    __slots__ = ("_cubic_meters",)

    unit_type = VolumeUnit
    base_unit = VolumeUnit.CubicMeter
    display_unit = VolumeUnit.CubicMeter

    def __init__(self, cubic_meters: float = 0.0) -> None:
        self._cubic_meters = float(cubic_meters)

    @property
    def cubic_centimeters(self) -> float:
        """Get Volume in CubicCentimeters."""
        return self._cubic_meters / 1e-06

    @property
    def cubic_decimeters(self) -> float:
        """Get Volume in CubicDecimeters."""
        return self._cubic_meters / 0.001

    @property
    def cubic_feet(self) -> float:
        """Get Volume in CubicFeet."""
        return self._cubic_meters / 0.028316846592

    @property
    def cubic_inches(self) -> float:
        """Get Volume in CubicInches."""
        return self._cubic_meters / 1.6387064e-05

    @property
    def cubic_kilometers(self) -> float:
        """Get Volume in CubicKilometers."""
        return self._cubic_meters / 1000000000.0

    @property
    def cubic_meters(self) -> float:
        """Get Volume in CubicMeters."""
        return self._cubic_meters

    @property
    def cubic_millimeters(self) -> float:
        """Get Volume in CubicMillimeters."""
        return self._cubic_meters / 1e-09

    @property
    def imperial_gallons(self) -> float:
        """Get Volume in ImperialGallons."""
        return self._cubic_meters / 0.00454609

    @property
    def liters(self) -> float:
        """Get Volume in Liters."""
        return self._cubic_meters / 0.001

    @property
    def milliliters(self) -> float:
        """Get Volume in Milliliters."""
        return self._cubic_meters / 1e-06

    @property
    def us_gallons(self) -> float:
        """Get Volume in UsGallons."""
        return self._cubic_meters / 0.003785411784

    @classmethod
    def zero(cls) -> Volume:
        return cls()

    @staticmethod
    def units() -> tuple[VolumeUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_cubic_centimeters(cls, cubic_centimeters: float) -> Volume:
        """Get Volume from CubicCentimeters."""
        return cls(cubic_centimeters * 1e-06)

    @classmethod
    def from_cubic_decimeters(cls, cubic_decimeters: float) -> Volume:
        """Get Volume from CubicDecimeters."""
        return cls(cubic_decimeters * 0.001)

    @classmethod
    def from_cubic_feet(cls, cubic_feet: float) -> Volume:
        """Get Volume from CubicFeet."""
        return cls(cubic_feet * 0.028316846592)

    @classmethod
    def from_cubic_inches(cls, cubic_inches: float) -> Volume:
        """Get Volume from CubicInches."""
        return cls(cubic_inches * 1.6387064e-05)

    @classmethod
    def from_cubic_kilometers(cls, cubic_kilometers: float) -> Volume:
        """Get Volume from CubicKilometers."""
        return cls(cubic_kilometers * 1000000000.0)

    @classmethod
    def from_cubic_meters(cls, cubic_meters: float) -> Volume:
        """Get Volume from CubicMeters."""
        return cls(cubic_meters)

    @classmethod
    def from_cubic_millimeters(cls, cubic_millimeters: float) -> Volume:
        """Get Volume from CubicMillimeters."""
        return cls(cubic_millimeters * 1e-09)

    @classmethod
    def from_imperial_gallons(cls, imperial_gallons: float) -> Volume:
        """Get Volume from ImperialGallons."""
        return cls(imperial_gallons * 0.00454609)

    @classmethod
    def from_liters(cls, liters: float) -> Volume:
        """Get Volume from Liters."""
        return cls(liters * 0.001)

    @classmethod
    def from_milliliters(cls, milliliters: float) -> Volume:
        """Get Volume from Milliliters."""
        return cls(milliliters * 1e-06)

    @classmethod
    def from_us_gallons(cls, us_gallons: float) -> Volume:
        """Get Volume from UsGallons."""
        return cls(us_gallons * 0.003785411784)

    @classmethod
    def from_unit(cls, value: float, unit: VolumeUnit) -> Volume:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, VolumeUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Volume", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: VolumeUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: VolumeUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, VolumeUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Volume", unit)
        return accessor(self)

    def __neg__(self) -> Volume:
        return Volume(-self._cubic_meters)

    def __add__(self, other: Any) -> Volume:
        if not isinstance(other, Volume):
            return NotImplemented
        return Volume(self._cubic_meters + other._cubic_meters)

    def __sub__(self, other: Any) -> Volume:
        if not isinstance(other, Volume):
            return NotImplemented
        return Volume(self._cubic_meters - other._cubic_meters)

    def __mul__(self, other: Any) -> Volume:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Volume(self._cubic_meters * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Volume | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Volume):
            return self._cubic_meters / other._cubic_meters
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Volume(self._cubic_meters / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Volume):
            raise QuantityTypeError("Volume", other)
        return (self._cubic_meters > other._cubic_meters) - (self._cubic_meters < other._cubic_meters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._cubic_meters == other._cubic_meters

    def __hash__(self) -> int:
        return hash(self._cubic_meters)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._cubic_meters < other._cubic_meters

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._cubic_meters <= other._cubic_meters

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._cubic_meters > other._cubic_meters

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._cubic_meters >= other._cubic_meters

    def to_string(
        self,
        unit: VolumeUnit | None = None,
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
        return f"Volume({self._cubic_meters!r})"


_FROM_UNIT = {
    VolumeUnit.CubicCentimeter: Volume.from_cubic_centimeters,
    VolumeUnit.CubicDecimeter: Volume.from_cubic_decimeters,
    VolumeUnit.CubicFoot: Volume.from_cubic_feet,
    VolumeUnit.CubicInch: Volume.from_cubic_inches,
    VolumeUnit.CubicKilometer: Volume.from_cubic_kilometers,
    VolumeUnit.CubicMeter: Volume.from_cubic_meters,
    VolumeUnit.CubicMillimeter: Volume.from_cubic_millimeters,
    VolumeUnit.ImperialGallon: Volume.from_imperial_gallons,
    VolumeUnit.Liter: Volume.from_liters,
    VolumeUnit.Milliliter: Volume.from_milliliters,
    VolumeUnit.UsGallon: Volume.from_us_gallons,
}

_AS_UNIT = {
    VolumeUnit.CubicCentimeter: Volume.cubic_centimeters.fget,
    VolumeUnit.CubicDecimeter: Volume.cubic_decimeters.fget,
    VolumeUnit.CubicFoot: Volume.cubic_feet.fget,
    VolumeUnit.CubicInch: Volume.cubic_inches.fget,
    VolumeUnit.CubicKilometer: Volume.cubic_kilometers.fget,
    VolumeUnit.CubicMeter: Volume.cubic_meters.fget,
    VolumeUnit.CubicMillimeter: Volume.cubic_millimeters.fget,
    VolumeUnit.ImperialGallon: Volume.imperial_gallons.fget,
    VolumeUnit.Liter: Volume.liters.fget,
    VolumeUnit.Milliliter: Volume.milliliters.fget,
    VolumeUnit.UsGallon: Volume.us_gallons.fget,
}

__all__ = ["Volume"]
