# This file is generated by unitkit.generator from pressure.yaml. Do not edit.
"""Pressure quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.constants import STANDARD_ATMOSPHERE, STANDARD_GRAVITY
from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import PressureUnit


class Pressure:
    """
    Pressure is the force applied perpendicular to a surface per unit area.
    """

    __slots__ = ("_pascals",)

    unit_type = PressureUnit
    base_unit = PressureUnit.Pascal
    display_unit = PressureUnit.Pascal

    def __init__(self, pascals: float = 0.0) -> None:
        self._pascals = float(pascals)

    @property
    def atmospheres(self) -> float:
        """Get Pressure in Atmospheres."""
        return self._pascals / STANDARD_ATMOSPHERE

    @property
    def bars(self) -> float:
        """Get Pressure in Bars."""
        return self._pascals / 100000.0

    @property
    def kilograms_force_per_square_centimeter(self) -> float:
        """Get Pressure in KilogramsForcePerSquareCentimeter."""
        return self._pascals / (10000.0 * STANDARD_GRAVITY)

    @property
    def kilopascals(self) -> float:
        """Get Pressure in Kilopascals."""
        return self._pascals / 1000.0

    @property
    def megapascals(self) -> float:
        """Get Pressure in Megapascals."""
        return self._pascals / 1000000.0

    @property
    def pascals(self) -> float:
        """Get Pressure in Pascals."""
        return self._pascals

    @property
    def psi(self) -> float:
        """Get Pressure in Psi."""
        return self._pascals / 6894.75729316836

    @property
    def technical_atmospheres(self) -> float:
        """Get Pressure in TechnicalAtmospheres."""
        return self._pascals / (10000.0 * STANDARD_GRAVITY)

    @property
    def torrs(self) -> float:
        """Get Pressure in Torrs."""
        return self._pascals / (20265 / 152)

    @classmethod
    def zero(cls) -> Pressure:
        return cls()

    @staticmethod
    def units() -> tuple[PressureUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_atmospheres(cls, atmospheres: float) -> Pressure:
        """Get Pressure from Atmospheres."""
        return cls(atmospheres * STANDARD_ATMOSPHERE)

    @classmethod
    def from_bars(cls, bars: float) -> Pressure:
        """Get Pressure from Bars."""
        return cls(bars * 100000.0)

    @classmethod
    def from_kilograms_force_per_square_centimeter(cls, kilograms_force_per_square_centimeter: float) -> Pressure:
        """Get Pressure from KilogramsForcePerSquareCentimeter."""
        return cls(kilograms_force_per_square_centimeter * (10000.0 * STANDARD_GRAVITY))

    @classmethod
    def from_kilopascals(cls, kilopascals: float) -> Pressure:
        """Get Pressure from Kilopascals."""
        return cls(kilopascals * 1000.0)

    @classmethod
    def from_megapascals(cls, megapascals: float) -> Pressure:
        """Get Pressure from Megapascals."""
        return cls(megapascals * 1000000.0)

    @classmethod
    def from_pascals(cls, pascals: float) -> Pressure:
        """Get Pressure from Pascals."""
        return cls(pascals)

    @classmethod
    def from_psi(cls, psi: float) -> Pressure:
        """Get Pressure from Psi."""
        return cls(psi * 6894.75729316836)

    @classmethod
    def from_technical_atmospheres(cls, technical_atmospheres: float) -> Pressure:
        """Get Pressure from TechnicalAtmospheres."""
        return cls(technical_atmospheres * (10000.0 * STANDARD_GRAVITY))

    @classmethod
    def from_torrs(cls, torrs: float) -> Pressure:
        """Get Pressure from Torrs."""
        return cls(torrs * (20265 / 152))

    @classmethod
    def from_unit(cls, value: float, unit: PressureUnit) -> Pressure:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, PressureUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Pressure", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: PressureUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: PressureUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, PressureUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Pressure", unit)
        return accessor(self)

    def __neg__(self) -> Pressure:
        return Pressure(-self._pascals)

    def __add__(self, other: Any) -> Pressure:
        if not isinstance(other, Pressure):
            return NotImplemented
        return Pressure(self._pascals + other._pascals)

    def __sub__(self, other: Any) -> Pressure:
        if not isinstance(other, Pressure):
            return NotImplemented
        return Pressure(self._pascals - other._pascals)

    def __mul__(self, other: Any) -> Pressure:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Pressure(self._pascals * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Pressure | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Pressure):
            return self._pascals / other._pascals
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Pressure(self._pascals / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Pressure):
            raise QuantityTypeError("Pressure", other)
        return (self._pascals > other._pascals) - (self._pascals < other._pascals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pressure):
            return NotImplemented
        return self._pascals == other._pascals

    def __hash__(self) -> int:
        return hash(self._pascals)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Pressure):
            return NotImplemented
        return self._pascals < other._pascals

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Pressure):
            return NotImplemented
        return self._pascals <= other._pascals

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Pressure):
            return NotImplemented
        return self._pascals > other._pascals

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Pressure):
            return NotImplemented
        return self._pascals >= other._pascals

    def to_string(
        self,
        unit: PressureUnit | None = None,
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
        return f"Pressure({self._pascals!r})"


_FROM_UNIT = {
    PressureUnit.Atmosphere: Pressure.from_atmospheres,
    PressureUnit.Bar: Pressure.from_bars,
    PressureUnit.KilogramForcePerSquareCentimeter: Pressure.from_kilograms_force_per_square_centimeter,
    PressureUnit.Kilopascal: Pressure.from_kilopascals,
    PressureUnit.Megapascal: Pressure.from_megapascals,
    PressureUnit.Pascal: Pressure.from_pascals,
    PressureUnit.Psi: Pressure.from_psi,
    PressureUnit.TechnicalAtmosphere: Pressure.from_technical_atmospheres,
    PressureUnit.Torr: Pressure.from_torrs,
}

_AS_UNIT = {
    PressureUnit.Atmosphere: Pressure.atmospheres.fget,
    PressureUnit.Bar: Pressure.bars.fget,
    PressureUnit.KilogramForcePerSquareCentimeter: Pressure.kilograms_force_per_square_centimeter.fget,
    PressureUnit.Kilopascal: Pressure.kilopascals.fget,
    PressureUnit.Megapascal: Pressure.megapascals.fget,
    PressureUnit.Pascal: Pressure.pascals.fget,
    PressureUnit.Psi: Pressure.psi.fget,
    PressureUnit.TechnicalAtmosphere: Pressure.technical_atmospheres.fget,
    PressureUnit.Torr: Pressure.torrs.fget,
}

__all__ = ["Pressure"]
