# This file is generated by unitkit.generator from torque.yaml. Do not edit.
"""Torque quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.constants import STANDARD_GRAVITY
from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import TorqueUnit


class Torque:
    """
    Torque is the tendency of a force to rotate an object about an axis.
    """

    __slots__ = ("_newton_meters",)

    unit_type = TorqueUnit
    base_unit = TorqueUnit.NewtonMeter
    display_unit = TorqueUnit.NewtonMeter

    def __init__(self, newton_meters: float = 0.0) -> None:
        self._newton_meters = float(newton_meters)

    @property
    def kilogram_force_meters(self) -> float:
        """Get Torque in KilogramForceMeters."""
        return self._newton_meters / STANDARD_GRAVITY

    @property
    def kilonewton_meters(self) -> float:
        """Get Torque in KilonewtonMeters."""
        return self._newton_meters / 1000.0

    @property
    def newton_meters(self) -> float:
        """Get Torque in NewtonMeters."""
        return self._newton_meters

    @property
    def pound_force_feet(self) -> float:
        """Get Torque in PoundForceFeet."""
        return self._newton_meters / 1.3558179483314

    @classmethod
    def zero(cls) -> Torque:
        return cls()

    @staticmethod
    def units() -> tuple[TorqueUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_kilogram_force_meters(cls, kilogram_force_meters: float) -> Torque:
        """Get Torque from KilogramForceMeters."""
        return cls(kilogram_force_meters * STANDARD_GRAVITY)

    @classmethod
    def from_kilonewton_meters(cls, kilonewton_meters: float) -> Torque:
        """Get Torque from KilonewtonMeters."""
        return cls(kilonewton_meters * 1000.0)

    @classmethod
    def from_newton_meters(cls, newton_meters: float) -> Torque:
        """Get Torque from NewtonMeters."""
        return cls(newton_meters)

    @classmethod
    def from_pound_force_feet(cls, pound_force_feet: float) -> Torque:
        """Get Torque from PoundForceFeet."""
        return cls(pound_force_feet * 1.3558179483314)

    @classmethod
    def from_unit(cls, value: float, unit: TorqueUnit) -> Torque:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, TorqueUnit) else None
        if factory is None:
            raise UnimplementedUnitError("Torque", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: TorqueUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: TorqueUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, TorqueUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("Torque", unit)
        return accessor(self)

    def __neg__(self) -> Torque:
        return Torque(-self._newton_meters)

    def __add__(self, other: Any) -> Torque:
        if not isinstance(other, Torque):
            return NotImplemented
        return Torque(self._newton_meters + other._newton_meters)

    def __sub__(self, other: Any) -> Torque:
        if not isinstance(other, Torque):
            return NotImplemented
        return Torque(self._newton_meters - other._newton_meters)

    def __mul__(self, other: Any) -> Torque:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Torque(self._newton_meters * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Torque | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, Torque):
            return self._newton_meters / other._newton_meters
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Torque(self._newton_meters / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, Torque):
            raise QuantityTypeError("Torque", other)
        return (self._newton_meters > other._newton_meters) - (self._newton_meters < other._newton_meters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Torque):
            return NotImplemented
        return self._newton_meters == other._newton_meters

    def __hash__(self) -> int:
        return hash(self._newton_meters)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Torque):
            return NotImplemented
        return self._newton_meters < other._newton_meters

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Torque):
            return NotImplemented
        return self._newton_meters <= other._newton_meters

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Torque):
            return NotImplemented
        return self._newton_meters > other._newton_meters

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Torque):
            return NotImplemented
        return self._newton_meters >= other._newton_meters

    def to_string(
        self,
        unit: TorqueUnit | None = None,
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
        return f"Torque({self._newton_meters!r})"


_FROM_UNIT = {
    TorqueUnit.KilogramForceMeter: Torque.from_kilogram_force_meters,
    TorqueUnit.KilonewtonMeter: Torque.from_kilonewton_meters,
    TorqueUnit.NewtonMeter: Torque.from_newton_meters,
    TorqueUnit.PoundForceFoot: Torque.from_pound_force_feet,
}

_AS_UNIT = {
    TorqueUnit.KilogramForceMeter: Torque.kilogram_force_meters.fget,
    TorqueUnit.KilonewtonMeter: Torque.kilonewton_meters.fget,
    TorqueUnit.NewtonMeter: Torque.newton_meters.fget,
    TorqueUnit.PoundForceFoot: Torque.pound_force_feet.fget,
}

__all__ = ["Torque"]
