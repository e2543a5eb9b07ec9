# This file is generated by unitkit.generator from electric_potential.yaml. Do not edit.
"""ElectricPotential quantity type."""

from __future__ import annotations

import numbers
from typing import Any

from unitkit.errors import QuantityTypeError, UnimplementedUnitError
from unitkit.formatting import format_quantity
from unitkit.unit_system import get_cached
from unitkit.units import ElectricPotentialUnit


class ElectricPotential:
    """
    Electric potential is the potential energy per unit of electric charge.
    """

    __slots__ = ("_volts",)

    unit_type = ElectricPotentialUnit
    base_unit = ElectricPotentialUnit.Volt
    display_unit = ElectricPotentialUnit.Volt

    def __init__(self, volts: float = 0.0) -> None:
        self._volts = float(volts)

    @property
    def kilovolts(self) -> float:
        """Get ElectricPotential in Kilovolts."""
        return self._volts / 1000.0

    @property
    def megavolts(self) -> float:
        """Get ElectricPotential in Megavolts."""
        return self._volts / 1000000.0

    @property
    def microvolts(self) -> float:
        """Get ElectricPotential in Microvolts."""
        return self._volts / 1e-06

    @property
    def millivolts(self) -> float:
        """Get ElectricPotential in Millivolts."""
        return self._volts / 0.001

    @property
    def volts(self) -> float:
        """Get ElectricPotential in Volts."""
        return self._volts

    @classmethod
    def zero(cls) -> ElectricPotential:
        return cls()

    @staticmethod
    def units() -> tuple[ElectricPotentialUnit, ...]:
        """Units this quantity converts between, in definition order."""
        return tuple(_AS_UNIT)

    @classmethod
    def from_kilovolts(cls, kilovolts: float) -> ElectricPotential:
        """Get ElectricPotential from Kilovolts."""
        return cls(kilovolts * 1000.0)

    @classmethod
    def from_megavolts(cls, megavolts: float) -> ElectricPotential:
        """Get ElectricPotential from Megavolts."""
        return cls(megavolts * 1000000.0)

    @classmethod
    def from_microvolts(cls, microvolts: float) -> ElectricPotential:
        """Get ElectricPotential from Microvolts."""
        return cls(microvolts * 1e-06)

    @classmethod
    def from_millivolts(cls, millivolts: float) -> ElectricPotential:
        """Get ElectricPotential from Millivolts."""
        return cls(millivolts * 0.001)

    @classmethod
    def from_volts(cls, volts: float) -> ElectricPotential:
        """Get ElectricPotential from Volts."""
        return cls(volts)

    @classmethod
    def from_unit(cls, value: float, unit: ElectricPotentialUnit) -> ElectricPotential:
        """Dynamically convert ``value`` expressed in ``unit``.

        Raises ``UnimplementedUnitError`` for units this quantity does not define.
        """
        factory = _FROM_UNIT.get(unit) if isinstance(unit, ElectricPotentialUnit) else None
        if factory is None:
            raise UnimplementedUnitError("ElectricPotential", unit)
        return factory(value)

    @staticmethod
    def get_abbreviation(unit: ElectricPotentialUnit, culture: str | None = None) -> str:
        return get_cached(culture).get_default_abbreviation(unit)

    def as_unit(self, unit: ElectricPotentialUnit) -> float:
        """Convert to ``unit``; unknown units raise ``UnimplementedUnitError``."""
        accessor = _AS_UNIT.get(unit) if isinstance(unit, ElectricPotentialUnit) else None
        if accessor is None:
            raise UnimplementedUnitError("ElectricPotential", unit)
        return accessor(self)

    def __neg__(self) -> ElectricPotential:
        return ElectricPotential(-self._volts)

    def __add__(self, other: Any) -> ElectricPotential:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return ElectricPotential(self._volts + other._volts)

    def __sub__(self, other: Any) -> ElectricPotential:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return ElectricPotential(self._volts - other._volts)

    def __mul__(self, other: Any) -> ElectricPotential:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return ElectricPotential(self._volts * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> ElectricPotential | float:
        """Divide by a number, or by a quantity of the same type to get their ratio.

        A zero divisor raises ``ZeroDivisionError``; no infinity or NaN is produced.
        """
        if isinstance(other, ElectricPotential):
            return self._volts / other._volts
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return ElectricPotential(self._volts / float(other))

    # Equality and ordering compare the base magnitude exactly.

    def compare_to(self, other: object) -> int:
        if not isinstance(other, ElectricPotential):
            raise QuantityTypeError("ElectricPotential", other)
        return (self._volts > other._volts) - (self._volts < other._volts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return self._volts == other._volts

    def __hash__(self) -> int:
        return hash(self._volts)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return self._volts < other._volts

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return self._volts <= other._volts

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return self._volts > other._volts

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, ElectricPotential):
            return NotImplemented
        return self._volts >= other._volts

    def to_string(
        self,
        unit: ElectricPotentialUnit | None = None,
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
        return f"ElectricPotential({self._volts!r})"


_FROM_UNIT = {
    ElectricPotentialUnit.Kilovolt: ElectricPotential.from_kilovolts,
    ElectricPotentialUnit.Megavolt: ElectricPotential.from_megavolts,
    ElectricPotentialUnit.Microvolt: ElectricPotential.from_microvolts,
    ElectricPotentialUnit.Millivolt: ElectricPotential.from_millivolts,
    ElectricPotentialUnit.Volt: ElectricPotential.from_volts,
}

_AS_UNIT = {
    ElectricPotentialUnit.Kilovolt: ElectricPotential.kilovolts.fget,
    ElectricPotentialUnit.Megavolt: ElectricPotential.megavolts.fget,
    ElectricPotentialUnit.Microvolt: ElectricPotential.microvolts.fget,
    ElectricPotentialUnit.Millivolt: ElectricPotential.millivolts.fget,
    ElectricPotentialUnit.Volt: ElectricPotential.volts.fget,
}

__all__ = ["ElectricPotential"]
