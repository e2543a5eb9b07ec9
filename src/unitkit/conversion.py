"""Linear and affine conversion rules between a unit and its family's base unit.

A rule is plain data: it can be evaluated with Python floats and rendered as
Python source that performs exactly the same float operations, which is what
the generator emits into the quantity modules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Iterable, Mapping, Union

from .constants import CONSTANTS, constant_symbol

Factor = Union[float, Fraction]

_ROUND_TRIP_SAMPLES: tuple[float, ...] = (0.0, 1.0, -1.0, 0.001, 3.14159, -273.15, 1.0e6, 1.0e-9)


def _literal(value: Factor) -> str:
    """Render ``value`` as a Python expression evaluating to ``float(value)``."""

    if isinstance(value, Fraction) and value.denominator != 1:
        return f"({value.numerator} / {value.denominator})"
    return repr(float(value))


def _check_factor(value: Factor, what: str) -> None:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{what} must be finite, got {number}")
    if number == 0.0:
        raise ValueError(f"{what} must be non-zero")


@dataclass(slots=True, frozen=True)
class Identity:
    """The unit is the base unit."""

    def to_base(self, value: float) -> float:
        return value

    def from_base(self, value: float) -> float:
        return value

    def to_base_source(self, var: str) -> str:
        return var

    def from_base_source(self, var: str) -> str:
        return var

    def check(self) -> None:
        return None


@dataclass(slots=True, frozen=True)
class Scale:
    """``base = value * factor``."""

    factor: Factor

    def to_base(self, value: float) -> float:
        return value * float(self.factor)

    def from_base(self, value: float) -> float:
        return value / float(self.factor)

    def to_base_source(self, var: str) -> str:
        return f"{var} * {_literal(self.factor)}"

    def from_base_source(self, var: str) -> str:
        return f"{var} / {_literal(self.factor)}"

    def check(self) -> None:
        _check_factor(self.factor, "scale factor")


@dataclass(slots=True, frozen=True)
class NamedConstantScale:
    """``base = value * multiplier * CONSTANTS[constant]``."""

    constant: str
    multiplier: Factor = 1.0

    @property
    def factor(self) -> float:
        return float(self.multiplier) * CONSTANTS[self.constant]

    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, value: float) -> float:
        return value / self.factor

    def _factor_source(self) -> str:
        symbol = constant_symbol(self.constant)
        if self.multiplier == 1:
            return symbol
        return f"({_literal(self.multiplier)} * {symbol})"

    def to_base_source(self, var: str) -> str:
        return f"{var} * {self._factor_source()}"

    def from_base_source(self, var: str) -> str:
        return f"{var} / {self._factor_source()}"

    def check(self) -> None:
        if self.constant not in CONSTANTS:
            known = ", ".join(sorted(CONSTANTS))
            raise ValueError(f"unknown constant '{self.constant}' (known: {known})")
        _check_factor(self.multiplier, "constant multiplier")


@dataclass(slots=True, frozen=True)
class Affine:
    """``base = value * factor + offset``, used by temperature scales."""

    factor: Factor
    offset: Factor

    def to_base(self, value: float) -> float:
        return value * float(self.factor) + float(self.offset)

    def from_base(self, value: float) -> float:
        return (value - float(self.offset)) / float(self.factor)

    def _shift(self, var: str, sign: int) -> str:
        # x + (-o) and x - o are the same float operation
        if (self.offset < 0) == (sign > 0):
            return f"{var} - {_literal(abs(self.offset))}"
        return f"{var} + {_literal(abs(self.offset))}"

    def to_base_source(self, var: str) -> str:
        scaled = var if self.factor == 1 else f"{var} * {_literal(self.factor)}"
        return self._shift(scaled, +1)

    def from_base_source(self, var: str) -> str:
        shifted = self._shift(var, -1)
        if self.factor == 1:
            return shifted
        return f"({shifted}) / {_literal(self.factor)}"

    def check(self) -> None:
        _check_factor(self.factor, "affine factor")
        if not math.isfinite(float(self.offset)):
            raise ValueError(f"affine offset must be finite, got {float(self.offset)}")


Formula = Union[Identity, Scale, NamedConstantScale, Affine]


@dataclass(slots=True, frozen=True)
class ConversionRule:
    """Invertible transform between a unit's magnitude and the base magnitude."""

    formula: Formula

    @property
    def is_identity(self) -> bool:
        return isinstance(self.formula, Identity)

    def to_base(self, value: float) -> float:
        return self.formula.to_base(float(value))

    def from_base(self, value: float) -> float:
        return self.formula.from_base(float(value))

    def to_base_source(self, var: str) -> str:
        return self.formula.to_base_source(var)

    def from_base_source(self, var: str) -> str:
        return self.formula.from_base_source(var)

    def check(self, samples: Iterable[float] = _ROUND_TRIP_SAMPLES) -> None:
        """Validate the formula's constants and its round trip on ``samples``."""

        self.formula.check()
        for sample in samples:
            restored = self.from_base(self.to_base(sample))
            if not math.isclose(restored, sample, rel_tol=1e-9, abs_tol=1e-9):
                raise ValueError(f"round trip of {sample} returned {restored}")


IDENTITY = ConversionRule(Identity())


def parse_number(value: Any) -> Factor:
    """Parse a schema number: int, float, decimal string or ``"p/q"`` fraction."""

    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            if "/" in text:
                return Fraction(text)
            return float(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"invalid number {value!r}") from exc
    raise ValueError(f"expected a number, got {type(value).__name__}")


def parse_conversion(raw: Any) -> ConversionRule:
    """Build a :class:`ConversionRule` from its schema representation.

    Accepted shapes::

        identity
        {scale: 0.3048}
        {scale: "1/60"}
        {scale: "5/9", offset: "45967/180"}
        {constant: standard_gravity, multiplier: 1e4}
    """

    if isinstance(raw, str):
        if raw.strip().lower() == "identity":
            return IDENTITY
        raise ValueError(f"unknown conversion {raw!r}")
    if not isinstance(raw, Mapping):
        raise ValueError("conversion must be 'identity' or a mapping")

    kind = str(raw.get("kind") or "").strip().lower()
    if kind == "identity":
        return IDENTITY

    formula: Formula
    if "constant" in raw:
        multiplier = parse_number(raw["multiplier"]) if "multiplier" in raw else 1.0
        formula = NamedConstantScale(constant=str(raw["constant"]), multiplier=multiplier)
    elif "scale" in raw and "offset" in raw:
        formula = Affine(factor=parse_number(raw["scale"]), offset=parse_number(raw["offset"]))
    elif "scale" in raw:
        formula = Scale(factor=parse_number(raw["scale"]))
    else:
        raise ValueError(f"conversion mapping needs 'scale' or 'constant', got keys {sorted(raw)}")

    rule = ConversionRule(formula)
    rule.check()
    return rule


__all__ = [
    "Affine",
    "ConversionRule",
    "Factor",
    "Formula",
    "IDENTITY",
    "Identity",
    "NamedConstantScale",
    "Scale",
    "parse_conversion",
    "parse_number",
]
