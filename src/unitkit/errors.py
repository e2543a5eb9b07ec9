"""Exception types raised by unit definitions and generated quantities."""

from __future__ import annotations

from pathlib import Path


class UnitkitError(Exception):
    """Base class for all errors raised by :mod:`unitkit`."""


class SchemaValidationError(UnitkitError, ValueError):
    """Raised when a unit family definition is malformed or ambiguous."""

    def __init__(
        self,
        message: str,
        *,
        family: str | None = None,
        rule: str | None = None,
        source: str | Path | None = None,
    ) -> None:
        self.family = family
        self.rule = rule
        self.source = str(source) if source is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        where = self.family or "<unnamed family>"
        if self.source:
            where = f"{where} ({self.source})"
        if self.rule:
            return f"{where}: [{self.rule}] {message}"
        return f"{where}: {message}"


class UnimplementedUnitError(UnitkitError, NotImplementedError):
    """Raised when a quantity is asked to convert with a unit it does not define."""

    def __init__(self, quantity: str, unit: object) -> None:
        self.quantity = quantity
        self.unit = unit
        super().__init__(f"{quantity} does not implement unit: {unit!r}")


class QuantityTypeError(UnitkitError, TypeError):
    """Raised when a quantity is compared against a value of another type."""

    def __init__(self, expected: str, actual: object) -> None:
        self.expected = expected
        super().__init__(f"Expected type {expected}, got {type(actual).__name__}.")


__all__ = [
    "UnitkitError",
    "SchemaValidationError",
    "UnimplementedUnitError",
    "QuantityTypeError",
]
