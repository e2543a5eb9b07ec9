"""Strongly-typed physical quantities generated from declarative unit definitions.

Quantity types and unit enums are re-exported from the generated
:mod:`unitkit.quantities` and :mod:`unitkit.units` modules, so this module
follows whatever families were last generated.
"""

from __future__ import annotations

from . import quantities, units
from .culture import get_current_culture, normalize_culture, use_culture
from .errors import (
    QuantityTypeError,
    SchemaValidationError,
    UnimplementedUnitError,
    UnitkitError,
)
from .quantities import *  # noqa: F401,F403
from .unit_system import UnitSystem, UnitSystemRegistry, get_cached
from .units import *  # noqa: F401,F403

__all__ = sorted(
    [
        *quantities.__all__,
        *units.__all__,
        "QuantityTypeError",
        "SchemaValidationError",
        "UnimplementedUnitError",
        "UnitSystem",
        "UnitSystemRegistry",
        "UnitkitError",
        "get_cached",
        "get_current_culture",
        "normalize_culture",
        "use_culture",
    ]
)
