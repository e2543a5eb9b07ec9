"""Physical constants that unit definitions may reference by name.

The table is versioned: generated quantity modules import these names, so a
change here changes conversion results and must bump :data:`CONSTANTS_VERSION`.
"""

from __future__ import annotations

import math
from typing import Mapping

CONSTANTS_VERSION = "2019.1"

# m/s^2, exact by definition (3rd CGPM, 1901)
STANDARD_GRAVITY: float = 9.80665
# Pa, exact by definition (10th CGPM, 1954)
STANDARD_ATMOSPHERE: float = 101325.0
DEGREES_PER_RADIAN: float = 180.0 / math.pi

CONSTANTS: Mapping[str, float] = {
    "standard_gravity": STANDARD_GRAVITY,
    "standard_atmosphere": STANDARD_ATMOSPHERE,
    "degrees_per_radian": DEGREES_PER_RADIAN,
}


def constant_symbol(name: str) -> str:
    """Return the module-level name generated code uses for constant ``name``."""

    if name not in CONSTANTS:
        raise KeyError(f"Unknown physical constant '{name}'.")
    return name.upper()


__all__ = [
    "CONSTANTS",
    "CONSTANTS_VERSION",
    "DEGREES_PER_RADIAN",
    "STANDARD_ATMOSPHERE",
    "STANDARD_GRAVITY",
    "constant_symbol",
]
