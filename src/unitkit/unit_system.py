"""Culture-keyed cache of unit abbreviations.

Each culture gets one :class:`UnitSystem`, built on first request from the
generated default table and kept for the life of its registry. Lookups fall
back to the registry's reference culture and finally to a placeholder string,
so a missing abbreviation never raises.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from functools import lru_cache
from typing import Mapping, Sequence

from .abbreviations import DEFAULT_ABBREVIATIONS
from .config import get_settings
from .culture import get_current_culture, normalize_culture

logger = logging.getLogger(__name__)

UnitKey = tuple[str, str]
AbbreviationTable = Mapping[str, Mapping[UnitKey, Sequence[str]]]


def unit_key(unit: Enum) -> UnitKey:
    """Return the ``(family, member)`` key of a unit enum member.

    The family is the enum class name without its ``Unit`` suffix, so
    ``LengthUnit.Meter`` maps to ``("Length", "Meter")``.
    """

    if not isinstance(unit, Enum):
        raise TypeError(f"Expected a unit enum member, got {type(unit).__name__}.")
    family = type(unit).__name__
    if family.endswith("Unit") and len(family) > len("Unit"):
        family = family[: -len("Unit")]
    return family, unit.name


def placeholder_abbreviation(family: str, member: str) -> str:
    return f"(no abbreviation for {family}.{member})"


class UnitSystem:
    """Abbreviations for a single culture."""

    def __init__(
        self,
        culture: str,
        abbreviations: Mapping[UnitKey, Sequence[str]] | None = None,
        *,
        fallback: "UnitSystem | None" = None,
    ) -> None:
        self.culture = culture
        self.fallback = fallback
        self._write_lock = threading.Lock()
        # Values are immutable tuples replaced by single assignments; readers
        # never take the lock.
        self._abbreviations: dict[UnitKey, tuple[str, ...]] = {
            (str(family), str(member)): tuple(values)
            for (family, member), values in (abbreviations or {}).items()
            if values
        }

    def __repr__(self) -> str:
        return f"UnitSystem(culture={self.culture!r}, entries={len(self._abbreviations)})"

    def _own(self, key: UnitKey) -> tuple[str, ...] | None:
        return self._abbreviations.get(key)

    def _lookup(self, key: UnitKey) -> tuple[str, ...] | None:
        values = self._own(key)
        if values is None and self.fallback is not None:
            values = self.fallback._own(key)
        return values

    def resolve(self, family: str, member: str) -> str:
        """Default abbreviation of ``family.member`` with culture fallback."""

        values = self._lookup((family, member))
        if values:
            return values[0]
        return placeholder_abbreviation(family, member)

    def get_default_abbreviation(self, unit: Enum) -> str:
        return self.resolve(*unit_key(unit))

    def get_all_abbreviations(self, unit: Enum) -> tuple[str, ...]:
        """All known abbreviations of ``unit``, default first; empty if unknown."""

        return self._lookup(unit_key(unit)) or ()

    def register_override(self, family: str, member: str, abbreviation: str) -> None:
        """Make ``abbreviation`` the default for ``family.member`` in this culture.

        Previously known abbreviations are kept after the new one.
        """

        text = str(abbreviation)
        if not text:
            raise ValueError("abbreviation must be a non-empty string")

        key = (family, member)
        with self._write_lock:
            existing = self._abbreviations.get(key, ())
            self._abbreviations[key] = (text, *(value for value in existing if value != text))
        logger.debug("Abbreviation for %s.%s in %r set to %r", family, member, self.culture, text)

    def map_unit_to_abbreviation(self, unit: Enum, abbreviation: str) -> None:
        self.register_override(*unit_key(unit), abbreviation)


class UnitSystemRegistry:
    """Owns one :class:`UnitSystem` per culture, created lazily and never dropped."""

    def __init__(
        self,
        abbreviations: AbbreviationTable | None = None,
        *,
        fallback_culture: str | None = None,
    ) -> None:
        table = DEFAULT_ABBREVIATIONS if abbreviations is None else abbreviations
        self._tables: dict[str, Mapping[UnitKey, Sequence[str]]] = {
            normalize_culture(culture): entries for culture, entries in table.items()
        }
        self.fallback_culture = normalize_culture(
            fallback_culture if fallback_culture is not None else get_settings().fallback_culture
        )
        self._systems: dict[str, UnitSystem] = {}
        self._lock = threading.Lock()

    @property
    def cultures(self) -> tuple[str, ...]:
        """Cultures whose unit system has been created so far."""

        return tuple(self._systems)

    def get(self, culture: str | None = None) -> UnitSystem:
        """Return the unit system for ``culture`` (default: the current culture)."""

        name = get_current_culture() if culture is None else normalize_culture(culture)
        system = self._systems.get(name)
        if system is None:
            with self._lock:
                system = self._get_or_create_locked(name)
        return system

    def _get_or_create_locked(self, name: str) -> UnitSystem:
        system = self._systems.get(name)
        if system is not None:
            return system

        fallback = None
        if name != self.fallback_culture:
            fallback = self._get_or_create_locked(self.fallback_culture)
        system = UnitSystem(name, self._tables.get(name), fallback=fallback)
        self._systems[name] = system
        logger.debug("Created unit system for culture %r", name)
        return system


@lru_cache(maxsize=1)
def default_registry() -> UnitSystemRegistry:
    """Return the process-wide :class:`UnitSystemRegistry`."""

    return UnitSystemRegistry(DEFAULT_ABBREVIATIONS)


def get_cached(culture: str | None = None) -> UnitSystem:
    """Unit system for ``culture`` from the process-wide registry."""

    return default_registry().get(culture)


__all__ = [
    "AbbreviationTable",
    "UnitKey",
    "UnitSystem",
    "UnitSystemRegistry",
    "default_registry",
    "get_cached",
    "placeholder_abbreviation",
    "unit_key",
]
