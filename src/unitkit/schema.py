"""Loading and validation of unit family definitions expressed as YAML or JSON."""

from __future__ import annotations

import json
import keyword
import pathlib
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

import yaml

from .config import get_settings
from .conversion import ConversionRule, parse_conversion
from .culture import normalize_culture
from .errors import SchemaValidationError

DEFINITION_SUFFIXES = (".yaml", ".yml", ".json")

_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# Attribute names the generated quantity class defines itself.
RESERVED_NAMES = frozenset(
    {
        "as_unit",
        "base_unit",
        "compare_to",
        "display_unit",
        "from_unit",
        "get_abbreviation",
        "to_string",
        "unit_type",
        "units",
        "zero",
    }
)


def _is_keyword(name: str) -> bool:
    return keyword.iskeyword(name) or keyword.issoftkeyword(name)


def snake_case(name: str) -> str:
    """``"KilogramsForce"`` -> ``"kilograms_force"``."""

    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(slots=True, frozen=True)
class UnitMember:
    """A named unit of a family with its conversion rule and abbreviations."""

    singular_name: str
    plural_name: str
    conversion: ConversionRule
    abbreviations: Mapping[str, tuple[str, ...]]

    @property
    def accessor_name(self) -> str:
        return snake_case(self.plural_name)

    @property
    def factory_name(self) -> str:
        return f"from_{self.accessor_name}"

    @property
    def cultures(self) -> tuple[str, ...]:
        return tuple(self.abbreviations)

    def default_abbreviation(self, culture: str) -> str | None:
        values = self.abbreviations.get(normalize_culture(culture))
        return values[0] if values else None

    @classmethod
    def from_mapping(cls, entry: Mapping[str, Any], *, family: str, source: str | None) -> "UnitMember":
        singular = str(entry.get("singularName") or "").strip()
        if not singular:
            raise SchemaValidationError(
                "Unit is missing a 'singularName'.", family=family, rule="format", source=source
            )
        plural = str(entry.get("pluralName") or f"{singular}s").strip()

        if "conversion" not in entry:
            raise SchemaValidationError(
                f"Unit '{singular}' is missing a 'conversion'.",
                family=family,
                rule="conversion",
                source=source,
            )
        try:
            conversion = parse_conversion(entry["conversion"])
        except (ValueError, KeyError) as exc:
            raise SchemaValidationError(
                f"Unit '{singular}' has an invalid conversion: {exc}",
                family=family,
                rule="conversion",
                source=source,
            ) from exc

        abbreviations: dict[str, tuple[str, ...]] = {}
        localization = entry.get("localization") or []
        if not isinstance(localization, Sequence) or isinstance(localization, str):
            raise SchemaValidationError(
                f"Unit '{singular}' localization must be a list.",
                family=family,
                rule="format",
                source=source,
            )
        for item in localization:
            if not isinstance(item, Mapping):
                raise SchemaValidationError(
                    f"Unit '{singular}' has a localization entry that is not a mapping.",
                    family=family,
                    rule="format",
                    source=source,
                )
            culture = normalize_culture(str(item.get("culture") or ""))
            if not culture:
                raise SchemaValidationError(
                    f"Unit '{singular}' has a localization entry without 'culture'.",
                    family=family,
                    rule="format",
                    source=source,
                )
            if culture in abbreviations:
                raise SchemaValidationError(
                    f"Unit '{singular}' localizes culture '{culture}' twice.",
                    family=family,
                    rule="unique-names",
                    source=source,
                )
            raw_values = item.get("abbreviations") or []
            if isinstance(raw_values, str):
                raw_values = [raw_values]
            values = tuple(str(value) for value in raw_values if str(value))
            if not values:
                raise SchemaValidationError(
                    f"Unit '{singular}' has no abbreviations for culture '{culture}'.",
                    family=family,
                    rule="format",
                    source=source,
                )
            abbreviations[culture] = values

        return cls(
            singular_name=singular,
            plural_name=plural,
            conversion=conversion,
            abbreviations=abbreviations,
        )


@dataclass(slots=True, frozen=True)
class UnitFamilySchema:
    """A quantity family: its base unit and the ordered units it converts between."""

    name: str
    base_unit: str
    documentation: str
    units: tuple[UnitMember, ...]
    display_unit: str | None = None
    source: str | None = None

    @property
    def unit_enum_name(self) -> str:
        return f"{self.name}Unit"

    @property
    def module_name(self) -> str:
        return snake_case(self.name)

    @property
    def base_member(self) -> UnitMember:
        return self.member(self.base_unit)

    @property
    def display_member(self) -> UnitMember:
        return self.member(self.display_unit or self.base_unit)

    @property
    def value_field(self) -> str:
        return f"_{self.base_member.accessor_name}"

    @property
    def cultures(self) -> tuple[str, ...]:
        """Cultures used by any unit, in first-seen order."""

        seen: dict[str, None] = {}
        for unit in self.units:
            for culture in unit.abbreviations:
                seen.setdefault(culture, None)
        return tuple(seen)

    def member(self, singular_name: str) -> UnitMember:
        for unit in self.units:
            if unit.singular_name == singular_name:
                return unit
        raise KeyError(f"{self.name} has no unit '{singular_name}'.")

    def _error(self, message: str, rule: str) -> SchemaValidationError:
        return SchemaValidationError(message, family=self.name, rule=rule, source=self.source)

    def validate(self, fallback_culture: str | None = None) -> None:
        """Check the family-local invariants, raising :class:`SchemaValidationError`."""

        fallback = normalize_culture(
            fallback_culture if fallback_culture is not None else get_settings().fallback_culture
        )

        if not _NAME_PATTERN.match(self.name) or _is_keyword(self.name):
            raise self._error(f"Family name '{self.name}' is not a valid identifier.", "identifier")
        if _is_keyword(self.module_name):
            raise self._error(
                f"Family name '{self.name}' would generate module '{self.module_name}'.", "identifier"
            )
        if not self.units:
            raise self._error("Family defines no units.", "base-unit")

        seen: set[str] = set()
        generated: set[str] = set()
        for unit in self.units:
            for name in (unit.singular_name, unit.plural_name):
                if not _NAME_PATTERN.match(name) or _is_keyword(name) or name == "Undefined":
                    raise self._error(f"Unit name '{name}' is not a valid identifier.", "identifier")
            if unit.singular_name in seen:
                raise self._error(f"Unit '{unit.singular_name}' is defined twice.", "unique-names")
            seen.add(unit.singular_name)

            for attribute in (unit.accessor_name, unit.factory_name):
                if _is_keyword(attribute) or attribute in RESERVED_NAMES:
                    raise self._error(
                        f"Unit '{unit.singular_name}' would generate reserved name '{attribute}'.",
                        "identifier",
                    )
                if attribute in generated:
                    raise self._error(
                        f"Unit '{unit.singular_name}' would generate '{attribute}' twice.",
                        "unique-names",
                    )
                generated.add(attribute)

            if fallback not in unit.abbreviations:
                raise self._error(
                    f"Unit '{unit.singular_name}' has no abbreviation for fallback culture '{fallback}'.",
                    "fallback-abbreviation",
                )

        if self.base_unit not in seen:
            raise self._error(f"Base unit '{self.base_unit}' is not one of the units.", "base-unit")
        identities = [unit.singular_name for unit in self.units if unit.conversion.is_identity]
        if identities != [self.base_unit]:
            raise self._error(
                f"Exactly the base unit '{self.base_unit}' must use 'identity', got {identities}.",
                "base-unit",
            )

        if self.display_unit is not None and self.display_unit not in seen:
            raise self._error(
                f"Display unit '{self.display_unit}' is not one of the units.", "display-unit"
            )

    @classmethod
    def from_mapping(
        cls,
        payload: Mapping[str, Any],
        *,
        source: str | pathlib.Path | None = None,
        fallback_culture: str | None = None,
    ) -> "UnitFamilySchema":
        source_text = str(source) if source is not None else None
        name = str(payload.get("name") or "").strip()
        if not name:
            raise SchemaValidationError(
                "Unit family is missing a 'name'.", rule="format", source=source_text
            )

        base_unit = str(payload.get("baseUnit") or "").strip()
        if not base_unit:
            raise SchemaValidationError(
                "Unit family is missing a 'baseUnit'.",
                family=name,
                rule="base-unit",
                source=source_text,
            )

        raw_units = payload.get("units")
        if not isinstance(raw_units, Sequence) or isinstance(raw_units, str) or not raw_units:
            raise SchemaValidationError(
                "Unit family must define a non-empty 'units' list.",
                family=name,
                rule="format",
                source=source_text,
            )

        units: list[UnitMember] = []
        for index, entry in enumerate(raw_units):
            if not isinstance(entry, Mapping):
                raise SchemaValidationError(
                    f"Unit at index {index} is not a mapping.",
                    family=name,
                    rule="format",
                    source=source_text,
                )
            units.append(UnitMember.from_mapping(entry, family=name, source=source_text))

        display_unit = str(payload.get("displayUnit") or "").strip() or None
        schema = cls(
            name=name,
            base_unit=base_unit,
            documentation=" ".join(str(payload.get("documentation") or "").split()),
            units=tuple(units),
            display_unit=display_unit,
            source=source_text,
        )
        schema.validate(fallback_culture)
        return schema


def _read_source(source: str | pathlib.Path) -> tuple[str, str]:
    path = pathlib.Path(source)
    text = path.read_text(encoding="utf-8")
    return text, path.suffix.lower()


def _parse_text(text: str, *, suffix: str, source: str) -> Mapping[str, Any]:
    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise SchemaValidationError(
            f"Unable to parse definition: {exc}", rule="format", source=source
        ) from exc

    if not isinstance(data, Mapping):
        raise SchemaValidationError(
            "Unit family definition must be a mapping.", rule="format", source=source
        )
    return data


def load_schema(
    source: str | pathlib.Path | Mapping[str, Any],
    *,
    fallback_culture: str | None = None,
) -> UnitFamilySchema:
    """Load and validate one unit family from a path or mapping."""

    if isinstance(source, Mapping):
        return UnitFamilySchema.from_mapping(source, fallback_culture=fallback_culture)

    text, suffix = _read_source(source)
    payload = _parse_text(text, suffix=suffix, source=str(source))
    return UnitFamilySchema.from_mapping(payload, source=source, fallback_culture=fallback_culture)


def discover_definitions(directory: str | pathlib.Path) -> list[pathlib.Path]:
    """Definition files in ``directory`` sorted by file name."""

    root = pathlib.Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Definitions directory '{root}' does not exist.")
    return sorted(
        (path for path in root.iterdir() if path.suffix.lower() in DEFINITION_SUFFIXES),
        key=lambda path: path.name,
    )


def validate_schemas(
    schemas: Iterable[UnitFamilySchema],
) -> tuple[list[UnitFamilySchema], list[SchemaValidationError]]:
    """Apply cross-family rules; every family clashing with another is rejected.

    Families clash when they share a name, render to the same module file, or
    when one family's class name equals another family's unit enum name.
    """

    ordered = list(schemas)
    modules: dict[str, list[str]] = {}
    symbols: dict[str, list[str]] = {}
    for schema in ordered:
        modules.setdefault(schema.module_name, []).append(schema.name)
        symbols.setdefault(schema.name, []).append(schema.name)
        symbols.setdefault(schema.unit_enum_name, []).append(schema.name)

    valid: list[UnitFamilySchema] = []
    errors: list[SchemaValidationError] = []
    for schema in ordered:
        names = symbols[schema.name]
        if len(names) > 1:
            message = f"Family name '{schema.name}' is claimed by {len(names)} definitions."
        elif len(symbols[schema.unit_enum_name]) > 1:
            message = f"Unit enum '{schema.unit_enum_name}' clashes with another family name."
        elif len(modules[schema.module_name]) > 1:
            message = (
                f"Module '{schema.module_name}' would be generated for "
                f"{modules[schema.module_name]}."
            )
        else:
            valid.append(schema)
            continue
        errors.append(
            SchemaValidationError(
                message, family=schema.name, rule="unique-family", source=schema.source
            )
        )
    return valid, errors


__all__ = [
    "DEFINITION_SUFFIXES",
    "RESERVED_NAMES",
    "UnitFamilySchema",
    "UnitMember",
    "discover_definitions",
    "load_schema",
    "snake_case",
    "validate_schemas",
]
