from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from unitkit.errors import SchemaValidationError
from unitkit.schema import (
    discover_definitions,
    load_schema,
    snake_case,
    validate_schemas,
)


def _family(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Length",
        "baseUnit": "Meter",
        "documentation": "Distance between\n  two points.",
        "units": [
            {
                "singularName": "Meter",
                "conversion": "identity",
                "localization": [
                    {"culture": "en-US", "abbreviations": ["m"]},
                    {"culture": "ru_ru", "abbreviations": ["м"]},
                ],
            },
            {
                "singularName": "Foot",
                "pluralName": "Feet",
                "conversion": {"scale": 0.3048},
                "localization": [{"culture": "en-US", "abbreviations": ["ft", "'"]}],
            },
        ],
    }
    payload.update(overrides)
    return payload


def _unit(name: str, conversion: Any = None, **extra: Any) -> dict[str, Any]:
    entry = {
        "singularName": name,
        "conversion": {"scale": 2.0} if conversion is None else conversion,
        "localization": [{"culture": "en-US", "abbreviations": [name.lower()]}],
    }
    entry.update(extra)
    return entry


def _rule_of(payload: dict[str, Any], **kwargs: Any) -> str | None:
    with pytest.raises(SchemaValidationError) as excinfo:
        load_schema(payload, **kwargs)
    return excinfo.value.rule


def test_load_schema_from_mapping() -> None:
    schema = load_schema(_family(), fallback_culture="en-US")

    assert schema.name == "Length"
    assert schema.unit_enum_name == "LengthUnit"
    assert schema.module_name == "length"
    assert schema.documentation == "Distance between two points."
    assert [unit.singular_name for unit in schema.units] == ["Meter", "Foot"]
    assert schema.base_member.plural_name == "Meters"
    assert schema.display_member is schema.base_member
    assert schema.value_field == "_meters"
    assert schema.cultures == ("en-US", "ru-RU")

    foot = schema.member("Foot")
    assert foot.accessor_name == "feet"
    assert foot.factory_name == "from_feet"
    assert foot.abbreviations == {"en-US": ("ft", "'")}
    assert foot.default_abbreviation("en_us") == "ft"
    assert foot.default_abbreviation("ru-RU") is None


def test_member_lookup_raises_for_unknown_unit() -> None:
    schema = load_schema(_family(), fallback_culture="en-US")

    with pytest.raises(KeyError):
        schema.member("Parsec")


def test_display_unit_must_be_a_member() -> None:
    schema = load_schema(_family(displayUnit="Foot"), fallback_culture="en-US")
    assert schema.display_member.singular_name == "Foot"

    assert _rule_of(_family(displayUnit="Yard"), fallback_culture="en-US") == "display-unit"


def test_base_unit_rules() -> None:
    assert _rule_of(_family(baseUnit=""), fallback_culture="en-US") == "base-unit"
    assert _rule_of(_family(baseUnit="Inch"), fallback_culture="en-US") == "base-unit"

    two_identities = _family()
    two_identities["units"].append(_unit("Metre", "identity"))
    assert _rule_of(two_identities, fallback_culture="en-US") == "base-unit"

    scaled_base = _family(baseUnit="Foot")
    assert _rule_of(scaled_base, fallback_culture="en-US") == "base-unit"


def test_unit_names_must_be_unique() -> None:
    payload = _family()
    payload["units"].append(_unit("Foot"))

    assert _rule_of(payload, fallback_culture="en-US") == "unique-names"


def test_generated_attribute_names_must_be_unique() -> None:
    payload = _family()
    payload["units"].append(_unit("Feet", pluralName="Feet"))

    assert _rule_of(payload, fallback_culture="en-US") == "unique-names"


def test_duplicate_culture_in_one_unit() -> None:
    payload = _family()
    payload["units"][1]["localization"].append({"culture": "en_US", "abbreviations": ["ft."]})

    assert _rule_of(payload, fallback_culture="en-US") == "unique-names"


def test_identifier_rules() -> None:
    assert _rule_of(_family(name="Length 2"), fallback_culture="en-US") == "identifier"

    undefined = _family()
    undefined["units"].append(_unit("Undefined"))
    assert _rule_of(undefined, fallback_culture="en-US") == "identifier"

    reserved = _family()
    reserved["units"].append(_unit("Unit", pluralName="Units"))
    assert _rule_of(reserved, fallback_culture="en-US") == "identifier"

    keyword = _family()
    keyword["units"].append(_unit("Lambda", pluralName="Lambda"))
    assert _rule_of(keyword, fallback_culture="en-US") == "identifier"

def test_python_keywords_are_not_identifiers() -> None:
    for name in ("None", "True"):
        payload = _family()
        payload["units"].append(_unit(name, pluralName=f"{name}Values"))
        assert _rule_of(payload, fallback_culture="en-US") == "identifier"

    plural = _family()
    plural["units"].append(_unit("Item", pluralName="False"))
    assert _rule_of(plural, fallback_culture="en-US") == "identifier"

    assert _rule_of(_family(name="None"), fallback_culture="en-US") == "identifier"
    # Would be written to quantities/class.py.
    assert _rule_of(_family(name="Class"), fallback_culture="en-US") == "identifier"



def test_every_unit_needs_the_fallback_culture() -> None:
    assert _rule_of(_family(), fallback_culture="ru-RU") == "fallback-abbreviation"

    payload = _family()
    payload["units"][1]["localization"] = []
    assert _rule_of(payload, fallback_culture="en-US") == "fallback-abbreviation"


def test_conversion_errors_are_reported_with_family() -> None:
    payload = _family()
    payload["units"].append(_unit("Chain", {"scale": 0}))

    with pytest.raises(SchemaValidationError) as excinfo:
        load_schema(payload, fallback_culture="en-US")

    error = excinfo.value
    assert error.rule == "conversion"
    assert error.family == "Length"
    assert "Chain" in str(error)

    missing = _family()
    del missing["units"][1]["conversion"]
    assert _rule_of(missing, fallback_culture="en-US") == "conversion"


def test_format_errors() -> None:
    assert _rule_of(_family(name=""), fallback_culture="en-US") == "format"
    assert _rule_of(_family(units=[]), fallback_culture="en-US") == "format"
    assert _rule_of(_family(units=["Meter"]), fallback_culture="en-US") == "format"

    no_abbreviations = _family()
    no_abbreviations["units"][1]["localization"] = [{"culture": "en-US", "abbreviations": []}]
    assert _rule_of(no_abbreviations, fallback_culture="en-US") == "format"


def test_load_schema_from_yaml_and_json(tmp_path: Path) -> None:
    yaml_path = tmp_path / "length.yaml"
    yaml_path.write_text(
        "\n".join(
            [
                "name: Length",
                "baseUnit: Meter",
                "documentation: Distance.",
                "units:",
                "  - singularName: Meter",
                "    conversion: identity",
                "    localization:",
                "      - culture: en-US",
                "        abbreviations: [m]",
                "  - singularName: Mile",
                "    conversion: {scale: 1609.344}",
                "    localization:",
                "      - culture: en-US",
                "        abbreviations: mi",
            ]
        ),
        encoding="utf-8",
    )
    json_path = tmp_path / "length.json"
    json_path.write_text(json.dumps(_family()), encoding="utf-8")

    from_yaml = load_schema(yaml_path, fallback_culture="en-US")
    from_json = load_schema(json_path, fallback_culture="en-US")

    assert from_yaml.source == str(yaml_path)
    assert from_yaml.member("Mile").abbreviations == {"en-US": ("mi",)}
    assert from_yaml.member("Mile").conversion.to_base(1.0) == 1609.344
    assert [unit.singular_name for unit in from_json.units] == ["Meter", "Foot"]


def test_unparseable_file_is_a_format_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unterminated\n", encoding="utf-8")

    with pytest.raises(SchemaValidationError) as excinfo:
        load_schema(path, fallback_culture="en-US")

    assert excinfo.value.rule == "format"
    assert excinfo.value.source == str(path)

    scalar = tmp_path / "scalar.json"
    scalar.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SchemaValidationError):
        load_schema(scalar, fallback_culture="en-US")


def test_discover_definitions_sorts_by_name(tmp_path: Path) -> None:
    for name in ("volume.yaml", "angle.json", "notes.txt", "mass.yml"):
        (tmp_path / name).write_text("{}", encoding="utf-8")

    found = discover_definitions(tmp_path)

    assert [path.name for path in found] == ["angle.json", "mass.yml", "volume.yaml"]

    with pytest.raises(FileNotFoundError):
        discover_definitions(tmp_path / "missing")


def test_validate_schemas_rejects_every_duplicate_family() -> None:
    first = load_schema(_family(), fallback_culture="en-US")
    second = load_schema(_family(documentation="Another length."), fallback_culture="en-US")
    mass = load_schema(
        {"name": "Mass", "baseUnit": "Kilogram", "units": [_unit("Kilogram", "identity")]},
        fallback_culture="en-US",
    )

    valid, errors = validate_schemas([first, mass, second])

    assert valid == [mass]
    assert [error.rule for error in errors] == ["unique-family", "unique-family"]
    assert {error.family for error in errors} == {"Length"}

def test_validate_schemas_rejects_families_sharing_a_module() -> None:
    camel = load_schema(_family(name="HttpRate"), fallback_culture="en-US")
    upper = load_schema(_family(name="HTTPRate"), fallback_culture="en-US")
    length = load_schema(_family(), fallback_culture="en-US")
    assert camel.module_name == upper.module_name == "http_rate"

    valid, errors = validate_schemas([camel, length, upper])

    assert valid == [length]
    assert [error.family for error in errors] == ["HttpRate", "HTTPRate"]
    assert {error.rule for error in errors} == {"unique-family"}
    assert "http_rate" in str(errors[0])


def test_validate_schemas_rejects_family_named_like_a_unit_enum() -> None:
    length = load_schema(_family(), fallback_culture="en-US")
    clash = load_schema(_family(name="LengthUnit"), fallback_culture="en-US")

    valid, errors = validate_schemas([length, clash])

    assert valid == []
    assert [error.family for error in errors] == ["Length", "LengthUnit"]



def test_error_message_names_family_rule_and_source() -> None:
    error = SchemaValidationError("bad", family="Length", rule="base-unit", source="length.yaml")

    assert str(error) == "Length (length.yaml): [base-unit] bad"
    assert isinstance(error, ValueError)


def test_snake_case() -> None:
    assert snake_case("Meters") == "meters"
    assert snake_case("KilogramsForcePerSquareCentimeter") == "kilograms_force_per_square_centimeter"
    assert snake_case("UsGallonsPerMinute") == "us_gallons_per_minute"
    assert snake_case("ElectricPotential") == "electric_potential"
