from __future__ import annotations

import math
from fractions import Fraction

import pytest

from unitkit.constants import CONSTANTS, constant_symbol
from unitkit.conversion import (
    IDENTITY,
    Affine,
    ConversionRule,
    NamedConstantScale,
    Scale,
    parse_conversion,
    parse_number,
)


def _evaluate(source: str, value: float) -> float:
    namespace = {constant_symbol(name): number for name, number in CONSTANTS.items()}
    namespace["x"] = value
    return eval(source, {"__builtins__": {}}, namespace)


def test_identity_spellings() -> None:
    assert parse_conversion("identity") is IDENTITY
    assert parse_conversion({"kind": "identity"}) is IDENTITY
    assert IDENTITY.is_identity
    assert IDENTITY.to_base_source("meters") == "meters"
    assert IDENTITY.to_base(2.5) == 2.5


def test_scale_from_float() -> None:
    rule = parse_conversion({"scale": 0.3048})

    assert isinstance(rule.formula, Scale)
    assert rule.to_base(1.0) == 0.3048
    assert rule.from_base(0.3048) == 1.0
    assert rule.to_base_source("feet") == "feet * 0.3048"
    assert rule.from_base_source("self._meters") == "self._meters / 0.3048"


def test_scale_from_fraction_keeps_exact_ratio_in_source() -> None:
    rule = parse_conversion({"scale": "1/60"})

    assert rule.formula == Scale(Fraction(1, 60))
    assert rule.to_base_source("x") == "x * (1 / 60)"
    assert rule.from_base_source("x") == "x / (1 / 60)"
    assert rule.to_base(60.0) == 60.0 * (1 / 60)


def test_exponent_strings_render_as_repr() -> None:
    rule = parse_conversion({"scale": "1e-06"})

    assert rule.to_base_source("x") == "x * 1e-06"


def test_named_constant() -> None:
    rule = parse_conversion({"constant": "standard_gravity"})

    assert isinstance(rule.formula, NamedConstantScale)
    assert rule.to_base(1.0) == 9.80665
    assert rule.to_base_source("x") == "x * STANDARD_GRAVITY"
    assert rule.from_base_source("x") == "x / STANDARD_GRAVITY"


def test_named_constant_with_multiplier() -> None:
    rule = parse_conversion({"constant": "standard_gravity", "multiplier": 1.0e4})

    assert rule.to_base(1.0) == pytest.approx(98066.5)
    assert rule.to_base_source("x") == "x * (10000.0 * STANDARD_GRAVITY)"


def test_affine_offset_only() -> None:
    rule = parse_conversion({"scale": 1, "offset": 273.15})

    assert isinstance(rule.formula, Affine)
    assert rule.to_base_source("x") == "x + 273.15"
    assert rule.from_base_source("x") == "x - 273.15"
    assert rule.to_base(0.0) == 273.15


def test_affine_with_fractions() -> None:
    rule = parse_conversion({"scale": "5/9", "offset": "45967/180"})

    assert rule.to_base_source("x") == "x * (5 / 9) + (45967 / 180)"
    assert rule.from_base_source("x") == "(x - (45967 / 180)) / (5 / 9)"
    assert rule.to_base(32.0) == pytest.approx(273.15)
    assert rule.from_base(373.15) == pytest.approx(212.0)


def test_negative_offset_renders_as_subtraction() -> None:
    rule = ConversionRule(Affine(factor=2.0, offset=-10.0))

    assert rule.to_base_source("x") == "x * 2.0 - 10.0"
    assert rule.from_base_source("x") == "(x + 10.0) / 2.0"


def test_rendered_source_matches_evaluation_exactly() -> None:
    rules = [
        parse_conversion({"scale": 0.0254}),
        parse_conversion({"scale": "157725491/2500000000000"}),
        parse_conversion({"constant": "degrees_per_radian"}),
        parse_conversion({"constant": "standard_gravity", "multiplier": "1/1000"}),
        parse_conversion({"scale": "5/9", "offset": "45967/180"}),
        parse_conversion({"scale": 1.8, "offset": -32.5}),
    ]

    for rule in rules:
        for value in (0.0, 1.0, -17.25, 3.14159, 1.0e6):
            assert _evaluate(rule.to_base_source("x"), value) == rule.to_base(value)
            assert _evaluate(rule.from_base_source("x"), value) == rule.from_base(value)


def test_round_trip_is_checked_on_construction() -> None:
    for raw in ({"scale": 1.0e-9}, {"scale": "1/3600"}, {"scale": 1.8, "offset": 32}):
        rule = parse_conversion(raw)
        for value in (1.0, -40.0, 12345.678):
            assert math.isclose(rule.from_base(rule.to_base(value)), value, rel_tol=1e-12)


def test_invalid_conversions_raise_value_error() -> None:
    invalid = [
        "linear",
        42,
        {},
        {"scale": 0},
        {"scale": "abc"},
        {"scale": "1/0"},
        {"scale": float("inf")},
        {"scale": True},
        {"constant": "speed_of_light"},
        {"constant": "standard_gravity", "multiplier": 0},
        {"scale": 0, "offset": 1},
        {"scale": 1, "offset": float("nan")},
    ]

    for raw in invalid:
        with pytest.raises(ValueError):
            parse_conversion(raw)


def test_parse_number() -> None:
    assert parse_number(3) == 3.0
    assert isinstance(parse_number(3), float)
    assert parse_number("0.5") == 0.5
    assert parse_number(" 5/9 ") == Fraction(5, 9)

    with pytest.raises(ValueError):
        parse_number(None)
    with pytest.raises(ValueError):
        parse_number(False)


def test_constant_symbol_rejects_unknown_names() -> None:
    assert constant_symbol("standard_atmosphere") == "STANDARD_ATMOSPHERE"
    with pytest.raises(KeyError):
        constant_symbol("planck")
