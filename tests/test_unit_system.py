from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

import pytest

from unitkit.culture import use_culture
from unitkit.unit_system import (
    UnitSystem,
    UnitSystemRegistry,
    get_cached,
    placeholder_abbreviation,
    unit_key,
)
from unitkit.units import LengthUnit, MassUnit


class CustomUnit(Enum):
    Undefined = 0
    Unit1 = 1


TABLE = {
    "en-US": {
        ("Length", "Meter"): ("m",),
        ("Length", "Foot"): ("ft", "'"),
        ("Mass", "Kilogram"): ("kg",),
    },
    "ru_ru": {
        ("Length", "Meter"): ("м",),
    },
}


def _registry() -> UnitSystemRegistry:
    return UnitSystemRegistry(TABLE, fallback_culture="en-US")


def test_unit_key_strips_enum_suffix() -> None:
    assert unit_key(LengthUnit.Meter) == ("Length", "Meter")
    assert unit_key(CustomUnit.Unit1) == ("Custom", "Unit1")

    with pytest.raises(TypeError):
        unit_key("Meter")


def test_culture_specific_abbreviation() -> None:
    registry = _registry()

    assert registry.get("en-US").get_default_abbreviation(LengthUnit.Meter) == "m"
    assert registry.get("ru-RU").get_default_abbreviation(LengthUnit.Meter) == "м"


def test_missing_entry_falls_back_to_reference_culture() -> None:
    registry = _registry()

    russian = registry.get("ru-RU")

    assert russian.get_default_abbreviation(LengthUnit.Foot) == "ft"
    assert russian.get_all_abbreviations(LengthUnit.Foot) == ("ft", "'")
    assert registry.get("de-DE").get_default_abbreviation(MassUnit.Kilogram) == "kg"
    assert registry.get("").get_default_abbreviation(LengthUnit.Meter) == "m"


def test_unknown_unit_gets_placeholder() -> None:
    system = _registry().get("ru-RU")

    assert system.get_default_abbreviation(CustomUnit.Unit1) == "(no abbreviation for Custom.Unit1)"
    assert system.get_default_abbreviation(LengthUnit.Undefined) == placeholder_abbreviation(
        "Length", "Undefined"
    )
    assert system.get_all_abbreviations(CustomUnit.Unit1) == ()


def test_same_culture_returns_same_instance() -> None:
    registry = _registry()

    first = registry.get("ru-RU")

    assert registry.get("ru_RU") is first
    assert registry.get(" ru-ru ") is first
    assert set(registry.cultures) == {"ru-RU", "en-US"}


def test_none_uses_current_culture() -> None:
    registry = _registry()

    with use_culture("ru-RU"):
        assert registry.get().culture == "ru-RU"
    with use_culture("en_US"):
        assert registry.get() is registry.get("en-US")


def test_override_becomes_default_and_keeps_existing() -> None:
    registry = _registry()
    english = registry.get("en-US")

    english.map_unit_to_abbreviation(LengthUnit.Foot, "feet")
    english.register_override("Length", "Foot", "'")

    assert english.get_all_abbreviations(LengthUnit.Foot) == ("'", "feet", "ft")
    assert english.get_default_abbreviation(LengthUnit.Foot) == "'"


def test_override_is_scoped_to_its_culture() -> None:
    registry = _registry()

    registry.get("ru-RU").map_unit_to_abbreviation(MassUnit.Kilogram, "кг")

    assert registry.get("ru-RU").get_default_abbreviation(MassUnit.Kilogram) == "кг"
    assert registry.get("en-US").get_default_abbreviation(MassUnit.Kilogram) == "kg"
    assert registry.get("de-DE").get_default_abbreviation(MassUnit.Kilogram) == "kg"


def test_override_on_reference_culture_is_seen_by_fallback() -> None:
    registry = _registry()
    russian = registry.get("ru-RU")

    registry.get("en-US").map_unit_to_abbreviation(LengthUnit.Foot, "foot")

    assert russian.get_default_abbreviation(LengthUnit.Foot) == "foot"


def test_override_registers_unknown_units() -> None:
    system = UnitSystem("en-US")

    system.map_unit_to_abbreviation(CustomUnit.Unit1, "u1")

    assert system.get_default_abbreviation(CustomUnit.Unit1) == "u1"


def test_empty_override_is_rejected() -> None:
    with pytest.raises(ValueError):
        _registry().get("en-US").register_override("Length", "Meter", "")


def test_concurrent_first_access_creates_one_system() -> None:
    registry = _registry()
    barrier = threading.Barrier(16)

    def fetch(_: int) -> UnitSystem:
        barrier.wait()
        return registry.get("nb-NO")

    with ThreadPoolExecutor(max_workers=16) as pool:
        systems = list(pool.map(fetch, range(16)))

    assert all(system is systems[0] for system in systems)
    assert sorted(registry.cultures) == ["en-US", "nb-NO"]


def test_readers_see_whole_values_during_overrides() -> None:
    registry = _registry()
    system = registry.get("en-US")
    allowed = {"ft", "'"} | {f"ft{index}" for index in range(200)}
    seen: set[str] = set()
    stop = threading.Event()

    def read() -> None:
        while not stop.is_set():
            seen.add(system.get_default_abbreviation(LengthUnit.Foot))
            values = system.get_all_abbreviations(LengthUnit.Foot)
            assert len(values) == len(set(values))

    def write() -> None:
        for index in range(200):
            system.register_override("Length", "Foot", f"ft{index}")

    readers = [threading.Thread(target=read) for _ in range(4)]
    for reader in readers:
        reader.start()
    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(lambda _: write(), range(4)))
    stop.set()
    for reader in readers:
        reader.join()

    assert seen <= allowed
    assert len(system.get_all_abbreviations(LengthUnit.Foot)) == 202


def test_process_wide_registry_is_shared() -> None:
    assert get_cached("en-US") is get_cached("en_us")
    assert get_cached("en-US").get_default_abbreviation(LengthUnit.Meter) == "m"
    assert get_cached("ru-RU").get_default_abbreviation(LengthUnit.Meter) == "м"
    assert get_cached("ru-RU").get_default_abbreviation(MassUnit.LongTon) == "long tn"
    assert get_cached("").get_default_abbreviation(MassUnit.Kilogram) == "kg"
