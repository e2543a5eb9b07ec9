from __future__ import annotations

import math
from pathlib import Path

import pytest

import unitkit
from unitkit import (
    Angle,
    Area,
    Duration,
    DurationUnit,
    ElectricPotential,
    Flow,
    Force,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Pressure,
    QuantityTypeError,
    RotationalSpeed,
    Speed,
    Temperature,
    TemperatureUnit,
    Torque,
    UnimplementedUnitError,
    Volume,
    use_culture,
)
from unitkit.schema import discover_definitions, load_schema

DEFINITIONS = Path(__file__).resolve().parents[1] / "definitions"


def _schemas():
    return [load_schema(path, fallback_culture="en-US") for path in discover_definitions(DEFINITIONS)]


def _quantity_class(schema):
    return getattr(unitkit.quantities, schema.name)


def test_every_definition_has_a_quantity_type() -> None:
    names = [schema.name for schema in _schemas()]

    assert names == unitkit.quantities.__all__
    assert len(names) == 14


def test_round_trip_through_every_unit() -> None:
    for schema in _schemas():
        quantity = _quantity_class(schema)
        for unit in quantity.units():
            for value in (1.0, -3.5, 1234.5678):
                restored = quantity.from_unit(value, unit).as_unit(unit)
                assert restored == pytest.approx(value, rel=1e-9), (schema.name, unit)

                in_unit = quantity(value).as_unit(unit)
                assert quantity.from_unit(in_unit, unit).as_unit(quantity.base_unit) == pytest.approx(
                    value, rel=1e-9
                ), (schema.name, unit)


def test_base_unit_round_trip_is_exact() -> None:
    for schema in _schemas():
        quantity = _quantity_class(schema)
        base = quantity.base_unit
        assert base.name == schema.base_unit
        for value in (0.1, -7.25, 6.02214076e23):
            assert quantity.from_unit(value, base).as_unit(base) == value


def test_factories_and_accessors_agree_with_dynamic_conversion() -> None:
    for schema in _schemas():
        quantity = _quantity_class(schema)
        sample = quantity.from_unit(2.5, quantity.display_unit)
        for member in schema.units:
            unit = quantity.unit_type[member.singular_name]
            factory = getattr(quantity, member.factory_name)
            assert factory(2.5) == quantity.from_unit(2.5, unit)
            assert getattr(sample, member.accessor_name) == sample.as_unit(unit)


def test_units_lists_definition_order_without_undefined() -> None:
    assert Length.units()[0] is LengthUnit.Centimeter
    assert LengthUnit.Undefined not in Length.units()
    assert list(Length.units()) == list(LengthUnit)[1:]
    assert LengthUnit.Undefined.value == 0


def test_base_unit_accessors() -> None:
    assert Length.base_unit is LengthUnit.Meter
    assert Length.display_unit is LengthUnit.Meter
    assert Length.unit_type is LengthUnit
    assert Length.from_meters(3).meters == 3.0
    assert Length(3).meters == 3.0
    assert Length.zero().meters == 0.0


def test_known_conversions() -> None:
    assert Length.from_feet(1).meters == 0.3048
    assert Length.from_kilometers(1).meters == 1000.0
    assert Length.from_inches(12).feet == pytest.approx(1.0)
    assert Mass.from_pounds(1).kilograms == 0.45359237
    assert Mass.from_tonnes(1).grams == pytest.approx(1.0e6)
    assert Force.from_kilograms_force(1).newtons == 9.80665
    assert Force.from_kilo_ponds(1) == Force.from_kilograms_force(1)
    assert Pressure.from_atmospheres(1).pascals == 101325.0
    assert Pressure.from_bars(1).kilopascals == pytest.approx(100.0)
    assert Pressure.from_technical_atmospheres(1).kilograms_force_per_square_centimeter == pytest.approx(1.0)
    assert Pressure.from_torrs(760).atmospheres == pytest.approx(1.0)
    assert Angle.from_radians(math.pi).degrees == pytest.approx(180.0)
    assert Angle.from_degrees(1).arcminutes == pytest.approx(60.0)
    assert Speed.from_knots(1).kilometers_per_hour == pytest.approx(1.852)
    assert Duration.from_days(1).hours == pytest.approx(24.0)
    assert Volume.from_liters(1).milliliters == pytest.approx(1000.0)
    assert Flow.from_cubic_meters_per_hour(3600).cubic_meters_per_second == pytest.approx(1.0)
    assert Flow.from_us_gallons_per_minute(1).liters_per_minute == pytest.approx(3.785411784)
    assert RotationalSpeed.from_revolutions_per_minute(60).revolutions_per_second == pytest.approx(1.0)
    assert Torque.from_kilonewton_meters(1).newton_meters == 1000.0
    assert ElectricPotential.from_millivolts(1500).volts == pytest.approx(1.5)
    assert Area.from_hectares(1).square_meters == 10000.0


def test_temperature_scales_use_offsets() -> None:
    assert Temperature.from_degrees_celsius(0).kelvins == 273.15
    assert Temperature.from_degrees_celsius(100).degrees_fahrenheit == pytest.approx(212.0)
    assert Temperature.from_degrees_fahrenheit(-40).degrees_celsius == pytest.approx(-40.0)
    assert Temperature.from_kelvins(0).degrees_rankine == 0.0
    assert Temperature.from_unit(25, TemperatureUnit.DegreeCelsius).as_unit(
        TemperatureUnit.Kelvin
    ) == pytest.approx(298.15)


def test_unknown_selector_raises() -> None:
    with pytest.raises(UnimplementedUnitError) as excinfo:
        Length.from_unit(1.0, LengthUnit.Undefined)
    assert "Length" in str(excinfo.value)
    assert excinfo.value.unit is LengthUnit.Undefined

    with pytest.raises(UnimplementedUnitError):
        Length.from_meters(1).as_unit(LengthUnit.Undefined)
    with pytest.raises(UnimplementedUnitError):
        Length.from_meters(1).as_unit(MassUnit.Kilogram)
    with pytest.raises(NotImplementedError):
        Length.from_meters(1).to_string(LengthUnit.Undefined)


def test_arithmetic() -> None:
    total = Length.from_meters(1) + Length.from_feet(1)
    assert total.meters == pytest.approx(1.3048)
    assert (Length.from_meters(3) - Length.from_meters(1)).meters == 2.0
    assert (-Length.from_meters(2)).meters == -2.0
    assert (Length.from_meters(2) * 3).meters == 6.0
    assert (3 * Length.from_meters(2)).meters == 6.0
    assert (Length.from_meters(3) / 2).meters == 1.5
    assert Length.from_meters(3) / Length.from_meters(2) == 1.5


def test_division_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        Length.from_meters(1) / 0
    with pytest.raises(ZeroDivisionError):
        Length.from_meters(1) / Length.zero()


def test_mixing_quantity_types_is_rejected() -> None:
    with pytest.raises(TypeError):
        Length.from_meters(1) + Mass.from_kilograms(1)
    with pytest.raises(TypeError):
        Length.from_meters(1) + 1
    with pytest.raises(TypeError):
        Length.from_meters(1) * Length.from_meters(1)
    with pytest.raises(TypeError):
        Length.from_meters(1) < Mass.from_kilograms(1)


def test_equality_and_ordering() -> None:
    one = Length.from_meters(1)

    assert one == Length(1.0)
    assert hash(one) == hash(Length(1.0))
    assert one != Mass.from_kilograms(1)
    assert one != 1.0
    assert Length.from_meters(1) < Length.from_meters(2) <= Length.from_meters(2)
    assert Length.from_kilometers(1) > Length.from_meters(999) >= Length.from_meters(999)
    assert sorted([Length(3), Length(1), Length(2)]) == [Length(1), Length(2), Length(3)]


def test_compare_to() -> None:
    assert Length.from_meters(1).compare_to(Length.from_meters(2)) == -1
    assert Length.from_meters(2).compare_to(Length.from_meters(2)) == 0
    assert Length.from_meters(3).compare_to(Length.from_meters(2)) == 1

    with pytest.raises(QuantityTypeError) as excinfo:
        Length.from_meters(1).compare_to(Mass.from_kilograms(1))
    assert str(excinfo.value) == "Expected type Length, got Mass."
    assert isinstance(excinfo.value, TypeError)


def test_default_string_per_family() -> None:
    cases = [
        (Angle.from_degrees(1), "1 °", "1 °"),
        (Area.from_square_meters(1), "1 m²", "1 м²"),
        (ElectricPotential.from_volts(1), "1 V", "1 В"),
        (Flow.from_cubic_meters_per_second(1), "1 m³/s", "1 м³/с"),
        (Force.from_newtons(1), "1 N", "1 Н"),
        (Length.from_meters(1), "1 m", "1 м"),
        (Mass.from_kilograms(1), "1 kg", "1 кг"),
        (Pressure.from_pascals(1), "1 Pa", "1 Па"),
        (RotationalSpeed.from_revolutions_per_second(1), "1 r/s", "1 об/с"),
        (Temperature.from_kelvins(1), "1 K", "1 K"),
        (Torque.from_newton_meters(1), "1 Nm", "1 Н·м"),
        (Volume.from_cubic_meters(1), "1 m³", "1 м³"),
    ]

    for quantity, english, russian in cases:
        assert quantity.to_string(culture="en-US") == english
        assert quantity.to_string(culture="ru-RU") == russian


def test_default_string_rounds_to_two_digits() -> None:
    assert Length.from_meters(0).to_string(culture="en-US") == "0 m"
    assert Length.from_meters(0.1).to_string(culture="en-US") == "0.1 m"
    assert Length.from_meters(0.11).to_string(culture="en-US") == "0.11 m"
    assert Length.from_meters(0.111).to_string(culture="en-US") == "0.11 m"
    assert Length.from_meters(-0.001).to_string(culture="en-US") == "0 m"


def test_to_string_in_other_units_and_formats() -> None:
    length = Length.from_meters(1500)

    assert length.to_string(LengthUnit.Kilometer, "en-US") == "1.5 km"
    assert length.to_string(LengthUnit.Kilometer, "ru-RU") == "1.5 км"
    assert length.to_string(LengthUnit.Kilometer, "en-US", "{0:.3f} {1}") == "1.500 km"
    assert length.to_string(LengthUnit.Meter, "en-US", "{0:.0f}{1} ({2})", "approx") == "1500m (approx)"


def test_string_uses_context_culture() -> None:
    with use_culture("ru-RU"):
        assert str(Length.from_meters(1)) == "1 м"
    with use_culture("en-US"):
        assert str(Length.from_meters(1)) == "1 m"


def test_missing_culture_entry_falls_back_to_english() -> None:
    assert Duration.from_hours(2).to_string(DurationUnit.Hour, "nb-NO") == "2 t"
    assert Duration.from_seconds(1).to_string(culture="nb-NO") == "1 s"
    assert Mass.from_kilograms(1).to_string(MassUnit.LongTon, "ru-RU").endswith(" long tn")
    assert Length.from_meters(1).to_string(culture="fr-FR") == "1 m"


def test_get_abbreviation() -> None:
    assert Length.get_abbreviation(LengthUnit.Foot, "ru-RU") == "фут"
    assert Length.get_abbreviation(LengthUnit.Foot, "en-US") == "ft"
    assert Length.get_abbreviation(LengthUnit.Undefined, "en-US") == "(no abbreviation for Length.Undefined)"


def test_repr() -> None:
    assert repr(Length.from_meters(2)) == "Length(2.0)"
    assert repr(Temperature.from_kelvins(1)) == "Temperature(1.0)"
