# This file is generated by unitkit.generator. Do not edit.
"""Unit enumerations, one per quantity family."""

from __future__ import annotations

from enum import Enum


class AngleUnit(Enum):
    Undefined = 0
    Arcminute = 1
    Arcsecond = 2
    Degree = 3
    Gradian = 4
    Radian = 5


class AreaUnit(Enum):
    Undefined = 0
    Hectare = 1
    SquareCentimeter = 2
    SquareDecimeter = 3
    SquareFoot = 4
    SquareInch = 5
    SquareKilometer = 6
    SquareMeter = 7
    SquareMile = 8
    SquareMillimeter = 9
    SquareYard = 10


class DurationUnit(Enum):
    Undefined = 0
    Day = 1
    Hour = 2
    Microsecond = 3
    Millisecond = 4
    Minute = 5
    Month = 6
    Nanosecond = 7
    Second = 8
    Week = 9
    Year = 10


class ElectricPotentialUnit(Enum):
    Undefined = 0
    Kilovolt = 1
    Megavolt = 2
    Microvolt = 3
    Millivolt = 4
    Volt = 5


class FlowUnit(Enum):
    Undefined = 0
    CubicFootPerSecond = 1
    CubicMeterPerHour = 2
    CubicMeterPerSecond = 3
    LiterPerMinute = 4
    UsGallonPerMinute = 5


class ForceUnit(Enum):
    Undefined = 0
    Dyne = 1
    KilogramForce = 2
    Kilonewton = 3
    KiloPond = 4
    Newton = 5
    Poundal = 6
    PoundForce = 7


class LengthUnit(Enum):
    Undefined = 0
    Centimeter = 1
    Decimeter = 2
    Foot = 3
    Inch = 4
    Kilometer = 5
    Meter = 6
    Micrometer = 7
    Mile = 8
    Millimeter = 9
    Nanometer = 10
    Yard = 11


class MassUnit(Enum):
    Undefined = 0
    Gram = 1
    Kilogram = 2
    LongTon = 3
    Microgram = 4
    Milligram = 5
    Ounce = 6
    Pound = 7
    ShortTon = 8
    Tonne = 9


class PressureUnit(Enum):
    Undefined = 0
    Atmosphere = 1
    Bar = 2
    KilogramForcePerSquareCentimeter = 3
    Kilopascal = 4
    Megapascal = 5
    Pascal = 6
    Psi = 7
    TechnicalAtmosphere = 8
    Torr = 9


class RotationalSpeedUnit(Enum):
    Undefined = 0
    DegreePerSecond = 1
    RevolutionPerMinute = 2
    RevolutionPerSecond = 3


class SpeedUnit(Enum):
    Undefined = 0
    FootPerSecond = 1
    KilometerPerHour = 2
    Knot = 3
    MeterPerSecond = 4
    MilePerHour = 5


class TemperatureUnit(Enum):
    Undefined = 0
    DegreeCelsius = 1
    DegreeFahrenheit = 2
    DegreeRankine = 3
    Kelvin = 4


class TorqueUnit(Enum):
    Undefined = 0
    KilogramForceMeter = 1
    KilonewtonMeter = 2
    NewtonMeter = 3
    PoundForceFoot = 4


class VolumeUnit(Enum):
    Undefined = 0
    CubicCentimeter = 1
    CubicDecimeter = 2
    CubicFoot = 3
    CubicInch = 4
    CubicKilometer = 5
    CubicMeter = 6
    CubicMillimeter = 7
    ImperialGallon = 8
    Liter = 9
    Milliliter = 10
    UsGallon = 11


__all__ = [
    "AngleUnit",
    "AreaUnit",
    "DurationUnit",
    "ElectricPotentialUnit",
    "FlowUnit",
    "ForceUnit",
    "LengthUnit",
    "MassUnit",
    "PressureUnit",
    "RotationalSpeedUnit",
    "SpeedUnit",
    "TemperatureUnit",
    "TorqueUnit",
    "VolumeUnit",
]
