# This file is generated by unitkit.generator. Do not edit.
"""Default unit abbreviations by culture; the first entry of each tuple is the default."""

from __future__ import annotations

from typing import Mapping

DEFAULT_ABBREVIATIONS: Mapping[str, Mapping[tuple[str, str], tuple[str, ...]]] = {
    "en-US": {
        ("Angle", "Arcminute"): ("'", "arcmin"),
        ("Angle", "Arcsecond"): ("″", "arcsec"),
        ("Angle", "Degree"): ("°", "deg"),
        ("Angle", "Gradian"): ("g",),
        ("Angle", "Radian"): ("rad",),
        ("Area", "Hectare"): ("ha",),
        ("Area", "SquareCentimeter"): ("cm²",),
        ("Area", "SquareDecimeter"): ("dm²",),
        ("Area", "SquareFoot"): ("ft²",),
        ("Area", "SquareInch"): ("in²",),
        ("Area", "SquareKilometer"): ("km²",),
        ("Area", "SquareMeter"): ("m²",),
        ("Area", "SquareMile"): ("mi²",),
        ("Area", "SquareMillimeter"): ("mm²",),
        ("Area", "SquareYard"): ("yd²",),
        ("Duration", "Day"): ("d", "day"),
        ("Duration", "Hour"): ("h", "hr"),
        ("Duration", "Microsecond"): ("μs",),
        ("Duration", "Millisecond"): ("ms",),
        ("Duration", "Minute"): ("min",),
        ("Duration", "Month"): ("month",),
        ("Duration", "Nanosecond"): ("ns",),
        ("Duration", "Second"): ("s", "sec"),
        ("Duration", "Week"): ("week",),
        ("Duration", "Year"): ("year",),
        ("ElectricPotential", "Kilovolt"): ("kV",),
        ("ElectricPotential", "Megavolt"): ("MV",),
        ("ElectricPotential", "Microvolt"): ("μV",),
        ("ElectricPotential", "Millivolt"): ("mV",),
        ("ElectricPotential", "Volt"): ("V",),
        ("Flow", "CubicFootPerSecond"): ("ft³/s",),
        ("Flow", "CubicMeterPerHour"): ("m³/h",),
        ("Flow", "CubicMeterPerSecond"): ("m³/s",),
        ("Flow", "LiterPerMinute"): ("LPM", "l/min"),
        ("Flow", "UsGallonPerMinute"): ("gpm",),
        ("Force", "Dyne"): ("dyn",),
        ("Force", "KilogramForce"): ("kgf",),
        ("Force", "Kilonewton"): ("kN",),
        ("Force", "KiloPond"): ("kp",),
        ("Force", "Newton"): ("N",),
        ("Force", "Poundal"): ("pdl",),
        ("Force", "PoundForce"): ("lbf",),
        ("Length", "Centimeter"): ("cm",),
        ("Length", "Decimeter"): ("dm",),
        ("Length", "Foot"): ("ft",),
        ("Length", "Inch"): ("in",),
        ("Length", "Kilometer"): ("km",),
        ("Length", "Meter"): ("m",),
        ("Length", "Micrometer"): ("μm",),
        ("Length", "Mile"): ("mi",),
        ("Length", "Millimeter"): ("mm",),
        ("Length", "Nanometer"): ("nm",),
        ("Length", "Yard"): ("yd",),
        ("Mass", "Gram"): ("g",),
        ("Mass", "Kilogram"): ("kg",),
        ("Mass", "LongTon"): ("long tn",),
        ("Mass", "Microgram"): ("μg",),
        ("Mass", "Milligram"): ("mg",),
        ("Mass", "Ounce"): ("oz",),
        ("Mass", "Pound"): ("lb",),
        ("Mass", "ShortTon"): ("short tn",),
        ("Mass", "Tonne"): ("t",),
        ("Pressure", "Atmosphere"): ("atm",),
        ("Pressure", "Bar"): ("bar",),
        ("Pressure", "KilogramForcePerSquareCentimeter"): ("kgf/cm²",),
        ("Pressure", "Kilopascal"): ("kPa",),
        ("Pressure", "Megapascal"): ("MPa",),
        ("Pressure", "Pascal"): ("Pa",),
        ("Pressure", "Psi"): ("psi",),
        ("Pressure", "TechnicalAtmosphere"): ("at",),
        ("Pressure", "Torr"): ("torr",),
        ("RotationalSpeed", "DegreePerSecond"): ("°/s",),
        ("RotationalSpeed", "RevolutionPerMinute"): ("rpm", "r/min"),
        ("RotationalSpeed", "RevolutionPerSecond"): ("r/s",),
        ("Speed", "FootPerSecond"): ("ft/s",),
        ("Speed", "KilometerPerHour"): ("km/h",),
        ("Speed", "Knot"): ("kn", "kt"),
        ("Speed", "MeterPerSecond"): ("m/s",),
        ("Speed", "MilePerHour"): ("mph",),
        ("Temperature", "DegreeCelsius"): ("°C",),
        ("Temperature", "DegreeFahrenheit"): ("°F",),
        ("Temperature", "DegreeRankine"): ("°R",),
        ("Temperature", "Kelvin"): ("K",),
        ("Torque", "KilogramForceMeter"): ("kgf·m",),
        ("Torque", "KilonewtonMeter"): ("kNm", "kN·m"),
        ("Torque", "NewtonMeter"): ("Nm", "N·m"),
        ("Torque", "PoundForceFoot"): ("lbf·ft",),
        ("Volume", "CubicCentimeter"): ("cm³",),
        ("Volume", "CubicDecimeter"): ("dm³",),
        ("Volume", "CubicFoot"): ("ft³",),
        ("Volume", "CubicInch"): ("in³",),
        ("Volume", "CubicKilometer"): ("km³",),
        ("Volume", "CubicMeter"): ("m³",),
        ("Volume", "CubicMillimeter"): ("mm³",),
        ("Volume", "ImperialGallon"): ("gal (imp.)",),
        ("Volume", "Liter"): ("l", "L"),
        ("Volume", "Milliliter"): ("ml", "mL"),
        ("Volume", "UsGallon"): ("gal (U.S.)",),
    },
    "nb-NO": {
        ("Duration", "Day"): ("d",),
        ("Duration", "Hour"): ("t",),
        ("Duration", "Month"): ("mnd",),
        ("Duration", "Week"): ("uke",),
        ("Duration", "Year"): ("år",),
    },
    "ru-RU": {
        ("Angle", "Arcminute"): ("'",),
        ("Angle", "Arcsecond"): ("″",),
        ("Angle", "Degree"): ("°",),
        ("Angle", "Gradian"): ("g",),
        ("Angle", "Radian"): ("рад",),
        ("Area", "Hectare"): ("га",),
        ("Area", "SquareCentimeter"): ("см²",),
        ("Area", "SquareDecimeter"): ("дм²",),
        ("Area", "SquareFoot"): ("фут²",),
        ("Area", "SquareInch"): ("дюйм²",),
        ("Area", "SquareKilometer"): ("км²",),
        ("Area", "SquareMeter"): ("м²",),
        ("Area", "SquareMile"): ("миля²",),
        ("Area", "SquareMillimeter"): ("мм²",),
        ("Area", "SquareYard"): ("ярд²",),
        ("Duration", "Day"): ("сут",),
        ("Duration", "Hour"): ("ч",),
        ("Duration", "Microsecond"): ("мкс",),
        ("Duration", "Millisecond"): ("мс",),
        ("Duration", "Minute"): ("мин",),
        ("Duration", "Month"): ("месяц",),
        ("Duration", "Nanosecond"): ("нс",),
        ("Duration", "Second"): ("с",),
        ("Duration", "Week"): ("неделя",),
        ("Duration", "Year"): ("год",),
        ("ElectricPotential", "Kilovolt"): ("кВ",),
        ("ElectricPotential", "Megavolt"): ("МВ",),
        ("ElectricPotential", "Microvolt"): ("мкВ",),
        ("ElectricPotential", "Millivolt"): ("мВ",),
        ("ElectricPotential", "Volt"): ("В",),
        ("Flow", "CubicFootPerSecond"): ("фут³/с",),
        ("Flow", "CubicMeterPerHour"): ("м³/ч",),
        ("Flow", "CubicMeterPerSecond"): ("м³/с",),
        ("Flow", "LiterPerMinute"): ("л/мин",),
        ("Force", "Dyne"): ("дин",),
        ("Force", "KilogramForce"): ("кгс",),
        ("Force", "Kilonewton"): ("кН",),
        ("Force", "KiloPond"): ("кгс",),
        ("Force", "Newton"): ("Н",),
        ("Force", "Poundal"): ("паундаль",),
        ("Force", "PoundForce"): ("фунт-сила",),
        ("Length", "Centimeter"): ("см",),
        ("Length", "Decimeter"): ("дм",),
        ("Length", "Foot"): ("фут",),
        ("Length", "Inch"): ("дюйм",),
        ("Length", "Kilometer"): ("км",),
        ("Length", "Meter"): ("м",),
        ("Length", "Micrometer"): ("мкм",),
        ("Length", "Mile"): ("миля",),
        ("Length", "Millimeter"): ("мм",),
        ("Length", "Nanometer"): ("нм",),
        ("Length", "Yard"): ("ярд",),
        ("Mass", "Gram"): ("г",),
        ("Mass", "Kilogram"): ("кг",),
        ("Mass", "Microgram"): ("мкг",),
        ("Mass", "Milligram"): ("мг",),
        ("Mass", "Ounce"): ("унция",),
        ("Mass", "Pound"): ("фунт",),
        ("Mass", "Tonne"): ("т",),
        ("Pressure", "Atmosphere"): ("атм",),
        ("Pressure", "Bar"): ("бар",),
        ("Pressure", "KilogramForcePerSquareCentimeter"): ("кгс/см²",),
        ("Pressure", "Kilopascal"): ("кПа",),
        ("Pressure", "Megapascal"): ("МПа",),
        ("Pressure", "Pascal"): ("Па",),
        ("Pressure", "Psi"): ("psi",),
        ("Pressure", "TechnicalAtmosphere"): ("ат",),
        ("Pressure", "Torr"): ("торр",),
        ("RotationalSpeed", "DegreePerSecond"): ("°/с",),
        ("RotationalSpeed", "RevolutionPerMinute"): ("об/мин",),
        ("RotationalSpeed", "RevolutionPerSecond"): ("об/с",),
        ("Speed", "FootPerSecond"): ("фут/с",),
        ("Speed", "KilometerPerHour"): ("км/ч",),
        ("Speed", "Knot"): ("уз",),
        ("Speed", "MeterPerSecond"): ("м/с",),
        ("Speed", "MilePerHour"): ("миль/ч",),
        ("Temperature", "DegreeCelsius"): ("°C",),
        ("Temperature", "DegreeFahrenheit"): ("°F",),
        ("Temperature", "DegreeRankine"): ("°R",),
        ("Temperature", "Kelvin"): ("K",),
        ("Torque", "KilogramForceMeter"): ("кгс·м",),
        ("Torque", "KilonewtonMeter"): ("кН·м",),
        ("Torque", "NewtonMeter"): ("Н·м",),
        ("Volume", "CubicCentimeter"): ("см³",),
        ("Volume", "CubicDecimeter"): ("дм³",),
        ("Volume", "CubicFoot"): ("фут³",),
        ("Volume", "CubicInch"): ("дюйм³",),
        ("Volume", "CubicKilometer"): ("км³",),
        ("Volume", "CubicMeter"): ("м³",),
        ("Volume", "CubicMillimeter"): ("мм³",),
        ("Volume", "Liter"): ("л",),
        ("Volume", "Milliliter"): ("мл",),
    },
}

__all__ = ["DEFAULT_ABBREVIATIONS"]
