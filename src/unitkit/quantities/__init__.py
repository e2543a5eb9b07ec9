# This file is generated by unitkit.generator. Do not edit.
"""Quantity types generated from the unit definitions."""

from __future__ import annotations

from .angle import Angle
from .area import Area
from .duration import Duration
from .electric_potential import ElectricPotential
from .flow import Flow
from .force import Force
from .length import Length
from .mass import Mass
from .pressure import Pressure
from .rotational_speed import RotationalSpeed
from .speed import Speed
from .temperature import Temperature
from .torque import Torque
from .volume import Volume

__all__ = [
    "Angle",
    "Area",
    "Duration",
    "ElectricPotential",
    "Flow",
    "Force",
    "Length",
    "Mass",
    "Pressure",
    "RotationalSpeed",
    "Speed",
    "Temperature",
    "Torque",
    "Volume",
]
