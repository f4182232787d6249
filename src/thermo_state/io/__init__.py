"""Parameter keys, input pairs and keyed input values."""

from .fluid_input_pair import FluidInputPair
from .fluid_param import FluidParam, FluidTrivialParam
from .global_param import GlobalParam
from .humid_air_param import HumidAirParam
from .inputs import FluidInput, HumidAirInput, Input
from .phase import Phase

__all__ = [
    "FluidInput",
    "FluidInputPair",
    "FluidParam",
    "FluidTrivialParam",
    "GlobalParam",
    "HumidAirInput",
    "HumidAirParam",
    "Input",
    "Phase",
]
