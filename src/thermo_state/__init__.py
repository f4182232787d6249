"""Typed, cached thermodynamic state objects over the CoolProp property engine."""

import logging
from importlib import metadata

from . import config
from .errors import (
    AltitudeError,
    BinaryMixError,
    CalculationFailedError,
    ConfigError,
    CustomMixError,
    InvalidInputPairError,
    InvalidInputsError,
    InvalidInputValueError,
    NativeError,
    OutputError,
    StateError,
    ThermoStateError,
    UnavailableOutputError,
    UnknownNameError,
    UnsupportedMixError,
    UpdateFailedError,
)
from .fluid import Fluid, UndefinedFluid
from .humid_air import HumidAir, UndefinedHumidAir
from .io import (
    FluidInput,
    FluidInputPair,
    FluidParam,
    FluidTrivialParam,
    GlobalParam,
    HumidAirInput,
    HumidAirParam,
    Phase,
)
from .substance import (
    Backend,
    BaseBackend,
    BinaryMix,
    BinaryMixKind,
    CustomMix,
    IncompPure,
    PredefinedMix,
    Pure,
    TabularMethod,
)
from .units import Q_, ureg

logging.getLogger(__name__).addHandler(logging.NullHandler())


def get_version() -> str:
    """Return the installed package version."""
    try:
        return metadata.version("thermo-state")
    except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
        return "0.0.0"


__all__ = [
    "AltitudeError",
    "Backend",
    "BaseBackend",
    "BinaryMix",
    "BinaryMixError",
    "BinaryMixKind",
    "CalculationFailedError",
    "ConfigError",
    "CustomMix",
    "CustomMixError",
    "Fluid",
    "FluidInput",
    "FluidInputPair",
    "FluidParam",
    "FluidTrivialParam",
    "GlobalParam",
    "HumidAir",
    "HumidAirInput",
    "HumidAirParam",
    "IncompPure",
    "InvalidInputPairError",
    "InvalidInputValueError",
    "InvalidInputsError",
    "NativeError",
    "OutputError",
    "Phase",
    "PredefinedMix",
    "Pure",
    "Q_",
    "StateError",
    "TabularMethod",
    "ThermoStateError",
    "UnavailableOutputError",
    "UndefinedFluid",
    "UndefinedHumidAir",
    "UnknownNameError",
    "UnsupportedMixError",
    "UpdateFailedError",
    "config",
    "get_version",
    "ureg",
]
