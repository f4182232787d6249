"""Pure fluids, incompressible liquids and mixtures in a thermodynamic state."""

from .request import CUSTOM_MIX_PAIRS, FluidCreateRequest, FluidUpdateRequest, resolve_fluid_request
from .state import Fluid, UndefinedFluid

__all__ = [
    "CUSTOM_MIX_PAIRS",
    "Fluid",
    "FluidCreateRequest",
    "FluidUpdateRequest",
    "UndefinedFluid",
    "resolve_fluid_request",
]
