"""Humid air in a thermodynamic state."""

from .request import HumidAirUpdateRequest, resolve_humid_air_request
from .state import HumidAir, UndefinedHumidAir

__all__ = ["HumidAir", "HumidAirUpdateRequest", "UndefinedHumidAir", "resolve_humid_air_request"]
