"""Humid air state objects.

Humid air needs no native handle: every output is a single psychrometric
evaluation keyed by the three canonical inputs and the requested parameter.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

from .. import native
from ..cache import OutputCache, guard, is_finite, is_fraction, is_non_negative, is_positive
from ..errors import CalculationFailedError, NativeError
from ..io.humid_air_param import HumidAirParam
from ..io.inputs import HumidAirInput
from .request import HumidAirUpdateRequest, resolve_humid_air_request

logger = logging.getLogger(__name__)

_GUARDS: Dict[HumidAirParam, Callable[[float], bool]] = {
    HumidAirParam.TWetBulb: is_positive,
    HumidAirParam.Cpda: is_positive,
    HumidAirParam.Cpha: is_positive,
    HumidAirParam.Cvda: is_positive,
    HumidAirParam.Cvha: is_positive,
    HumidAirParam.TDew: is_positive,
    HumidAirParam.Conductivity: is_positive,
    HumidAirParam.DynamicViscosity: is_positive,
    HumidAirParam.PsiW: is_non_negative,
    HumidAirParam.P: is_positive,
    HumidAirParam.Pw: is_non_negative,
    HumidAirParam.R: is_fraction,
    HumidAirParam.T: is_positive,
    HumidAirParam.Vda: is_positive,
    HumidAirParam.Vha: is_positive,
    HumidAirParam.W: is_non_negative,
    HumidAirParam.Z: is_positive,
}


class UndefinedHumidAir:
    """Humid air without a state; define one with :meth:`in_state`."""

    def in_state(self, input1: HumidAirInput, input2: HumidAirInput, input3: HumidAirInput) -> "HumidAir":
        """Return humid air defined by three inputs with distinct keys, in any order.

        Raises:
            InvalidInputsError: two or more inputs share a key.
            InvalidInputValueError: any value is NaN or infinite.
        """

        return HumidAir._from_request(resolve_humid_air_request(input1, input2, input3))

    update = in_state

    def clone(self) -> "UndefinedHumidAir":
        return UndefinedHumidAir()

    def __copy__(self) -> "UndefinedHumidAir":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "UndefinedHumidAir":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndefinedHumidAir):
            return NotImplemented
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "UndefinedHumidAir()"


class HumidAir:
    """Humid air in a defined state.

    Example::

        air = UndefinedHumidAir().in_state(
            HumidAirInput.altitude(0.0),
            HumidAirInput.temperature(293.15),
            HumidAirInput.rel_humidity(0.5),
        )
        air.abs_humidity()
    """

    _request: HumidAirUpdateRequest
    _outputs: OutputCache

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("HumidAir objects are created through UndefinedHumidAir.in_state()")

    @classmethod
    def _from_request(cls, request: HumidAirUpdateRequest, outputs: Optional[OutputCache] = None) -> "HumidAir":
        air = cls.__new__(cls)
        air._request = request
        if outputs is None:
            air._outputs = OutputCache()
            air._reseed()
        else:
            air._outputs = outputs
        return air

    @property
    def request(self) -> HumidAirUpdateRequest:
        return self._request

    def update(self, input1: HumidAirInput, input2: HumidAirInput, input3: HumidAirInput) -> "HumidAir":
        """Redefine the state in place and return ``self``; unchanged on error."""

        self._request = resolve_humid_air_request(input1, input2, input3)
        self._reseed()
        logger.debug("Humid air updated with %s", self._request)
        return self

    def in_state(self, input1: HumidAirInput, input2: HumidAirInput, input3: HumidAirInput) -> "HumidAir":
        return HumidAir._from_request(resolve_humid_air_request(input1, input2, input3))

    def _reseed(self) -> None:
        self._outputs.clear()
        for item in self._request.inputs():
            self._outputs.seed(item.key, item.value)

    def output(self, key: Union[HumidAirParam, str]) -> float:
        """Return the output *key*, computing it at most once per state."""

        if isinstance(key, str):
            key = HumidAirParam.parse(key)
        return self._outputs.get_or_compute(key, lambda: self._compute(key))

    def _compute(self, key: HumidAirParam) -> float:
        try:
            value = native.ha_props_si(key, *self._request.inputs())
        except NativeError as exc:
            raise CalculationFailedError(key, exc) from exc
        return guard(key, value, _GUARDS.get(key, is_finite))

    def abs_humidity(self) -> float:
        """Humidity ratio, kg of water per kg of dry air."""

        return self.output(HumidAirParam.W)

    def compressibility(self) -> float:
        return self.output(HumidAirParam.Z)

    def conductivity(self) -> float:
        return self.output(HumidAirParam.Conductivity)

    def density(self) -> float:
        """Mass of humid air per unit volume."""

        return 1.0 / self.specific_volume()

    def density_da(self) -> float:
        """Mass of dry air per unit volume."""

        return 1.0 / self.specific_volume_da()

    def dew_temperature(self) -> float:
        return self.output(HumidAirParam.TDew)

    def dynamic_viscosity(self) -> float:
        return self.output(HumidAirParam.DynamicViscosity)

    def enthalpy(self) -> float:
        return self.output(HumidAirParam.Hha)

    def enthalpy_da(self) -> float:
        return self.output(HumidAirParam.Hda)

    def entropy(self) -> float:
        return self.output(HumidAirParam.Sha)

    def entropy_da(self) -> float:
        return self.output(HumidAirParam.Sda)

    def pressure(self) -> float:
        return self.output(HumidAirParam.P)

    def rel_humidity(self) -> float:
        return self.output(HumidAirParam.R)

    def specific_heat(self) -> float:
        return self.output(HumidAirParam.Cpha)

    def specific_heat_da(self) -> float:
        return self.output(HumidAirParam.Cpda)

    def specific_heat_const_volume(self) -> float:
        return self.output(HumidAirParam.Cvha)

    def specific_heat_const_volume_da(self) -> float:
        return self.output(HumidAirParam.Cvda)

    def specific_volume(self) -> float:
        return self.output(HumidAirParam.Vha)

    def specific_volume_da(self) -> float:
        return self.output(HumidAirParam.Vda)

    def temperature(self) -> float:
        return self.output(HumidAirParam.T)

    def water_mole_fraction(self) -> float:
        return self.output(HumidAirParam.PsiW)

    def water_partial_pressure(self) -> float:
        return self.output(HumidAirParam.Pw)

    def wet_bulb_temperature(self) -> float:
        return self.output(HumidAirParam.TWetBulb)

    def clone(self) -> "HumidAir":
        return HumidAir._from_request(self._request, self._outputs.copy())

    def __copy__(self) -> "HumidAir":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "HumidAir":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HumidAir):
            return NotImplemented
        return self._request == other._request

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HumidAir({self._request!r})"


__all__ = ["HumidAir", "UndefinedHumidAir"]
