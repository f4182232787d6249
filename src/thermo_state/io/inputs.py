"""Keyed input values for fluid and humid air state updates.

Every constructor accepts either a plain number, taken as SI already, or a
:class:`pint.Quantity` in any compatible unit. Constructors never validate
finiteness; the update request resolvers do that.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors import AltitudeError
from ..units import QuantityLike, to_si
from .fluid_param import FluidParam
from .humid_air_param import HumidAirParam

K = TypeVar("K", FluidParam, HumidAirParam)

ALTITUDE_RANGE = (-5_000.0, 10_000.0)


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Input(Generic[K]):
    """A parameter key together with its SI value."""

    key: K
    value: float

    def __iter__(self):
        yield self.key
        yield self.value


@dataclass(frozen=True)
class FluidInput(Input[FluidParam]):
    """Fluid input; build one with the named constructors below."""

    @classmethod
    def density(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.DMass, to_si(value, "mass_density"))

    @classmethod
    def enthalpy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.HMass, to_si(value, "specific_energy"))

    @classmethod
    def entropy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.SMass, to_si(value, "specific_entropy"))

    @classmethod
    def internal_energy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.UMass, to_si(value, "specific_energy"))

    @classmethod
    def molar_density(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.DMolar, to_si(value, "molar_density"))

    @classmethod
    def molar_enthalpy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.HMolar, to_si(value, "molar_energy"))

    @classmethod
    def molar_entropy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.SMolar, to_si(value, "molar_entropy"))

    @classmethod
    def molar_internal_energy(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.UMolar, to_si(value, "molar_energy"))

    @classmethod
    def pressure(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.P, to_si(value, "pressure"))

    @classmethod
    def quality(cls, value: QuantityLike) -> "FluidInput":
        """Vapour quality, a ratio between 0 and 1."""

        return cls(FluidParam.Q, to_si(value, "ratio"))

    @classmethod
    def specific_volume(cls, value: QuantityLike) -> "FluidInput":
        """Specific volume, stored as mass density (its reciprocal)."""

        return cls(FluidParam.DMass, _reciprocal(to_si(value, "specific_volume")))

    @classmethod
    def temperature(cls, value: QuantityLike) -> "FluidInput":
        return cls(FluidParam.T, to_si(value, "temperature"))


@dataclass(frozen=True)
class HumidAirInput(Input[HumidAirParam]):
    """Humid air input; build one with the named constructors below."""

    @classmethod
    def abs_humidity(cls, value: QuantityLike) -> "HumidAirInput":
        """Humidity ratio, kg of water per kg of dry air."""

        return cls(HumidAirParam.W, to_si(value, "ratio"))

    @classmethod
    def altitude(cls, value: QuantityLike) -> "HumidAirInput":
        """Pressure input derived from altitude above sea level.

        Uses the ASHRAE standard atmosphere,
        ``p = 101325 * (1 - 2.25577e-5 * z) ** 5.2559``.

        Raises:
            AltitudeError: if *value* lies outside [-5000, 10000] m.
        """

        altitude = to_si(value, "length")
        lower, upper = ALTITUDE_RANGE
        if not lower <= altitude <= upper:
            raise AltitudeError(altitude, lower, upper)
        return cls.pressure(101_325.0 * (1.0 - 2.25577e-5 * altitude) ** 5.2559)

    @classmethod
    def density(cls, value: QuantityLike) -> "HumidAirInput":
        """Humid air density, stored as specific volume per unit of humid air."""

        return cls(HumidAirParam.Vha, _reciprocal(to_si(value, "mass_density")))

    @classmethod
    def density_da(cls, value: QuantityLike) -> "HumidAirInput":
        """Density per unit of dry air, stored as dry air specific volume."""

        return cls(HumidAirParam.Vda, _reciprocal(to_si(value, "mass_density")))

    @classmethod
    def dew_temperature(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.TDew, to_si(value, "temperature"))

    @classmethod
    def enthalpy(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Hha, to_si(value, "specific_energy"))

    @classmethod
    def enthalpy_da(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Hda, to_si(value, "specific_energy"))

    @classmethod
    def entropy(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Sha, to_si(value, "specific_entropy"))

    @classmethod
    def entropy_da(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Sda, to_si(value, "specific_entropy"))

    @classmethod
    def pressure(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.P, to_si(value, "pressure"))

    @classmethod
    def rel_humidity(cls, value: QuantityLike) -> "HumidAirInput":
        """Relative humidity as a ratio; ``Q_(50, "percent")`` is accepted."""

        return cls(HumidAirParam.R, to_si(value, "ratio"))

    @classmethod
    def specific_volume(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Vha, to_si(value, "specific_volume"))

    @classmethod
    def specific_volume_da(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Vda, to_si(value, "specific_volume"))

    @classmethod
    def temperature(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.T, to_si(value, "temperature"))

    @classmethod
    def water_mole_fraction(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.PsiW, to_si(value, "ratio"))

    @classmethod
    def water_partial_pressure(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.Pw, to_si(value, "pressure"))

    @classmethod
    def wet_bulb_temperature(cls, value: QuantityLike) -> "HumidAirInput":
        return cls(HumidAirParam.TWetBulb, to_si(value, "temperature"))


__all__ = ["ALTITUDE_RANGE", "FluidInput", "HumidAirInput", "Input"]
