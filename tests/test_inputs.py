import math
import warnings

import pytest

from thermo_state import AltitudeError, Q_
from thermo_state.io import FluidInput, FluidParam, HumidAirInput, HumidAirParam
from thermo_state.io.inputs import ALTITUDE_RANGE
from thermo_state.units import _build_registry


def test_plain_numbers_are_si():
    assert FluidInput.temperature(300) == FluidInput(FluidParam.T, 300.0)


def test_quantities_are_converted():
    assert FluidInput.temperature(Q_(20.0, "degC")).value == pytest.approx(293.15)
    assert FluidInput.pressure(Q_(1.0, "bar")).value == pytest.approx(1e5)
    assert FluidInput.enthalpy(Q_(2.5, "kJ/kg")).value == pytest.approx(2500.0)
    assert HumidAirInput.rel_humidity(Q_(50.0, "percent")).value == pytest.approx(0.5)


def test_reciprocal_inputs():
    assert FluidInput.specific_volume(0.25) == FluidInput(FluidParam.DMass, 4.0)
    assert HumidAirInput.density(1.25).key is HumidAirParam.Vha
    assert HumidAirInput.density(1.25).value == pytest.approx(0.8)
    assert HumidAirInput.density_da(2.0) == HumidAirInput(HumidAirParam.Vda, 0.5)
    assert math.isinf(FluidInput.specific_volume(0.0).value)


def test_constructors_accept_non_finite_values():
    assert math.isnan(FluidInput.pressure(math.nan).value)


@pytest.mark.parametrize("altitude", ALTITUDE_RANGE)
def test_altitude_boundaries_are_accepted(altitude):
    item = HumidAirInput.altitude(altitude)

    assert item.key is HumidAirParam.P
    assert item.value == pytest.approx(101_325.0 * (1.0 - 2.25577e-5 * altitude) ** 5.2559)


def test_sea_level_altitude():
    assert HumidAirInput.altitude(0.0) == HumidAirInput.pressure(101_325.0)


def test_altitude_in_kilometres():
    assert HumidAirInput.altitude(Q_(1.0, "km")) == HumidAirInput.altitude(1000.0)


@pytest.mark.parametrize("altitude", [-5_000.1, 10_000.1, math.nan])
def test_altitude_outside_range(altitude):
    with pytest.raises(AltitudeError):
        HumidAirInput.altitude(altitude)


def test_inputs_unpack():
    key, value = HumidAirInput.temperature(293.15)

    assert (key, value) == (HumidAirParam.T, 293.15)


def test_registry_uses_abbreviated_format_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        registry = _build_registry.__wrapped__()

    assert registry.formatter.default_format == "~P"
    assert f"{Q_(1.0, 'bar')}" == "1.0 bar"
