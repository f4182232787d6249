"""End-to-end checks against the real CoolProp engine."""

import math

import pytest

from thermo_state import (
    CalculationFailedError,
    FluidInput,
    FluidParam,
    FluidTrivialParam,
    HumidAirInput,
    HumidAirParam,
    Phase,
    Pure,
    UnavailableOutputError,
    UndefinedFluid,
    UndefinedHumidAir,
    UpdateFailedError,
    native,
)
from thermo_state.native import CoolPropEngine


class CountingEngine(CoolPropEngine):
    def __init__(self):
        self.outputs = []

    def keyed_output(self, handle, key):
        self.outputs.append(key)
        return super().keyed_output(handle, key)


@pytest.fixture
def coolprop():
    counting = CountingEngine()
    previous = native.install(counting)
    yield counting
    native.install(previous)


def test_saturated_water_vapour(coolprop):
    steam = UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(101_325.0), FluidInput.quality(1.0))

    first = steam.specific_heat()
    second = steam.specific_heat()

    assert first == second
    assert first > 0.0
    assert coolprop.outputs.count("Cpmass") == 1
    assert steam.temperature() == pytest.approx(373.124, rel=1e-4)
    assert steam.phase() is Phase.TwoPhase


def test_subcooled_water(coolprop):
    water = UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(101_325.0), FluidInput.temperature(293.15))

    assert water.density() == pytest.approx(998.2, rel=1e-3)
    assert water.phase() is Phase.Liquid
    assert water.molar_mass() == pytest.approx(0.018015, rel=1e-3)


def test_rejected_state_keeps_previous_one(coolprop):
    water = UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(101_325.0), FluidInput.temperature(293.15))

    with pytest.raises(UpdateFailedError):
        water.update(FluidInput.pressure(-1.0), FluidInput.temperature(293.15))

    assert water.density() == pytest.approx(998.2, rel=1e-3)


def test_humid_air_at_sea_level(coolprop):
    air = UndefinedHumidAir().in_state(
        HumidAirInput.altitude(0.0),
        HumidAirInput.temperature(293.15),
        HumidAirInput.rel_humidity(0.5),
    )

    assert air.abs_humidity() == pytest.approx(0.0073, rel=0.05)
    assert air.dew_temperature() == pytest.approx(282.4, abs=0.5)


def test_version():
    assert native.global_param("version")


def _assert_name_accepted(error):
    assert "is not valid" not in str(error.cause)
    assert "Unable to match" not in str(error.cause)


@pytest.fixture
def liquid_water(coolprop):
    return UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(101_325.0), FluidInput.temperature(293.15))


@pytest.mark.parametrize("key", list(FluidParam), ids=str)
def test_every_state_key_is_known_to_coolprop(liquid_water, key):
    try:
        liquid_water.output(key)
    except CalculationFailedError as exc:
        _assert_name_accepted(exc)
    except UnavailableOutputError:
        pass


@pytest.mark.parametrize("key", list(FluidTrivialParam), ids=str)
def test_every_trivial_key_is_known_to_coolprop(liquid_water, key):
    try:
        liquid_water.trivial_output(key)
    except CalculationFailedError as exc:
        _assert_name_accepted(exc)
    except UnavailableOutputError:
        pass


@pytest.mark.parametrize("key", list(HumidAirParam), ids=str)
def test_every_humid_air_key_is_known_to_coolprop(coolprop, key):
    air = UndefinedHumidAir().in_state(
        HumidAirInput.pressure(101_325.0),
        HumidAirInput.temperature(293.15),
        HumidAirInput.rel_humidity(0.5),
    )

    try:
        assert math.isfinite(air.output(key))
    except CalculationFailedError as exc:
        _assert_name_accepted(exc)


def test_renamed_trivial_outputs(coolprop):
    water = UndefinedFluid(Pure.Water)

    assert water.critical_pressure() == pytest.approx(22.064e6, rel=1e-3)
    assert water.triple_pressure() == pytest.approx(611.65, rel=1e-2)
    assert water.reducing_pressure() == pytest.approx(22.064e6, rel=1e-3)
    assert water.acentric_factor() == pytest.approx(0.3443, rel=1e-2)


def test_sound_speed_in_liquid_water(liquid_water):
    assert liquid_water.sound_speed() == pytest.approx(1482.0, rel=1e-2)
