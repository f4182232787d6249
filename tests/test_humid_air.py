import copy
import math

import pytest

from thermo_state import (
    CalculationFailedError,
    HumidAirInput,
    HumidAirParam,
    InvalidInputsError,
    InvalidInputValueError,
    UnavailableOutputError,
    UndefinedHumidAir,
)


@pytest.fixture
def air(engine):
    return UndefinedHumidAir().in_state(
        HumidAirInput.temperature(293.15),
        HumidAirInput.rel_humidity(0.5),
        HumidAirInput.altitude(0.0),
    )


def test_request_is_ordered_by_key(air):
    keys = [item.key for item in air.request.inputs()]

    assert keys == [HumidAirParam.P, HumidAirParam.R, HumidAirParam.T]


def test_repeated_query_calls_engine_once(engine, air):
    engine.outputs["W"] = 0.0073

    assert air.abs_humidity() == air.abs_humidity() == 0.0073
    assert engine.calls["W"] == 1
    assert engine.calls[("ha_inputs", "P", "R", "T")] == 1


def test_inputs_are_seeded(engine, air):
    assert air.pressure() == pytest.approx(101_325.0)
    assert air.temperature() == 293.15
    assert air.rel_humidity() == 0.5
    assert engine.calls["T"] == 0


def test_density_is_reciprocal_of_specific_volume(engine, air):
    engine.outputs.update({"Vha": 0.8, "V": 0.5})

    assert air.density() == pytest.approx(1.25)
    assert air.density_da() == pytest.approx(2.0)


def test_duplicate_keys_are_echoed_in_client_order(engine):
    t = HumidAirInput.temperature(293.15)
    r = HumidAirInput.rel_humidity(0.5)

    with pytest.raises(InvalidInputsError) as info:
        UndefinedHumidAir().in_state(t, r, HumidAirInput.temperature(300.0))

    assert info.value.keys == (HumidAirParam.T, HumidAirParam.R, HumidAirParam.T)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_input_is_rejected(air, bad):
    before = air.request

    with pytest.raises(InvalidInputValueError):
        air.update(
            HumidAirInput.pressure(101_325.0),
            HumidAirInput.temperature(bad),
            HumidAirInput.rel_humidity(0.5),
        )

    assert air.request == before


def test_order_invariance(engine):
    p = HumidAirInput.pressure(101_325.0)
    t = HumidAirInput.temperature(293.15)
    w = HumidAirInput.abs_humidity(0.007)
    undefined = UndefinedHumidAir()

    assert undefined.in_state(p, t, w) == undefined.in_state(w, p, t)


def test_non_physical_output_is_unavailable(engine, air):
    engine.outputs["W"] = -0.1
    engine.outputs["Hha"] = math.nan

    with pytest.raises(UnavailableOutputError):
        air.abs_humidity()
    with pytest.raises(UnavailableOutputError):
        air.enthalpy()
    with pytest.raises(UnavailableOutputError):
        air.abs_humidity()

    assert engine.calls["W"] == 1


def test_relative_humidity_above_one_is_unavailable(engine):
    engine.outputs["R"] = 1.2
    air = UndefinedHumidAir().in_state(
        HumidAirInput.pressure(101_325.0),
        HumidAirInput.temperature(293.15),
        HumidAirInput.abs_humidity(0.03),
    )

    with pytest.raises(UnavailableOutputError):
        air.rel_humidity()


def test_native_failure_is_cached(engine, air):
    engine.errors["B"] = "Wet bulb temperature solver failed"

    for _ in range(2):
        with pytest.raises(CalculationFailedError) as info:
            air.wet_bulb_temperature()
        assert info.value.key is HumidAirParam.TWetBulb

    assert engine.calls["B"] == 1


def test_update_reseeds(engine, air):
    air.abs_humidity()

    result = air.update(
        HumidAirInput.pressure(90_000.0),
        HumidAirInput.temperature(300.0),
        HumidAirInput.rel_humidity(0.2),
    )

    assert result is air
    assert air.pressure() == 90_000.0
    air.abs_humidity()
    assert engine.calls["W"] == 2


def test_clone_copies_cache(engine, air):
    air.abs_humidity()

    clone = copy.copy(air)
    clone.abs_humidity()

    assert clone == air
    assert engine.calls["W"] == 1
    clone.update(
        HumidAirInput.pressure(90_000.0),
        HumidAirInput.temperature(300.0),
        HumidAirInput.rel_humidity(0.2),
    )
    assert clone != air
    assert air.temperature() == 293.15


def test_undefined_humid_air_has_no_outputs():
    assert not hasattr(UndefinedHumidAir(), "temperature")
