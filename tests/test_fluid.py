import copy
import math

import pytest

from thermo_state import (
    CalculationFailedError,
    CustomMix,
    Fluid,
    FluidInput,
    FluidInputPair,
    FluidParam,
    IncompPure,
    InvalidInputPairError,
    InvalidInputValueError,
    NativeError,
    Phase,
    Pure,
    UnavailableOutputError,
    UndefinedFluid,
    UnsupportedMixError,
    UpdateFailedError,
)
from thermo_state.substance import BinaryMixKind


@pytest.fixture
def water(engine):
    return UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(101_325.0), FluidInput.quality(1.0))


def test_repeated_query_calls_engine_once(engine, water):
    engine.outputs["Cpmass"] = 2080.0

    first = water.specific_heat()
    second = water.specific_heat()

    assert first == second == 2080.0
    assert engine.calls["Cpmass"] == 1


def test_inputs_are_seeded_without_native_calls(engine, water):
    assert water.pressure() == 101_325.0
    assert water.quality() == 1.0
    assert engine.calls["P"] == 0
    assert engine.calls["Q"] == 0


def test_update_clears_cached_outputs(engine, water):
    water.specific_heat()
    water.update(FluidInput.pressure(2e5), FluidInput.temperature(400.0))

    water.specific_heat()

    assert engine.calls["Cpmass"] == 2
    assert water.temperature() == 400.0
    assert water.request.input_pair is FluidInputPair.PT


def test_update_returns_self(water):
    assert water.update(FluidInput.pressure(2e5), FluidInput.temperature(400.0)) is water


def test_input_order_does_not_matter(engine):
    fluid = UndefinedFluid(Pure.Water)
    a = fluid.in_state(FluidInput.pressure(101_325.0), FluidInput.temperature(293.15))
    b = fluid.in_state(FluidInput.temperature(293.15), FluidInput.pressure(101_325.0))

    assert a.request == b.request
    assert a == b
    assert engine.handles[-1].state == ("PT", 101_325.0, 293.15)


@pytest.mark.parametrize("key", list(FluidParam), ids=str)
def test_identical_keys_are_rejected(engine, water, key):
    before = water.request

    with pytest.raises(InvalidInputPairError) as info:
        water.update(FluidInput(key, 1.0), FluidInput(key, 2.0))

    assert info.value.keys == (key, key)
    assert water.request == before
    assert engine.calls["update"] == 1


def test_unsupported_pair_is_rejected(engine):
    with pytest.raises(InvalidInputPairError):
        UndefinedFluid(Pure.Water).in_state(FluidInput.temperature(300.0), FluidInput(FluidParam.CpMass, 4180.0))


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_input_is_rejected(engine, water, bad):
    before = water.request

    with pytest.raises(InvalidInputValueError):
        water.update(FluidInput.pressure(bad), FluidInput.temperature(300.0))

    assert water.request == before
    assert engine.calls["update"] == 1


def test_failed_update_leaves_fluid_unchanged(engine, water):
    engine.outputs["Cpmass"] = 2080.0
    water.specific_heat()
    before = water.request
    engine.rejected_values.add(5e9)

    with pytest.raises(UpdateFailedError) as info:
        water.update(FluidInput.pressure(5e9), FluidInput.temperature(300.0))

    assert isinstance(info.value.cause, NativeError)
    assert water.request == before
    assert water.specific_heat() == 2080.0
    assert engine.calls["Cpmass"] == 1
    # the native handle was brought back to the previous state
    assert engine.handles[-1].state == ("PQ", 101_325.0, 1.0)


def test_failed_in_state_does_not_touch_source(engine, water):
    engine.rejected_values.add(5e9)

    with pytest.raises(UpdateFailedError):
        water.in_state(FluidInput.pressure(5e9), FluidInput.temperature(300.0))

    assert water.pressure() == 101_325.0


def test_non_physical_output_is_unavailable(engine, water):
    engine.outputs["Dmass"] = -5.0

    for _ in range(2):
        with pytest.raises(UnavailableOutputError) as info:
            water.density()
        assert info.value.key is FluidParam.DMass

    assert engine.calls["Dmass"] == 1


def test_quality_outside_two_phase_is_unavailable(engine):
    engine.outputs["Q"] = -1.0
    fluid = UndefinedFluid(Pure.Water).in_state(FluidInput.pressure(1e5), FluidInput.temperature(300.0))

    with pytest.raises(UnavailableOutputError):
        fluid.quality()


def test_native_failure_is_cached(engine, water):
    engine.errors["viscosity"] = "Viscosity model is not available"

    with pytest.raises(CalculationFailedError) as first:
        water.dynamic_viscosity()
    with pytest.raises(CalculationFailedError) as second:
        water.dynamic_viscosity()

    assert first.value == second.value
    assert first.value is not second.value
    assert first.value.cause == NativeError("Viscosity model is not available")
    assert engine.calls["viscosity"] == 1


def test_generic_output_accepts_names(engine, water):
    engine.outputs["Dmass"] = 0.59

    assert water.output("Dmass") == 0.59
    assert water.output("d") == 0.59
    assert water.density() == 0.59
    assert engine.calls["Dmass"] == 1


def test_derived_outputs(engine, water):
    engine.outputs.update({"Dmass": 0.5, "viscosity": 1.2e-5})

    assert water.specific_volume() == pytest.approx(2.0)
    assert water.kinematic_viscosity() == pytest.approx(2.4e-5)


def test_phase(engine, water):
    engine.outputs["Phase"] = 6.0

    assert water.phase() is Phase.TwoPhase


def test_specify_phase_replays_state(engine, water):
    engine.outputs["Cpmass"] = 2080.0
    water.specific_heat()

    water.specify_phase(Phase.Gas)

    handle = engine.handles[-1]
    assert handle.phase == "phase_gas"
    assert handle.history[-1] == ("PQ", 101_325.0, 1.0)
    water.specific_heat()
    assert engine.calls["Cpmass"] == 2

    water.unspecify_phase()
    assert handle.phase is None


def test_trivial_outputs_are_shared_with_defined_fluid(engine):
    engine.outputs["molar_mass"] = 0.018015
    fluid = UndefinedFluid(Pure.Water)

    assert fluid.molar_mass() == 0.018015
    defined = fluid.in_state(FluidInput.pressure(1e5), FluidInput.temperature(300.0))

    assert defined.molar_mass() == 0.018015
    assert engine.calls["molar_mass"] == 1


def test_undefined_fluid_has_no_state_outputs(engine):
    fluid = UndefinedFluid(Pure.Water)

    assert not hasattr(fluid, "temperature")
    assert not hasattr(fluid, "output")


def test_defined_fluid_is_not_constructed_directly():
    with pytest.raises(TypeError):
        Fluid(Pure.Water)


def test_clone_is_independent(engine, water):
    engine.outputs["Cpmass"] = 2080.0
    water.specific_heat()

    clone = copy.deepcopy(water)

    assert clone == water
    assert clone is not water
    assert clone.specific_heat() == 2080.0
    assert engine.calls["Cpmass"] == 1
    assert engine.calls["factory"] == 3

    clone.update(FluidInput.pressure(2e5), FluidInput.temperature(400.0))

    assert clone != water
    assert water.pressure() == 101_325.0


def test_equality_ignores_cached_outputs(engine):
    fluid = UndefinedFluid(Pure.Water)
    a = fluid.in_state(FluidInput.pressure(1e5), FluidInput.temperature(300.0))
    b = fluid.in_state(FluidInput.pressure(1e5), FluidInput.temperature(300.0))
    a.specific_heat()

    assert a == b
    assert a != fluid.in_state(FluidInput.pressure(1e5), FluidInput.temperature(310.0))


def test_binary_mix_sets_fraction(engine):
    UndefinedFluid(BinaryMixKind.MPG.with_fraction(0.4))

    handle = engine.handles[-1]
    assert (handle.backend_name, handle.fluid_name, handle.fractions) == ("INCOMP", "MPG", (0.4,))


def test_incompressible_fluid_uses_incomp_backend(engine):
    fluid = UndefinedFluid(IncompPure.Water)

    assert fluid.backend.name == "INCOMP"


def test_custom_mix_accepts_only_flash_pairs(engine):
    mix = CustomMix.mole_based({Pure.Water: 0.2, Pure.Ethanol: 0.8})
    fluid = UndefinedFluid(mix)

    handle = engine.handles[-1]
    assert handle.fluid_name == "Ethanol&Water"
    assert handle.fractions == (0.8, 0.2)
    fluid.in_state(FluidInput.pressure(1e5), FluidInput.temperature(300.0))
    with pytest.raises(InvalidInputPairError):
        fluid.in_state(FluidInput.pressure(1e5), FluidInput.enthalpy(1e5))


def test_unsupported_custom_mix(engine):
    engine.rejected_fluids.add("Ethanol&Water")

    with pytest.raises(UnsupportedMixError):
        UndefinedFluid(CustomMix.mole_based({Pure.Water: 0.2, Pure.Ethanol: 0.8}))


def test_unknown_pure_fluid_error_is_native(engine):
    engine.rejected_fluids.add("Water")

    with pytest.raises(NativeError):
        UndefinedFluid(Pure.Water)
