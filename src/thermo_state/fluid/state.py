"""Fluid state objects.

A fluid starts as an :class:`UndefinedFluid`, which only knows its substance
and exposes state-independent ("trivial") outputs. Supplying two inputs via
:meth:`UndefinedFluid.in_state` yields a :class:`Fluid`, whose state-dependent
outputs are computed lazily by the native engine and memoised until the next
:meth:`Fluid.update`.

All outputs are SI floats.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

from ..cache import OutputCache, guard, is_finite, is_fraction, is_non_negative, is_positive
from ..errors import (
    CalculationFailedError,
    NativeError,
    UnsupportedMixError,
    UpdateFailedError,
)
from ..io.fluid_param import FluidParam, FluidTrivialParam
from ..io.inputs import FluidInput
from ..io.phase import Phase
from ..native import AbstractState
from ..substance import Backend, BaseBackend, CustomMix, Substance, default_backend
from .request import (
    CUSTOM_MIX_PAIRS,
    FluidCreateRequest,
    FluidUpdateRequest,
    resolve_fluid_request,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[float], bool]

_TRIVIAL_GUARDS: Dict[FluidTrivialParam, Predicate] = {
    FluidTrivialParam.GasConstant: is_positive,
    FluidTrivialParam.MolarMass: is_positive,
    FluidTrivialParam.DMolarReducing: is_positive,
    FluidTrivialParam.DMolarCritical: is_positive,
    FluidTrivialParam.TReducing: is_positive,
    FluidTrivialParam.TCritical: is_positive,
    FluidTrivialParam.DMassReducing: is_positive,
    FluidTrivialParam.DMassCritical: is_positive,
    FluidTrivialParam.PCritical: is_positive,
    FluidTrivialParam.PReducing: is_positive,
    FluidTrivialParam.TTriple: is_positive,
    FluidTrivialParam.PTriple: is_positive,
    FluidTrivialParam.TMin: is_positive,
    FluidTrivialParam.TMax: is_positive,
    FluidTrivialParam.PMax: is_positive,
    FluidTrivialParam.PMin: is_non_negative,
    FluidTrivialParam.DipoleMoment: is_non_negative,
    FluidTrivialParam.MinFraction: is_fraction,
    FluidTrivialParam.MaxFraction: is_fraction,
    FluidTrivialParam.TFreeze: is_positive,
    FluidTrivialParam.GWP20: is_non_negative,
    FluidTrivialParam.GWP100: is_non_negative,
    FluidTrivialParam.GWP500: is_non_negative,
    FluidTrivialParam.FH: is_non_negative,
    FluidTrivialParam.HH: is_non_negative,
    FluidTrivialParam.PH: is_non_negative,
    FluidTrivialParam.ODP: is_non_negative,
}

_OUTPUT_GUARDS: Dict[FluidParam, Predicate] = {
    FluidParam.T: is_positive,
    FluidParam.P: is_positive,
    FluidParam.Q: is_fraction,
    FluidParam.Tau: is_positive,
    FluidParam.Delta: is_positive,
    FluidParam.DMolar: is_positive,
    FluidParam.CpMolar: is_positive,
    FluidParam.Cp0Molar: is_positive,
    FluidParam.CvMolar: is_positive,
    FluidParam.DMass: is_positive,
    FluidParam.CpMass: is_positive,
    FluidParam.Cp0Mass: is_positive,
    FluidParam.CvMass: is_positive,
    FluidParam.DynamicViscosity: is_positive,
    FluidParam.Conductivity: is_positive,
    FluidParam.SurfaceTension: is_positive,
    FluidParam.Prandtl: is_positive,
    FluidParam.SoundSpeed: is_positive,
    FluidParam.IsothermalCompressibility: is_positive,
    FluidParam.Z: is_positive,
    FluidParam.Phase: is_non_negative,
}


def _create_handle(request: FluidCreateRequest) -> AbstractState:
    handle = AbstractState(request.backend_name, request.substance_name)
    if request.fractions is not None:
        handle.set_fractions(request.fractions)
    return handle


class _FluidBase:
    """Substance identity, native handle and trivial outputs shared by both states."""

    def __init__(self, substance: Substance, backend: Optional[Union[Backend, BaseBackend]] = None) -> None:
        if isinstance(backend, BaseBackend):
            backend = Backend(backend)
        self._substance = substance
        self._backend = backend or default_backend(substance)
        try:
            self._create_request = FluidCreateRequest.new(substance, self._backend)
            self._handle = _create_handle(self._create_request)
        except NativeError as exc:
            if isinstance(substance, CustomMix):
                raise UnsupportedMixError(exc) from exc
            raise
        self._trivial_outputs = OutputCache()
        self._imposed_phase: Optional[Phase] = None

    @property
    def substance(self) -> Substance:
        return self._substance

    @property
    def backend(self) -> Backend:
        return self._backend

    def _resolve(self, input1: FluidInput, input2: FluidInput) -> FluidUpdateRequest:
        allowed = CUSTOM_MIX_PAIRS if isinstance(self._substance, CustomMix) else None
        return resolve_fluid_request(input1, input2, allowed_pairs=allowed)

    def _spawn(self) -> "Fluid":
        fluid = Fluid.__new__(Fluid)
        _FluidBase.__init__(fluid, self._substance, self._backend)
        fluid._trivial_outputs = self._trivial_outputs.copy()
        fluid._outputs = OutputCache()
        fluid._request = None
        return fluid

    # -- trivial outputs ---------------------------------------------------
    def trivial_output(self, key: Union[FluidTrivialParam, str]) -> float:
        """Return the state-independent output *key*, computing it at most once."""

        if isinstance(key, str):
            key = FluidTrivialParam.parse(key)
        return self._trivial_outputs.get_or_compute(key, lambda: self._compute(key, _TRIVIAL_GUARDS))

    def _compute(self, key: Union[FluidParam, FluidTrivialParam], guards: Dict[Any, Predicate]) -> float:
        try:
            value = self._handle.keyed_output(key)
        except NativeError as exc:
            raise CalculationFailedError(key, exc) from exc
        return guard(key, value, guards.get(key, is_finite))

    def acentric_factor(self) -> float:
        return self.trivial_output(FluidTrivialParam.AcentricFactor)

    def critical_density(self) -> float:
        return self.trivial_output(FluidTrivialParam.DMassCritical)

    def critical_molar_density(self) -> float:
        return self.trivial_output(FluidTrivialParam.DMolarCritical)

    def critical_pressure(self) -> float:
        return self.trivial_output(FluidTrivialParam.PCritical)

    def critical_temperature(self) -> float:
        return self.trivial_output(FluidTrivialParam.TCritical)

    def dipole_moment(self) -> float:
        return self.trivial_output(FluidTrivialParam.DipoleMoment)

    def flammability_hazard(self) -> float:
        """NFPA 704 flammability rating."""

        return self.trivial_output(FluidTrivialParam.FH)

    def freezing_temperature(self) -> float:
        """Freezing temperature of an incompressible liquid."""

        return self.trivial_output(FluidTrivialParam.TFreeze)

    def gas_constant(self) -> float:
        return self.trivial_output(FluidTrivialParam.GasConstant)

    def gwp20(self) -> float:
        """20-year global warming potential."""

        return self.trivial_output(FluidTrivialParam.GWP20)

    def gwp100(self) -> float:
        """100-year global warming potential."""

        return self.trivial_output(FluidTrivialParam.GWP100)

    def gwp500(self) -> float:
        """500-year global warming potential."""

        return self.trivial_output(FluidTrivialParam.GWP500)

    def health_hazard(self) -> float:
        """NFPA 704 health rating."""

        return self.trivial_output(FluidTrivialParam.HH)

    def max_fraction(self) -> float:
        return self.trivial_output(FluidTrivialParam.MaxFraction)

    def max_pressure(self) -> float:
        return self.trivial_output(FluidTrivialParam.PMax)

    def max_temperature(self) -> float:
        return self.trivial_output(FluidTrivialParam.TMax)

    def min_fraction(self) -> float:
        return self.trivial_output(FluidTrivialParam.MinFraction)

    def min_pressure(self) -> float:
        return self.trivial_output(FluidTrivialParam.PMin)

    def min_temperature(self) -> float:
        return self.trivial_output(FluidTrivialParam.TMin)

    def molar_mass(self) -> float:
        return self.trivial_output(FluidTrivialParam.MolarMass)

    def odp(self) -> float:
        """Ozone depletion potential."""

        return self.trivial_output(FluidTrivialParam.ODP)

    def physical_hazard(self) -> float:
        """NFPA 704 instability rating."""

        return self.trivial_output(FluidTrivialParam.PH)

    def reducing_density(self) -> float:
        return self.trivial_output(FluidTrivialParam.DMassReducing)

    def reducing_molar_density(self) -> float:
        return self.trivial_output(FluidTrivialParam.DMolarReducing)

    def reducing_pressure(self) -> float:
        return self.trivial_output(FluidTrivialParam.PReducing)

    def reducing_temperature(self) -> float:
        return self.trivial_output(FluidTrivialParam.TReducing)

    def triple_pressure(self) -> float:
        return self.trivial_output(FluidTrivialParam.PTriple)

    def triple_temperature(self) -> float:
        return self.trivial_output(FluidTrivialParam.TTriple)


class UndefinedFluid(_FluidBase):
    """A substance bound to a native handle, without a thermodynamic state yet.

    Raises:
        UnsupportedMixError: the native engine rejects a custom mixture.
    """

    def in_state(self, input1: FluidInput, input2: FluidInput) -> "Fluid":
        """Return a new :class:`Fluid` defined by two inputs given in any order.

        The new fluid owns a fresh native handle and starts with a copy of
        this object's trivial outputs. ``self`` is left untouched.

        Raises:
            InvalidInputPairError: the keys are equal or do not form a supported pair.
            InvalidInputValueError: a value is NaN or infinite.
            UpdateFailedError: the native engine rejects the state.
        """

        request = self._resolve(input1, input2)
        fluid = self._spawn()
        fluid._apply(request)
        return fluid

    update = in_state

    def clone(self) -> "UndefinedFluid":
        other = UndefinedFluid(self._substance, self._backend)
        other._trivial_outputs = self._trivial_outputs.copy()
        return other

    def __copy__(self) -> "UndefinedFluid":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "UndefinedFluid":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndefinedFluid):
            return NotImplemented
        return self._substance == other._substance

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UndefinedFluid({self._substance!r}, backend={self._backend.name!r})"


class Fluid(_FluidBase):
    """A substance in a defined thermodynamic state.

    Obtain one through :meth:`UndefinedFluid.in_state`. Every accessor either
    returns a cached value or performs exactly one native call for its key
    per state; failures are cached as well.
    """

    _outputs: OutputCache
    _request: Optional[FluidUpdateRequest]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("Fluid objects are created through UndefinedFluid.in_state()")

    @property
    def request(self) -> FluidUpdateRequest:
        """Canonical update request of the current state."""

        assert self._request is not None
        return self._request

    # -- state transitions -------------------------------------------------
    def update(self, input1: FluidInput, input2: FluidInput) -> "Fluid":
        """Redefine the state in place and return ``self``.

        On any error the fluid keeps its previous state and cached outputs.
        """

        request = self._resolve(input1, input2)
        self._apply(request)
        return self

    def in_state(self, input1: FluidInput, input2: FluidInput) -> "Fluid":
        """Return a new fluid of the same substance in another state."""

        request = self._resolve(input1, input2)
        fluid = self._spawn()
        if self._imposed_phase is not None:
            fluid._impose(self._imposed_phase)
        fluid._apply(request)
        return fluid

    def specify_phase(self, phase: Phase) -> "Fluid":
        """Impose *phase* on the native handle and re-evaluate the current state."""

        previous = self._imposed_phase
        self._impose(phase)
        self._reapply(previous)
        logger.debug("Imposed %s on %r", phase, self)
        return self

    def unspecify_phase(self) -> "Fluid":
        """Let the native engine determine the phase again."""

        previous = self._imposed_phase
        self._impose(None)
        self._reapply(previous)
        return self

    def _impose(self, phase: Optional[Phase]) -> None:
        try:
            if phase is None:
                self._handle.unspecify_phase()
            else:
                self._handle.specify_phase(phase)
        except NativeError as exc:
            raise UpdateFailedError(exc) from exc
        self._imposed_phase = phase

    def _reapply(self, previous_phase: Optional[Phase]) -> None:
        try:
            self._native_update(self.request)
        except UpdateFailedError:
            self._impose(previous_phase)
            self._native_update(self.request)
            raise
        self._reseed()

    def _apply(self, request: FluidUpdateRequest) -> None:
        try:
            self._native_update(request)
        except UpdateFailedError:
            if self._request is not None:
                logger.debug("Restoring %s after a failed update", self._request)
                self._native_update(self._request)
            raise
        self._request = request
        self._reseed()

    def _native_update(self, request: FluidUpdateRequest) -> None:
        logger.debug("Updating %s with %s", self._create_request.substance_name, request)
        try:
            self._handle.update(request.input_pair, request.value1, request.value2)
        except NativeError as exc:
            raise UpdateFailedError(exc) from exc

    def _reseed(self) -> None:
        self._outputs.clear()
        for item in self.request.inputs():
            self._outputs.seed(item.key, item.value)

    # -- outputs -----------------------------------------------------------
    def output(self, key: Union[FluidParam, str]) -> float:
        """Return the state-dependent output *key*, computing it at most once."""

        if isinstance(key, str):
            key = FluidParam.parse(key)
        return self._outputs.get_or_compute(key, lambda: self._compute(key, _OUTPUT_GUARDS))

    def alpha0(self) -> float:
        """Ideal-gas Helmholtz energy contribution (dimensionless)."""

        return self.output(FluidParam.Alpha0)

    def alphar(self) -> float:
        """Residual Helmholtz energy contribution (dimensionless)."""

        return self.output(FluidParam.AlphaR)

    def compressibility(self) -> float:
        return self.output(FluidParam.Z)

    def conductivity(self) -> float:
        return self.output(FluidParam.Conductivity)

    def d_alpha0_d_delta_const_tau(self) -> float:
        return self.output(FluidParam.DAlpha0DDeltaConstTau)

    def d_alpha0_d_tau_const_delta(self) -> float:
        return self.output(FluidParam.DAlpha0DTauConstDelta)

    def d2_alpha0_d_delta2_const_tau(self) -> float:
        return self.output(FluidParam.D2Alpha0DDelta2ConstTau)

    def d3_alpha0_d_delta3_const_tau(self) -> float:
        return self.output(FluidParam.D3Alpha0DDelta3ConstTau)

    def d_alphar_d_delta_const_tau(self) -> float:
        return self.output(FluidParam.DAlphaRDDeltaConstTau)

    def d_alphar_d_tau_const_delta(self) -> float:
        return self.output(FluidParam.DAlphaRDTauConstDelta)

    def d_second_virial_coefficient_dt(self) -> float:
        return self.output(FluidParam.DBVirialDT)

    def d_third_virial_coefficient_dt(self) -> float:
        return self.output(FluidParam.DCVirialDT)

    def density(self) -> float:
        return self.output(FluidParam.DMass)

    def dynamic_viscosity(self) -> float:
        return self.output(FluidParam.DynamicViscosity)

    def enthalpy(self) -> float:
        return self.output(FluidParam.HMass)

    def entropy(self) -> float:
        return self.output(FluidParam.SMass)

    def fundamental_derivative_of_gas_dynamics(self) -> float:
        return self.output(FluidParam.FundamentalDerivativeOfGasDynamics)

    def gibbs_energy(self) -> float:
        return self.output(FluidParam.GMass)

    def helmholtz_energy(self) -> float:
        return self.output(FluidParam.HelmholtzMass)

    def ideal_gas_specific_heat(self) -> float:
        return self.output(FluidParam.Cp0Mass)

    def internal_energy(self) -> float:
        return self.output(FluidParam.UMass)

    def isentropic_expansion_coefficient(self) -> float:
        return self.output(FluidParam.IsentropicExpansionCoefficient)

    def isobaric_expansion_coefficient(self) -> float:
        return self.output(FluidParam.IsobaricExpansionCoefficient)

    def isothermal_compressibility(self) -> float:
        return self.output(FluidParam.IsothermalCompressibility)

    def kinematic_viscosity(self) -> float:
        """Dynamic viscosity divided by density."""

        return self.dynamic_viscosity() / self.density()

    def molar_density(self) -> float:
        return self.output(FluidParam.DMolar)

    def molar_enthalpy(self) -> float:
        return self.output(FluidParam.HMolar)

    def molar_entropy(self) -> float:
        return self.output(FluidParam.SMolar)

    def molar_gibbs_energy(self) -> float:
        return self.output(FluidParam.GMolar)

    def molar_helmholtz_energy(self) -> float:
        return self.output(FluidParam.HelmholtzMolar)

    def molar_ideal_gas_specific_heat(self) -> float:
        return self.output(FluidParam.Cp0Molar)

    def molar_internal_energy(self) -> float:
        return self.output(FluidParam.UMolar)

    def molar_specific_heat(self) -> float:
        return self.output(FluidParam.CpMolar)

    def molar_specific_heat_const_volume(self) -> float:
        return self.output(FluidParam.CvMolar)

    def phase(self) -> Phase:
        return Phase(int(self.output(FluidParam.Phase)))

    def phase_identification_param(self) -> float:
        return self.output(FluidParam.PIP)

    def prandtl(self) -> float:
        return self.output(FluidParam.Prandtl)

    def pressure(self) -> float:
        return self.output(FluidParam.P)

    def quality(self) -> float:
        """Vapour quality; unavailable outside the two-phase region."""

        return self.output(FluidParam.Q)

    def reciprocal_reduced_temperature(self) -> float:
        return self.output(FluidParam.Tau)

    def reduced_density(self) -> float:
        return self.output(FluidParam.Delta)

    def residual_molar_enthalpy(self) -> float:
        return self.output(FluidParam.HMolarResidual)

    def residual_molar_entropy(self) -> float:
        return self.output(FluidParam.SMolarResidual)

    def residual_molar_gibbs_energy(self) -> float:
        return self.output(FluidParam.GMolarResidual)

    def second_virial_coefficient(self) -> float:
        return self.output(FluidParam.BVirial)

    def sound_speed(self) -> float:
        return self.output(FluidParam.SoundSpeed)

    def specific_heat(self) -> float:
        return self.output(FluidParam.CpMass)

    def specific_heat_const_volume(self) -> float:
        return self.output(FluidParam.CvMass)

    def specific_volume(self) -> float:
        return 1.0 / self.density()

    def surface_tension(self) -> float:
        return self.output(FluidParam.SurfaceTension)

    def temperature(self) -> float:
        return self.output(FluidParam.T)

    def third_virial_coefficient(self) -> float:
        return self.output(FluidParam.CVirial)

    # -- value semantics ---------------------------------------------------
    def clone(self) -> "Fluid":
        """Return an independent fluid with a fresh native handle and copied caches."""

        fluid = self._spawn()
        if self._imposed_phase is not None:
            fluid._impose(self._imposed_phase)
        fluid._native_update(self.request)
        fluid._request = self._request
        fluid._outputs = self._outputs.copy()
        return fluid

    def __copy__(self) -> "Fluid":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Fluid":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fluid):
            return NotImplemented
        return self._substance == other._substance and self._request == other._request

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Fluid({self._substance!r}, backend={self._backend.name!r}, request={self._request!r})"


__all__ = ["Fluid", "UndefinedFluid"]
