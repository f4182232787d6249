"""Thermodynamic phase reported or imposed by the native engine."""

from __future__ import annotations

from .names import AliasedIntEnum


class Phase(AliasedIntEnum):
    Liquid = 0, "phase_liquid", "liquid"
    Supercritical = 1, "phase_supercritical", "supercritical"
    SupercriticalGas = 2, "phase_supercritical_gas", "supercritical_gas"
    SupercriticalLiquid = 3, "phase_supercritical_liquid", "supercritical_liquid"
    CriticalPoint = 4, "phase_critical_point", "critical_point"
    Gas = 5, "phase_gas", "gas"
    TwoPhase = 6, "phase_twophase", "phase_two_phase", "two_phase"
    Unknown = 7, "phase_unknown", "unknown"
    NotImposed = 8, "phase_not_imposed", "not_imposed"


__all__ = ["Phase"]
