"""Supported pairs of fluid input keys and their canonical ordering."""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

from .fluid_param import FluidParam
from .names import AliasedIntEnum

_P = FluidParam


class FluidInputPair(AliasedIntEnum):
    """Input pair identifiers accepted by the native engine's state update.

    The canonical name matches the engine constant stem, so ``HmassP``
    corresponds to ``HmassP_INPUTS``.
    """

    QT = 1, "QT"
    PQ = 2, "PQ"
    QSMolar = 3, "QSmolar"
    QSMass = 4, "QSmass"
    HMolarQ = 5, "HmolarQ"
    HMassQ = 6, "HmassQ"
    DMolarQ = 7, "DmolarQ"
    DMassQ = 8, "DmassQ"
    PT = 9, "PT"
    DMassT = 10, "DmassT"
    DMolarT = 11, "DmolarT"
    HMolarT = 12, "HmolarT"
    HMassT = 13, "HmassT"
    SMolarT = 14, "SmolarT"
    SMassT = 15, "SmassT"
    TUMolar = 16, "TUmolar"
    TUMass = 17, "TUmass"
    DMassP = 18, "DmassP"
    DMolarP = 19, "DmolarP"
    HMassP = 20, "HmassP"
    HMolarP = 21, "HmolarP"
    PSMass = 22, "PSmass"
    PSMolar = 23, "PSmolar"
    PUMass = 24, "PUmass"
    PUMolar = 25, "PUmolar"
    HMassSMass = 26, "HmassSmass"
    HMolarSMolar = 27, "HmolarSmolar"
    SMassUMass = 28, "SmassUmass"
    SMolarUMolar = 29, "SmolarUmolar"
    DMassHMass = 30, "DmassHmass"
    DMolarHMolar = 31, "DmolarHmolar"
    DMassSMass = 32, "DmassSmass"
    DMolarSMolar = 33, "DmolarSmolar"
    DMassUMass = 34, "DmassUmass"
    DMolarUMolar = 35, "DmolarUmolar"

    @property
    def keys(self) -> Tuple[FluidParam, FluidParam]:
        """Canonical ``(first, second)`` key order expected by the engine."""

        return _CANONICAL_KEYS[self]

    @classmethod
    def from_keys(cls, key1: FluidParam, key2: FluidParam) -> Optional["FluidInputPair"]:
        """Return the pair formed by two keys in either order, or ``None``."""

        return _BY_KEY_SET.get(frozenset((key1, key2)))


_CANONICAL_KEYS: Dict[FluidInputPair, Tuple[FluidParam, FluidParam]] = {
    FluidInputPair.QT: (_P.Q, _P.T),
    FluidInputPair.PQ: (_P.P, _P.Q),
    FluidInputPair.QSMolar: (_P.Q, _P.SMolar),
    FluidInputPair.QSMass: (_P.Q, _P.SMass),
    FluidInputPair.HMolarQ: (_P.HMolar, _P.Q),
    FluidInputPair.HMassQ: (_P.HMass, _P.Q),
    FluidInputPair.DMolarQ: (_P.DMolar, _P.Q),
    FluidInputPair.DMassQ: (_P.DMass, _P.Q),
    FluidInputPair.PT: (_P.P, _P.T),
    FluidInputPair.DMassT: (_P.DMass, _P.T),
    FluidInputPair.DMolarT: (_P.DMolar, _P.T),
    FluidInputPair.HMolarT: (_P.HMolar, _P.T),
    FluidInputPair.HMassT: (_P.HMass, _P.T),
    FluidInputPair.SMolarT: (_P.SMolar, _P.T),
    FluidInputPair.SMassT: (_P.SMass, _P.T),
    FluidInputPair.TUMolar: (_P.T, _P.UMolar),
    FluidInputPair.TUMass: (_P.T, _P.UMass),
    FluidInputPair.DMassP: (_P.DMass, _P.P),
    FluidInputPair.DMolarP: (_P.DMolar, _P.P),
    FluidInputPair.HMassP: (_P.HMass, _P.P),
    FluidInputPair.HMolarP: (_P.HMolar, _P.P),
    FluidInputPair.PSMass: (_P.P, _P.SMass),
    FluidInputPair.PSMolar: (_P.P, _P.SMolar),
    FluidInputPair.PUMass: (_P.P, _P.UMass),
    FluidInputPair.PUMolar: (_P.P, _P.UMolar),
    FluidInputPair.HMassSMass: (_P.HMass, _P.SMass),
    FluidInputPair.HMolarSMolar: (_P.HMolar, _P.SMolar),
    FluidInputPair.SMassUMass: (_P.SMass, _P.UMass),
    FluidInputPair.SMolarUMolar: (_P.SMolar, _P.UMolar),
    FluidInputPair.DMassHMass: (_P.DMass, _P.HMass),
    FluidInputPair.DMolarHMolar: (_P.DMolar, _P.HMolar),
    FluidInputPair.DMassSMass: (_P.DMass, _P.SMass),
    FluidInputPair.DMolarSMolar: (_P.DMolar, _P.SMolar),
    FluidInputPair.DMassUMass: (_P.DMass, _P.UMass),
    FluidInputPair.DMolarUMolar: (_P.DMolar, _P.UMolar),
}

_BY_KEY_SET: Dict[FrozenSet[FluidParam], FluidInputPair] = {
    frozenset(keys): pair for pair, keys in _CANONICAL_KEYS.items()
}


__all__ = ["FluidInputPair"]
