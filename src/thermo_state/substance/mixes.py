"""Binary incompressible solutions and user-defined mixtures of pure fluids."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple

from ..errors import BinaryMixError, CustomMixError
from ..io.fluid_param import FluidTrivialParam
from ..io.names import AliasedEnum
from ..native import AbstractState
from .pure import Pure

logger = logging.getLogger(__name__)

FRACTIONS_SUM_TOLERANCE = 1e-6


class BinaryMixKind(AliasedEnum):
    """Incompressible binary solutions with their valid fraction range.

    Declared as ``NAME = "name", min_fraction, max_fraction``.
    """

    def __new__(cls, value: str, min_fraction: float, max_fraction: float):
        member = object.__new__(cls)
        member._value_ = value
        member.names = (value,)
        member.min_fraction = min_fraction
        member.max_fraction = max_fraction
        return member

    FRE = "FRE", 0.19, 0.5
    IceEA = "IceEA", 0.05, 0.35
    IceNA = "IceNA", 0.05, 0.35
    IcePG = "IcePG", 0.05, 0.35
    LiBr = "LiBr", 0.0, 0.75
    MAM = "MAM", 0.0, 0.3
    MAM2 = "MAM2", 0.078, 0.236
    MCA = "MCA", 0.0, 0.3
    MCA2 = "MCA2", 0.09, 0.294
    MEA = "MEA", 0.0, 0.6
    MEA2 = "MEA2", 0.11, 0.6
    MEG = "MEG", 0.0, 0.6
    MEG2 = "MEG2", 0.0, 0.56
    MGL = "MGL", 0.0, 0.6
    MGL2 = "MGL2", 0.195, 0.63
    MITSW = "MITSW", 0.0, 0.12
    MKA = "MKA", 0.0, 0.45
    MKA2 = "MKA2", 0.11, 0.41
    MKC = "MKC", 0.0, 0.4
    MKC2 = "MKC2", 0.0, 0.39
    MKF = "MKF", 0.0, 0.48
    MLI = "MLI", 0.0, 0.24
    MMA = "MMA", 0.0, 0.6
    MMA2 = "MMA2", 0.078, 0.474
    MMG = "MMG", 0.0, 0.3
    MMG2 = "MMG2", 0.0, 0.205
    MNA = "MNA", 0.0, 0.23
    MNA2 = "MNA2", 0.0, 0.23
    MPG = "MPG", 0.0, 0.6
    MPG2 = "MPG2", 0.15, 0.57
    VCA = "VCA", 0.147, 0.299
    VKC = "VKC", 0.128, 0.389
    VMA = "VMA", 0.1, 0.9
    VMG = "VMG", 0.072, 0.206
    VNA = "VNA", 0.07, 0.231
    AEG = "AEG", 0.1, 0.6
    AKF = "AKF", 0.4, 1.0
    AL = "AL", 0.1, 0.6
    AN = "AN", 0.1, 0.6
    APG = "APG", 0.1, 0.6
    GKN = "GKN", 0.1, 0.6
    PK2 = "PK2", 0.3, 1.0
    PKL = "PKL", 0.1, 0.6
    ZAC = "ZAC", 0.06, 0.5
    ZFC = "ZFC", 0.3, 0.6
    ZLC = "ZLC", 0.3, 0.7
    ZM = "ZM", 0.0, 1.0
    ZMC = "ZMC", 0.3, 0.7

    def with_fraction(self, fraction: float) -> "BinaryMix":
        """Return a :class:`BinaryMix` of this kind, validating *fraction*."""

        return BinaryMix(self, fraction)


@dataclass(frozen=True)
class BinaryMix:
    """Binary incompressible solution with the solute's fraction in [0, 1]."""

    kind: BinaryMixKind
    fraction: float

    def __post_init__(self) -> None:
        if not self.kind.min_fraction <= self.fraction <= self.kind.max_fraction:
            raise BinaryMixError(self.fraction, self.kind.min_fraction, self.kind.max_fraction)

    def with_fraction(self, fraction: float) -> "BinaryMix":
        return BinaryMix(self.kind, fraction)

    def __str__(self) -> str:
        return str(self.kind)


class FractionBasis(Enum):
    MOLE = "mole"
    MASS = "mass"


@dataclass(frozen=True)
class CustomMix:
    """Mixture of at least two pure fluids in arbitrary proportions.

    Build one through :meth:`mole_based` or :meth:`mass_based`; both reject
    fewer than two components, any fraction outside the open interval
    (0, 1) and fractions that do not sum to 1.
    """

    components: Tuple[Tuple[Pure, float], ...]
    basis: FractionBasis = FractionBasis.MOLE

    def __post_init__(self) -> None:
        _validate(self.components)
        ordered = sorted(((pure, float(fraction)) for pure, fraction in self.components), key=lambda item: item[0].value)
        object.__setattr__(self, "components", tuple(ordered))

    @classmethod
    def mole_based(cls, components: Mapping[Pure, float]) -> "CustomMix":
        return cls(tuple(components.items()), FractionBasis.MOLE)

    @classmethod
    def mass_based(cls, components: Mapping[Pure, float]) -> "CustomMix":
        return cls(tuple(components.items()), FractionBasis.MASS)

    def as_dict(self) -> Dict[Pure, float]:
        return dict(self.components)

    def to_mole_based(self) -> "CustomMix":
        """Convert mass fractions to mole fractions using each component's molar mass."""

        if self.basis is FractionBasis.MOLE:
            return self
        moles = [(pure, fraction / _molar_mass(pure)) for pure, fraction in self.components]
        total = sum(amount for _, amount in moles)
        return CustomMix(tuple((pure, amount / total) for pure, amount in moles), FractionBasis.MOLE)

    def __str__(self) -> str:
        return "&".join(str(pure) for pure, _ in self.components)


def _validate(components: Tuple[Tuple[Pure, float], ...]) -> None:
    unique = {pure for pure, _ in components}
    if len(unique) < 2 or len(unique) != len(components):
        raise CustomMixError(CustomMixError.NOT_ENOUGH_COMPONENTS)
    if any(not 0.0 < fraction < 1.0 for _, fraction in components):
        raise CustomMixError(CustomMixError.INVALID_FRACTION)
    if abs(sum(fraction for _, fraction in components) - 1.0) > FRACTIONS_SUM_TOLERANCE:
        raise CustomMixError(CustomMixError.INVALID_FRACTIONS_SUM)


def _molar_mass(pure: Pure) -> float:
    handle = AbstractState("HEOS", str(pure))
    value = handle.keyed_output(FluidTrivialParam.MolarMass)
    logger.debug("Molar mass of %s: %s kg/mol", pure, value)
    return value


__all__ = ["BinaryMix", "BinaryMixKind", "CustomMix", "FractionBasis"]
