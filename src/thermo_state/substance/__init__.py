"""Substances: pure fluids, incompressible liquids and mixtures."""

from .backend import BaseBackend, Backend, Substance, TabularMethod, default_backend
from .mixes import BinaryMix, BinaryMixKind, CustomMix, FractionBasis
from .pure import IncompPure, PredefinedMix, Pure

__all__ = [
    "BaseBackend",
    "Backend",
    "BinaryMix",
    "BinaryMixKind",
    "CustomMix",
    "FractionBasis",
    "IncompPure",
    "PredefinedMix",
    "Pure",
    "Substance",
    "TabularMethod",
    "default_backend",
]
