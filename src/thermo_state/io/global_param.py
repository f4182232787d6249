"""Process-wide string parameters reported by the native engine."""

from __future__ import annotations

from .names import AliasedEnum


class GlobalParam(AliasedEnum):
    Version = "version"
    GitRevision = "gitrevision"
    HomePath = "HOME"
    RefpropVersion = "REFPROP_version"
    PendingError = "errstring"
    PendingWarning = "warnstring"
    PureList = "fluids_list", "FluidsList"
    IncompPureList = "incompressible_list_pure"
    BinaryMixList = "incompressible_list_solution"
    PredefinedMixList = "predefined_mixtures"
    CubicList = "cubic_fluids_list"
    MixBinaryPairsList = "mixture_binary_pairs_list"
    ParamList = "parameter_list"
    CubicJsonSchema = "cubic_fluids_schema"
    PcSaftJsonSchema = "pcsaft_fluids_schema"


__all__ = ["GlobalParam"]
