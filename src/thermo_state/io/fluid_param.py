"""Fluid input/output parameter keys.

Discriminants are shared with the native engine's parameter table layout so
that the two enumerations below never collide; the output cache uses them as
slot indices.
"""

from __future__ import annotations

from .names import AliasedIntEnum


class FluidParam(AliasedIntEnum):
    """State-dependent fluid parameters (SI units)."""

    T = 19, "T"
    P = 20, "P"
    Q = 21, "Q"
    Tau = 22, "Tau"
    Delta = 23, "Delta"
    DMolar = 24, "Dmolar"
    HMolar = 25, "Hmolar"
    SMolar = 26, "Smolar"
    CpMolar = 27, "Cpmolar"
    Cp0Molar = 28, "Cp0molar"
    CvMolar = 29, "Cvmolar"
    UMolar = 30, "Umolar"
    GMolar = 31, "Gmolar"
    HelmholtzMolar = 32, "Helmholtzmolar"
    HMolarResidual = 33, "Hmolar_residual"
    SMolarResidual = 34, "Smolar_residual"
    GMolarResidual = 35, "Gmolar_residual"
    DMass = 36, "Dmass", "D"
    HMass = 37, "Hmass", "H"
    SMass = 38, "Smass", "S"
    CpMass = 39, "Cpmass", "C"
    Cp0Mass = 40, "Cp0mass"
    CvMass = 41, "Cvmass", "O"
    UMass = 42, "Umass", "U"
    GMass = 43, "Gmass", "G"
    HelmholtzMass = 44, "Helmholtzmass"
    DynamicViscosity = 45, "viscosity", "V"
    Conductivity = 46, "conductivity", "L"
    SurfaceTension = 47, "surface_tension", "I"
    Prandtl = 48, "Prandtl"
    SoundSpeed = 49, "speed_of_sound", "speed_sound", "A"
    IsothermalCompressibility = 50, "isothermal_compressibility"
    IsobaricExpansionCoefficient = 51, "isobaric_expansion_coefficient"
    IsentropicExpansionCoefficient = 52, "isentropic_expansion_coefficient"
    FundamentalDerivativeOfGasDynamics = 53, "fundamental_derivative_of_gas_dynamics"
    AlphaR = 54, "alphar"
    DAlphaRDTauConstDelta = 55, "dalphar_dtau_constdelta"
    DAlphaRDDeltaConstTau = 56, "dalphar_ddelta_consttau"
    Alpha0 = 57, "alpha0"
    DAlpha0DTauConstDelta = 58, "dalpha0_dtau_constdelta"
    DAlpha0DDeltaConstTau = 59, "dalpha0_ddelta_consttau"
    D2Alpha0DDelta2ConstTau = 60, "d2alpha0_ddelta2_consttau"
    D3Alpha0DDelta3ConstTau = 61, "d3alpha0_ddelta3_consttau"
    BVirial = 62, "Bvirial"
    CVirial = 63, "Cvirial"
    DBVirialDT = 64, "dBvirial_dT"
    DCVirialDT = 65, "dCvirial_dT"
    Z = 66, "Z"
    PIP = 67, "PIP"
    Phase = 78, "Phase"


class FluidTrivialParam(AliasedIntEnum):
    """State-independent fluid parameters (SI units)."""

    GasConstant = 1, "gas_constant"
    MolarMass = 2, "molar_mass", "M", "molarmass", "molemass"
    AcentricFactor = 3, "acentric", "acentric_factor"
    DMolarReducing = 4, "rhomolar_reducing"
    DMolarCritical = 5, "rhomolar_critical"
    TReducing = 6, "T_reducing"
    TCritical = 7, "T_critical", "Tcrit"
    DMassReducing = 8, "rhomass_reducing"
    DMassCritical = 9, "rhomass_critical", "rhocrit"
    PCritical = 10, "p_critical", "P_critical", "Pcrit"
    PReducing = 11, "p_reducing", "P_reducing"
    TTriple = 12, "T_triple", "Ttriple"
    PTriple = 13, "p_triple", "P_triple", "Ptriple"
    TMin = 14, "T_min", "Tmin"
    TMax = 15, "T_max", "Tmax"
    PMax = 16, "P_max", "Pmax"
    PMin = 17, "P_min", "Pmin"
    DipoleMoment = 18, "dipole_moment"
    MinFraction = 68, "fraction_min"
    MaxFraction = 69, "fraction_max"
    TFreeze = 70, "T_freeze"
    GWP20 = 71, "GWP20"
    GWP100 = 72, "GWP100"
    GWP500 = 73, "GWP500"
    FH = 74, "FH"
    HH = 75, "HH"
    PH = 76, "PH"
    ODP = 77, "ODP"


__all__ = ["FluidParam", "FluidTrivialParam"]
