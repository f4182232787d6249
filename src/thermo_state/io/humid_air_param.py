"""Humid air input/output parameter keys."""

from __future__ import annotations

from .names import AliasedIntEnum


class HumidAirParam(AliasedIntEnum):
    """Psychrometric parameters understood by ``HAPropsSI`` (SI units).

    The first name is the one passed to the engine; the rest are aliases
    accepted by :meth:`parse`.
    """

    TWetBulb = 0, "B", "Twb", "T_wb", "WetBulb"
    Cpda = 1, "C", "Cp", "Cp_da"
    Cpha = 2, "Cha", "Cp_ha"
    Cvda = 3, "CV", "Cv_da"
    Cvha = 4, "CVha", "Cv_ha"
    TDew = 5, "D", "Tdp", "T_dp", "DewPoint"
    Hda = 6, "H", "H_da", "Enthalpy"
    Hha = 7, "Hha", "H_ha"
    Conductivity = 8, "K"
    DynamicViscosity = 9, "M", "Visc", "mu", "viscosity"
    PsiW = 10, "psi_w", "Y"
    P = 11, "P", "Pressure"
    Pw = 12, "P_w"
    R = 13, "R", "RH", "RelHum"
    Sda = 14, "S", "S_da", "Entropy"
    Sha = 15, "Sha", "S_ha"
    T = 16, "T", "Tdb", "T_db", "Temperature"
    Vda = 17, "V", "V_da"
    Vha = 18, "Vha", "V_ha"
    W = 19, "W", "Omega", "HumRat"
    Z = 20, "Z", "Compressibility"


__all__ = ["HumidAirParam"]
