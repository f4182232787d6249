"""Named substances known to the native engine's fluid library."""

from __future__ import annotations

from ..io.names import AliasedEnum


class Pure(AliasedEnum):
    """Pure and pseudo-pure fluids (HEOS backend by default)."""

    Acetone = "Acetone"
    Air = "Air"
    Ammonia = "Ammonia", "NH3", "R717"
    Argon = "Argon", "Ar", "R740"
    Benzene = "Benzene"
    Butene = "1-Butene", "1Butene", "Butene"
    CarbonDioxide = "CarbonDioxide", "CO2", "R744"
    CarbonMonoxide = "CarbonMonoxide", "CO"
    CarbonylSulfide = "CarbonylSulfide", "COS"
    cis2Butene = "cis-2-Butene", "C2BUTENE"
    Cyclohexane = "Cyclohexane", "CYCLOHEX"
    Cyclopentane = "Cyclopentane", "CYCLOPEN"
    Cyclopropane = "Cyclopropane", "CYCLOPRO"
    D4 = "D4", "Octamethylcyclotetrasiloxane"
    D5 = "D5", "Decamethylcyclopentasiloxane"
    D6 = "D6", "Dodecamethylcyclohexasiloxane"
    Deuterium = "Deuterium", "D2"
    Dichloroethane = "Dichloroethane", "1,2-dichloroethane"
    DiethylEther = "DiethylEther", "DEE"
    DimethylCarbonate = "DimethylCarbonate", "DMC"
    DimethylEther = "DimethylEther", "DME"
    Ethane = "Ethane", "n-C2H6", "R170"
    Ethanol = "Ethanol", "C2H6O"
    EthylBenzene = "EthylBenzene", "EBENZENE"
    Ethylene = "Ethylene", "R1150"
    EthyleneOxide = "EthyleneOxide"
    Fluorine = "Fluorine"
    HeavyWater = "HeavyWater", "D2O"
    Helium = "Helium", "He", "R704"
    HFE143m = "HFE143m", "HFE-143m"
    Hydrogen = "Hydrogen", "H2", "R702"
    HydrogenChloride = "HydrogenChloride", "HCl"
    HydrogenSulfide = "HydrogenSulfide", "H2S"
    Isobutane = "Isobutane", "IBUTANE", "R600a"
    Isobutene = "Isobutene", "IBUTENE"
    Isohexane = "Isohexane", "IHEXANE"
    Isopentane = "Isopentane", "IPENTANE", "R601a"
    Krypton = "Krypton"
    MD2M = "MD2M", "Decamethyltetrasiloxane"
    MD3M = "MD3M", "Dodecamethylpentasiloxane"
    MD4M = "MD4M", "Tetradecamethylhexasiloxane"
    MDM = "MDM", "Octamethyltrisiloxane"
    Methane = "Methane", "CH4", "n-C1H4", "R50"
    Methanol = "Methanol"
    MethylLinoleate = "MethylLinoleate", "MLINOLEA"
    MethylLinolenate = "MethylLinolenate", "MLINOLEN"
    MethylOleate = "MethylOleate", "MOLEATE"
    MethylPalmitate = "MethylPalmitate", "MPALMITA"
    MethylStearate = "MethylStearate", "MSTEARAT"
    MM = "MM", "Hexamethyldisiloxane"
    mXylene = "m-Xylene", "mXylene", "MC8H10"
    nButane = "n-Butane", "nButane", "Butane", "NC4H10", "n-C4H10", "R600"
    nDecane = "n-Decane", "nDecane", "Decane", "NC10H22", "n-C10H22"
    nDodecane = "n-Dodecane", "nDodecane", "Dodecane", "NC12H26", "n-C12H26"
    Neon = "Neon", "Ne", "R720"
    Neopentane = "Neopentane"
    nHeptane = "n-Heptane", "nHeptane", "Heptane", "NC7H16", "n-C7H16"
    nHexane = "n-Hexane", "nHexane", "Hexane", "NC6H14", "n-C6H14"
    Nitrogen = "Nitrogen", "N2", "R728"
    NitrousOxide = "NitrousOxide", "N2O"
    nNonane = "n-Nonane", "nNonane", "Nonane", "NC9H20", "n-C9H20"
    nOctane = "n-Octane", "nOctane", "Octane", "NC8H18", "n-C8H18"
    Novec649 = "Novec649", "Novec1230"
    nPentane = "n-Pentane", "nPentane", "Pentane", "NC5H12", "n-C5H12", "R601"
    nPropane = "n-Propane", "nPropane", "Propane", "C3H8", "NC3H8", "n-C3H8", "R290"
    nUndecane = "n-Undecane", "nUndecane", "Undecane", "NC11H24", "n-C11H24"
    OrthoDeuterium = "OrthoDeuterium", "o-D2"
    OrthoHydrogen = "OrthoHydrogen", "o-H2"
    Oxygen = "Oxygen", "O2", "R732"
    oXylene = "o-Xylene", "oXylene", "OC8H10"
    ParaDeuterium = "ParaDeuterium", "p-D2"
    ParaHydrogen = "ParaHydrogen", "p-H2"
    Propylene = "Propylene", "R1270"
    Propyne = "Propyne"
    pXylene = "p-Xylene", "pXylene", "PC8H10"
    SES36 = "SES36"
    SulfurDioxide = "SulfurDioxide", "SO2", "R764"
    SulfurHexafluoride = "SulfurHexafluoride", "SF6", "R846"
    Toluene = "Toluene"
    trans2Butene = "trans-2-Butene", "T2BUTENE"
    Water = "Water", "H2O", "R718"
    Xenon = "Xenon", "Xe"
    R11 = "R11"
    R12 = "R12"
    R13 = "R13"
    R13I1 = "R13I1", "CF3I"
    R14 = "R14"
    R21 = "R21"
    R22 = "R22"
    R23 = "R23"
    R32 = "R32"
    R40 = "R40"
    R41 = "R41"
    R113 = "R113"
    R114 = "R114"
    R115 = "R115"
    R116 = "R116"
    R123 = "R123"
    R124 = "R124"
    R125 = "R125"
    R134a = "R134a"
    R141b = "R141b"
    R142b = "R142b"
    R143a = "R143a"
    RE143a = "RE143a"
    R152a = "R152a"
    R161 = "R161"
    R218 = "R218"
    R227ea = "R227ea"
    R236ea = "R236ea"
    R236fa = "R236fa"
    R245ca = "R245ca"
    R245fa = "R245fa"
    RC318 = "RC318"
    R365mfc = "R365mfc"
    R404A = "R404A"
    R407C = "R407C"
    R410A = "R410A"
    R507A = "R507A"
    R1233zdE = "R1233zd(E)", "R1233zdE"
    R1234yf = "R1234yf"
    R1234zeE = "R1234ze(E)", "R1234zeE"
    R1234zeZ = "R1234ze(Z)", "R1234zeZ"
    R1243zf = "R1243zf"


class IncompPure(AliasedEnum):
    """Incompressible pure liquids (INCOMP backend by default)."""

    AS10 = "AS10"
    AS20 = "AS20"
    AS30 = "AS30"
    AS40 = "AS40"
    AS55 = "AS55"
    DEB = "DEB"
    DowJ = "DowJ"
    DowJ2 = "DowJ2"
    DowQ = "DowQ"
    DowQ2 = "DowQ2"
    DSF = "DSF"
    HC10 = "HC10"
    HC20 = "HC20"
    HC30 = "HC30"
    HC40 = "HC40"
    HC50 = "HC50"
    HCB = "HCB"
    HCM = "HCM"
    HFE = "HFE"
    HFE2 = "HFE2"
    HY20 = "HY20"
    HY30 = "HY30"
    HY40 = "HY40"
    HY45 = "HY45"
    HY50 = "HY50"
    NaK = "NaK"
    NBS = "NBS"
    PBB = "PBB"
    PCL = "PCL"
    PCR = "PCR"
    PGLT = "PGLT"
    PHE = "PHE"
    PHR = "PHR"
    PLR = "PLR"
    PMR = "PMR"
    PMS1 = "PMS1"
    PMS2 = "PMS2"
    PNF = "PNF"
    PNF2 = "PNF2"
    S800 = "S800"
    SAB = "SAB"
    T66 = "T66"
    T72 = "T72"
    TCO = "TCO"
    TD12 = "TD12"
    TVP1 = "TVP1"
    TVP1869 = "TVP1869"
    TX22 = "TX22"
    TY10 = "TY10"
    TY15 = "TY15"
    TY20 = "TY20"
    TY24 = "TY24"
    Water = "Water", "H2O"
    XLT = "XLT"
    XLT2 = "XLT2"
    ZS10 = "ZS10"
    ZS25 = "ZS25"
    ZS40 = "ZS40"
    ZS45 = "ZS45"
    ZS55 = "ZS55"


class PredefinedMix(AliasedEnum):
    """Mixtures with a fixed composition shipped as ``.mix`` files."""

    Air = "Air.mix", "Air"
    Amarillo = "Amarillo.mix", "Amarillo"
    Ekofisk = "Ekofisk.mix", "Ekofisk"
    GulfCoast = "GulfCoast.mix", "GulfCoast"
    GulfCoastGasNIST = "GulfCoastGas(NIST1).mix", "GulfCoastGasNIST"
    HighCO2 = "HighCO2.mix", "HighCO2"
    HighN2 = "HighN2.mix", "HighN2"
    NaturalGasSample = "NaturalGasSample.mix", "NaturalGasSample"
    TypicalNaturalGas = "TypicalNaturalGas.mix", "TypicalNaturalGas", "NaturalGas"
    R401A = "R401A.mix", "R401A"
    R402A = "R402A.mix", "R402A"
    R404AMix = "R404A.mix", "R404AMix"
    R407CMix = "R407C.mix", "R407CMix"
    R410AMix = "R410A.mix", "R410AMix"
    R507AMix = "R507A.mix", "R507AMix"


__all__ = ["IncompPure", "PredefinedMix", "Pure"]
