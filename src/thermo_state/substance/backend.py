"""Native engine backends and the default backend of each substance kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..io.names import AliasedEnum
from .mixes import BinaryMix, CustomMix
from .pure import IncompPure, PredefinedMix, Pure

Substance = Union[Pure, IncompPure, PredefinedMix, BinaryMix, CustomMix]


class BaseBackend(AliasedEnum):
    Heos = "HEOS"
    Refprop = "REFPROP"
    Incomp = "INCOMP"
    If97 = "IF97"
    Srk = "SRK"
    Pr = "PR"
    VtPr = "VTPR"
    PcSaft = "PCSAFT"

    def with_method(self, method: "TabularMethod") -> "Backend":
        return Backend(self, method)


class TabularMethod(AliasedEnum):
    """Interpolation scheme used on top of a base backend."""

    Ttse = "TTSE"
    Bicubic = "BICUBIC"


@dataclass(frozen=True)
class Backend:
    """Base backend with an optional tabular interpolation method."""

    base: BaseBackend
    method: Optional[TabularMethod] = None

    @property
    def name(self) -> str:
        """Name understood by the engine, e.g. ``HEOS`` or ``TTSE&HEOS``."""

        if self.method is None:
            return str(self.base)
        return f"{self.method}&{self.base}"

    def __str__(self) -> str:
        return self.name


def default_backend(substance: Substance) -> Backend:
    """Return the backend a substance uses when none is given."""

    if isinstance(substance, (IncompPure, BinaryMix)):
        return Backend(BaseBackend.Incomp)
    return Backend(BaseBackend.Heos)


__all__ = ["BaseBackend", "Backend", "Substance", "TabularMethod", "default_backend"]
