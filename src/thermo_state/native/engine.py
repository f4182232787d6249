"""Native property engine protocol and its CoolProp implementation."""

from __future__ import annotations

import json
import math
from contextlib import contextmanager
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterator, Protocol, Sequence

import CoolProp.CoolProp as CP

from ..errors import NativeError

INVALID_STATE_MESSAGE = "Unable to get the output with key '{key}' due to invalid or undefined state!"


class NativeEngine(Protocol):
    """Protocol implemented by native thermophysical property engines.

    Keys, pairs and phases are passed as the engine's canonical names
    (``"Dmass"``, ``"HmassP"``, ``"phase_gas"``). Every failure is raised as
    :class:`~thermo_state.errors.NativeError`.
    """

    def factory(self, backend_name: str, fluid_name: str) -> Any:
        ...

    def set_fractions(self, handle: Any, fractions: Sequence[float]) -> None:
        ...

    def update(self, handle: Any, input_pair: str, value1: float, value2: float) -> None:
        ...

    def keyed_output(self, handle: Any, key: str) -> float:
        ...

    def specify_phase(self, handle: Any, phase: str) -> None:
        ...

    def unspecify_phase(self, handle: Any) -> None:
        ...

    def ha_props_si(
        self,
        output: str,
        key1: str,
        value1: float,
        key2: str,
        value2: float,
        key3: str,
        value3: float,
    ) -> float:
        ...

    def set_config(self, key: str, value: Any) -> None:
        ...

    def global_param(self, name: str) -> str:
        ...


@contextmanager
def _translated() -> Iterator[None]:
    try:
        yield
    except (ValueError, RuntimeError) as exc:
        raise NativeError(str(exc).strip()) from exc


@lru_cache(maxsize=None)
def _parameter_index(key: str) -> int:
    with _translated():
        return CP.get_parameter_index(key)


@lru_cache(maxsize=None)
def _input_pair_index(input_pair: str) -> int:
    try:
        return getattr(CP, f"{input_pair}_INPUTS")
    except AttributeError:
        raise NativeError(f"Unknown input pair '{input_pair}'") from None


@lru_cache(maxsize=None)
def _phase_index(phase: str) -> int:
    try:
        return getattr(CP, f"i{phase}")
    except AttributeError:
        raise NativeError(f"Unknown phase '{phase}'") from None


@dataclass
class CoolPropEngine:
    """CoolProp-backed property engine."""

    def factory(self, backend_name: str, fluid_name: str) -> Any:
        with _translated():
            return CP.AbstractState(backend_name, fluid_name)

    def set_fractions(self, handle: Any, fractions: Sequence[float]) -> None:
        # Incompressible solutions take mass or volume fractions, mixtures mole fractions.
        with _translated():
            if handle.using_mole_fractions():
                handle.set_mole_fractions(list(fractions))
            elif handle.using_mass_fractions():
                handle.set_mass_fractions(list(fractions))
            else:
                handle.set_volu_fractions(list(fractions))

    def update(self, handle: Any, input_pair: str, value1: float, value2: float) -> None:
        index = _input_pair_index(input_pair)
        with _translated():
            handle.update(index, value1, value2)

    def keyed_output(self, handle: Any, key: str) -> float:
        index = _parameter_index(key)
        with _translated():
            value = float(handle.keyed_output(index))
        if not math.isfinite(value):
            raise NativeError(INVALID_STATE_MESSAGE.format(key=key))
        return value

    def specify_phase(self, handle: Any, phase: str) -> None:
        index = _phase_index(phase)
        with _translated():
            handle.specify_phase(index)

    def unspecify_phase(self, handle: Any) -> None:
        with _translated():
            handle.unspecify_phase()

    def ha_props_si(
        self,
        output: str,
        key1: str,
        value1: float,
        key2: str,
        value2: float,
        key3: str,
        value3: float,
    ) -> float:
        with _translated():
            value = float(CP.HAPropsSI(output, key1, value1, key2, value2, key3, value3))
        if not math.isfinite(value):
            raise NativeError(CP.get_global_param_string("errstring") or "Unknown error")
        return value

    def set_config(self, key: str, value: Any) -> None:
        with _translated():
            CP.set_config_as_json_string(json.dumps({key: value}))

    def global_param(self, name: str) -> str:
        with _translated():
            return CP.get_global_param_string(name)


__all__ = ["CoolPropEngine", "INVALID_STATE_MESSAGE", "NativeEngine"]
