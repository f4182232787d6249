"""Serialised access to the process-wide native property engine.

The engine is created on first use and never torn down. Every call into it
goes through :func:`session`, which holds one global re-entrant lock for the
duration of the call.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from ..io.fluid_input_pair import FluidInputPair
from ..io.fluid_param import FluidParam, FluidTrivialParam
from ..io.global_param import GlobalParam
from ..io.humid_air_param import HumidAirParam
from ..io.inputs import HumidAirInput
from ..io.phase import Phase
from .engine import INVALID_STATE_MESSAGE, CoolPropEngine, NativeEngine

logger = logging.getLogger(__name__)

_LOCK = threading.RLock()
_ENGINE: Optional[NativeEngine] = None


@contextmanager
def session() -> Iterator[NativeEngine]:
    """Yield the process-wide engine while holding the native lock."""

    global _ENGINE
    with _LOCK:
        if _ENGINE is None:
            _ENGINE = CoolPropEngine()
            logger.debug("Native engine initialised: %s", type(_ENGINE).__name__)
        yield _ENGINE


def install(engine: Optional[NativeEngine]) -> Optional[NativeEngine]:
    """Replace the process-wide engine and return the previous one.

    Passing ``None`` makes the next :func:`session` create a fresh
    :class:`CoolPropEngine`.
    """

    global _ENGINE
    with _LOCK:
        previous, _ENGINE = _ENGINE, engine
    return previous


class AbstractState:
    """Native state handle owned by exactly one state object."""

    def __init__(self, backend_name: str, fluid_name: str) -> None:
        with session() as engine:
            self._handle = engine.factory(backend_name, fluid_name)
        self.backend_name = backend_name
        self.fluid_name = fluid_name
        logger.debug("Created native handle %s::%s", backend_name, fluid_name)

    def set_fractions(self, fractions: Sequence[float]) -> None:
        with session() as engine:
            engine.set_fractions(self._handle, fractions)

    def update(self, input_pair: FluidInputPair, value1: float, value2: float) -> None:
        with session() as engine:
            engine.update(self._handle, str(input_pair), value1, value2)

    def keyed_output(self, key: Union[FluidParam, FluidTrivialParam]) -> float:
        with session() as engine:
            return engine.keyed_output(self._handle, str(key))

    def specify_phase(self, phase: Phase) -> None:
        with session() as engine:
            engine.specify_phase(self._handle, str(phase))

    def unspecify_phase(self) -> None:
        with session() as engine:
            engine.unspecify_phase(self._handle)

    def __repr__(self) -> str:
        return f"AbstractState({self.backend_name!r}, {self.fluid_name!r})"


def ha_props_si(
    output: HumidAirParam,
    input1: HumidAirInput,
    input2: HumidAirInput,
    input3: HumidAirInput,
) -> float:
    """Evaluate one humid air property from three inputs."""

    with session() as engine:
        return engine.ha_props_si(
            str(output),
            str(input1.key),
            input1.value,
            str(input2.key),
            input2.value,
            str(input3.key),
            input3.value,
        )


def global_param(name: Union[GlobalParam, str]) -> str:
    """Return a global string parameter such as ``version`` or ``fluids_list``."""

    with session() as engine:
        return engine.global_param(str(name))


__all__ = [
    "AbstractState",
    "CoolPropEngine",
    "INVALID_STATE_MESSAGE",
    "NativeEngine",
    "global_param",
    "ha_props_si",
    "install",
    "session",
]
