"""Shared fixtures: a call-counting stand-in for the native engine."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from thermo_state import config, native
from thermo_state.errors import NativeError


@dataclass
class FakeHandle:
    backend_name: str
    fluid_name: str
    fractions: Optional[Tuple[float, ...]] = None
    state: Optional[Tuple[str, float, float]] = None
    phase: Optional[str] = None
    history: List[Tuple[str, float, float]] = field(default_factory=list)


@dataclass
class FakeEngine:
    """Records every native call and answers from configurable tables."""

    outputs: Dict[str, float] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    rejected_values: set = field(default_factory=set)
    rejected_fluids: set = field(default_factory=set)
    config: Dict[str, Any] = field(default_factory=dict)
    config_calls: List[Tuple[str, Any]] = field(default_factory=list)
    calls: Counter = field(default_factory=Counter)
    handles: List[FakeHandle] = field(default_factory=list)

    def factory(self, backend_name: str, fluid_name: str) -> FakeHandle:
        self.calls["factory"] += 1
        if fluid_name in self.rejected_fluids:
            raise NativeError(f"Unable to load fluid '{fluid_name}'")
        handle = FakeHandle(backend_name, fluid_name)
        self.handles.append(handle)
        return handle

    def set_fractions(self, handle: FakeHandle, fractions: Sequence[float]) -> None:
        self.calls["set_fractions"] += 1
        handle.fractions = tuple(fractions)

    def update(self, handle: FakeHandle, input_pair: str, value1: float, value2: float) -> None:
        self.calls["update"] += 1
        handle.history.append((input_pair, value1, value2))
        if value1 in self.rejected_values or value2 in self.rejected_values:
            handle.state = None
            raise NativeError("Input values are out of range")
        handle.state = (input_pair, value1, value2)

    def keyed_output(self, handle: FakeHandle, key: str) -> float:
        self.calls[key] += 1
        if handle.state is None and key in {"T", "P", "Dmass", "Cpmass"}:
            raise NativeError(native.INVALID_STATE_MESSAGE.format(key=key))
        if key in self.errors:
            raise NativeError(self.errors[key])
        return self.outputs.get(key, 1.0)

    def specify_phase(self, handle: FakeHandle, phase: str) -> None:
        self.calls["specify_phase"] += 1
        handle.phase = phase

    def unspecify_phase(self, handle: FakeHandle) -> None:
        self.calls["unspecify_phase"] += 1
        handle.phase = None

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
        self.calls[output] += 1
        self.calls[("ha_inputs", key1, key2, key3)] += 1
        if output in self.errors:
            raise NativeError(self.errors[output])
        return self.outputs.get(output, 1.0)

    def set_config(self, key: str, value: Any) -> None:
        self.config_calls.append((key, value))
        self.config[key] = value

    def global_param(self, name: str) -> str:
        return {"version": "6.6.0"}.get(name, "")


@pytest.fixture
def engine():
    fake = FakeEngine()
    previous = native.install(fake)
    yield fake
    native.install(previous)


@pytest.fixture
def default_config(monkeypatch):
    monkeypatch.setattr(config, "_CURRENT", config.Config())
    return config.read()
