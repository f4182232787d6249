"""Validation and canonicalisation of fluid create and update requests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Collection, Optional, Tuple

from ..errors import InvalidInputPairError, InvalidInputValueError
from ..io.fluid_input_pair import FluidInputPair
from ..io.inputs import FluidInput
from ..substance import Backend, BinaryMix, CustomMix, Substance, default_backend

# Pairs a custom mixture's native handle can be flashed with.
CUSTOM_MIX_PAIRS = frozenset((FluidInputPair.PQ, FluidInputPair.QT, FluidInputPair.PT))


@dataclass(frozen=True)
class FluidUpdateRequest:
    """Canonical update request: the pair plus values in the pair's key order."""

    input_pair: FluidInputPair
    value1: float
    value2: float

    def inputs(self) -> Tuple[FluidInput, FluidInput]:
        key1, key2 = self.input_pair.keys
        return FluidInput(key1, self.value1), FluidInput(key2, self.value2)


def resolve_fluid_request(
    input1: FluidInput,
    input2: FluidInput,
    *,
    allowed_pairs: Optional[Collection[FluidInputPair]] = None,
) -> FluidUpdateRequest:
    """Turn two inputs given in any order into a canonical update request.

    Raises:
        InvalidInputPairError: identical keys, an unsupported combination, or
            a pair outside *allowed_pairs*.
        InvalidInputValueError: either value is NaN or infinite.
    """

    input_pair = FluidInputPair.from_keys(input1.key, input2.key)
    if input_pair is None:
        raise InvalidInputPairError(input1.key, input2.key)
    if not (math.isfinite(input1.value) and math.isfinite(input2.value)):
        raise InvalidInputValueError()
    if allowed_pairs is not None and input_pair not in allowed_pairs:
        raise InvalidInputPairError(input1.key, input2.key)
    if input_pair.keys[0] == input1.key:
        return FluidUpdateRequest(input_pair, input1.value, input2.value)
    return FluidUpdateRequest(input_pair, input2.value, input1.value)


@dataclass(frozen=True)
class FluidCreateRequest:
    """Everything the native engine needs to create a handle for a substance."""

    substance_name: str
    backend_name: str
    fractions: Optional[Tuple[float, ...]] = None

    @classmethod
    def new(cls, substance: Substance, backend: Optional[Backend] = None) -> "FluidCreateRequest":
        backend_name = (backend or default_backend(substance)).name
        if isinstance(substance, BinaryMix):
            return cls(str(substance.kind), backend_name, (substance.fraction,))
        if isinstance(substance, CustomMix):
            mix = substance.to_mole_based()
            return cls(str(mix), backend_name, tuple(fraction for _, fraction in mix.components))
        return cls(str(substance), backend_name)


__all__ = ["CUSTOM_MIX_PAIRS", "FluidCreateRequest", "FluidUpdateRequest", "resolve_fluid_request"]
