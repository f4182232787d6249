"""Validation and canonicalisation of humid air update requests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..errors import InvalidInputsError, InvalidInputValueError
from ..io.inputs import HumidAirInput


@dataclass(frozen=True)
class HumidAirUpdateRequest:
    """Three humid air inputs with distinct keys, ordered by key discriminant."""

    input1: HumidAirInput
    input2: HumidAirInput
    input3: HumidAirInput

    def inputs(self) -> Tuple[HumidAirInput, HumidAirInput, HumidAirInput]:
        return self.input1, self.input2, self.input3


def resolve_humid_air_request(
    input1: HumidAirInput,
    input2: HumidAirInput,
    input3: HumidAirInput,
) -> HumidAirUpdateRequest:
    """Validate three inputs given in any order and return the canonical request.

    Raises:
        InvalidInputsError: two or more inputs share a key. The error lists
            the keys in the order they were passed.
        InvalidInputValueError: any value is NaN or infinite.
    """

    given = (input1, input2, input3)
    if len({item.key for item in given}) != 3:
        raise InvalidInputsError(input1.key, input2.key, input3.key)
    if not all(math.isfinite(item.value) for item in given):
        raise InvalidInputValueError()
    return HumidAirUpdateRequest(*sorted(given, key=lambda item: int(item.key)))


__all__ = ["HumidAirUpdateRequest", "resolve_humid_air_request"]
