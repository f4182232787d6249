"""Per-state output memoisation and physical-validity guards."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .errors import ThermoStateError, UnavailableOutputError

logger = logging.getLogger(__name__)

CACHE_SLOTS = 256

Outcome = Union[float, ThermoStateError]


def is_finite(value: float) -> bool:
    return math.isfinite(value)


def is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0.0


def is_non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0.0


def is_fraction(value: float) -> bool:
    return math.isfinite(value) and 0.0 <= value <= 1.0


def guard(key: object, value: float, predicate: Callable[[float], bool] = is_finite) -> float:
    """Return *value* if it satisfies *predicate*, else raise :class:`UnavailableOutputError`."""

    if predicate(value):
        return value
    raise UnavailableOutputError(key)


class OutputCache:
    """Fixed-size table of computed outputs indexed by key discriminant.

    A slot holds either the float result or the domain error of the first
    computation for that key. Cached errors are re-raised as fresh copies.
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: List[Optional[Outcome]] = [None] * CACHE_SLOTS

    def get_or_compute(self, key: int, compute: Callable[[], float]) -> float:
        outcome = self._slots[key]
        if outcome is None:
            logger.debug("Cache miss for %s", key)
            try:
                value = float(compute())
            except ThermoStateError as exc:
                self._slots[key] = exc.clone()
                raise
            self._slots[key] = value
            return value
        if isinstance(outcome, ThermoStateError):
            raise outcome.clone()
        return outcome

    def seed(self, key: int, value: float) -> None:
        self._slots[key] = float(value)

    def clear(self) -> None:
        self._slots = [None] * CACHE_SLOTS

    def copy(self) -> "OutputCache":
        other = OutputCache()
        other._slots = [outcome.clone() if isinstance(outcome, ThermoStateError) else outcome for outcome in self._slots]
        return other

    def items(self) -> Iterator[Tuple[int, Outcome]]:
        for index, outcome in enumerate(self._slots):
            if outcome is not None:
                yield index, outcome

    def __contains__(self, key: int) -> bool:
        return self._slots[key] is not None

    def __len__(self) -> int:
        return sum(1 for outcome in self._slots if outcome is not None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputCache):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OutputCache({dict(self.items())!r})"


__all__ = [
    "CACHE_SLOTS",
    "OutputCache",
    "guard",
    "is_finite",
    "is_fraction",
    "is_non_negative",
    "is_positive",
]
