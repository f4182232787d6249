"""Exception hierarchy shared by every state object and the native boundary."""

from __future__ import annotations

import copy
from typing import Any


def _restore(cls: type, args: tuple[Any, ...], state: dict[str, Any]) -> "ThermoStateError":
    error = cls.__new__(cls, *args)
    error.__dict__.update(state)
    return error


class ThermoStateError(Exception):
    """Base class for every error raised by this package."""

    def __reduce__(self) -> Any:
        # Subclass constructors take structured arguments, not the message.
        return _restore, (type(self), self.args, dict(self.__dict__))

    def clone(self) -> "ThermoStateError":
        """Return an independent copy without the traceback of this instance."""

        return copy.copy(self).with_traceback(None)


class NativeError(ThermoStateError):
    """Error string reported by the native property engine, kept verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NativeError) and other.message == self.message

    def __hash__(self) -> int:
        return hash(self.message)


class UnknownNameError(ThermoStateError, ValueError):
    """Raised when a name does not match any member of an aliased enumeration."""

    def __init__(self, enum_name: str, name: str) -> None:
        super().__init__(f"'{name}' is not a valid {enum_name} name")
        self.enum_name = enum_name
        self.name = name


# ----------------------------------------------------------------------
# Input construction
# ----------------------------------------------------------------------
class AltitudeError(ThermoStateError, ValueError):
    """Raised when an altitude lies outside the barometric model's range."""

    def __init__(self, value: float, lower: float, upper: float) -> None:
        super().__init__(f"Altitude {value!r} m is out of possible range [{lower:g}; {upper:g}] m")
        self.value = value


class BinaryMixError(ThermoStateError, ValueError):
    """Raised when a binary mixture fraction falls outside its kind's limits."""

    def __init__(self, specified: float, minimum: float, maximum: float) -> None:
        super().__init__(
            f"Specified fraction ({specified * 100.0!r} %) is out of possible range "
            f"[{minimum * 100.0:.1f}; {maximum * 100.0:.1f}] %"
        )
        self.specified = specified
        self.minimum = minimum
        self.maximum = maximum


class CustomMixError(ThermoStateError, ValueError):
    """Raised for an invalid custom mixture composition."""

    NOT_ENOUGH_COMPONENTS = "At least 2 unique components must be provided"
    INVALID_FRACTION = "All of the specified fractions must be exclusive between 0 and 100 %"
    INVALID_FRACTIONS_SUM = "The sum of the specified fractions must be equal to 100 %"


class UnsupportedMixError(ThermoStateError):
    """Raised when the native engine refuses a custom mixture."""

    def __init__(self, cause: NativeError) -> None:
        super().__init__(f"Specified custom mixture is not supported! {cause}")
        self.cause = cause


class ConfigError(ThermoStateError, ValueError):
    """Raised for an unknown configuration key or a value of the wrong type."""


# ----------------------------------------------------------------------
# State definition
# ----------------------------------------------------------------------
class StateError(ThermoStateError):
    """Base class for failures while defining or updating a state."""


class InvalidInputPairError(StateError, ValueError):
    """Raised when two fluid inputs do not form a supported, distinct pair."""

    def __init__(self, key1: Any, key2: Any) -> None:
        super().__init__(f"Specified inputs ({key1!s}, {key2!s}) are invalid")
        self.keys = (key1, key2)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidInputPairError) and other.keys == self.keys

    def __hash__(self) -> int:
        return hash(self.keys)


class InvalidInputsError(StateError, ValueError):
    """Raised when three humid air inputs do not have pairwise distinct keys."""

    def __init__(self, key1: Any, key2: Any, key3: Any) -> None:
        super().__init__(f"Specified inputs ({key1!s}, {key2!s}, {key3!s}) are invalid")
        self.keys = (key1, key2, key3)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidInputsError) and other.keys == self.keys

    def __hash__(self) -> int:
        return hash(self.keys)


class InvalidInputValueError(StateError, ValueError):
    """Raised when any input value is NaN or infinite."""

    def __init__(self) -> None:
        super().__init__("Input values must be finite")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidInputValueError)

    def __hash__(self) -> int:
        return hash(type(self))


class UpdateFailedError(StateError):
    """Raised when the native engine rejects an otherwise valid request."""

    def __init__(self, cause: NativeError) -> None:
        super().__init__(f"Failed to update the fluid state! {cause}")
        self.cause = cause


# ----------------------------------------------------------------------
# Outputs
# ----------------------------------------------------------------------
class OutputError(ThermoStateError):
    """Base class for failures while computing an output parameter."""

    def __init__(self, message: str, key: Any) -> None:
        super().__init__(message)
        self.key = key


class UnavailableOutputError(OutputError):
    """The engine answered, but the value is not physical for *key*."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Specified output parameter '{key!s}' is not available", key)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnavailableOutputError) and other.key == self.key

    def __hash__(self) -> int:
        return hash((type(self), self.key))


class CalculationFailedError(OutputError):
    """The engine raised an error while computing *key*."""

    def __init__(self, key: Any, cause: NativeError) -> None:
        super().__init__(f"Failed to calculate the output value of '{key!s}'! {cause}", key)
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CalculationFailedError) and (other.key, other.cause) == (self.key, self.cause)

    def __hash__(self) -> int:
        return hash((type(self), self.key, self.cause))


__all__ = [
    "AltitudeError",
    "BinaryMixError",
    "CalculationFailedError",
    "ConfigError",
    "CustomMixError",
    "InvalidInputPairError",
    "InvalidInputValueError",
    "InvalidInputsError",
    "NativeError",
    "OutputError",
    "StateError",
    "ThermoStateError",
    "UnavailableOutputError",
    "UnknownNameError",
    "UnsupportedMixError",
    "UpdateFailedError",
]
