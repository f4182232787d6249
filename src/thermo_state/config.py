"""Process-wide native engine configuration.

The engine has exactly one configuration. :func:`update` pushes only the
fields that differ from the current snapshot; keys are passed through to the
engine unchanged and whatever it does with them is not second-guessed.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Final, Mapping, Optional, Union

from . import native
from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR: Final[str] = "THERMO_STATE_CONFIG"

NATIVE_KEYS: Final[Dict[str, str]] = {
    "assume_critical_point_is_stable": "ASSUME_CRITICAL_POINT_STABLE",
    "critical_within_1uk": "CRITICAL_WITHIN_1UK",
    "dont_check_prop_limits": "DONT_CHECK_PROPERTY_LIMITS",
    "enable_critical_splines": "CRITICAL_SPLINES_ENABLED",
    "enable_superancillaries": "ENABLE_SUPERANCILLARIES",
    "henrys_law_to_generate_vle_guesses": "HENRYS_LAW_TO_GENERATE_VLE_GUESSES",
    "normalize_gas_constants": "NORMALIZE_GAS_CONSTANTS",
    "overwrite_binary_interaction": "OVERWRITE_BINARY_INTERACTION",
    "overwrite_departure_fn": "OVERWRITE_DEPARTURE_FUNCTION",
    "overwrite_substances": "OVERWRITE_FLUIDS",
    "phase_envelope_start_pressure_pa": "PHASE_ENVELOPE_STARTING_PRESSURE_PA",
    "ru_codata": "R_U_CODATA",
    "spinodal_min_delta": "SPINODAL_MINIMUM_DELTA",
    "use_guesses_in_props_si": "USE_GUESSES_IN_PROPSSI",
    "alt_refprop_path": "ALTERNATIVE_REFPROP_PATH",
    "alt_refprop_lib_path": "ALTERNATIVE_REFPROP_LIBRARY_PATH",
    "alt_refprop_hmx_bnc_path": "ALTERNATIVE_REFPROP_HMX_BNC_PATH",
    "refprop_dont_estimate_interaction_params": "REFPROP_DONT_ESTIMATE_INTERACTION_PARAMETERS",
    "refprop_ignore_error_estimated_interaction_params": "REFPROP_IGNORE_ERROR_ESTIMATED_INTERACTION_PARAMETERS",
    "refprop_use_gerg": "REFPROP_USE_GERG",
    "refprop_use_peng_robinson": "REFPROP_USE_PENGROBINSON",
    "alt_tables_path": "ALTERNATIVE_TABLES_DIRECTORY",
    "float_punctuation": "FLOAT_PUNCTUATION",
    "list_punctuation": "LIST_STRING_DELIMITER",
    "max_table_dir_size_in_gb": "MAXIMUM_TABLE_DIRECTORY_SIZE_IN_GB",
    "save_raw_tables": "SAVE_RAW_TABLES",
    "vtpr_always_reload_lib": "VTPR_ALWAYS_RELOAD_LIBRARY",
    "vtpr_unifac_path": "VTPR_UNIFAC_PATH",
}


@dataclass(frozen=True)
class Config:
    """Snapshot of the native engine configuration."""

    assume_critical_point_is_stable: bool = False
    critical_within_1uk: bool = True
    dont_check_prop_limits: bool = False
    enable_critical_splines: bool = True
    enable_superancillaries: bool = True
    henrys_law_to_generate_vle_guesses: bool = False
    normalize_gas_constants: bool = True
    overwrite_binary_interaction: bool = False
    overwrite_departure_fn: bool = False
    overwrite_substances: bool = False
    phase_envelope_start_pressure_pa: float = 100.0
    ru_codata: float = 8.31446261815324
    spinodal_min_delta: float = 0.5
    use_guesses_in_props_si: bool = False
    alt_refprop_path: Optional[str] = None
    alt_refprop_lib_path: Optional[str] = None
    alt_refprop_hmx_bnc_path: Optional[str] = None
    refprop_dont_estimate_interaction_params: bool = False
    refprop_ignore_error_estimated_interaction_params: bool = False
    refprop_use_gerg: bool = False
    refprop_use_peng_robinson: bool = False
    alt_tables_path: Optional[str] = None
    float_punctuation: str = "."
    list_punctuation: str = ","
    max_table_dir_size_in_gb: float = 1.0
    save_raw_tables: bool = False
    vtpr_always_reload_lib: bool = False
    vtpr_unifac_path: Optional[str] = None

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            default = field.default
            if isinstance(value, Path):
                object.__setattr__(self, field.name, str(value))
            elif isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ConfigError(f"'{field.name}' must be a boolean, got {value!r}")
            elif isinstance(default, float):
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError(f"'{field.name}' must be a number, got {value!r}")
                object.__setattr__(self, field.name, float(value))
            elif isinstance(default, str):
                if not isinstance(value, str) or len(value) != 1:
                    raise ConfigError(f"'{field.name}' must be a single character, got {value!r}")
            elif value is not None and not isinstance(value, str):
                raise ConfigError(f"'{field.name}' must be a path, got {value!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a config from defaults overridden by *data*.

        Raises:
            ConfigError: *data* holds an unknown key or a value of the wrong type.
        """

        unknown = sorted(set(data) - set(NATIVE_KEYS))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**deep_merge(asdict(cls()), data))

    def changes(self, other: "Config") -> Dict[str, Any]:
        """Return the fields of *other* that differ from this snapshot."""

        return {
            field.name: getattr(other, field.name)
            for field in fields(self)
            if getattr(self, field.name) != getattr(other, field.name)
        }


_CURRENT = Config()


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries without mutating the inputs."""

    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _native_value(value: Any) -> Any:
    return "" if value is None else value


def read() -> Config:
    """Return the configuration most recently pushed to the engine."""

    return _CURRENT


def update(new: Config) -> Config:
    """Push the fields of *new* that differ from the current snapshot.

    Returns the previous snapshot. The whole push holds the native lock, so
    no state update observes a half-applied configuration.
    """

    global _CURRENT
    with native.session() as engine:
        previous = _CURRENT
        changed = previous.changes(new)
        for name, value in changed.items():
            engine.set_config(NATIVE_KEYS[name], _native_value(value))
            _CURRENT = replace(_CURRENT, **{name: value})
    if changed:
        logger.info("Native configuration updated: %s", ", ".join(sorted(changed)))
    return previous


def reset() -> Config:
    """Restore the default configuration; returns the previous snapshot."""

    return update(Config())


def load(path: Union[str, Path]) -> Config:
    """Read a JSON configuration file, push it, and return the new snapshot."""

    with Path(path).open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration file {path} must contain a JSON object")
    config = Config.from_mapping(data)
    update(config)
    return config


def from_env() -> Optional[Config]:
    """Load the file named by ``THERMO_STATE_CONFIG``, if that variable is set."""

    path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        return None
    return load(path)


__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "NATIVE_KEYS",
    "deep_merge",
    "from_env",
    "load",
    "read",
    "reset",
    "update",
]
