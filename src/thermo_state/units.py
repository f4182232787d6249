"""Unit conversion helpers backed by Pint.

Inputs accept either a bare number, taken to be SI already, or a
:class:`pint.Quantity` in any compatible unit.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Union

from pint import Quantity, UnitRegistry

QuantityLike = Union[float, int, Quantity]


@lru_cache(maxsize=1)
def _build_registry() -> UnitRegistry:
    registry = UnitRegistry(auto_reduce_dimensions=True)
    registry.formatter.default_format = "~P"
    if "percent" not in registry:
        registry.define("percent = 0.01 = pct")
    return registry


ureg = _build_registry()
Q_ = ureg.Quantity

# SI units of every physical quantity an input can carry.
SI_UNITS: dict[str, str] = {
    "temperature": "kelvin",
    "pressure": "pascal",
    "ratio": "dimensionless",
    "length": "meter",
    "mass_density": "kilogram / meter ** 3",
    "molar_density": "mole / meter ** 3",
    "specific_volume": "meter ** 3 / kilogram",
    "specific_energy": "joule / kilogram",
    "specific_entropy": "joule / kilogram / kelvin",
    "molar_energy": "joule / mole",
    "molar_entropy": "joule / mole / kelvin",
}


def ensure_quantity(value: Any, unit: str) -> Quantity:
    """Return *value* as a quantity expressed in *unit*."""

    if isinstance(value, Quantity):
        return value.to(unit)
    return Q_(float(value), unit)


def magnitude(value: Any, unit: str) -> float:
    """Return the float magnitude of *value* expressed in *unit*."""

    return float(ensure_quantity(value, unit).magnitude)


def to_si(value: QuantityLike, quantity: str) -> float:
    """Return the SI magnitude of *value* for the named physical *quantity*."""

    if not isinstance(value, Quantity):
        return float(value)
    return magnitude(value, SI_UNITS[quantity])


__all__ = ["Q_", "QuantityLike", "SI_UNITS", "ensure_quantity", "magnitude", "to_si", "ureg"]
