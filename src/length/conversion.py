# src/length/conversion.py
"""
Normalize-then-scale conversion between length units.

Each helper returns None instead of raising when a unit is missing from the
table. Callers in `length.core.value` validate units first, so None only
shows up when these functions are used directly.
"""
from __future__ import annotations

import logging

from .units import LengthUnit, factor_of

logger = logging.getLogger(__name__)


def to_base_unit(value: float, unit: LengthUnit | str) -> float | None:
    """Scale `value` given in `unit` to meters."""
    factor = factor_of(unit)
    if factor is None:
        logger.debug("No conversion factor for unit %r", unit)
        return None
    return value * factor


def from_base_unit(base_value: float, unit: LengthUnit | str) -> float | None:
    """Scale `base_value` given in meters to `unit`."""
    factor = factor_of(unit)
    if factor is None:
        logger.debug("No conversion factor for unit %r", unit)
        return None
    return base_value * (1 / factor)


def convert(
    value: float, from_unit: LengthUnit | str, to_unit: LengthUnit | str
) -> float | None:
    """
    Convert `value` from `from_unit` to `to_unit` through meters.

    No rounding is applied, so round trips are close but not always exact.
    Converting a unit to itself returns `value` untouched.

    Returns:
        float | None: The converted magnitude, or None if either unit is unknown.
    """
    base_value = to_base_unit(value, from_unit)
    if base_value is None:
        return None
    if factor_of(to_unit) is not None and str(from_unit) == str(to_unit):
        return value
    return from_base_unit(base_value, to_unit)
