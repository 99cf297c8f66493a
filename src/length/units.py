# src/length/units.py
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .constants import (
    ASTRONOMICAL_UNIT_M,
    FOOT_M,
    INCH_M,
    LIGHT_YEAR_M,
    MILE_M,
    NAUTICAL_MILE_M,
    PARSEC_M,
    YARD_M,
)
from .errors import UnsupportedUnit


class LengthUnit(str, Enum):
    """
    Enumeration of supported length units.
    Internally, every conversion passes through SI units (meters).
    """
    PICOMETERS = "pm"
    NANOMETERS = "nm"
    MICROMETERS = "um"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    DECIMETERS = "dm"
    METERS = "m"
    DECAMETERS = "dam"
    HECTOMETERS = "hm"
    KILOMETERS = "km"
    NAUTICAL_MILES = "nmi"
    INCHES = "in"
    FEET = "ft"
    YARDS = "yd"
    MILES = "mi"
    ASTRONOMICAL_UNITS = "au"
    LIGHT_YEARS = "ly"
    PARSECS = "pc"

    def __str__(self) -> str:
        return self.value


UNIT_FACTORS: Mapping[str, float] = MappingProxyType({
    LengthUnit.PICOMETERS.value: 10 ** -12,
    LengthUnit.NANOMETERS.value: 10 ** -9,
    LengthUnit.MICROMETERS.value: 10 ** -6,
    LengthUnit.MILLIMETERS.value: 10 ** -3,
    LengthUnit.CENTIMETERS.value: 10 ** -2,
    LengthUnit.DECIMETERS.value: 10 ** -1,
    LengthUnit.METERS.value: 1,
    LengthUnit.DECAMETERS.value: 10 ** 1,
    LengthUnit.HECTOMETERS.value: 10 ** 2,
    LengthUnit.KILOMETERS.value: 10 ** 3,
    LengthUnit.NAUTICAL_MILES.value: NAUTICAL_MILE_M,
    LengthUnit.INCHES.value: INCH_M,
    LengthUnit.FEET.value: FOOT_M,
    LengthUnit.YARDS.value: YARD_M,
    LengthUnit.MILES.value: MILE_M,
    LengthUnit.ASTRONOMICAL_UNITS.value: ASTRONOMICAL_UNIT_M,
    LengthUnit.LIGHT_YEARS.value: LIGHT_YEAR_M,
    LengthUnit.PARSECS.value: PARSEC_M,
})

BASE_UNIT = LengthUnit.METERS

_SUPPORTED_UNITS: tuple[str, ...] = tuple(UNIT_FACTORS)


def _symbol(unit: object) -> str | None:
    if isinstance(unit, LengthUnit):
        return unit.value
    if isinstance(unit, str):
        return unit
    return None


def supported_units() -> tuple[str, ...]:
    """Return every supported unit symbol in declaration order."""
    return _SUPPORTED_UNITS


def factor_of(unit: object) -> float | None:
    """
    Look up how many meters one `unit` is.

    Args:
        unit (LengthUnit | str): The unit symbol.

    Returns:
        float | None: The positive conversion factor, or None if the unit is
        not in the table. Never raises.
    """
    symbol = _symbol(unit)
    if symbol is None:
        return None
    return UNIT_FACTORS.get(symbol)


def is_supported(unit: object) -> bool:
    return factor_of(unit) is not None


def to_meters(value: float, unit: LengthUnit | str) -> float:
    """
    Convert a length value from the specified unit to meters.

    Args:
        value (float): The length value in `unit`.
        unit (LengthUnit | str): The source unit (e.g., MILLIMETERS).

    Returns:
        float: The equivalent length in meters [m].

    Raises:
        UnsupportedUnit: If the provided unit is not supported.
    """
    factor = factor_of(unit)
    if factor is None:
        raise UnsupportedUnit(unit, _SUPPORTED_UNITS)
    return value * factor


def from_meters(value: float, unit: LengthUnit | str) -> float:
    """
    Convert a length value from meters to the specified target unit.

    Args:
        value (float): The length value in meters [m].
        unit (LengthUnit | str): The target unit (e.g., MILLIMETERS).

    Returns:
        float: The equivalent length in `unit`.

    Raises:
        UnsupportedUnit: If the provided unit is not supported.
    """
    factor = factor_of(unit)
    if factor is None:
        raise UnsupportedUnit(unit, _SUPPORTED_UNITS)
    return value * (1 / factor)
