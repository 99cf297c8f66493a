# src/length/validation.py
"""
Admission checks for lengths.

Every public operation on a `Length` funnels its arguments through one of the
validators below before any arithmetic happens, so an invalid length can never
be built. Absent arguments are represented by ``None``.
"""
from __future__ import annotations

import math
from numbers import Real

from .errors import InvalidValue, MissingArgument, UnsupportedUnit
from .units import LengthUnit, factor_of, supported_units

# Range accepted by fixed-point formatting (JavaScript's toFixed limit).
MAX_DIGITS = 100


def _is_finite_real(value: object) -> bool:
    # bool is an int subclass but not a magnitude
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a double
        return False


def _check_value(value: object) -> float:
    if not _is_finite_real(value):
        raise InvalidValue(f"Value must be a finite number, got {value!r}.")
    return float(value)


def _check_unit(unit: object) -> LengthUnit:
    if factor_of(unit) is None:
        raise UnsupportedUnit(unit, supported_units())
    return LengthUnit(unit)


def validate_value_and_unit(value: object, unit: object) -> tuple[float, LengthUnit]:
    """
    Validate a (value, unit) pair.

    Raises:
        MissingArgument: If either argument is None.
        InvalidValue: If `value` is not a finite real number.
        UnsupportedUnit: If `unit` is not in the unit table.
    """
    if value is None or unit is None:
        raise MissingArgument("You have to pass value and unit type!")
    return _check_value(value), _check_unit(unit)


def validate_unit(unit: object) -> LengthUnit:
    if unit is None:
        raise MissingArgument("You have to pass unit type!")
    return _check_unit(unit)


def validate_value(value: object) -> float:
    if value is None:
        raise MissingArgument("You have to pass value!")
    return _check_value(value)


def validate_digits(digits: object) -> int:
    """Check a fractional digit count for fixed-point rounding."""
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidValue(f"Digits must be an integer, got {digits!r}.")
    if not 0 <= digits <= MAX_DIGITS:
        raise InvalidValue(f"Digits must be between 0 and {MAX_DIGITS}, got {digits}.")
    return digits
