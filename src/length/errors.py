# src/length/errors.py
from __future__ import annotations

from typing import Iterable


class LengthError(ValueError):
    """Base class for every error raised while admitting a length."""


class MissingArgument(LengthError, TypeError):
    """A required value and/or unit argument was not passed."""


class InvalidValue(LengthError):
    """A value was passed but it is not a finite real number."""


class UnsupportedUnit(LengthError):
    """A unit was passed but it is not in the unit table."""

    def __init__(self, unit: object, supported: Iterable[str]):
        self.unit = unit
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported unit type {unit!r}! Supported types: {', '.join(self.supported)}."
        )
