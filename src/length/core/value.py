# src/length/core/value.py
from __future__ import annotations

import functools
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..constants import VERSION
from ..conversion import convert
from ..extensions.registry import ExtensionRegistry, extensions
from ..units import LengthUnit
from ..utils.formatting import format_number, round_fixed
from ..validation import (
    validate_digits,
    validate_unit,
    validate_value,
    validate_value_and_unit,
)


class Length(BaseModel):
    """
    An immutable physical length: a finite magnitude paired with a unit.

    Instances are validated on construction and are frozen afterwards. Every
    operation (`to`, `add`, `to_precision`) returns a new `Length` and leaves
    the receiver untouched, so a value can be shared freely.

    Behaviors registered on `Length.fn` (see `ExtensionRegistry`) are
    available as methods on every instance.

    Attributes:
        value (float): The magnitude, expressed in `unit`.
        unit (LengthUnit): The unit of `value`.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    value: float
    unit: LengthUnit

    version: ClassVar[str] = VERSION
    fn: ClassVar[ExtensionRegistry] = extensions

    def __init__(self, value: Any = None, unit: Any = None):
        value, unit = validate_value_and_unit(value, unit)
        super().__init__(value=value, unit=unit)

    def __getattr__(self, name: str) -> Any:
        try:
            return super().__getattr__(name)
        except AttributeError:
            func = None if name.startswith("_") else self.fn.get(name)
            if func is None:
                raise
            return functools.partial(func, self)

    def to(self, unit: LengthUnit | str) -> Length:
        """
        Convert this length to another unit.

        Args:
            unit (LengthUnit | str): The target unit.

        Returns:
            Length: A new length expressed in `unit`.

        Raises:
            MissingArgument: If `unit` is None.
            UnsupportedUnit: If `unit` is not supported.
        """
        target = validate_unit(unit)
        return Length(convert(self.value, self.unit, target), target)

    def add(self, value: float, unit: LengthUnit | str | None = None) -> Length:
        """
        Add a magnitude to this length, keeping the receiver's unit.

        Without `unit`, `value` is taken to be in this length's unit. With
        `unit`, it is converted first, except that a zero is never converted.
        """
        if unit is None:
            return Length(self.value + validate_value(value), self.unit)

        value, unit = validate_value_and_unit(value, unit)
        if value == 0:
            return Length(self.value, self.unit)
        return Length(self.value + Length(value, unit).to(self.unit).get_value(), self.unit)

    def get_value(self) -> float:
        return self.value

    def get_unit(self) -> LengthUnit:
        return self.unit

    def get_string(self) -> str:
        """Format as magnitude immediately followed by the unit symbol, e.g. '5m'."""
        return format_number(self.value) + self.unit.value

    def __str__(self) -> str:
        return self.get_string()

    def to_precision(self, digits: int | None = None) -> Length:
        """
        Round the magnitude to `digits` fractional digits.

        Trailing zeros vanish since the result is a float again. Without
        `digits`, the magnitude is kept as is.

        Raises:
            InvalidValue: If `digits` is not an integer between 0 and 100.
        """
        if digits is None:
            return Length(self.value, self.unit)
        return Length(round_fixed(self.value, validate_digits(digits)), self.unit)


def length(value: Any = None, unit: Any = None) -> Length:
    """Create a validated `Length`; same as calling `Length(value, unit)`."""
    return Length(value, unit)
