"""Immutable physical lengths with unit conversion and arithmetic."""
from .constants import VERSION
from .conversion import convert, from_base_unit, to_base_unit
from .core.value import Length, length
from .errors import InvalidValue, LengthError, MissingArgument, UnsupportedUnit
from .extensions.base import LengthExtension
from .extensions.registry import ExtensionRegistry, extensions
from .schemas.extensions import ExtensionConfig
from .units import (
    BASE_UNIT,
    UNIT_FACTORS,
    LengthUnit,
    factor_of,
    from_meters,
    is_supported,
    supported_units,
    to_meters,
)

__version__ = VERSION

# Extension hook: behaviors registered here become methods of every Length.
fn = extensions
register_extension = extensions.register

__all__ = [
    "BASE_UNIT",
    "UNIT_FACTORS",
    "ExtensionConfig",
    "ExtensionRegistry",
    "InvalidValue",
    "Length",
    "LengthError",
    "LengthExtension",
    "LengthUnit",
    "MissingArgument",
    "UnsupportedUnit",
    "__version__",
    "convert",
    "factor_of",
    "fn",
    "from_base_unit",
    "from_meters",
    "is_supported",
    "length",
    "register_extension",
    "supported_units",
    "to_base_unit",
    "to_meters",
]
