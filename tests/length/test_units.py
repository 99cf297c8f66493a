# tests/length/test_units.py
import math

import pytest

from length.errors import UnsupportedUnit
from length.units import (
    BASE_UNIT,
    UNIT_FACTORS,
    LengthUnit,
    factor_of,
    from_meters,
    is_supported,
    supported_units,
    to_meters,
)

EXPECTED_FACTORS = {
    "pm": 1e-12,
    "nm": 1e-9,
    "um": 1e-6,
    "mm": 1e-3,
    "cm": 1e-2,
    "dm": 1e-1,
    "m": 1,
    "dam": 1e1,
    "hm": 1e2,
    "km": 1e3,
    "nmi": 1852,
    "in": 0.0254,
    "ft": 0.3048,
    "yd": 0.9144,
    "mi": 1609.344,
    "au": 149597870700,
    "ly": 9460730472580800,
    "pc": (648000 / math.pi) * 149597870700,
}


def test_supported_units_declaration_order():
    assert supported_units() == tuple(EXPECTED_FACTORS)
    assert supported_units() is supported_units()


def test_enum_matches_table():
    assert [u.value for u in LengthUnit] == list(supported_units())
    assert LengthUnit.METERS == "m"
    assert str(LengthUnit.NAUTICAL_MILES) == "nmi"


@pytest.mark.parametrize("symbol", list(EXPECTED_FACTORS))
def test_factors(symbol):
    assert math.isclose(factor_of(symbol), EXPECTED_FACTORS[symbol], rel_tol=1e-15)
    assert factor_of(LengthUnit(symbol)) == factor_of(symbol)
    assert factor_of(symbol) > 0


def test_base_unit_factor_is_one():
    assert BASE_UNIT == LengthUnit.METERS
    assert factor_of(BASE_UNIT) == 1


def test_factor_of_unknown_returns_none():
    assert factor_of("xyz") is None
    assert factor_of("M") is None
    assert factor_of(None) is None
    assert factor_of(5) is None
    assert factor_of(["m"]) is None
    assert not is_supported("xyz")
    assert is_supported("km")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        UNIT_FACTORS["m"] = 2  # type: ignore[index]
    assert UNIT_FACTORS["m"] == 1


def test_to_and_from_meters():
    # 1.0 mm -> 0.001 m
    assert math.isclose(to_meters(1.0, LengthUnit.MILLIMETERS), 0.001)
    assert math.isclose(from_meters(0.001, "mm"), 1.0)
    assert math.isclose(to_meters(1, "mi"), 1609.344)


def test_to_meters_unknown_unit_raises():
    with pytest.raises(UnsupportedUnit, match="Supported types: pm, nm"):
        to_meters(1.0, "furlong")
    with pytest.raises(UnsupportedUnit):
        from_meters(1.0, "furlong")
