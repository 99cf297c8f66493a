# tests/length/test_formatting.py
import pytest

from length.utils.formatting import format_number, round_fixed


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.0, "5"),
        (-0.0, "0"),
        (1.5, "1.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (100.0, "100"),
        (1e16, "10000000000000000"),
        (1.2345678901234568e20, "123456789012345680000"),
        (1e21, "1e+21"),
        (-2.5e25, "-2.5e+25"),
        (1e-5, "0.00001"),
        (1e-6, "0.000001"),
        (1.5e-7, "1.5e-7"),
        (1e-12, "1e-12"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (1.23456, 2, 1.23),
        (1.005, 2, 1.0),
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (1.5, 0, 2.0),
        (1.10, 5, 1.1),
        (1e300, 2, 1e300),
    ],
)
def test_round_fixed(value, digits, expected):
    assert round_fixed(value, digits) == expected
