from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

# Enough significant digits for any finite double plus 100 fractional digits.
_DECIMAL_PRECISION = 512


def format_number(value: float) -> str:
    """
    Render a float the way JavaScript's Number#toString does.

    Uses the shortest round-tripping digits. Integral values drop the
    trailing ".0" and plain decimals are used for 1e-6 <= |value| < 1e21.
    Outside that range exponents look like "1e+21" or "1.5e-7".
    """
    if value == 0:
        return "0"

    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        if "e" in text:
            # repr switches to exponents earlier than JavaScript does
            text = format(Decimal(text), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, _, exponent = text.partition("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def round_fixed(value: float, digits: int) -> float:
    """
    Round to `digits` fractional digits and parse the result back to a float.

    Rounding works on the exact binary value of `value` with ties away from
    zero, so 1.005 (stored as 1.00499...) rounds to 1.0 at two digits.
    """
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return float(rounded)
