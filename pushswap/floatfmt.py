"""The 'f' conversion: exact decimal expansion, rounding and padding."""

from __future__ import annotations

import math
from fractions import Fraction

from .numstr import bankers_tie, bitoa, extended_exponent, extended_mantissa
from .spec import FormatSpec

_DEFAULT_PRECISION = 6
_EXPONENT_BIAS = 16383
_LONG_DOUBLE_PADDING = 6


def _is_negative(value: float) -> bool:
    return not math.isnan(value) and math.copysign(1.0, value) < 0


def _extended_bytes(value: float) -> bytes:
    """The value as a 16-byte x87 long double, little-endian, zero padded."""
    mantissa = int(extended_mantissa(value), 2)
    exponent = extended_exponent(value) + _EXPONENT_BIAS
    if math.copysign(1.0, value) < 0:
        exponent |= 0x8000
    return (
        mantissa.to_bytes(8, "little")
        + exponent.to_bytes(2, "little")
        + bytes(_LONG_DOUBLE_PADDING)
    )


def _split(value: float) -> tuple[str, str]:
    """Integer digits and exact fractional digits of a non-negative value.

    The fraction has as many digits as its binary expansion has bits,
    or is "0" when the value is whole.
    """
    exact = Fraction(value)
    whole, rest = divmod(exact.numerator, exact.denominator)
    if rest == 0:
        return str(whole), "0"
    bits = exact.denominator.bit_length() - 1
    return str(whole), str(rest * 5**bits).zfill(bits)


def _round(deci: str, fracti: str, precision: int) -> tuple[str, str]:
    if len(fracti) <= precision:
        return deci, fracti.ljust(precision, "0")
    tie = bankers_tie(deci, fracti, precision)
    kept = fracti[:precision]
    if tie == 1 or fracti[precision] < "5":
        return deci, kept
    carried = precision == 0
    if precision:
        bumped = int(kept) + 1
        if bumped == 10**precision:
            kept = "0" * precision
            carried = True
        else:
            kept = str(bumped).zfill(precision)
    if carried and tie != 2:
        deci = str(int(deci) + 1)
    return deci, kept


def _inf_or_nan(value: float, negative: bool, spec: FormatSpec) -> str:
    if math.isinf(value):
        if negative:
            text = "-inf"
        elif spec.plus:
            text = "+inf"
        elif spec.space:
            text = " inf"
        else:
            text = "inf"
    else:
        text = "nan"
    if spec.width > len(text):
        padding = " " * (spec.width - len(text))
        text = text + padding if spec.minus else padding + text
    return text


def format_float(value: float, spec: FormatSpec) -> str:
    """Render ``value`` as the 'f' conversion described by ``spec``.

    Without a '.' the precision is 6. Halves round to even, on the
    exact binary value. With the 'b' length the bits of the value as a
    long double are returned instead.
    """
    value = float(value)
    if spec.binary:
        return bitoa(_extended_bytes(value))
    negative = _is_negative(value)
    if math.isinf(value) or math.isnan(value):
        return _inf_or_nan(value, negative, spec)
    precision = spec.precision if spec.dot else _DEFAULT_PRECISION
    deci, fracti = _round(*_split(abs(value)), precision)
    if negative:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    point = "." if spec.hash or precision else ""
    digits = fracti if precision else ""
    used = len(deci) + precision + len(point) + len(sign)
    padding = ("0" if spec.zero else " ") * max(spec.width - used, 0)
    if spec.minus:
        return sign + deci + point + digits + padding
    if spec.zero:
        return sign + padding + deci + point + digits
    return padding + sign + deci + point + digits