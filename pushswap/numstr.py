"""Decimal digit strings, integer conversions and extended-precision floats.

Digit strings hold big numbers as text so that they can grow without
bound. Their width is kept: a result is never shorter than its input.
"""

from __future__ import annotations

import struct

_WIDTH_32 = 2**32
_WIDTH_64 = 2**64
_INF_OR_NAN_EXPONENT = 16384
_ZERO_EXPONENT = -16383


def _check_digits(text: str) -> None:
    if not all("0" <= char <= "9" for char in text):
        raise ValueError(f"not a digit string: {text!r}")


def add_decimal(a: str, b: str) -> str:
    """Add the integer parts (before any '.') of two digit strings.

    The result is as wide as the wider operand, plus one digit on a final carry.
    """
    a_int = a.partition(".")[0]
    b_int = b.partition(".")[0]
    _check_digits(a_int)
    _check_digits(b_int)
    width = max(len(a_int), len(b_int))
    if width == 0:
        return ""
    total = int(a_int or "0") + int(b_int or "0")
    return str(total).zfill(width)


def double_decimal(digits: str) -> str:
    """Multiply a digit string by two, growing by one digit when it must."""
    _check_digits(digits)
    if not digits:
        return ""
    return str(int(digits) * 2).zfill(len(digits))


def halve_decimal(digits: str) -> str:
    """Divide a digit string by two, gaining one digit on the right.

    The digits are read as a fraction, so the value is exact: ``"5"`` gives ``"25"``.
    """
    _check_digits(digits)
    return str(int(digits + "0") // 2).zfill(len(digits) + 1)


def itoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit signed integer."""
    value = ((n + 2**31) % _WIDTH_32) - 2**31
    return str(value)


def lltoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 64-bit signed integer."""
    value = ((n + 2**63) % _WIDTH_64) - 2**63
    return str(value)


def llutoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 64-bit unsigned integer."""
    return str(n % _WIDTH_64)


def hexatoa(n: int) -> str:
    """Lower-case hexadecimal text of ``n`` taken as 64-bit unsigned."""
    return format(n % _WIDTH_64, "x")


def octatoa(n: int) -> str:
    """Octal text of ``n`` taken as 64-bit unsigned."""
    return format(n % _WIDTH_64, "o")


def bitoa(data: bytes) -> str:
    """Bits of little-endian ``data``, most significant byte first, bytes apart by spaces."""
    return " ".join(f"{byte:08b}" for byte in reversed(bytes(data)))


def _double_parts(value: float) -> tuple[int, int]:
    (bits,) = struct.unpack("<Q", struct.pack("<d", float(value)))
    return (bits >> 52) & 0x7FF, bits & ((1 << 52) - 1)


def extended_mantissa(value: float) -> str:
    """The 64-bit significand ``value`` has as an x87 extended float, in binary.

    The integer bit is explicit, so it is the first character.
    """
    exponent, fraction = _double_parts(value)
    if exponent == 0:
        significand = fraction << (64 - fraction.bit_length()) if fraction else 0
    else:
        significand = (1 << 63) | (fraction << 11)
    return format(significand, "064b")


def extended_exponent(value: float) -> int:
    """The unbiased exponent ``value`` has as an x87 extended float.

    Zero gives -16383; infinities and NaNs give 16384.
    """
    exponent, fraction = _double_parts(value)
    if exponent == 0x7FF:
        return _INF_OR_NAN_EXPONENT
    if exponent == 0:
        if not fraction:
            return _ZERO_EXPONENT
        return fraction.bit_length() - 1075
    return exponent - 1023


def bankers_tie(deci: str, fracti: str, index: int) -> int:
    """Decide rounding at ``fracti[index]`` when it is an exact half.

    Returns 1 when the half is a tie and the digit before it is even,
    2 when the tie falls on the integer part ``deci`` and that is even,
    and 0 when rounding up as usual applies.
    """
    if index < 0 or index >= len(fracti) or fracti[index] != "5":
        return 0
    rest = fracti[index + 1:]
    if rest.strip("0"):
        return 0
    if index > 0:
        return 0 if int(fracti[index - 1]) % 2 == 1 else 1
    if deci and int(deci[-1]) % 2 == 1:
        return 0
    return 2