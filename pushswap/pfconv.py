"""Conversions for integers, strings and characters: padding, signs and prefixes.

Each function renders one argument as the matching conversion of a
format string. The spec passed in is never changed.
"""

from __future__ import annotations

from dataclasses import replace

from .numstr import bitoa, hexatoa, llutoa, lltoa, octatoa
from .spec import FormatSpec

_UNSIGNED_CONVERSIONS = ("o", "u", "U")
_HEX_CONVERSIONS = ("x", "X", "p")


class _Buffer:
    """Character cells written at a cursor; the text ends at the first NUL."""

    def __init__(self, size: int) -> None:
        self._cells = ["\0"] * (size + 1)
        self.pos = 0

    def __setitem__(self, index: int, char: str) -> None:
        if index >= len(self._cells):
            self._cells.extend("\0" * (index + 1 - len(self._cells)))
        self._cells[index] = char

    def write(self, text: str) -> None:
        for char in text:
            self[self.pos] = char
            self.pos += 1

    def pad_to(self, end: int, char: str) -> None:
        if end > self.pos:
            self.write(char * (end - self.pos))

    def text(self) -> str:
        return "".join(self._cells).split("\0", 1)[0]


def _wrap(value: int, bits: int, signed: bool) -> int:
    value = int(value) % (1 << bits)
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _signed_bits(spec: FormatSpec) -> int:
    if spec.long or spec.long_long:
        return 64
    if spec.short:
        return 16
    if spec.char:
        return 8
    return 32


def _unsigned_bits(spec: FormatSpec) -> int:
    if spec.conv in ("p", "U") or spec.long or spec.long_long:
        return 64
    if spec.short:
        return 16
    if spec.char:
        return 8
    return 32


def _put_number(buf: _Buffer, toa: str, spec: FormatSpec) -> None:
    if (
        toa == "0"
        and spec.dot
        and spec.precision == 0
        and spec.conv != "p"
        and not spec.hash
    ):
        if spec.conv in ("o", "u") and spec.width:
            buf[buf.pos] = " "
        return
    buf.write(toa[1:] if toa.startswith("-") else toa)


def _put_sign(buf: _Buffer, spec: FormatSpec) -> None:
    signed = spec.number < 0 or spec.plus or spec.space
    if not spec.minus and (not spec.zero or spec.dot) and signed and buf.pos:
        buf.pos -= 1
    if spec.number < 0:
        buf.write("-")
    elif spec.plus:
        buf.write("+")
    elif spec.space:
        buf.write(" ")
    if (
        not spec.minus
        and spec.zero
        and not spec.dot
        and buf.pos == 1
        and spec.width > 0
    ):
        spec.width -= 1


def _put_zeros(buf: _Buffer, target: int, length: int) -> None:
    if target > length:
        buf.write("0" * (target - length))


def _put_hash(buf: _Buffer, spec: FormatSpec, length: int) -> None:
    _put_zeros(buf, spec.precision, length)
    if spec.conv != "o" or not spec.hash:
        return
    if spec.precision > length:
        return
    if buf.pos == 0 and spec.unsigned_number != 0:
        buf.write("0")
    elif (
        spec.width > length
        and not (spec.dot and not spec.precision and spec.unsigned_number == 0)
        and buf.pos > 0
    ):
        buf[buf.pos - 1] = "0"


def _put_spaces(buf: _Buffer, spec: FormatSpec, limit: int) -> None:
    if spec.minus:
        if spec.width > spec.precision:
            buf.pad_to(limit, " ")
    elif spec.width > limit and spec.width > spec.precision:
        buf.pad_to(spec.width - max(spec.precision, limit), " ")


def _fill_integer(spec: FormatSpec, size: int, toa: str) -> str:
    buf = _Buffer(size)
    length = len(toa) - 1 if spec.number < 0 else len(toa)
    if spec.number == 0 and spec.precision == 0 and spec.dot:
        length = 0
    if spec.minus:
        _put_sign(buf, spec)
        _put_zeros(buf, spec.precision, length)
        _put_number(buf, toa, spec)
        _put_spaces(buf, spec, size)
    elif spec.zero and (not spec.dot or spec.precision > spec.width):
        _put_sign(buf, spec)
        _put_zeros(buf, max(spec.precision, spec.width), length)
        _put_number(buf, toa, spec)
    else:
        _put_spaces(buf, spec, length)
        _put_sign(buf, spec)
        _put_zeros(buf, spec.precision, length)
        _put_number(buf, toa, spec)
    return buf.text()


def format_integer(value: int, spec: FormatSpec) -> str:
    """Render ``value`` as a 'd' conversion.

    The value is cut to the width the length modifier names (int by
    default). With the 'b' length the bits of it as a 64-bit integer are
    returned instead.
    """
    spec = replace(spec, conv="d")
    number = _wrap(value, _signed_bits(spec), signed=True)
    spec.number = number
    if spec.binary:
        return bitoa(number.to_bytes(8, "little", signed=True))
    toa = lltoa(number)
    size = len(toa)
    if number == 0 and spec.precision == 0 and spec.dot:
        size = 0
    size = max(size, spec.width)
    if spec.precision >= spec.width and spec.precision > size:
        size = spec.precision + 1 if number < 0 else spec.precision
    if number > 0 and (spec.plus or spec.space) and spec.width <= len(toa):
        size += 1
    return _fill_integer(spec, size, toa)


def _fill_unsigned(spec: FormatSpec, size: int, toa: str) -> str:
    buf = _Buffer(size)
    length = len(toa)
    if spec.minus:
        _put_hash(buf, spec, length)
        _put_number(buf, toa, spec)
        _put_spaces(buf, spec, size)
    elif spec.zero and not spec.dot:
        _put_zeros(buf, spec.width, length)
        if spec.unsigned_number != 0 or spec.precision:
            _put_hash(buf, spec, length)
        _put_number(buf, toa, spec)
    else:
        _put_spaces(buf, spec, length)
        _put_hash(buf, spec, length)
        _put_number(buf, toa, spec)
    return buf.text()


def format_unsigned(value: int, spec: FormatSpec) -> str:
    """Render ``value`` as the 'o', 'u' or 'U' conversion named by ``spec.conv``.

    'U' always takes 64 bits. With the 'b' length a 'u' conversion
    returns the bits of the value instead.
    """
    if spec.conv not in _UNSIGNED_CONVERSIONS:
        raise ValueError(f"not an unsigned conversion: {spec.conv!r}")
    spec = replace(spec)
    number = _wrap(value, _unsigned_bits(spec), signed=False)
    spec.unsigned_number = number
    if spec.binary and spec.conv == "u":
        return bitoa(number.to_bytes(8, "little"))
    toa = octatoa(number) if spec.conv == "o" else llutoa(number)
    size = len(toa)
    if number == 0 and spec.precision == 0 and spec.dot:
        size = 0
    if spec.conv == "o" and spec.hash and number != 0:
        size += 1
    if spec.conv == "o" and spec.precision > size:
        size = spec.precision + 1 if spec.hash and number != 0 else spec.precision
    if spec.conv == "u" and spec.precision > size:
        size = spec.precision
    size = max(size, spec.width)
    return _fill_unsigned(spec, size, toa)


def _fill_hex_right(buf: _Buffer, spec: FormatSpec, length: int) -> None:
    if spec.zero and not spec.dot and spec.width > length:
        if spec.hash:
            _put_number(buf, "0x", spec)
        buf.pad_to(spec.width - length, "0")
        return
    if spec.width > spec.precision and spec.width > length:
        buf.pad_to(spec.width - max(spec.precision, length), " ")
    if spec.hash:
        buf.pos -= min(buf.pos, 2)
        _put_number(buf, "0x", spec)
    _put_zeros(buf, spec.precision, length)


def _fill_hex(spec: FormatSpec, size: int, toa: str) -> str:
    buf = _Buffer(size)
    length = len(toa)
    if toa == "0" and spec.precision == 0 and spec.dot and spec.conv == "x":
        length = 0
    if spec.minus:
        if spec.hash:
            _put_number(buf, "0x", spec)
        _put_zeros(buf, spec.precision, length)
        _put_number(buf, toa, spec)
        _put_spaces(buf, spec, size)
    else:
        _fill_hex_right(buf, spec, length)
        if not (spec.dot and spec.precision == 0 and toa.startswith("0")):
            _put_number(buf, toa, spec)
    return buf.text()


def format_hex(value: int, spec: FormatSpec) -> str:
    """Render ``value`` as the 'x', 'X' or 'p' conversion named by ``spec.conv``.

    'p' always shows the "0x" prefix; 'X' is 'x' in upper case.
    """
    if spec.conv not in _HEX_CONVERSIONS:
        raise ValueError(f"not a hexadecimal conversion: {spec.conv!r}")
    upper_case = spec.conv == "X"
    spec = replace(spec, conv="x" if upper_case else spec.conv)
    if spec.conv == "p":
        spec.hash = True
    number = _wrap(value, _unsigned_bits(spec), signed=False)
    spec.unsigned_number = number
    toa = hexatoa(number)
    size = len(toa)
    if number == 0 and spec.conv == "x":
        spec.hash = False
    size = max(size, spec.precision)
    if (spec.conv == "x" and spec.hash) or spec.conv == "p":
        size += 2
    if number == 0 and spec.precision == 0 and spec.dot and spec.conv == "x":
        size = 0
    size = max(size, spec.width)
    text = _fill_hex(spec, size, toa)
    return text.upper() if upper_case else text


def format_string(value: str | None, spec: FormatSpec) -> str:
    """Render ``value`` as an 's' conversion; None shows as "(null)"."""
    text = "(null)" if value is None else str(value)
    shown = text[: spec.precision] if spec.dot else text
    if spec.minus:
        return shown.ljust(spec.width, " ")
    pad = "0" if spec.zero else " "
    return pad * max(spec.width - len(shown), 0) + shown


def format_char(value: int | str, spec: FormatSpec, literal: bool = False) -> str:
    """Render one character padded to the spec's width.

    With ``literal`` the value is the character itself (as for '%' or an
    unknown conversion); otherwise it is an integer cut to one byte.
    """
    if literal or isinstance(value, str):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"expected one character, got {value!r}")
        char = value
    else:
        char = chr(int(value) % 256)
    if spec.minus:
        return char + " " * max(spec.width - 1, 0)
    pad = "0" if spec.zero else " "
    return pad * max(spec.width - 1, 0) + char