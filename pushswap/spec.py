"""Parsing the flags, width, precision and length of a conversion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .validate import atoi

_FLAGS = "0- +#"
_LENGTHS = "Llbh"


@dataclass
class FormatSpec:
    """Everything written between '%' and the conversion character."""

    zero: bool = False
    minus: bool = False
    space: bool = False
    plus: bool = False
    hash: bool = False
    width: int = 0
    dot: bool = False
    precision: int = 0
    long: bool = False
    long_long: bool = False
    long_double: bool = False
    short: bool = False
    char: bool = False
    binary: bool = False
    conv: str = "r"
    number: int = 0
    unsigned_number: int = 0


def _at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _is_digit(char: str) -> bool:
    return bool(char) and "0" <= char <= "9"


def _take(args: Iterator[Any]) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise ValueError("missing argument for '*'") from None


def _apply_flag(spec: FormatSpec, char: str) -> None:
    if char == "0":
        spec.zero = not spec.minus
    elif char == "-":
        spec.minus = True
        spec.zero = False
    elif char == " ":
        spec.space = True
    elif char == "+":
        spec.plus = True
        spec.space = False
    elif char == "#":
        spec.hash = True


def _read_number(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int | None, int]:
    char = _at(fmt, pos)
    if char == "*":
        return _take(args), pos + 1
    if _is_digit(char):
        end = pos
        while _is_digit(_at(fmt, end)):
            end += 1
        return atoi(fmt[pos:end]), end
    return None, pos


def _read_l(spec: FormatSpec, fmt: str, pos: int) -> int:
    char = _at(fmt, pos)
    if char == "L":
        spec.long_double = True
        return pos + 1
    if char == "l":
        spec.long = True
        pos += 1
        if _at(fmt, pos) == "l":
            spec.long = False
            spec.long_long = True
            pos += 1
    return pos


def _read_bh(spec: FormatSpec, fmt: str, pos: int) -> int:
    if _at(fmt, pos) == "b":
        spec.binary = True
        pos += 1
    if _at(fmt, pos) == "h":
        spec.short = True
        pos += 1
        if _at(fmt, pos) == "h":
            spec.short = False
            spec.char = True
            pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse the conversion starting at ``fmt[pos]`` (just after '%').

    ``args`` is an iterator over the remaining arguments; each '*' takes
    one from it. Returns the spec and the position of the conversion
    character. A precision with no digits keeps the width's value.
    """
    spec = FormatSpec()
    while (char := _at(fmt, pos)) and char in _FLAGS:
        _apply_flag(spec, char)
        pos += 1
    value, pos = _read_number(fmt, pos, args)
    held = 0 if value is None else value
    spec.width = max(held, 0)
    if _at(fmt, pos) == ".":
        spec.dot = True
        value, pos = _read_number(fmt, pos + 1, args)
        if value is not None:
            held = value
        spec.precision = max(held, 0)
        if held < 0:
            spec.dot = False
    while (char := _at(fmt, pos)) and char in _LENGTHS:
        pos = _read_l(spec, fmt, pos)
        pos = _read_bh(spec, fmt, pos)
    return spec, pos