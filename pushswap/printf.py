"""Formatted output with color tags: the format string driver and its helpers."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .floatfmt import format_float
from .pfconv import format_char, format_hex, format_integer, format_string, format_unsigned
from .spec import FormatSpec, parse_spec

_TAG_CODES = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "black": "\033[30m",
    "under": "\033[4m",
    "reset": "\033[0m",
}
_TAG = re.compile(r"\{(" + "|".join(_TAG_CODES) + r")\}")

_TEXT_COLORS = {
    "red": "\033[0;31m",
    "green": "\033[0;32m",
    "yellow": "\033[0;33m",
    "blue": "\033[0;34m",
    "magenta": "\033[0;35m",
    "cyan": "\033[0;36m",
}
_TEXT_RESET = "\033[0m"


def _next_arg(args: Iterator[Any], conv: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for '%{conv}'") from None


def _convert(conv: str, spec: FormatSpec, args: Iterator[Any]) -> str:
    match conv:
        case "f":
            return format_float(float(_next_arg(args, conv)), spec)
        case "d" | "i":
            return format_integer(int(_next_arg(args, conv)), spec)
        case "o" | "u" | "U":
            spec.conv = conv
            return format_unsigned(int(_next_arg(args, conv)), spec)
        case "x" | "X" | "p":
            spec.conv = conv
            arg = _next_arg(args, conv)
            value = arg if isinstance(arg, int) else id(arg)
            return format_hex(value, spec)
        case "s":
            arg = _next_arg(args, conv)
            return format_string(None if arg is None else str(arg), spec)
        case "c":
            return format_char(_next_arg(args, conv), spec)
        case _:
            return format_char(conv, spec, literal=True)


def _build(fmt: str, args: tuple[Any, ...]) -> tuple[str, Any]:
    """The text before color expansion and the last output target named by '%@'."""
    remaining = iter(args)
    parts: list[str] = []
    target: Any = None
    pos = 0
    while pos < len(fmt):
        at = fmt.find("%", pos)
        if at < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:at])
        spec, pos = parse_spec(fmt, at + 1, remaining)
        if pos >= len(fmt):
            break
        conv = fmt[pos]
        pos += 1
        if conv == "@":
            target = _next_arg(remaining, conv)
            continue
        parts.append(_convert(conv, spec, remaining))
    return "".join(parts), target


def expand_colors(text: str) -> str:
    """Replace the tags {red}, {green}, ..., {under} and {reset} by terminal codes."""
    return _TAG.sub(lambda match: _TAG_CODES[match.group(1)], text)


def visible_length(text: str) -> int:
    """Number of characters written for ``text`` once its color tags are expanded."""
    return len(expand_colors(text))


def render(fmt: str, *args: Any) -> str:
    """The text ``printf`` writes for ``fmt`` and ``args``, colors expanded.

    A missing argument raises ValueError.
    """
    raw, _ = _build(fmt, args)
    return expand_colors(raw)


def _emit(text: str, target: Any, stream: TextIO) -> None:
    if target is None or (isinstance(target, int) and target == 1):
        stream.write(text)
    elif isinstance(target, int):
        if target == 2:
            sys.stderr.write(text)
        elif target >= 0:
            os.write(target, text.encode())
    else:
        target.write(text)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text and return its length.

    Output goes to ``stream`` (standard output by default) unless a '%@'
    conversion names another target: a stream, or a file descriptor where
    1 is ``stream``, 2 is standard error and a negative one drops the text.
    """
    raw, target = _build(fmt, args)
    text = expand_colors(raw)
    _emit(text, target, sys.stdout if stream is None else stream)
    return len(text)


def color_text(text: str, color: str) -> str:
    """``text`` wrapped in the terminal codes for ``color`` and a reset."""
    try:
        code = _TEXT_COLORS[color]
    except KeyError:
        raise ValueError(
            "Please chose red, green, yellow, blue, magenta or cyan."
        ) from None
    return code + text + _TEXT_RESET