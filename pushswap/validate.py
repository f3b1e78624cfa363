"""Checks on the numbers given on the command line."""

from __future__ import annotations

from itertools import pairwise

_INT_MAX = "2147483647"
_INT_MIN = "-2147483648"
_INT_MAX_SIGNED = "+2147483647"


class InputError(ValueError):
    """The arguments do not describe a valid stack."""


def atoi(text: str) -> int:
    """Read a leading integer the C way, wrapping to 32 bits."""
    i = 0
    while i < len(text) and (text[i] == " " or "\t" <= text[i] <= "\r"):
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    value = 0
    while i < len(text) and "0" <= text[i] <= "9":
        value = value * 10 + ord(text[i]) - ord("0")
        i += 1
    return ((sign * value + 2**31) % 2**32) - 2**31


def _fits(arg: str) -> bool:
    if arg.startswith("-"):
        return arg <= _INT_MIN
    if arg.startswith("+"):
        return arg <= _INT_MAX_SIGNED
    return arg <= _INT_MAX


def check_integers(args: list[str]) -> None:
    """Raise InputError unless every argument is a 32-bit integer literal."""
    for arg in args:
        digits = arg
        if digits[:1] in ("-", "+"):
            digits = digits[1:]
            if not digits:
                raise InputError(f"not an integer: {arg!r}")
        for count, char in enumerate(digits, start=1):
            if not ("0" <= char <= "9") or count > 10:
                raise InputError(f"not an integer: {arg!r}")
            if count == 10 and not _fits(arg):
                raise InputError(f"out of range: {arg!r}")


def has_duplicates(values: list[int]) -> bool:
    """True when some value occurs twice."""
    return len(set(values)) != len(values)


def parse_stack(args: list[str]) -> list[int]:
    """Build stack ``a`` from the arguments; the first argument is the top."""
    check_integers(args)
    values = [atoi(arg) for arg in reversed(args)]
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values


def is_sorted(a: list[int], b: list[int]) -> bool:
    """True when ``b`` is empty and ``a`` ascends from top to bottom."""
    if b:
        return False
    return all(lower >= upper for lower, upper in pairwise(a))