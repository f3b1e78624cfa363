import math

import pytest

from pushswap.floatfmt import format_float
from pushswap.spec import FormatSpec


@pytest.mark.parametrize(
    "value, options, reference",
    [
        (3.14159, {}, "%f"),
        (-2.5, {}, "%f"),
        (0.0, {}, "%f"),
        (-0.0, {}, "%f"),
        (1.5, {"dot": True, "precision": 0}, "%.0f"),
        (2.5, {"dot": True, "precision": 0}, "%.0f"),
        (0.5, {"dot": True, "precision": 0}, "%.0f"),
        (0.125, {"dot": True, "precision": 2}, "%.2f"),
        (0.375, {"dot": True, "precision": 2}, "%.2f"),
        (9.96875, {"dot": True, "precision": 1}, "%.1f"),
        (0.96875, {"dot": True, "precision": 1}, "%.1f"),
        (1e300, {}, "%f"),
        (5e-324, {"dot": True, "precision": 400}, "%.400f"),
        (1 / 3, {"dot": True, "precision": 20}, "%.20f"),
        (123.456, {"width": 12}, "%12f"),
        (123.456, {"width": 12, "minus": True}, "%-12f"),
        (-3.5, {"width": 10, "zero": True, "dot": True, "precision": 2}, "%010.2f"),
        (3.0, {"hash": True, "dot": True, "precision": 0}, "%#.0f"),
        (7.25, {"plus": True}, "%+f"),
        (7.25, {"space": True}, "% f"),
        (7.25, {"plus": True, "width": 10, "dot": True, "precision": 1}, "%+10.1f"),
        (2.0**70 + 0.0, {}, "%f"),
    ],
)
def test_matches_reference_formatting(value, options, reference):
    assert format_float(value, FormatSpec(**options)) == reference % value


def test_precision_without_dot_is_six():
    spec = FormatSpec(precision=2)
    assert format_float(1.5, spec) == "%f" % 1.5


def test_spec_is_not_modified():
    spec = FormatSpec(width=20)
    format_float(2.75, spec)
    assert spec == FormatSpec(width=20)


@pytest.mark.parametrize(
    "value, options, reference",
    [
        (math.inf, {}, "%f"),
        (-math.inf, {}, "%f"),
        (math.inf, {"plus": True}, "%+f"),
        (math.inf, {"space": True}, "% f"),
        (math.inf, {"width": 6}, "%6f"),
        (math.inf, {"width": 6, "minus": True}, "%-6f"),
        (math.nan, {}, "%f"),
    ],
)
def test_infinities(value, options, reference):
    assert format_float(value, FormatSpec(**options)) == reference % value


def test_nan_never_has_a_sign():
    assert format_float(math.nan, FormatSpec(plus=True)) == "nan"
    assert format_float(-math.nan, FormatSpec()) == "nan"


def test_binary_layout_of_one():
    groups = format_float(1.0, FormatSpec(binary=True)).split(" ")
    assert len(groups) == 16
    assert all(len(group) == 8 for group in groups)
    assert groups[:6] == ["00000000"] * 6
    assert groups[6:8] == ["00111111", "11111111"]
    assert groups[8] == "10000000"
    assert groups[9:] == ["00000000"] * 7


def test_binary_negative_sets_sign_bit_only():
    positive = format_float(1.0, FormatSpec(binary=True))
    negative = format_float(-1.0, FormatSpec(binary=True))
    assert negative[54] == "1"
    assert positive[54] == "0"
    assert positive[:54] == negative[:54]
    assert positive[55:] == negative[55:]