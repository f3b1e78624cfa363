import pytest

from pushswap.spec import FormatSpec, parse_spec


def parse(fmt, *args, pos=0):
    return parse_spec(fmt, pos, iter(args))


def test_defaults():
    spec, pos = parse("d")
    assert pos == 0
    assert spec == FormatSpec()
    assert spec.conv == "r"


def test_minus_zero_and_width():
    spec, pos = parse("-05d")
    assert spec.minus is True
    assert spec.zero is False
    assert spec.width == 5
    assert pos == 3


def test_minus_after_zero_clears_zero():
    spec, _ = parse("0-5d")
    assert spec.minus is True
    assert spec.zero is False


def test_space_after_plus_sets_both():
    spec, _ = parse("+ d")
    assert spec.plus is True
    assert spec.space is True


def test_plus_after_space_clears_space():
    spec, _ = parse(" +d")
    assert spec.plus is True
    assert spec.space is False


def test_hash():
    spec, pos = parse("#x")
    assert spec.hash is True
    assert pos == 1


def test_negative_star_width_becomes_zero():
    spec, _ = parse("*d", -4)
    assert spec.width == 0
    assert spec.minus is False


def test_negative_star_precision_drops_dot():
    spec, _ = parse(".*s", -1)
    assert spec.precision == 0
    assert spec.dot is False


def test_empty_precision_keeps_width_value():
    spec, pos = parse("5.s")
    assert spec.dot is True
    assert spec.width == 5
    assert spec.precision == 5
    assert pos == 2


def test_digit_precision():
    spec, _ = parse("10.2f")
    assert spec.width == 10
    assert spec.precision == 2


def test_missing_star_argument():
    with pytest.raises(ValueError):
        parse("*d")


@pytest.mark.parametrize(
    "fmt, attr",
    [
        ("ld", "long"),
        ("lld", "long_long"),
        ("Lf", "long_double"),
        ("hd", "short"),
        ("hhd", "char"),
        ("bd", "binary"),
    ],
)
def test_length_modifiers(fmt, attr):
    spec, pos = parse(fmt)
    assert getattr(spec, attr) is True
    assert pos == len(fmt) - 1


def test_ll_clears_l():
    spec, _ = parse("lld")
    assert spec.long is False


def test_hh_clears_h():
    spec, _ = parse("hhd")
    assert spec.short is False


def test_binary_and_short_together():
    spec, pos = parse("bhd")
    assert spec.binary is True
    assert spec.short is True
    assert pos == 2


def test_end_of_string():
    spec, pos = parse("5")
    assert spec.width == 5
    assert pos == 1


def test_starting_offset():
    spec, pos = parse("ab%3d", pos=3)
    assert spec.width == 3
    assert pos == 4