from dataclasses import replace

import pytest

from cstrkit.spec import FormatSpec, parse_spec


def parse(fmt, *stars):
    return parse_spec(fmt, 0, iter(stars))


def test_plain_conversion():
    spec, end = parse("%d")
    assert spec == FormatSpec(spec="d")
    assert end == 1


def test_directive_inside_text():
    fmt = "Test %d Test"
    spec, end = parse_spec(fmt, 5, iter(()))
    assert spec.spec == "d"
    assert fmt[end] == "d"


@pytest.mark.parametrize(
    "fmt, fields",
    [
        ("%6.5i", {"width_number": 6, "prec_number": 5}),
        ("%.i", {"prec_number": 0}),
        ("%.23i", {"prec_number": 23}),
        ("%-10.5i", {"minus_flag": True, "width_number": 10, "prec_number": 5}),
        ("%05.7i", {"zero_flag": True, "width_number": 5, "prec_number": 7}),
        ("%0.i", {"zero_flag": True, "prec_number": 0}),
        ("%- 15i", {"minus_flag": True, "space_flag": True, "width_number": 15}),
        ("%+#x", {"plus_flag": True, "sharp_flag": True}),
        ("%li", {"length": "l"}),
        ("%hu", {"length": "h"}),
        ("%Lf", {"length": "L"}),
        ("%10i", {"width_number": 10}),
    ],
)
def test_fields(fmt, fields):
    spec, end = parse(fmt)
    assert spec == replace(FormatSpec(spec=fmt[-1]), **fields)
    assert end == len(fmt) - 1


def test_star_width_and_precision():
    spec, _ = parse("%*.*i", 4, 10)
    assert spec.width_star == 4
    assert spec.width_number == 0
    assert spec.prec_star == 10
    assert spec.prec_number == 10


def test_star_width_with_minus():
    spec, _ = parse("%-*i", 5)
    assert spec.minus_flag is True
    assert spec.width_star == 5


def test_stars_consume_arguments_in_order():
    values = iter([2, 7, 99])
    spec, _ = parse_spec("%*.*d", 0, values)
    assert (spec.width_star, spec.prec_number) == (2, 7)
    assert next(values) == 99


def test_percent_directive():
    spec, end = parse("%%")
    assert spec.spec == "%"
    assert end == 1


def test_unterminated_directive_runs_to_end():
    spec, end = parse("%5")
    assert spec.spec == ""
    assert spec.width_number == 5
    assert end == 2


def test_dot_at_end():
    spec, end = parse("%.")
    assert spec.prec_number == 0
    assert end == 2


def test_missing_star_argument():
    with pytest.raises(ValueError):
        parse("%*d")


def test_non_int_star_argument():
    with pytest.raises(TypeError):
        parse("%*d", "a")


def test_index_not_at_percent():
    with pytest.raises(ValueError):
        parse_spec("abc %d", 0, iter(()))