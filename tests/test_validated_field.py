"""Tests for the text entry binding and its parsers."""

import pytest

from crank_sketch.core.expression_service import eval_number_expression
from crank_sketch.core.validated_field import (
    FieldState,
    ValidatedField,
    parse_length,
    parse_number,
    parse_period,
)


def test_same_valid_text_twice():
    field = ValidatedField("1", parse_number)
    assert field.edit("2.5") == (2.5, True)
    assert field.edit("2.5") == (2.5, True)
    assert field.raw_text == "2.5"


def test_non_numeric_text_is_invalid():
    field = ValidatedField.from_value(1.0, parse_number)
    parsed, valid = field.edit("abc")
    assert parsed is None
    assert valid is False
    assert field.raw_text == "abc"
    assert "Unknown symbol" in field.state.error


@pytest.mark.parametrize("text", ["", "   ", "1+", "nan", "2*x", "1 2 3", "I"])
def test_invalid_numbers(text):
    value, err = parse_number(text)
    assert value is None
    assert err


@pytest.mark.parametrize(
    "text, expected",
    [("3", 3.0), (" 0.25 ", 0.25), ("1e-3", 0.001), ("2*pi", 6.283185307179586), ("sqrt(2)/2", 0.7071067811865476)],
)
def test_numeric_expressions(text, expected):
    assert parse_number(text) == (pytest.approx(expected), None)


def test_state_is_always_consistent():
    field = ValidatedField("1", parse_length)
    for text in ["1", "", "-2", "x", "4", "1/0", "0"]:
        field.edit(text)
        st = field.state
        assert st.raw_text == text
        assert st.valid == (st.parsed is not None)
        assert (st.error is None) == st.valid


def test_length_and_period_reject_negative_and_infinite():
    assert parse_length("-1")[0] is None
    assert parse_length("oo")[0] is None
    assert parse_length("0") == (0.0, None)
    assert parse_period("-0.5")[0] is None
    assert parse_period("oo")[0] is None
    assert parse_period("0") == (0.0, None)


def _parse_int(text):
    try:
        return int(text.strip(), 10), None
    except ValueError:
        return None, f"Not an integer: {text!r}"


def test_field_works_with_non_float_parser():
    field = ValidatedField.from_value(7, _parse_int)
    assert field.parsed == 7
    assert field.edit(" 42 ") == (42, True)
    assert field.edit("4.2") == (None, False)
    assert "integer" in field.state.error
    field.set_value(9)
    assert field.state == FieldState("9", 9, None)


def test_set_value_overwrites_buffer_and_notifies():
    field = ValidatedField.from_value(1.0, parse_length)
    field.edit("oops")
    seen = []
    field.subscribe(seen.append)
    field.set_value(2.5)
    assert field.state == FieldState("2.5", 2.5, None)
    assert field.valid
    assert seen == [FieldState("2.5", 2.5, None)]
    field.set_value(0.5, fmt=lambda v: f"{v:.3f}")
    assert field.raw_text == "0.500"
    with pytest.raises(ValueError):
        field.set_value(None)


def test_from_value_rejects_unparseable_initial_value():
    with pytest.raises(ValueError):
        ValidatedField.from_value(-1.0, parse_length)


def test_parser_exceptions_become_parse_failures():
    def boom(text):
        raise ValueError("bad input")

    field = ValidatedField("x", boom)
    assert field.state == FieldState("x", None, "bad input")


def test_subscribers_see_each_edit():
    field = ValidatedField("1", parse_number)
    seen = []
    unsubscribe = field.subscribe(seen.append)
    field.edit("2")
    field.edit("y")
    unsubscribe()
    field.edit("3")
    assert [s.raw_text for s in seen] == ["2", "y"]
    assert [s.valid for s in seen] == [True, False]


def test_eval_number_expression_reports_errors():
    assert eval_number_expression("")[1] == "Empty expression"
    assert eval_number_expression("(")[1].startswith("Parse error")
