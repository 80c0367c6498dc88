"""
Unit tests for text formatting and value dispatch.
"""

import pytest
from pydantic import TypeAdapter

from core.domain.models import NumberValue, TextValue, Value
from core.services.text import WRONG_INPUT_TYPE, format_string, process_value


@pytest.mark.parametrize(
    ("text", "to_upper", "expected"),
    [
        ("abc", True, "ABC"),
        ("abc", None, "ABC"),
        ("abc", False, "abc"),
        ("MiXeD", False, "mixed"),
        ("abc123", True, "ABC123"),
    ],
)
def test_format_string_converts_case(text: str, to_upper, expected: str) -> None:
    assert format_string(text, to_upper) == expected


def test_format_string_defaults_to_upper() -> None:
    assert format_string("hello") == "HELLO"


@pytest.mark.parametrize("text", ["", "123", "0"])
def test_format_string_rejects_empty_and_digits(text: str) -> None:
    assert format_string(text) == WRONG_INPUT_TYPE
    assert format_string(text, False) == "Wrong Input Type!"


def test_format_string_only_treats_ascii_digits_as_numeric() -> None:
    assert format_string("١٢٣") == "١٢٣".upper()
    assert format_string(" 123") == " 123"


def test_process_value_text_length() -> None:
    assert process_value(TextValue(text="hello")) == 5
    assert process_value(TextValue(text="")) == 0


def test_process_value_doubles_numbers() -> None:
    assert process_value(NumberValue(number=4)) == 8
    assert process_value(NumberValue(number=-1.5)) == -3


def test_process_value_falls_back_to_zero() -> None:
    assert process_value(None) == 0


def test_value_union_picks_variant_from_kind() -> None:
    adapter = TypeAdapter(Value)

    text = adapter.validate_python({"kind": "text", "text": "abc"})
    number = adapter.validate_python({"kind": "number", "number": 21})

    assert isinstance(text, TextValue)
    assert process_value(text) == 3
    assert process_value(number) == 42
