"""
Unit tests for clippy.utils.tokens.
"""

import pytest

from clippy.utils.tokens import TokenParseResult, _adapter_for, try_parse_tokens


def test_parse_ints():
    result = try_parse_tokens("1, 2, 3", int)
    assert result.success is True
    assert result.values == [1, 2, 3]


def test_parse_fails_on_bad_token():
    result = try_parse_tokens("1, x, 3", int)
    assert result.success is False
    assert result.values == []


def test_result_truthiness():
    assert try_parse_tokens("1,2", int)
    assert not try_parse_tokens("1,b", int)


def test_parse_defaults_to_strings():
    assert try_parse_tokens(" a , b ,,c").values == ["a", "b", "c"]


@pytest.mark.parametrize(
    "text, target_type, expected",
    [
        ("1.5,2", float, [1.5, 2.0]),
        ("true,false", bool, [True, False]),
        ("", int, []),
        (",,,", int, []),
    ],
)
def test_parse_types(text, target_type, expected):
    result = try_parse_tokens(text, target_type)
    assert result.success
    assert result.values == expected


def test_every_delimiter_character_splits():
    assert try_parse_tokens("1;2|3", int, delimiter=";|").values == [1, 2, 3]


def test_empty_delimiter_splits_on_whitespace():
    assert try_parse_tokens("1 2   3", int, delimiter="").values == [1, 2, 3]


def test_whitespace_only_token_is_converted_as_empty():
    assert not try_parse_tokens("1, ,2", int)
    assert try_parse_tokens("a, ,b").values == ["a", "", "b"]


def test_none_input_fails():
    result = try_parse_tokens(None, int)
    assert isinstance(result, TokenParseResult)
    assert not result.success


def test_unsupported_type_fails_softly():
    class Opaque:
        pass

    assert not try_parse_tokens("1,2", Opaque)


def test_adapter_is_cached():
    assert _adapter_for(int) is _adapter_for(int)


@pytest.mark.parametrize(
    "text, target_type",
    [
        ("1.0, 2", int),
        ("1_000", int),
        ("0x1F", int),
        ("1_000.5", float),
        ("inf", float),
        ("yes, no", bool),
        ("on", bool),
        ("1, 0", bool),
    ],
)
def test_lax_forms_are_rejected(text, target_type):
    """Only plain numbers and true/false convert; one lax token fails the parse."""
    result = try_parse_tokens(text, target_type)
    assert result.success is False
    assert result.values == []


def test_plain_forms_are_accepted():
    assert try_parse_tokens("-1, 2, 10", int).values == [-1, 2, 10]
    assert try_parse_tokens("1e3, 0.5, -2.5", float).values == [1000.0, 0.5, -2.5]
    assert try_parse_tokens("True, FALSE", bool).values == [True, False]


def test_unhashable_type_fails_softly():
    assert not try_parse_tokens("1,2", [int])
