"""
Unit tests for clippy.utils.string_utils.
"""

import pytest

from clippy.utils.string_utils import (
    URL_PATTERN,
    add_query_string_parameter,
    html_decode,
    is_null_or_whitespace,
    is_valid_url,
    reverse,
    strip_html,
    to_first_upper,
)


def test_html_decode():
    assert html_decode("&lt;b&gt;Fish &amp; Chips&lt;/b&gt;") == "<b>Fish & Chips</b>"
    assert html_decode("caf&eacute; &#39;ok&#39;") == "café 'ok'"
    assert html_decode(None) is None


def test_strip_html():
    assert strip_html("<p>Hello <b>World</b></p>") == "Hello World"
    assert strip_html('<a href="/x">link</a><br/>') == "link"
    assert strip_html("a < b") == "a < b"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("http://example.com", True),
        ("https://www.example.com/path?x=1&y=2", True),
        ("see https://a.io for more", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("http://localhost", False),
        ("", False),
    ],
)
def test_is_valid_url(url, expected):
    assert is_valid_url(url) is expected


def test_url_pattern_allows_hyphens_and_spaces_in_path():
    match = URL_PATTERN.search("<https://my-site.example.com/a-b c/d?x=1>")
    assert match.group(0) == "https://my-site.example.com/a-b c/d?x=1"


def test_add_query_string_parameter_to_bare_url():
    assert add_query_string_parameter("http://x.com", "a", "b") == "http://x.com?a=b"


def test_add_query_string_parameter_replaces_existing():
    url = add_query_string_parameter("http://x.com", "a", "b")
    assert add_query_string_parameter(url, "a", "c") == "http://x.com?a=c"


def test_add_query_string_parameter_keeps_order():
    url = add_query_string_parameter("http://x.com?a=1&b=2", "a", "3")
    assert url == "http://x.com?a=3&b=2"
    url = add_query_string_parameter("http://x.com?a=1&b=2", "c", "4")
    assert url == "http://x.com?a=1&b=2&c=4"


def test_add_query_string_parameter_encodes_value():
    url = add_query_string_parameter("http://x.com/p", "q", "x y&z")
    assert url == "http://x.com/p?q=x+y%26z"


def test_add_query_string_parameter_merges_repeated_keys():
    url = add_query_string_parameter("http://x.com?a=1&a=2&flag=", "b", "c")
    assert url == "http://x.com?a=1%2C2&flag=&b=c"


def test_add_query_string_parameter_reencodes_existing_pairs():
    """A bare key gains an empty value and keys are URL-encoded too."""
    url = add_query_string_parameter("http://x.com?k", "a", "b")
    assert url == "http://x.com?k=&a=b"
    url = add_query_string_parameter("http://x.com?a%20b=1", "c", "d")
    assert url == "http://x.com?a+b=1&c=d"


@pytest.mark.parametrize(
    "text, expected",
    [("hello", "Hello"), ("élan", "Élan"), ("A", "A"), ("", ""), ("  ", "  "), (None, None)],
)
def test_to_first_upper(text, expected):
    assert to_first_upper(text) == expected


def test_to_first_upper_keeps_length():
    """Characters that upper-case to several characters are left as they are."""
    assert to_first_upper("ßa") == "ßa"
    assert to_first_upper("ŉx") == "ŉx"


@pytest.mark.parametrize(
    "text, expected",
    [(None, True), ("", True), (" \t\n", True), ("x", False), (" x ", False)],
)
def test_is_null_or_whitespace(text, expected):
    assert is_null_or_whitespace(text) is expected


def test_reverse():
    assert reverse("abc") == "cba"
    assert reverse("a") == "a"
    assert reverse("  ") == "  "
    assert reverse(None) is None


@pytest.mark.parametrize("text", ["", " ", "a", "ab", "Hello, World!", "  padded ", "héllo"])
def test_reverse_twice_is_identity(text):
    assert reverse(reverse(text)) == text
