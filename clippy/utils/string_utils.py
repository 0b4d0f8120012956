"""
String Utility Functions for Clippy

This module provides small helpers for HTML, URLs and general string handling.
"""

import html
import re
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode

HTML_TAG_PATTERN = re.compile(r"(<[^>]+>)")
URL_PATTERN = re.compile(r"http(s)?://([\w-]+\.)+[\w-]+(/[\w\- ./?%&=]*)?")


def html_decode(value: Optional[str]) -> Optional[str]:
    """Decodes HTML entities, e.g. "&lt;b&gt;" -> "<b>"."""
    if value is None:
        return None
    return html.unescape(value)


def strip_html(value: str) -> str:
    """Removes anything that looks like an HTML tag."""
    return HTML_TAG_PATTERN.sub("", value)


def is_valid_url(value: str) -> bool:
    """
    Checks whether the string contains an http(s) URL.

    The match is not anchored, so a URL anywhere in the string counts.
    """
    return URL_PATTERN.search(value) is not None


def add_query_string_parameter(url: str, name: str, value: str) -> str:
    """
    Adds a parameter to the query string of a URL, replacing it if present.

    Args:
        url: The URL, with or without a query string.
        name: Name of the parameter.
        value: Value of the parameter. It is URL-encoded in the result.

    Returns:
        The URL with the parameter set. Repeated keys in the existing query are
        merged into one comma-separated value.
    """
    parts = url.split("?")
    base = parts[0]
    query = parts[1] if len(parts) > 1 else ""

    params: Dict[str, str] = {}
    for key, existing in parse_qsl(query, keep_blank_values=True):
        params[key] = f"{params[key]},{existing}" if key in params else existing
    params[name] = value

    return f"{base}?{urlencode(params)}"


def to_first_upper(value: Optional[str]) -> Optional[str]:
    """
    Upper-cases the first character unless the string is blank.

    Characters whose upper case is more than one character (e.g. "ß") are
    left alone, so the length never changes.
    """
    if is_null_or_whitespace(value):
        return value
    first = value[0].upper()
    if len(first) != 1:
        return value
    return first + value[1:]


def is_null_or_whitespace(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def reverse(value: Optional[str]) -> Optional[str]:
    """Reverses the string. Blank and single-character strings come back as is."""
    if is_null_or_whitespace(value) or len(value) == 1:
        return value
    return value[::-1]
