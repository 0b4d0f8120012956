"""
Clippy Utilities Subpackage

This module initializes the `clippy.utils` subpackage and exports the string
transforms for use throughout the application.

Key features:
- Marks the 'clippy/utils' directory as a Python subpackage.
- Exports `to_slug`, `truncate`, `try_parse_tokens` and the smaller string helpers.

@dependencies
- Modules within this subpackage (`slugify`, `truncate`, `tokens`, `string_utils`).
"""

from .slugify import strip_diacritics, to_slug
from .string_utils import (
    add_query_string_parameter,
    html_decode,
    is_null_or_whitespace,
    is_valid_url,
    reverse,
    strip_html,
    to_first_upper,
)
from .tokens import TokenParseResult, try_parse_tokens
from .truncate import InvalidArgumentError, truncate

__all__ = [
    "to_slug",
    "strip_diacritics",
    "truncate",
    "InvalidArgumentError",
    "try_parse_tokens",
    "TokenParseResult",
    "html_decode",
    "strip_html",
    "is_valid_url",
    "add_query_string_parameter",
    "to_first_upper",
    "is_null_or_whitespace",
    "reverse",
]
