"""
Clippy Package Initializer

This module initializes the Clippy package and exports its string transforms.

Key features:
- Marks the 'clippy' directory as a Python package.
- Re-exports everything from `clippy.utils` so callers can write
  `from clippy import to_slug`.
"""

from .utils import (
    InvalidArgumentError,
    TokenParseResult,
    add_query_string_parameter,
    html_decode,
    is_null_or_whitespace,
    is_valid_url,
    reverse,
    strip_diacritics,
    strip_html,
    to_first_upper,
    to_slug,
    truncate,
    try_parse_tokens,
)

__version__ = "0.1.0"

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
    "__version__",
]
