"""
Slugify Utility

This module converts free text (titles, headings, names) into a URL-friendly
"slug": lowercase ASCII letters, digits, hyphens, underscores and tildes.

Key features:
- Collapses whitespace to hyphens and maps `&`, `/`, `.` to hyphens and `$` to `s`.
- Drops apostrophes (ASCII and typographic) so "Don't" becomes "dont".
- Strips diacritics via Unicode canonical decomposition ("café" -> "cafe").
- Removes anything left that is not slug-safe and collapses hyphen runs.

@dependencies
- `re` for the fixed, precompiled patterns.
- `unicodedata` for NFD decomposition and category lookup.

@notes
- The order of the passes matters. Substitutions run before the unsafe-character
  filter, otherwise `&`, `/`, `.` and `$` would simply disappear.
- Only one trailing hyphen is removed. After dash collapsing there is never more
  than one, but a leading hyphen from the input is kept.
"""

import re
import unicodedata
from typing import Optional

UNSAFE_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9\-_~]")
DASH_RUN_PATTERN = re.compile(r"-+")
SPACE_RUN_PATTERN = re.compile(r"\s+")

# Applied in order, as plain (non-regex) replacements.
_SUBSTITUTIONS = (
    ("&", "-"),
    ("/", "-"),
    (".", "-"),
    ("$", "s"),
    ("’", ""),  # right single quotation mark
    ("'", ""),
)


def strip_diacritics(value: str) -> str:
    """
    Remove combining (non-spacing) marks, keeping the base characters.

    Args:
        value: The string to clean.

    Returns:
        The NFD-decomposed string without any code point of category "Mn".
    """
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def to_slug(value: Optional[str]) -> Optional[str]:
    """
    Convert a string to a slug.

    Args:
        value: The string to slugify. `None` is allowed.

    Returns:
        The slug, or `None` when `value` is `None`.
    """
    if value is None:
        return None

    value = SPACE_RUN_PATTERN.sub("-", value.strip())
    for old, new in _SUBSTITUTIONS:
        value = value.replace(old, new)

    value = strip_diacritics(value)
    value = DASH_RUN_PATTERN.sub("-", UNSAFE_CHAR_PATTERN.sub("", value))
    if value.endswith("-"):
        value = value[:-1]

    # Only ASCII is left at this point, so lower() is locale independent.
    return value.lower()
