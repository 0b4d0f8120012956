"""
Truncation helper for Clippy.

Shortens text to a maximum length including a suffix, optionally backing off
to the last whitespace so words are not cut in half.
"""

from typing import Optional

from clippy import settings


class InvalidArgumentError(ValueError):
    """Raised when a call's arguments cannot produce a sensible result."""

    pass


def _last_whitespace_index(text: str) -> int:
    for index in range(len(text) - 1, -1, -1):
        if text[index].isspace():
            return index
    return -1


def truncate(
    text: Optional[str],
    max_length: int,
    cut_at_whitespace: bool = False,
    suffix: str = settings.DEFAULT_TRUNCATE_SUFFIX,
) -> Optional[str]:
    """
    Truncates a string to `max_length` characters, suffix included.

    Args:
        text: The text to truncate. `None`, empty and whitespace-only text is
              returned as is.
        max_length: Total allowed length of the result, including the suffix.
        cut_at_whitespace: Cut at the last whitespace of the shortened text, if
                           there is one past the second character.
        suffix: Appended to the shortened text.

    Returns:
        The truncated string. With `cut_at_whitespace` it may be shorter than
        `max_length`.

    Raises:
        InvalidArgumentError: If truncation is needed and the suffix is not
                              shorter than `max_length`.
    """
    if text is None or not text.strip():
        return text
    if len(text) <= max_length:
        return text

    if len(suffix) >= max_length:
        raise InvalidArgumentError(
            f"max_length ({max_length}) must be greater than the suffix length "
            f"({len(suffix)})."
        )

    trunc = text[: max_length - len(suffix)]
    if cut_at_whitespace:
        last_whitespace = _last_whitespace_index(trunc)
        if last_whitespace > 1:
            trunc = trunc[:last_whitespace]

    return trunc + suffix
