"""
Token-Separated Value Parsing

This module parses delimiter-separated strings such as "1, 2, 3" into a list of
typed values.

Key features:
- `try_parse_tokens`: splits, trims and converts each token to a target type.
- `TokenParseResult`: a small result model carrying the success flag and values.

@dependencies
- `pydantic.TypeAdapter` for converting a token to the requested type.
- `pydantic.BeforeValidator` for the stricter text checks on int, float and bool.
- `pydantic.BaseModel` for the result model.
- `logging` for reporting the token that failed to convert.

@notes
- Parsing is all-or-nothing. One bad token fails the whole parse and no
  partial values are returned.
- Every character of the delimiter is a separator on its own, so ",;" splits
  on commas and on semicolons. An empty delimiter splits on whitespace.
- int, float and bool tokens must look like plain numbers or "true"/"false".
  Pydantic's lax forms ("1.0" as an int, "1_000", "yes", "off") are rejected.
"""

import logging
import re
from functools import lru_cache
from typing import Annotated, Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, Field, TypeAdapter
from pydantic.errors import PydanticUserError

from clippy import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTEGER_TEXT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_TEXT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
BOOL_TEXT_PATTERN = re.compile(r"true|false", re.IGNORECASE)


class TokenParseResult(BaseModel, Generic[T]):
    """
    Outcome of `try_parse_tokens`. `values` is only meaningful when `success`
    is true; on failure it is always empty.
    """

    success: bool = Field(..., description="True if every token converted.")
    values: List[T] = Field(
        default_factory=list, description="Converted tokens, in input order."
    )

    def __bool__(self) -> bool:
        return self.success


def _integer_text(value: Any) -> Any:
    if isinstance(value, str) and not INTEGER_TEXT_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not an integer")
    return value


def _float_text(value: Any) -> Any:
    if isinstance(value, str) and not FLOAT_TEXT_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not a number")
    return value


def _bool_text(value: Any) -> Any:
    if isinstance(value, str):
        if not BOOL_TEXT_PATTERN.fullmatch(value):
            raise ValueError(f"{value!r} is not true or false")
        return value.lower()
    return value


STRICT_TYPES = {
    int: Annotated[int, BeforeValidator(_integer_text)],
    float: Annotated[float, BeforeValidator(_float_text)],
    bool: Annotated[bool, BeforeValidator(_bool_text)],
}


@lru_cache(maxsize=None)
def _adapter_for(target_type: Any) -> TypeAdapter:
    return TypeAdapter(STRICT_TYPES.get(target_type, target_type))


def _split(value: str, delimiter: str) -> List[str]:
    if not delimiter:
        return value.split()
    pattern = "[" + re.escape(delimiter) + "]"
    return [segment for segment in re.split(pattern, value) if segment]


def try_parse_tokens(
    value: Optional[str],
    target_type: Type[T] = str,
    delimiter: str = settings.DEFAULT_TOKEN_DELIMITER,
) -> TokenParseResult[T]:
    """
    Tries to split `value` on `delimiter` and convert each token to `target_type`.

    Args:
        value: The delimiter-separated string.
        target_type: Type each trimmed token is converted to (e.g. `int`).
        delimiter: Separator characters. Defaults to ",".

    Returns:
        A successful `TokenParseResult` holding the converted values, or a
        failed one if `value` is None or any token could not be converted.
    """
    if value is None:
        return TokenParseResult(success=False)

    try:
        adapter = _adapter_for(target_type)
    except (TypeError, PydanticUserError) as e:
        # PydanticSchemaGenerationError for unsupported types, TypeError if unhashable
        logger.debug(f"No conversion available for {target_type!r}: {e}")
        return TokenParseResult(success=False)

    values = []
    for token in _split(value, delimiter):
        token = token.strip()
        try:
            values.append(adapter.validate_python(token))
        except (TypeError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.debug(f"Token {token!r} is not a valid {target_type!r}: {e}")
            return TokenParseResult(success=False)

    return TokenParseResult(success=True, values=values)
