from __future__ import annotations

import re
from enum import Enum
from typing import Any

from .exceptions import InvalidResponseShape, InvalidThreadNumber

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


class ResponseShape(str, Enum):
    """Output shapes supported by SuggestionEngine.suggest."""

    ARRAY = "array"
    JSON = "json"


def validate_response_shape(value: Any) -> ResponseShape:
    """Return the ResponseShape for value or raise InvalidResponseShape."""
    if isinstance(value, ResponseShape):
        return value
    for shape in ResponseShape:
        if value == shape.value:
            return shape
    raise InvalidResponseShape(
        f"Response type({value}) is invalid. "
        f"Use {ResponseShape.JSON.value} or {ResponseShape.ARRAY.value} instead"
    )


def validate_thread_number(value: Any) -> int:
    """
    Convert a loosely typed worker count into a strict positive integer.

    Integers and decimal-integer strings (e.g. read from a config file or the
    command line) are accepted; booleans, floats and anything else are not.
    """
    number: int | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DECIMAL_INTEGER.fullmatch(value.strip()):
        number = int(value.strip())
    if number is None or number <= 0:
        raise InvalidThreadNumber("Thread number must be a positive integer")
    return number
