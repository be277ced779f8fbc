"""
Shared predicates used by the field and tool validators.

All helpers take arbitrary decoded JSON values and never raise.
"""

import math
from typing import Any, Callable


def is_non_empty_string(value: Any) -> bool:
    """True if value is a str with at least one character."""
    return isinstance(value, str) and len(value) > 0


def is_number(value: Any) -> bool:
    """True for real ints and floats. Booleans and NaN are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and not math.isnan(value)


def is_integer(value: Any) -> bool:
    """True for ints and integer-valued floats (JSON ``10.0``)."""
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def is_number_in_range(value: Any, minimum: float, maximum: float) -> bool:
    return is_number(value) and minimum <= value <= maximum


def is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def all_elements_match(value: Any, predicate: Callable[[Any], bool]) -> bool:
    return isinstance(value, list) and all(predicate(item) for item in value)


def validate_id_format(value: Any, prefix: str, min_suffix: int = 1) -> bool:
    """
    Check an identifier such as ``file-abc`` or ``vs_123``.

    Args:
        value: Candidate identifier
        prefix: Required prefix, e.g. ``"file-"``
        min_suffix: Minimum number of characters after the prefix

    Returns:
        True if value is a string with the prefix and enough content after it
    """
    if not isinstance(value, str) or not value.startswith(prefix):
        return False
    return len(value) - len(prefix) >= min_suffix


def type_name(value: Any) -> str:
    """Human readable JSON type name for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
