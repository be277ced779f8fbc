"""
Scalar field types shared by the JSON request bodies.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from apiguard.validators.common import is_integer, is_number, type_name
from apiguard.validators.rules import Rule, enforce


def integer_error_message(value: Any) -> str:
    if is_number(value):
        return f"Expected a whole number (received: {value!r})"
    return f"Expected an integer (received: {type_name(value)} {value!r})"


INTEGER_RULE = Rule(
    predicate=is_integer,
    message=integer_error_message,
    category=lambda value: "domain_violation" if is_number(value) else "type_mismatch",
)


def integer(**constraints: Any) -> Any:
    """
    Integer field type accepting ints and integer-valued floats such as 10.0.
    Strings and booleans are rejected. Numeric bounds (ge, le, ...) apply to
    the value after the integer check.
    """
    return Annotated[int, Field(**constraints), BeforeValidator(enforce(INTEGER_RULE))]
