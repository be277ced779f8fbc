"""
Validation for the ``prompt`` template reference of a response request.

A prompt reference looks like::

    {
        "id": "pmpt_abc123",
        "version": "2",
        "variables": {
            "customer": "Jane",
            "avatar": {"type": "input_image", "detail": "low", "image_url": "https://..."},
        },
    }

Variable values are plain strings or one of the typed inputs ``input_text``,
``input_image`` and ``input_file``.
"""

from typing import Any, Callable, Dict, Optional, Tuple

from apiguard.config import settings
from apiguard.validators.common import is_non_empty_string, type_name, validate_id_format
from apiguard.validators.rules import Category, Rule
from apiguard.validators.tools import is_valid_file_id

IMAGE_DETAILS = ("low", "high", "auto")

Problem = Optional[Tuple[str, Category]]


def is_valid_input_text(variable: Dict[str, Any]) -> bool:
    return is_non_empty_string(variable.get("text"))


def is_valid_input_image(variable: Dict[str, Any]) -> bool:
    if variable.get("detail") not in IMAGE_DETAILS:
        return False
    return isinstance(variable.get("image_url"), str) or isinstance(variable.get("image_data"), str)


def is_valid_input_file(variable: Dict[str, Any]) -> bool:
    has_file_id = isinstance(variable.get("file_id"), str)
    has_file_data = isinstance(variable.get("file_data"), str)

    if not has_file_id and not has_file_data:
        return False

    # An empty file_id alongside file_data is treated as absent
    if has_file_id and variable["file_id"] and not is_valid_file_id(variable["file_id"]):
        return False

    return True


INPUT_VALIDATORS: Dict[str, Callable[[Dict[str, Any]], bool]] = {
    "input_text": is_valid_input_text,
    "input_image": is_valid_input_image,
    "input_file": is_valid_input_file,
}

INPUT_REQUIREMENTS: Dict[str, str] = {
    "input_text": "input_text requires a non-empty text",
    "input_image": 'input_image requires detail ("low", "high" or "auto") and image_url or image_data',
    "input_file": 'input_file requires file_id or file_data, and file_id must start with "file-"',
}


def variable_problem(name: Any, value: Any) -> Problem:
    if not is_non_empty_string(name):
        return "variable names must be non-empty strings", "domain_violation"

    if isinstance(value, str):
        return None

    if not isinstance(value, dict):
        return (
            f'variable "{name}" must be a string or an input object (received: {type_name(value)})',
            "type_mismatch",
        )

    if "type" not in value:
        return f'variable "{name}" is missing its type', "structural_violation"

    input_type = value["type"]
    validator = INPUT_VALIDATORS.get(input_type) if isinstance(input_type, str) else None
    if validator is None:
        return (
            f'variable "{name}" has unsupported type {input_type!r} '
            "(expected input_text, input_image or input_file)",
            "domain_violation",
        )

    if not validator(value):
        return f'variable "{name}": {INPUT_REQUIREMENTS[input_type]}', "structural_violation"

    return None


def prompt_problem(prompt: Any) -> Problem:
    """Describe the first thing wrong with a prompt reference, or None."""
    if prompt is None:
        return None

    if not isinstance(prompt, dict):
        return f"prompt must be an object (received: {type_name(prompt)})", "type_mismatch"

    if "id" not in prompt:
        return "prompt.id is required", "structural_violation"

    if not validate_id_format(prompt["id"], "pmpt_", settings.PROMPT_ID_MIN_SUFFIX):
        return f'prompt.id must start with "pmpt_" (received: {prompt["id"]!r})', "domain_violation"

    variables = prompt.get("variables")
    if variables is not None:
        if not isinstance(variables, dict):
            return f"prompt.variables must be an object (received: {type_name(variables)})", "type_mismatch"
        for name, value in variables.items():
            problem = variable_problem(name, value)
            if problem:
                return problem

    version = prompt.get("version")
    if version is not None and not is_non_empty_string(version):
        return "prompt.version must be a non-empty string", "domain_violation"

    return None


def is_valid_prompt(prompt: Any) -> bool:
    """True for None or a well formed prompt reference."""
    return prompt_problem(prompt) is None


def prompt_error_message(prompt: Any) -> str:
    problem = prompt_problem(prompt)
    reason = f" {problem[0]}." if problem else ""
    return (
        f"Invalid prompt configuration.{reason} Prompt must have a valid id (pmpt_*), "
        "optional variables object, and optional version string."
    )


def _category(prompt: Any) -> Category:
    problem = prompt_problem(prompt)
    return problem[1] if problem else "structural_violation"


PROMPT_RULE = Rule(
    predicate=is_valid_prompt,
    message=prompt_error_message,
    category=_category,
)
