from typing import Any

from apiguard.config import settings
from apiguard.validators.common import type_name
from apiguard.validators.rules import Category, Rule


def is_valid_metadata(metadata: Any) -> bool:
    """Metadata is optional; when present it is a small str -> str mapping."""
    if metadata is None:
        return True

    if not isinstance(metadata, dict):
        return False

    if len(metadata) > settings.METADATA_MAX_KEYS:
        return False

    for key, value in metadata.items():
        if not isinstance(key, str) or len(key) > settings.METADATA_MAX_KEY_LENGTH:
            return False
        if not isinstance(value, str) or len(value) > settings.METADATA_MAX_VALUE_LENGTH:
            return False

    return True


def metadata_error_message(metadata: Any) -> str:
    requirements = (
        "Invalid metadata configuration. Requirements:\n"
        f"  - Maximum {settings.METADATA_MAX_KEYS} key-value pairs\n"
        f"  - Keys: max {settings.METADATA_MAX_KEY_LENGTH} characters\n"
        f"  - Values: must be strings, max {settings.METADATA_MAX_VALUE_LENGTH} characters"
    )
    if not isinstance(metadata, dict):
        return f"{requirements}\n\nReceived: {type_name(metadata)}"
    return requirements


def _category(metadata: Any) -> Category:
    return "domain_violation" if isinstance(metadata, dict) else "type_mismatch"


METADATA_RULE = Rule(
    predicate=is_valid_metadata,
    message=metadata_error_message,
    category=_category,
)
