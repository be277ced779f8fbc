"""
Upload size limits per file purpose.
"""

from typing import Any, Dict, Tuple

from apiguard.validators.common import is_number, type_name
from apiguard.validators.purpose import VALID_PURPOSES, is_valid_purpose
from apiguard.validators.rules import Category, Rule

MB = 1024 * 1024

FILE_SIZE_LIMITS_MB: Dict[str, int] = {
    "assistants": 512,
    "vision": 20,
    "batch": 200,
    "fine-tune": 512,
    "user_data": 512,
    "evals": 512,
}

FILE_SIZE_LIMITS_BYTES: Dict[str, int] = {
    purpose: limit * MB for purpose, limit in FILE_SIZE_LIMITS_MB.items()
}


def is_valid_file_size(size: Any, purpose: Any) -> bool:
    """True if size is a positive byte count within the purpose limit."""
    if not is_number(size) or size <= 0:
        return False
    if not is_valid_purpose(purpose):
        return False
    return size <= FILE_SIZE_LIMITS_BYTES[purpose]


def file_size_error_message(size: Any, purpose: Any) -> str:
    if not is_number(size):
        return f"File size must be a number (in bytes). Received: {type_name(size)}"

    if size <= 0:
        return f"File size must be positive. Received: {size} bytes"

    if not purpose or not isinstance(purpose, str):
        return f"Cannot validate file size without a valid purpose. Received purpose: {purpose!r}"

    if not is_valid_purpose(purpose):
        return (
            f'Unknown file purpose "{purpose}". Cannot determine size limit. '
            f"Valid purposes: {', '.join(VALID_PURPOSES)}"
        )

    limit_mb = FILE_SIZE_LIMITS_MB[purpose]
    limit_bytes = FILE_SIZE_LIMITS_BYTES[purpose]

    return (
        f'File size ({size / MB:.2f} MB) exceeds maximum for purpose "{purpose}". '
        f"Maximum allowed: {limit_mb} MB ({limit_bytes:,} bytes).\n\n"
        "Size limits by purpose:\n"
        '  - "assistants": 512 MB (documents for file_search)\n'
        '  - "vision": 20 MB (images for vision models)\n'
        '  - "batch": 200 MB (JSONL for Batch API)\n'
        '  - "fine-tune": 512 MB (JSONL for fine-tuning)\n'
        '  - "user_data": 512 MB (general purpose files)\n'
        '  - "evals": 512 MB (JSONL evaluation datasets)\n\n'
        "Consider:\n"
        '  - Using purpose "vision" for files up to 20 MB (if image format)\n'
        '  - Using purpose "batch" for files up to 200 MB (if JSONL format)\n'
        "  - Using the Uploads API for files over 512 MB (supports up to 8 GB)"
    )


def _category(pair: Tuple[Any, Any]) -> Category:
    size, purpose = pair
    if not is_number(size):
        return "type_mismatch"
    if size <= 0:
        return "domain_violation"
    return "cross_field_inconsistency"


FILE_SIZE_RULE = Rule(
    predicate=lambda pair: is_valid_file_size(*pair),
    message=lambda pair: file_size_error_message(*pair),
    category=_category,
)
