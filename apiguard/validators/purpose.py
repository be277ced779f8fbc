"""
File purpose validation with typo suggestions.
"""

from typing import Any, Dict, Optional, Tuple

from apiguard.validators.common import type_name
from apiguard.validators.rules import Category, Rule

VALID_PURPOSES: Tuple[str, ...] = (
    "assistants",
    "vision",
    "batch",
    "fine-tune",
    "user_data",
    "evals",
)

# Known misspellings and near-misses, checked before the partial match
PURPOSE_TYPOS: Dict[str, str] = {
    "assistant": "assistants",
    "asistants": "assistants",
    "assitants": "assistants",
    "document": "assistants",
    "finetune": "fine-tune",
    "fine tune": "fine-tune",
    "finetuning": "fine-tune",
    "userdata": "user_data",
    "user data": "user_data",
    "image": "vision",
    "eval": "evals",
}

PURPOSE_GUIDE = """Invalid file purpose.
Purpose guide:
- assistants: Code interpreter (PDF, TXT, DOCX), file_search
- vision: Image understanding (PNG, JPEG)
- batch: Batch API (JSONL)
- fine-tune: fine-tuning (JSONL)
- user_data: User data
- evals: Evals (JSONL)

Allowed sizes: 512 MB (assistants, fine-tune, user_data, evals), 20 MB (vision), 200 MB (batch).
Download permissions: Allowed for some, Forbidden for others."""


def is_valid_purpose(value: Any) -> bool:
    """True only for an exact, case-sensitive member of VALID_PURPOSES."""
    return isinstance(value, str) and value in VALID_PURPOSES


def _squash(value: str) -> str:
    return value.lower().replace("-", "").replace("_", "").replace(" ", "")


def suggest_purpose(value: Any) -> Optional[str]:
    """Best guess at the purpose the caller meant, or None."""
    if not isinstance(value, str):
        return None

    for candidate in (value, value.lower(), value.strip().lower()):
        if candidate in PURPOSE_TYPOS:
            return PURPOSE_TYPOS[candidate]

    squashed = _squash(value)
    if not squashed:
        return None

    for purpose in VALID_PURPOSES:
        normalized = _squash(purpose)
        if normalized in squashed or squashed in normalized:
            return purpose

    return None


def purpose_error_message(value: Any) -> str:
    if not isinstance(value, str):
        return (
            f"Purpose must be a string (received: {type_name(value)}). "
            'Examples: "assistants", "vision", "batch", "fine-tune".'
        )

    suggestion = suggest_purpose(value)
    if suggestion:
        return f'Did you mean "{suggestion}"?'

    return PURPOSE_GUIDE


def purpose_error_category(value: Any) -> Category:
    return "domain_violation" if isinstance(value, str) else "type_mismatch"


PURPOSE_RULE = Rule(
    predicate=is_valid_purpose,
    message=purpose_error_message,
    category=purpose_error_category,
    suggest=suggest_purpose,
)


def _optional(value: Any) -> bool:
    return value is None or is_valid_purpose(value)


# Filters such as the list-files query accept a missing purpose
OPTIONAL_PURPOSE_RULE = PURPOSE_RULE._replace(predicate=_optional)
