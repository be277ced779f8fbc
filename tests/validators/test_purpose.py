"""
Tests for file purpose validation and typo suggestions.
"""

import pytest

from apiguard.validators.purpose import (
    PURPOSE_RULE,
    VALID_PURPOSES,
    is_valid_purpose,
    purpose_error_message,
    suggest_purpose,
)


def test_all_purposes_are_valid():
    """Test that each documented purpose is accepted."""
    for purpose in ["assistants", "vision", "batch", "fine-tune", "user_data", "evals"]:
        assert is_valid_purpose(purpose) is True
    assert len(VALID_PURPOSES) == 6


@pytest.mark.parametrize(
    "value",
    ["ASSISTANTS", "Vision", "assistant", "file-search", "", " batch", None, 1, [], {}, True],
)
def test_invalid_purposes(value):
    """Test that anything but an exact purpose string is rejected."""
    assert is_valid_purpose(value) is False


@pytest.mark.parametrize(
    "typo, expected",
    [
        ("assistant", "assistants"),
        ("asistants", "assistants"),
        ("document", "assistants"),
        ("finetune", "fine-tune"),
        ("fine tune", "fine-tune"),
        ("finetuning", "fine-tune"),
        ("userdata", "user_data"),
        ("user data", "user_data"),
        ("image", "vision"),
        ("eval", "evals"),
    ],
)
def test_known_typos_are_suggested(typo, expected):
    """Test the exact-match typo table."""
    assert suggest_purpose(typo) == expected
    assert purpose_error_message(typo) == f'Did you mean "{expected}"?'


def test_partial_match_suggestions():
    """Test the separator-insensitive partial match fallback."""
    assert suggest_purpose("ASSISTANTS") == "assistants"
    assert suggest_purpose("fine_tune") == "fine-tune"
    assert suggest_purpose("user-data") == "user_data"
    assert suggest_purpose("batches") == "batch"


def test_no_suggestion_lists_all_purposes():
    """Test the generic message when nothing resembles a purpose."""
    assert suggest_purpose("invalid_purpose") is None
    assert suggest_purpose("") is None

    message = purpose_error_message("invalid_purpose")
    for purpose in VALID_PURPOSES:
        assert purpose in message
    assert "512 MB" in message
    assert "Download permissions" in message


def test_non_string_message_names_the_type():
    """Test the type mismatch message."""
    assert "received: number" in purpose_error_message(42)
    assert "received: null" in purpose_error_message(None)
    assert suggest_purpose(42) is None


def test_purpose_rule_categories():
    """Test that the rule reports type and domain problems separately."""
    assert PURPOSE_RULE.check("assistants") is None

    wrong_type = PURPOSE_RULE.check(["assistants"])
    assert wrong_type.category == "type_mismatch"

    typo = PURPOSE_RULE.check("assistant")
    assert typo.category == "domain_violation"
    assert typo.suggestion == "assistants"
