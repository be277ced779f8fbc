"""
Tests for prompt template reference validation.
"""

import pytest

from apiguard.validators.prompt import PROMPT_RULE, is_valid_prompt, prompt_error_message


def test_minimal_prompt():
    """Test the smallest valid prompt references."""
    assert is_valid_prompt(None) is True
    assert is_valid_prompt({"id": "pmpt_abc123"}) is True
    assert is_valid_prompt({"id": "pmpt_x", "version": "2"}) is True
    assert is_valid_prompt({"id": "pmpt_x", "version": None, "variables": None}) is True


def test_prompt_with_every_variable_kind():
    """Test string and typed variables together."""
    prompt = {
        "id": "pmpt_abc123",
        "version": "3",
        "variables": {
            "customer": "Jane",
            "summary": {"type": "input_text", "text": "A short summary"},
            "avatar": {"type": "input_image", "detail": "low", "image_url": "https://example.com/a.png"},
            "scan": {"type": "input_image", "detail": "auto", "image_data": "aGVsbG8="},
            "contract": {"type": "input_file", "file_id": "file-abc123"},
            "inline": {"type": "input_file", "file_data": "data:application/pdf;base64,aGVsbG8="},
        },
    }

    assert is_valid_prompt(prompt) is True


@pytest.mark.parametrize(
    "prompt",
    [
        "pmpt_abc123",
        ["pmpt_abc123"],
        {},
        {"id": "pmpt_"},
        {"id": "prompt_abc"},
        {"id": 123},
        {"id": "pmpt_x", "version": ""},
        {"id": "pmpt_x", "version": 2},
        {"id": "pmpt_x", "variables": "name=Jane"},
        {"id": "pmpt_x", "variables": {"": "empty key"}},
        {"id": "pmpt_x", "variables": {"a": 5}},
        {"id": "pmpt_x", "variables": {"a": {"text": "no type"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_audio", "data": "..."}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_text"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_text", "text": ""}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_image", "detail": "high"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_image", "image_url": "https://x"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_image", "detail": "max", "image_url": "https://x"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_file"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_file", "file_id": "file-"}}},
        {"id": "pmpt_x", "variables": {"a": {"type": "input_file", "file_id": "doc-123"}}},
    ],
)
def test_invalid_prompts(prompt):
    """Test rejected prompt references."""
    assert is_valid_prompt(prompt) is False


def test_error_message_names_the_problem():
    """Test that the message explains the first problem found."""
    message = prompt_error_message({"id": "pmpt_x", "variables": {"a": {"type": "input_image", "detail": "high"}}})

    assert message.startswith("Invalid prompt configuration.")
    assert 'variable "a": input_image requires detail' in message
    assert "pmpt_*" in message


def test_rule_categories():
    """Test categories reported through the prompt rule."""
    assert PROMPT_RULE.check({"id": "pmpt_ok"}) is None
    assert PROMPT_RULE.check("pmpt_ok").category == "type_mismatch"
    assert PROMPT_RULE.check({"version": "1"}).category == "structural_violation"
    assert PROMPT_RULE.check({"id": "pmpt_"}).category == "domain_violation"
