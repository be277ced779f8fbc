"""
Tests for the Files API request models.
"""

import pytest
from pydantic import ValidationError

from apiguard.models.files import CreateFileRequest, ExpiresAfter, ListFilesQuery


def test_expires_after_bounds():
    """Test the expiration window boundaries."""
    assert ExpiresAfter(anchor="created_at", seconds=3600).seconds == 3600
    assert ExpiresAfter(anchor="created_at", seconds=2592000).seconds == 2592000
    assert ExpiresAfter(anchor="created_at", seconds=86400.0).seconds == 86400

    for seconds in [3599, 2592001, 0, -3600, 3600.5]:
        with pytest.raises(ValidationError):
            ExpiresAfter(anchor="created_at", seconds=seconds)


def test_expires_after_anchor():
    """Test that only created_at is accepted as anchor."""
    with pytest.raises(ValidationError):
        ExpiresAfter(anchor="updated_at", seconds=3600)

    with pytest.raises(ValidationError):
        ExpiresAfter(seconds=3600)

    with pytest.raises(ValidationError):
        ExpiresAfter(anchor="created_at")


def test_create_file_request_with_expiration():
    """Test a complete upload request."""
    request = CreateFileRequest(
        purpose="assistants",
        expires_after={"anchor": "created_at", "seconds": 86400},
        file_type="handbook.pdf",
        file_size=1024,
    )

    assert request.purpose == "assistants"
    assert request.expires_after.seconds == 86400
    assert request.file_type == "handbook.pdf"


@pytest.mark.parametrize("expires_after", ["86400", 86400, [3600], {"anchor": "created_at"}])
def test_create_file_request_rejects_malformed_expiration(expires_after):
    """Test wrong container types for expires_after."""
    with pytest.raises(ValidationError) as exc_info:
        CreateFileRequest(purpose="assistants", expires_after=expires_after)

    assert exc_info.value.errors()[0]["loc"][0] == "expires_after"


def test_create_file_request_purpose_suggestion():
    """Test that a mistyped purpose carries a suggestion."""
    with pytest.raises(ValidationError) as exc_info:
        CreateFileRequest(purpose="finetune")

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("purpose",)
    assert str(error["ctx"]["error"]) == 'Did you mean "fine-tune"?'


def test_create_file_request_checks_type_against_purpose():
    """Test the cross-field file type rule."""
    assert CreateFileRequest(purpose="vision", file_type="image/png").file_type == "image/png"

    with pytest.raises(ValidationError) as exc_info:
        CreateFileRequest(purpose="batch", file_type="data.json")

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("file_type",)
    assert "Rename file extension from .json to .jsonl" in str(error["ctx"]["error"])


def test_create_file_request_checks_size_against_purpose():
    """Test the cross-field file size rule."""
    with pytest.raises(ValidationError) as exc_info:
        CreateFileRequest(purpose="vision", file_size=25 * 1024 * 1024)

    assert exc_info.value.errors()[0]["loc"] == ("file_size",)


def test_list_files_query_defaults_and_limits():
    """Test list query defaults and bounds."""
    query = ListFilesQuery()
    assert query.purpose is None
    assert query.order == "desc"
    assert query.limit == 20

    assert ListFilesQuery(purpose="vision", order="asc", limit="100").limit == 100

    for params in [{"limit": 0}, {"limit": 10001}, {"order": "newest"}, {"purpose": "images"}]:
        with pytest.raises(ValidationError):
            ListFilesQuery(**params)


@pytest.mark.parametrize("seconds", ["86400", True, None, [86400]])
def test_expires_after_seconds_must_be_a_number(seconds):
    """Test that non-numeric seconds are not converted."""
    with pytest.raises(ValidationError) as exc_info:
        ExpiresAfter(anchor="created_at", seconds=seconds)

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("seconds",)
    assert error["ctx"]["error"].category == "type_mismatch"


def test_file_size_must_be_a_number():
    """Test that the upload size is not converted from text."""
    for file_size in ["1024", True]:
        with pytest.raises(ValidationError) as exc_info:
            CreateFileRequest(purpose="vision", file_size=file_size)

        assert exc_info.value.errors()[0]["ctx"]["error"].category == "type_mismatch"


@pytest.mark.parametrize(
    "model, fields",
    [
        (CreateFileRequest, {"purpose": "assistants", "purpse": "vision"}),
        (ExpiresAfter, {"anchor": "created_at", "seconds": 3600, "ttl": 60}),
        (ListFilesQuery, {"limt": 5}),
    ],
)
def test_unknown_fields_are_rejected(model, fields):
    """Test that misspelled fields are reported instead of dropped."""
    with pytest.raises(ValidationError) as exc_info:
        model(**fields)

    assert exc_info.value.errors()[0]["type"] == "extra_forbidden"
