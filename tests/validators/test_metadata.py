"""
Tests for metadata validation.
"""

from apiguard.validators.metadata import METADATA_RULE, is_valid_metadata, metadata_error_message


def test_valid_metadata():
    """Test accepted metadata values."""
    assert is_valid_metadata(None) is True
    assert is_valid_metadata({}) is True
    assert is_valid_metadata({"team": "search", "ticket": "OPS-12"}) is True
    assert is_valid_metadata({f"key{i}": "v" for i in range(16)}) is True
    assert is_valid_metadata({"k" * 64: "v" * 512}) is True


def test_invalid_metadata():
    """Test the size and type limits."""
    assert is_valid_metadata([]) is False
    assert is_valid_metadata("team=search") is False
    assert is_valid_metadata({f"key{i}": "v" for i in range(17)}) is False
    assert is_valid_metadata({"k" * 65: "v"}) is False
    assert is_valid_metadata({"k": "v" * 513}) is False
    assert is_valid_metadata({"count": 3}) is False


def test_metadata_message():
    """Test the requirements message."""
    assert "Maximum 16 key-value pairs" in metadata_error_message({"a": 1})
    assert "Received: array" in metadata_error_message([])
    assert METADATA_RULE.check([]).category == "type_mismatch"
    assert METADATA_RULE.check({"a": 1}).category == "domain_violation"
