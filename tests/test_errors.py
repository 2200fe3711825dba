"""Tests for result and error values."""

import pytest

from tptags.errors import (
    TagError,
    TagErrorKind,
    TagSyntaxError,
    TagsResult,
    TagValidationError,
)


class TestTagErrorKind:
    """Tests for TagErrorKind."""

    def test_reasons(self):
        """Test that each kind carries its user-facing reason."""
        assert TagErrorKind.TOO_MANY_TAGS.reason == "tags field: too many tags"
        assert TagErrorKind.TOO_SHORT.reason == "too short"
        assert TagErrorKind.ESCAPE_FAILED.reason == "escape failed"

    def test_value_is_code_string(self):
        """Test that the enum value is the machine-readable error code."""
        assert TagErrorKind.TOO_SHORT.value == "TOO_SHORT"
        assert TagErrorKind("ESCAPE_FAILED") is TagErrorKind.ESCAPE_FAILED


class TestTagError:
    """Tests for TagError."""

    def test_list_level_message(self):
        """Test that an error without index uses the bare reason."""
        err = TagError(TagErrorKind.TOO_MANY_TAGS)

        assert err.index is None
        assert err.message == "tags field: too many tags"
        assert str(err) == err.message

    def test_entry_message_uses_zero_based_index(self):
        """Test that per-entry messages read 'custom tag n<i>'."""
        err = TagError(TagErrorKind.TOO_SHORT, index=0)

        assert err.message == "custom tag n0: too short"

    def test_frozen(self):
        """Test that error values cannot be changed."""
        err = TagError(TagErrorKind.TOO_SHORT, index=2)

        with pytest.raises(AttributeError):
            err.index = 3


class TestTagsResult:
    """Tests for TagsResult."""

    def test_success(self):
        """Test that a success result holds the tags as a tuple."""
        result = TagsResult.success(["a", "b"])

        assert result.ok
        assert result.error is None
        assert result.tags == ("a", "b")
        assert result.unwrap() == ["a", "b"]

    def test_success_does_not_share_caller_list(self):
        """Test that changing the caller's list does not change the result."""
        tags = ["a", "b"]
        result = TagsResult.success(tags)
        tags.append("c")

        assert result.tags == ("a", "b")

    def test_unwrap_returns_fresh_list(self):
        """Test that mutating the unwrapped list leaves the result intact."""
        result = TagsResult.success(["a"])
        result.unwrap().append("b")

        assert result.unwrap() == ["a"]

    def test_hashable(self):
        """Test that results can be hashed and compared."""
        assert hash(TagsResult.success(["a"])) == hash(TagsResult.success(("a",)))
        failure = TagsResult.failure(TagError(TagErrorKind.TOO_SHORT, index=1))
        assert isinstance(hash(failure), int)

    def test_failure(self):
        """Test that a failure result raises on unwrap with the error attached."""
        err = TagError(TagErrorKind.ESCAPE_FAILED, index=4)
        result = TagsResult.failure(err)

        assert not result.ok
        assert result.tags is None
        with pytest.raises(TagValidationError) as exc_info:
            result.unwrap()

        assert exc_info.value.error is err
        assert str(exc_info.value) == "custom tag n4: escape failed"


class TestExceptions:
    """Tests for the exception types."""

    def test_syntax_error_is_value_error(self):
        """Test that TagSyntaxError is a ValueError carrying the kind."""
        exc = TagSyntaxError(TagErrorKind.TOO_SHORT)

        assert isinstance(exc, ValueError)
        assert exc.kind == TagErrorKind.TOO_SHORT

    def test_validation_error_is_value_error(self):
        """Test that TagValidationError is a ValueError with the error message."""
        exc = TagValidationError(TagError(TagErrorKind.TOO_MANY_TAGS))

        assert isinstance(exc, ValueError)
        assert str(exc) == "tags field: too many tags"
