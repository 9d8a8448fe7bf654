"""Tests for exception hierarchy."""

import pytest

from listkeeper.exceptions import DispatchNotBoundError, DuplicateEntryError, ListkeeperError


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_base_exception_exists(self):
        """ListkeeperError is the base exception."""
        error = ListkeeperError("test message")
        assert isinstance(error, Exception)
        assert str(error) == "test message"

    @pytest.mark.parametrize(
        ("error", "attribute", "value"),
        [
            (DispatchNotBoundError("shell"), "consumer", "shell"),
            (DuplicateEntryError(7), "entry_id", 7),
        ],
    )
    def test_all_exceptions_inherit_from_base(self, error, attribute, value):
        """All custom exceptions inherit from ListkeeperError and keep their details."""
        assert isinstance(error, ListkeeperError)
        assert getattr(error, attribute) == value

    def test_dispatch_error_names_consumer(self):
        """DispatchNotBoundError says which consumer was not wired."""
        assert "for shell" in str(DispatchNotBoundError("shell"))

    def test_dispatch_error_without_consumer(self):
        """DispatchNotBoundError works without a consumer name."""
        error = DispatchNotBoundError()
        assert error.consumer is None
        assert "not bound." in str(error)

    def test_duplicate_error_message(self):
        """DuplicateEntryError mentions the id."""
        assert str(DuplicateEntryError(7)) == "Entry id 7 already exists"
