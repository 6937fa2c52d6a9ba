"""Tests for DispatchResult."""

import pytest

from signal_sdk._internal.dispatch.result import DispatchResult, Outcome
from signal_sdk.exceptions import SignalAPIError, SignalResponseError


class TestDispatchResult:
    """Tests for the tagged result type."""

    def test_value_result(self):
        """Should unwrap to the value."""
        result = DispatchResult("get_accounts", Outcome.VALUE, value=["+1"], status_code=200)
        assert result.ok is True
        assert result.unwrap() == ["+1"]

    def test_empty_result(self):
        """Should unwrap to None."""
        result = DispatchResult("health_check", Outcome.EMPTY, status_code=204)
        assert result.ok is True
        assert result.unwrap() is None

    def test_failure_unwrap_raises_carried_error(self):
        """Should raise the carried error on unwrap."""
        error = SignalAPIError("boom", status_code=400)
        result = DispatchResult("get_about", Outcome.SERVICE_ERROR, error=error, status_code=400)
        assert result.ok is False
        with pytest.raises(SignalAPIError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    def test_failure_without_error_is_rejected(self):
        """Should reject a failure without an error."""
        with pytest.raises(ValueError):
            DispatchResult("get_about", Outcome.SHAPE_ERROR)

    def test_success_with_error_is_rejected(self):
        """Should reject a success that carries an error."""
        with pytest.raises(ValueError):
            DispatchResult("get_about", Outcome.VALUE, error=SignalResponseError("x"))

    def test_is_immutable(self):
        """Should not allow fields to change."""
        result = DispatchResult("health_check", Outcome.EMPTY)
        with pytest.raises(AttributeError):
            result.value = 1  # type: ignore[misc]
