"""
Tests for the Result type.
"""

import dataclasses

import pytest

from post_client.result import Failure, Success


class TestSuccess:
    """Tests for the Success variant."""

    @pytest.mark.parametrize("value", [1, "text", None, [1, 2], {"a": 1}, object()])
    def test_value_is_recoverable(self, value):
        """Test that the wrapped value comes back unchanged."""
        result = Success(value)

        assert result.is_ok is True
        assert result.value is value

    def test_is_immutable(self):
        """Test that a Success cannot be modified."""
        result = Success(1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2

    def test_discriminator_is_not_a_constructor_argument(self):
        """Test that is_ok cannot be forged."""
        with pytest.raises(TypeError):
            Success(1, is_ok=False)

    def test_has_no_error(self):
        """Test that a Success carries no error attribute."""
        assert not hasattr(Success(1), "error")


class TestFailure:
    """Tests for the Failure variant."""

    @pytest.mark.parametrize("error", [ValueError("bad"), "message", 404, None])
    def test_error_is_recoverable(self, error):
        """Test that the wrapped error comes back unchanged."""
        result = Failure(error)

        assert result.is_ok is False
        assert result.error is error

    def test_is_immutable(self):
        """Test that a Failure cannot be modified."""
        result = Failure(ValueError("bad"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.error = None

    def test_has_no_value(self):
        """Test that a Failure carries no value attribute."""
        assert not hasattr(Failure("bad"), "value")

    def test_error_is_not_raised(self):
        """Test that wrapping an exception does not raise it."""
        error = RuntimeError("kept, not thrown")

        result = Failure(error)

        assert result.error.__traceback__ is None


class TestEquality:
    """Tests for value semantics."""

    def test_equal_successes(self):
        assert Success(1) == Success(1)

    def test_success_never_equals_failure(self):
        assert Success(1) != Failure(1)
