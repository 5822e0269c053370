"""Tests for exception classes."""

import pytest

from asciigrid.exceptions import AsciiGridError, ConfigError, InvalidInputError


class TestInvalidInputError:
    """Tests for InvalidInputError."""

    def test_message_and_attributes(self) -> None:
        error = InvalidInputError("max_column_width", "must be positive", 0)
        assert str(error) == "Invalid max_column_width: must be positive"
        assert error.field == "max_column_width"
        assert error.reason == "must be positive"
        assert error.value == 0

    def test_is_value_error(self) -> None:
        """Callers catching ValueError still see invalid input."""
        with pytest.raises(ValueError):
            raise InvalidInputError("headers", "must be a sequence of cells")


class TestHierarchy:
    """All library errors share a base class."""

    @pytest.mark.parametrize(
        "error",
        [InvalidInputError("rows", "bad"), ConfigError("opts.yaml", "missing")],
    )
    def test_base_class(self, error: Exception) -> None:
        assert isinstance(error, AsciiGridError)

    def test_config_error_message(self) -> None:
        error = ConfigError("opts.yaml", "No such file or directory")
        assert error.path == "opts.yaml"
        assert str(error) == "Cannot load options from 'opts.yaml': No such file or directory"
