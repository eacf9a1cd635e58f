"""
Unit tests for CLI error utilities
"""

import pytest
from pathlib import Path

from tmpl_core.exceptions import (
    DestinationExistsError,
    InvalidDestinationError,
    InvalidSourceError,
    InvalidTemplateNameError,
    SourceNotFoundError,
    StorageIOError,
    StoreEmptyError,
    TemplateExistsError,
    TemplateNotFoundError,
)
from tmpl_cli.utils.errors import (
    CLIError, exit_code_for, format_exception, suggest_fix, handle_cli_error
)


class TestCLIErrors:
    """Tests for CLI error classes"""

    def test_cli_error_basic(self):
        """Test basic CLIError"""
        error = CLIError("Test error")
        assert str(error) == "Test error"
        assert error.exit_code == 1

    def test_cli_error_custom_exit_code(self):
        """Test CLIError with custom exit code"""
        error = CLIError("Test error", exit_code=42)
        assert exit_code_for(error) == 42


class TestExitCodes:
    """Every store failure maps to a non-zero exit code"""

    @pytest.mark.parametrize("exc, code", [
        (InvalidTemplateNameError("x", "bad"), 2),
        (TemplateNotFoundError("x"), 3),
        (StoreEmptyError(Path("/store")), 3),
        (TemplateExistsError("x"), 4),
        (DestinationExistsError(Path("/out")), 4),
        (InvalidDestinationError(Path("/store/out"), "bad"), 4),
        (SourceNotFoundError(Path("/src")), 5),
        (InvalidSourceError(Path("/src"), "bad"), 5),
        (StorageIOError("failed", cause=OSError("disk full")), 1),
        (ValueError("unexpected"), 1),
    ])
    def test_exit_code_mapping(self, exc, code):
        assert exit_code_for(exc) == code


class TestExceptionFormatting:
    """Tests for exception formatting"""

    def test_store_errors_show_message_only(self):
        """Known errors are shown without the class name"""
        result = format_exception(TemplateNotFoundError("web"))

        assert result == "Template 'web' does not exist"

    def test_unexpected_errors_show_type(self):
        result = format_exception(ValueError("Test error"))

        assert "ValueError" in result
        assert "Test error" in result

    def test_format_exception_with_context(self):
        result = format_exception(ValueError("Test error"), context="save")

        assert "Error in save:" in result

    def test_storage_error_includes_cause(self):
        exc = StorageIOError("Failed to save template 'x'", cause=OSError("disk full"))

        assert "disk full" in format_exception(exc)


class TestErrorSuggestions:
    """Tests for error suggestion system"""

    def test_suggest_list_for_missing_template(self):
        assert "tmpl list" in suggest_fix(TemplateNotFoundError("x"))

    def test_suggest_save_for_empty_store(self):
        assert "tmpl save" in suggest_fix(StoreEmptyError(Path("/store")))

    def test_suggest_outside_store_for_bad_destination(self):
        exc = InvalidDestinationError(Path("/store/out"), "it is inside the template store")

        assert "outside the template store" in suggest_fix(exc)

    def test_suggest_permissions_from_cause(self):
        exc = StorageIOError("Failed", cause=PermissionError("Permission denied"))

        assert "permission" in suggest_fix(exc).lower()

    def test_no_suggestion(self):
        assert suggest_fix(ValueError("something odd")) is None


class TestHandleCLIError:
    """Tests for the top-level error handler"""

    def test_exits_with_mapped_code(self):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(TemplateExistsError("x"))

        assert exc_info.value.code == 4
