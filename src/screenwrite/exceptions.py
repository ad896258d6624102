"""Custom exception hierarchy for Screenwrite with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScreenwriteError(Exception):
    """Base exception with helpful formatting for all Screenwrite errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScreenwriteError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class DocumentError(ScreenwriteError):
    """Errors raised while reading or writing screenplay documents."""

    pass


class DocumentLoadError(DocumentError):
    """A document file exists but does not hold a usable screenplay."""

    pass


class ScreenwriteFileNotFoundError(ScreenwriteError):
    """File not found errors with helpful path information."""

    pass


class ValidationError(ScreenwriteError):
    """Input validation errors with details about what was expected."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "linesPerPage": "lines_per_page",
        "page_lines": "lines_per_page",
        "beatMode": "beat_mode",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )


def check_document_path(path: Any) -> None:
    """Check that a screenplay document path points at an existing file.

    Args:
        path: Path to check

    Raises:
        ScreenwriteFileNotFoundError: With hints about where the file was expected
    """
    from pathlib import Path

    if path and Path(path).is_file():
        return

    hints = ["Pass the path to a JSON file holding {\"elements\": [...]}"]
    if path and Path(path).is_dir():
        hints = ["The path is a directory; point at the screenplay JSON file"]

    raise ScreenwriteFileNotFoundError(
        message=f"Screenplay document not found at {path}",
        hint=" ".join(hints),
        details={
            "searched_path": str(path) if path else "None",
            "current_dir": str(Path.cwd()),
        },
    )
