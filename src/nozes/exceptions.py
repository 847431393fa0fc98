"""Custom exceptions for Nozes."""


class NozesError(Exception):
    """Base exception for all Nozes errors."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)


# Import errors (20-29)
class InvalidProjectError(NozesError):
    """Structured project file could not be imported."""

    exit_code = 20
    default_hint = "A project file needs 'name', 'features' and 'entities' fields"

    def __init__(self, details: str | None = None, hint: str | None = None):
        super().__init__("Invalid project file.", details=details, hint=hint)


# Export errors (30-39)
class ExportError(NozesError):
    """Error while exporting a project."""

    exit_code = 30


class UnsupportedFormatError(ExportError):
    """Requested export format is not known."""

    exit_code = 31
    default_hint = "Use one of: json, xlsx, csv, html"


# Configuration errors (40-49)
class ConfigError(NozesError):
    """Configuration error."""

    exit_code = 40
    default_hint = "Check NOZES_* environment variables or ~/.nozes/config.yaml"


# Library errors (50-59)
class LibraryError(NozesError):
    """Error in the saved-project library."""

    exit_code = 50


class ProjectNotInLibraryError(LibraryError):
    """Requested project id is not saved in the library."""

    exit_code = 51
    default_hint = "Run 'nozes library list' to see saved projects"
