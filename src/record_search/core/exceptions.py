"""Custom exceptions for record search."""


class RecordSearchError(Exception):
    """Base exception for record search operations."""
    pass


class ValidationError(RecordSearchError):
    """Exception raised when search or match options are invalid."""
    pass


class ConfigurationError(RecordSearchError):
    """Exception raised for service configuration issues."""
    pass


class FieldAccessError(RecordSearchError):
    """Exception raised when a field accessor fails in strict extraction."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field
