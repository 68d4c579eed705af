"""Custom exception classes for react-testgen."""

from typing import Optional


class ReactTestgenError(Exception):
    """Base exception for all react-testgen errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self):
        result = self.message
        if self.suggestion:
            result += f"\n\nSuggestion: {self.suggestion}"
        return result


class ConfigurationError(ReactTestgenError):
    """Raised when there are configuration-related issues."""
    pass


class FileOperationError(ReactTestgenError):
    """Raised when file operations fail."""

    def __init__(self, message: str, filepath: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.filepath = filepath
