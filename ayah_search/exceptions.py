"""
Custom exceptions for ayah search.

All exceptions inherit from AyahSearchError for easy catching.
"""


class AyahSearchError(Exception):
    """Base exception for all ayah search errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class RetrievalError(AyahSearchError):
    """Raised when the corpus store cannot be read."""

    def __init__(self, message: str, operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, details)
        self.operation = operation


class CorpusLoadError(AyahSearchError):
    """Raised when a corpus source file cannot be parsed into verse records."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path
