"""
Error types shared by the backend, the API client and the session.

A missing record or word is not an error: lookups return None or [].
"""


class LingoError(Exception):
    """Base error for the application."""


class NetworkFailure(LingoError):
    """Request could not complete or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyInput(LingoError):
    """User tried to translate blank text."""

    def __init__(self, message: str = "Please enter text to translate."):
        super().__init__(message)


class TranslationError(LingoError):
    """Translation backend failed or returned an unusable payload."""
