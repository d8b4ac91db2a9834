"""Library exceptions."""

from typing import Any, List, Optional


class AppleNotesException(Exception):
    """Generic applenotes exception."""


class AppleNotesValidationError(AppleNotesException):
    """Tool parameters failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class AppleNotesUnavailable(AppleNotesException):
    """Notes.app (or osascript) cannot be reached."""
