"""
Exception hierarchy for the storerate client.

Every failure a caller is expected to show the user derives from
StoreRateError, so forms and views catch one type and display `message`.
"""

from typing import Optional, Any


class StoreRateError(Exception):
    """
    A failure with a display message.

    `code` is a stable machine-readable tag (the class name unless given);
    `details` carries structured context for logs.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StoreRateError):
    """Client-side input was rejected before anything was sent."""


class AuthenticationError(StoreRateError):
    """No usable session for an operation that needs one."""


class ExternalServiceError(StoreRateError):
    """The backend could not be reached or returned nothing usable."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
