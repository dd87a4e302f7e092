"""
Session module exceptions.
"""

from shared.exceptions import AuthenticationError, StoreRateError, ValidationError


class MissingSessionError(AuthenticationError):
    """Raised when an operation needs a session and none is present."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_SESSION")


class InvalidSessionError(ValidationError):
    """Raised when login is attempted with an incomplete token/user pair."""

    def __init__(self, message: str = "Session requires both a token and a user"):
        super().__init__(message, code="INVALID_SESSION")


class SessionPersistError(StoreRateError):
    """Raised when a new session could not be written to storage."""

    def __init__(self, reason: str):
        super().__init__(
            f"Could not save session: {reason}",
            code="SESSION_PERSIST_FAILED",
            details={"reason": reason},
        )
