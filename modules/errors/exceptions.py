"""
Errors module exceptions.
"""

from typing import Optional

from shared.exceptions import StoreRateError


class RequestFailedError(StoreRateError):
    """
    Raised when a backend request fails.

    The message is already normalized for display.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(
            message,
            code="REQUEST_FAILED",
            details={"status": status},
        )
        self.status = status
