"""
Stores module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidScoreError(ValidationError):
    """Raised when a rating score is outside 1..5."""

    def __init__(self, score: object):
        super().__init__(
            f"Score must be between 1 and 5, got {score!r}",
            code="INVALID_SCORE",
            details={"score": score},
        )
