"""
Router module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidTransitionError(ValidationError):
    """Raised when a screen switch is not allowed in the current state."""

    def __init__(self, action: str, screen: str):
        super().__init__(
            f"Cannot {action} while on {screen}",
            code="INVALID_TRANSITION",
            details={"action": action, "screen": screen},
        )
