"""
Error normalization module.

Turns failed backend responses into display strings.

Public API:
- extract_error_message: Failed response -> message
- classify_error_body / render_error_body: The two halves of the above
- raise_for_error: Raise RequestFailedError for non-2xx responses
- ErrorBody variants: UnparseableBody, MissingDetail, TextDetail, etc.
"""

from .models import (
    ErrorBody,
    UnparseableBody,
    MissingDetail,
    TextDetail,
    ValidationDetail,
    ObjectDetail,
    OtherDetail,
)
from .exceptions import RequestFailedError
from .normalizer import (
    DEFAULT_MESSAGE,
    classify_error_body,
    render_error_body,
    extract_error_message,
    raise_for_error,
    message_for_exception,
)

__all__ = [
    # Models
    "ErrorBody",
    "UnparseableBody",
    "MissingDetail",
    "TextDetail",
    "ValidationDetail",
    "ObjectDetail",
    "OtherDetail",
    # Exceptions
    "RequestFailedError",
    # Functions
    "DEFAULT_MESSAGE",
    "classify_error_body",
    "render_error_body",
    "extract_error_message",
    "raise_for_error",
    "message_for_exception",
]
