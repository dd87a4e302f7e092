"""
Error normalizer.

Turns any failed backend response into one human-readable string. The
backend answers with plain string errors, arrays of field validation errors,
or structured fault objects; whatever arrives, the caller always gets
something displayable.
"""

import json
from typing import Any, assert_never

import httpx

from shared.exceptions import StoreRateError

from .exceptions import RequestFailedError
from .models import (
    ErrorBody,
    MissingDetail,
    ObjectDetail,
    OtherDetail,
    TextDetail,
    UnparseableBody,
    ValidationDetail,
)

DEFAULT_MESSAGE = "Request failed"


def _is_blank(value: Any) -> bool:
    """True for values a browser would treat as falsy: None, false, 0, ""."""
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def classify_error_body(status: int, content: bytes) -> ErrorBody:
    """
    Classify a raw response body into one of the known error shapes.

    Args:
        status: HTTP status code
        content: Raw response body

    Returns:
        The matching ErrorBody variant
    """
    try:
        body = json.loads(content, parse_constant=_reject_constant)
    except ValueError:
        return UnparseableBody(status=status)

    if not isinstance(body, dict):
        return MissingDetail()

    detail = body.get("detail")
    if _is_blank(detail):
        message = body.get("message")
        return MissingDetail(message=None if _is_blank(message) else str(message))
    if isinstance(detail, str):
        return TextDetail(text=detail)
    if isinstance(detail, list):
        return ValidationDetail(items=detail)
    if isinstance(detail, dict):
        return ObjectDetail(data=detail)
    return OtherDetail(value=detail)


def _render_validation_item(item: Any) -> str:
    if isinstance(item, dict) and not _is_blank(item.get("msg")):
        return str(item["msg"])
    return _compact_json(item)


def render_error_body(body: ErrorBody) -> str:
    """Render a classified error body as a display string."""
    if isinstance(body, UnparseableBody):
        return f"{DEFAULT_MESSAGE} ({body.status})"
    if isinstance(body, MissingDetail):
        return body.message or DEFAULT_MESSAGE
    if isinstance(body, TextDetail):
        return body.text
    if isinstance(body, ValidationDetail):
        return "; ".join(_render_validation_item(item) for item in body.items)
    if isinstance(body, ObjectDetail):
        message = body.data.get("message")
        if not _is_blank(message):
            return str(message)
        return _compact_json(body.data)
    if isinstance(body, OtherDetail):
        return DEFAULT_MESSAGE
    assert_never(body)


async def extract_error_message(response: httpx.Response) -> str:
    """
    Produce the display message for a failed response.

    Args:
        response: The non-2xx response

    Returns:
        A single human-readable message
    """
    content = await response.aread()
    return render_error_body(classify_error_body(response.status_code, content))


async def raise_for_error(response: httpx.Response) -> None:
    """
    Raise RequestFailedError with the normalized message if response failed.

    Raises:
        RequestFailedError: If the response status is not 2xx
    """
    if response.is_success:
        return
    message = await extract_error_message(response)
    raise RequestFailedError(message, status=response.status_code)


def message_for_exception(exc: BaseException) -> str:
    """Display message for a failure that produced no response body."""
    if isinstance(exc, StoreRateError):
        return exc.message
    reason = str(exc) or exc.__class__.__name__
    return f"{DEFAULT_MESSAGE}: {reason}"
