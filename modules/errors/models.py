"""
Error body variants.

A failed backend response carries its error information in one of a few
known shapes. Each shape is a separate model so that rendering can handle
every case explicitly.
"""

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field


class UnparseableBody(BaseModel):
    """The response body was not JSON."""

    kind: Literal["unparseable"] = "unparseable"
    status: int = Field(..., description="HTTP status code of the response")

    model_config = {"frozen": True}


class MissingDetail(BaseModel):
    """No usable `detail` field; may still carry a top-level `message`."""

    kind: Literal["missing"] = "missing"
    message: Optional[str] = Field(None, description="Top-level message, if any")

    model_config = {"frozen": True}


class TextDetail(BaseModel):
    """`detail` is a plain string."""

    kind: Literal["text"] = "text"
    text: str

    model_config = {"frozen": True}


class ValidationDetail(BaseModel):
    """`detail` is a list of field validation errors."""

    kind: Literal["validation"] = "validation"
    items: list[Any] = Field(default_factory=list)

    model_config = {"frozen": True}


class ObjectDetail(BaseModel):
    """`detail` is a single structured fault object."""

    kind: Literal["object"] = "object"
    data: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class OtherDetail(BaseModel):
    """`detail` is some other scalar (number, boolean)."""

    kind: Literal["other"] = "other"
    value: Any = None

    model_config = {"frozen": True}


ErrorBody = Annotated[
    Union[
        UnparseableBody,
        MissingDetail,
        TextDetail,
        ValidationDetail,
        ObjectDetail,
        OtherDetail,
    ],
    Field(discriminator="kind"),
]
