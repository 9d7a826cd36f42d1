"""Success envelope shared by all routes."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{"status": "success", "data": ...}``"""

    status: Literal["success"] = "success"
    data: T
