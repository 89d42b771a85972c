# catalog/schemas/response.py

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every API payload."""

    success: bool
    message: str
    data: Optional[T] = None


class ApiError(BaseModel):
    success: bool = False
    message: str
    data: Optional[Any] = None
