"""Common Pydantic schemas."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Uniform response envelope.

    Routes serialize it with ``response_model_exclude_none`` so unset
    members do not appear in the JSON body.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[DataT] = None
    count: Optional[int] = None


class MessageResponse(BaseModel):
    """Envelope carrying only a confirmation message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    message: str
    error: Optional[str] = None


class StatusResponse(BaseModel):
    """Status response schema."""

    status: str
