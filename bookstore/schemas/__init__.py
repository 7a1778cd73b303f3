"""Pydantic schemas for request/response validation."""
from bookstore.schemas.book import Book, BookCreate, BookUpdate
from bookstore.schemas.common import (
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    StatusResponse,
)

__all__ = [
    "ApiResponse",
    "Book",
    "BookCreate",
    "BookUpdate",
    "ErrorResponse",
    "MessageResponse",
    "StatusResponse",
]
