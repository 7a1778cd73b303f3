"""Book schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A stored book record.

    Field order is the order fields appear in JSON responses.
    """

    id: int
    title: str
    author: str
    year: int
    isbn: str


class BookCreate(BaseModel):
    """Schema for creating a book.

    Every field is optional at the schema level; the store rejects a
    missing or empty title/author with a 400 envelope instead of a
    schema error.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    isbn: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class BookUpdate(BaseModel):
    """Schema for a partial book update."""

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    isbn: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
