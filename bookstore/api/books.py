"""Book API routes."""
import re
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as SchemaValidationError

from bookstore.dependencies import get_store
from bookstore.schemas import (
    ApiResponse,
    Book,
    BookCreate,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)
from bookstore.storage import BookRepository

router = APIRouter(prefix="/books", tags=["Books"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}

# Leading ASCII integer, the rest of the segment is ignored ("3abc" -> 3)
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def parse_book_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path id; no leading digits matches no book."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


@router.get(
    "",
    response_model=ApiResponse[list[Book]],
    response_model_exclude_none=True,
)
async def list_books(store: BookRepository = Depends(get_store)) -> dict:
    """List all books in insertion order."""
    books = store.list()
    return {"success": True, "data": books, "count": len(books)}


@router.get(
    "/{book_id}",
    response_model=ApiResponse[Book],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def get_book(
    book_id: str,
    store: BookRepository = Depends(get_store),
) -> dict:
    """Get a book by ID."""
    return {"success": True, "data": store.get(parse_book_id(book_id))}


@router.post(
    "",
    response_model=ApiResponse[Book],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Title and author are required"}},
)
async def create_book(
    book_data: Optional[BookCreate] = Body(None),
    store: BookRepository = Depends(get_store),
) -> dict:
    """Create a new book."""
    book_data = book_data or BookCreate()
    book = store.create(
        title=book_data.title,
        author=book_data.author,
        year=book_data.year,
        isbn=book_data.isbn,
    )
    return {"success": True, "message": "Book created successfully", "data": book}


@router.put(
    "/{book_id}",
    response_model=ApiResponse[Book],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookUpdate.model_json_schema()}},
        },
    },
)
async def update_book(
    book_id: str,
    payload: Any = Body(None),
    store: BookRepository = Depends(get_store),
) -> dict:
    """Update the fields present in the body; the rest are left as they are.

    The id is looked up before the body is validated, so an unknown id is
    a 404 whatever the body holds.
    """
    parsed_id = parse_book_id(book_id)
    store.get(parsed_id)
    try:
        book_data = BookUpdate.model_validate(payload if payload is not None else {})
    except SchemaValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    book = store.update(parsed_id, book_data.model_dump())
    return {"success": True, "message": "Book updated successfully", "data": book}


@router.delete(
    "/{book_id}",
    response_model=ApiResponse[Book],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def delete_book(
    book_id: str,
    store: BookRepository = Depends(get_store),
) -> dict:
    """Delete a book by ID."""
    book = store.remove(parse_book_id(book_id))
    return {"success": True, "message": "Book deleted successfully", "data": book}


@router.delete("", response_model=MessageResponse)
async def delete_all_books(store: BookRepository = Depends(get_store)) -> dict:
    """Delete every book and reset ID assignment."""
    count = store.remove_all()
    return {"success": True, "message": f"All {count} books deleted successfully"}
