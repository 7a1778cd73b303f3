"""
FastAPI dependencies for the book store.
"""
from fastapi import Request

from bookstore.storage import BookRepository


def get_store(request: Request) -> BookRepository:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store
