"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore import __version__
from bookstore.api import api_router
from bookstore.config import settings
from bookstore.core.exceptions import AppException
from bookstore.core.logging import get_logger, setup_logging
from bookstore.schemas import StatusResponse
from bookstore.storage import BookRepository, InMemoryBookStore

logger = get_logger("main")


def _error(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"Book API Server running on {base_url}")
    logger.info(f"Health check: {base_url}/health")
    logger.info(f"API docs: {base_url}/api/books")
    yield
    logger.info("Book API Server shutting down")


def create_app(store: Optional[BookRepository] = None) -> FastAPI:
    """Build the application around ``store`` (a freshly seeded in-memory store by default)."""
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="CRUD API over an in-memory collection of books",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.store = store if store is not None else InMemoryBookStore()

    # Must stay registered before CORSMiddleware so it runs inside it
    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return _error(500, "Internal server error", str(exc))

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request bodies that do not fit the schema."""
        errors = "; ".join(str(err.get("msg")) for err in exc.errors())
        return _error(400, "Invalid request body", errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions; unrouted requests become 404."""
        if exc.status_code in (404, 405):
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    # Include API router
    app.include_router(api_router)

    # Health check endpoint
    @app.get("/health", response_model=StatusResponse)
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "Server is running"}

    return app


app = create_app()
