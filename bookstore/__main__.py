"""Run the API with ``python -m bookstore``."""
import uvicorn

from bookstore.config import settings


def main() -> None:
    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
