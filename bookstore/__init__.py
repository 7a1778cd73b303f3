"""In-memory Book Store HTTP service."""

__version__ = "1.0.0"
