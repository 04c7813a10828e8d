"""Service layer for business logic."""

from .author_service import AuthorService

__all__ = [
    "AuthorService",
]
