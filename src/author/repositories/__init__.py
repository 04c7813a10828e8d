"""Repository layer for locating and storing the author file."""

from .filesystem import AuthorFileRepository
from .protocol import LoginStoreProtocol, SelectorProtocol
from .root import GIT_MARKER, find_repo_root

__all__ = [
    "GIT_MARKER",
    "AuthorFileRepository",
    "LoginStoreProtocol",
    "SelectorProtocol",
    "find_repo_root",
]
