"""Service for listing, adding and removing authors."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import MissingArgumentError
from ..models import LoginSet
from ..repositories import AuthorFileRepository, find_repo_root

if TYPE_CHECKING:
    from ..repositories import LoginStoreProtocol, SelectorProtocol

logger = logging.getLogger(__name__)


class AuthorService:
    """Service implementing the list, add and remove commands."""

    def __init__(
        self,
        repository: LoginStoreProtocol,
        selector: SelectorProtocol | None = None,
    ) -> None:
        self.repository = repository
        self._selector = selector

    @classmethod
    def from_directory(
        cls,
        start_dir: Path,
        selector: SelectorProtocol | None = None,
    ) -> AuthorService:
        """Locate the repository root above start_dir and build a service for it.

        Raises:
            RootNotFoundError: If start_dir is not inside a git repository.
        """
        root = find_repo_root(start_dir)
        repository = AuthorFileRepository(root)
        logger.info("Repository root %s, author file %s", root, repository.path)
        return cls(repository, selector)

    def list_authors(self) -> Iterator[str]:
        """Yield stored logins in sorted order."""
        yield from self.repository.load()

    def add_authors(self, logins: Sequence[str]) -> LoginSet:
        """
        Add logins to the author file.

        Logins already present are ignored. The file is created if absent.

        Raises:
            MissingArgumentError: If no logins were given.
        """
        if not logins:
            raise MissingArgumentError("add requires at least one login")

        authors = self.repository.load()
        added = list(dict.fromkeys(login for login in logins if login not in authors))
        authors.update(logins)
        self.repository.save(authors)

        logger.info("Added %d new login(s): %s", len(added), " ".join(added))
        return authors

    def remove_authors(self, logins: Sequence[str] = ()) -> LoginSet | None:
        """
        Remove logins from the author file.

        With no logins, the stored logins are offered to the selector and the
        confirmed selection is removed. Returns None when nothing was selected
        (no write happens). Unknown logins are ignored.

        Raises:
            SelectionCancelled: If the interactive prompt was aborted.
            ValueError: If no logins were given and the service has no selector.
        """
        authors = self.repository.load()

        if logins:
            removals = list(logins)
        else:
            removals = self._select_removals(authors)
            if not removals:
                logger.info("Nothing selected, author file left untouched")
                return None

        removed = list(dict.fromkeys(login for login in removals if login in authors))
        authors.difference_update(removals)
        self.repository.save(authors)

        logger.info("Removed %d login(s): %s", len(removed), " ".join(removed))
        return authors

    def _select_removals(self, authors: LoginSet) -> list[str]:
        if authors.is_empty:
            return []
        if self._selector is None:
            raise ValueError("interactive removal needs a selector")
        return self._selector(authors.sorted())
