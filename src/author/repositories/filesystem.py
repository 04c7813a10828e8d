"""Filesystem-based repository for author.txt."""

import logging
from pathlib import Path

from ..errors import StorageError
from ..models import LoginSet

logger = logging.getLogger(__name__)


class AuthorFileRepository:
    """
    Repository for the author file stored at the repository root.

    The file holds a single line of space separated logins. A missing file
    reads as an empty set; the file is created on the first save.
    """

    AUTHOR_FILE = "author.txt"

    def __init__(self, root: Path) -> None:
        """
        Initialize repository.

        Args:
            root: Repository root directory (the one containing .git/)
        """
        self.root = root

    @property
    def path(self) -> Path:
        return self.root / self.AUTHOR_FILE

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> LoginSet:
        """Read the author file into a LoginSet."""
        if not self.exists():
            logger.debug("No author file at %s", self.path)
            return LoginSet()

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        logins = LoginSet.from_text(text)
        logger.debug("Loaded %d login(s) from %s", len(logins), self.path)
        return logins

    def save(self, logins: LoginSet) -> None:
        """Write the canonical form of logins, replacing prior contents."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                f.write(logins.to_text())
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        logger.debug("Saved %d login(s) to %s", len(logins), self.path)
