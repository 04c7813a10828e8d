"""Repository root discovery."""

import logging
from pathlib import Path

from ..errors import RootNotFoundError

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"


def find_repo_root(start: Path, marker: str = GIT_MARKER) -> Path:
    """Walk upward from start until a directory containing marker/ is found.

    Only existence checks are performed; nothing is read.

    Raises:
        RootNotFoundError: If the filesystem root is reached without a match.
    """
    current = start.absolute()
    while True:
        if (current / marker).is_dir():
            logger.debug("Repository root found at %s", current)
            return current
        parent = current.parent
        if parent == current:
            raise RootNotFoundError(start, marker)
        current = parent
