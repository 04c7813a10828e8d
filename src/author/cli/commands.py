"""Command runners for list, add and remove."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..errors import AuthorError, SelectionCancelled
from ..repositories import SelectorProtocol
from ..services import AuthorService
from ..ui import prompt_multi_select
from .output import empty_list_notice, error, login, success

logger = logging.getLogger(__name__)


def _plural(count: int) -> str:
    return "author" if count == 1 else "authors"


def run_list(start_dir: Path, program: str = "author") -> int:
    """Print every stored login, one per line.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        service = AuthorService.from_directory(start_dir)
        logins = list(service.list_authors())
    except AuthorError as e:
        error(str(e))
        return e.exit_code

    if not logins:
        empty_list_notice(program)
        return 0

    for name in logins:
        login(name)
    return 0


def run_add(start_dir: Path, logins: Sequence[str]) -> int:
    """Add logins to the author file.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        service = AuthorService.from_directory(start_dir)
        authors = service.add_authors(logins)
    except AuthorError as e:
        error(str(e))
        return e.exit_code

    success(f"{len(authors)} {_plural(len(authors))} in {service.repository.path}")
    return 0


def run_remove(
    start_dir: Path,
    logins: Sequence[str],
    selector: SelectorProtocol = prompt_multi_select,
) -> int:
    """Remove logins, prompting for them when none are given.

    Returns:
        Exit code (0 for success or cancellation, non-zero for error)
    """
    try:
        service = AuthorService.from_directory(start_dir, selector)
        authors = service.remove_authors(logins)
    except SelectionCancelled:
        logger.info("Removal cancelled, author file left untouched")
        return 0
    except AuthorError as e:
        error(str(e))
        return e.exit_code

    if authors is not None:
        success(f"{len(authors)} {_plural(len(authors))} in {service.repository.path}")
    return 0
