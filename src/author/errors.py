"""Exceptions raised by author commands."""

from pathlib import Path


class AuthorError(Exception):
    """Base exception for author command failures."""

    exit_code = 1


class RootNotFoundError(AuthorError):
    """No repository marker was found walking up from the start directory."""

    exit_code = 3

    def __init__(self, start: Path, marker: str = ".git") -> None:
        super().__init__(f"Not inside a git repository (no {marker} found above {start})")
        self.start = start
        self.marker = marker


class MissingArgumentError(AuthorError):
    """A command was invoked without a required argument."""

    exit_code = 2


class StorageError(AuthorError):
    """Reading or writing the author file failed."""

    exit_code = 4


class SelectionCancelled(AuthorError):
    """The interactive prompt was aborted by the user."""

    exit_code = 0
