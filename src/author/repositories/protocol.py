"""Protocols for the login store and the interactive selector."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..models import LoginSet


class LoginStoreProtocol(Protocol):
    """Interface for login set storage backends."""

    @property
    def path(self) -> Path:
        """Location of the stored logins, for messages."""
        ...

    def load(self) -> LoginSet:
        """Load the stored logins.

        Returns:
            The stored set, or an empty set if nothing has been stored yet.
        """
        ...

    def save(self, logins: LoginSet) -> None:
        """Replace the stored logins with the given set."""
        ...


class SelectorProtocol(Protocol):
    """Interactive multi-select capability used by remove."""

    def __call__(self, candidates: Sequence[str]) -> list[str]:
        """Let the user pick a subset of candidates.

        Raises:
            SelectionCancelled: If the user aborts the prompt.
        """
        ...
