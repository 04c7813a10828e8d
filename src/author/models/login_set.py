"""Login set model backing author.txt."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field


class LoginSet(BaseModel):
    """Deduplicated set of contributor logins.

    Insertion order is never kept: iteration and serialization always
    produce the logins in ascending lexicographic order.
    """

    logins: set[str] = Field(default_factory=set)

    @classmethod
    def from_text(cls, text: str) -> LoginSet:
        """Parse author file contents (any whitespace separates logins)."""
        return cls(logins={token for token in text.split() if token})

    @classmethod
    def of(cls, logins: Iterable[str]) -> LoginSet:
        """Build a set from an iterable of logins."""
        return cls(logins=set(logins))

    def to_text(self) -> str:
        """Serialize to the canonical single-line form with a trailing newline."""
        return " ".join(self.sorted()) + "\n"

    def sorted(self) -> list[str]:
        return sorted(self.logins)

    @property
    def is_empty(self) -> bool:
        return not self.logins

    def update(self, logins: Iterable[str]) -> None:
        self.logins.update(logins)

    def difference_update(self, logins: Iterable[str]) -> None:
        """Remove logins that are present; unknown logins are ignored."""
        self.logins.difference_update(logins)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self.logins)

    def __contains__(self, login: object) -> bool:
        return login in self.logins
