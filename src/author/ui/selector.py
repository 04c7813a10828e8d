"""Multi-select prompt for choosing authors to remove."""

import logging
import sys
from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Label, SelectionList

from ..errors import SelectionCancelled

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Select authors to remove"


class AuthorSelectApp(App[list[str] | None]):
    """Inline app listing logins with checkboxes.

    Exits with the checked logins in candidate order, or None if cancelled.
    """

    DEFAULT_CSS = """
    AuthorSelectApp > Vertical {
        height: auto;
        max-height: 20;
        padding: 0 1;
        border: solid $primary;
    }

    AuthorSelectApp Label {
        width: 100%;
        text-style: bold;
        margin-bottom: 1;
    }

    AuthorSelectApp SelectionList {
        height: auto;
        max-height: 12;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Cancel", show=False),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, candidates: Sequence[str], title: str = DEFAULT_TITLE) -> None:
        """Initialize the selector.

        Args:
            candidates: Logins to offer, in display order
            title: Prompt shown above the list
        """
        super().__init__()
        self._candidates = list(candidates)
        self._prompt = title

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self._prompt)
            yield SelectionList[str](
                *[(login, login) for login in self._candidates],
                id="author-list",
            )
        yield Footer()

    def on_mount(self) -> None:
        """Focus the selection list on mount."""
        self.query_one(SelectionList).focus()

    def selected_logins(self) -> list[str]:
        """Checked logins, in candidate order."""
        checked = set(self.query_one(SelectionList).selected)
        return [login for login in self._candidates if login in checked]

    def action_confirm(self) -> None:
        self.exit(self.selected_logins())

    def action_cancel(self) -> None:
        self.exit(None)


def prompt_multi_select(candidates: Sequence[str], title: str = DEFAULT_TITLE) -> list[str]:
    """Ask the user which candidates to select.

    Raises:
        SelectionCancelled: If the prompt is aborted or no terminal is attached.
    """
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        logger.warning("Interactive selection needs a terminal, nothing selected")
        raise SelectionCancelled("Interactive selection requires a terminal")

    app = AuthorSelectApp(candidates, title)
    try:
        result = app.run(inline=True)
    except KeyboardInterrupt as e:
        raise SelectionCancelled("Selection cancelled") from e

    if result is None:
        raise SelectionCancelled("Selection cancelled")

    logger.debug("Selected %d of %d login(s)", len(result), len(candidates))
    return result
