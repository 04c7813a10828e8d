"""Interactive terminal UI."""

from .selector import AuthorSelectApp, prompt_multi_select

__all__ = ["AuthorSelectApp", "prompt_multi_select"]
