"""Command line entry points."""

from .commands import run_add, run_list, run_remove

__all__ = ["run_add", "run_list", "run_remove"]
