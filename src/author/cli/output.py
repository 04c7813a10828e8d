"""Colorful CLI output helpers."""

import sys
from typing import TextIO

# ANSI escape codes
GREEN = "\033[32m"
RED = "\033[31m"
BOLD = "\033[1m"
ITALIC = "\033[3m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗


def _supports_color(stream: TextIO | None = None) -> bool:
    """Check if terminal supports color output."""
    stream = stream if stream is not None else sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def _style(text: str, code: str, stream: TextIO | None = None) -> str:
    """Apply an ANSI style to text if the stream supports it."""
    if _supports_color(stream):
        return f"{code}{text}{RESET}"
    return text


def login(name: str) -> None:
    """Print a single login, unstyled."""
    print(name)


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _style(CHECK, GREEN)
    print(f"{check} {message}")


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    cross = _style(CROSS, RED, sys.stderr)
    print(f"{cross} {message}", file=sys.stderr)


def empty_list_notice(program: str) -> None:
    """Tell the user there are no authors yet and how to add one."""
    prefix = _style("no authors specified, run ", ITALIC)
    command = _style(f"{program} add login", BOLD)
    suffix = _style(" to add them", ITALIC)
    print(f"{prefix}{command}{suffix}")
