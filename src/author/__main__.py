"""CLI entry point for author."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging

PROG = "author"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Running without a command lists authors."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Maintain the sorted list of contributor logins in author.txt",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    add_parser = subparsers.add_parser("add", help="Add one or more logins")
    add_parser.add_argument("logins", nargs="*", metavar="LOGIN")
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove logins (prompts for a selection when none are given)",
    )
    remove_parser.add_argument("logins", nargs="*", metavar="LOGIN")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    settings_kwargs: dict = {}
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    command = args.command or "list"
    setup_logging(settings.verbose, settings.log_file, command)
    start_dir = Path.cwd()

    # Import here so --help and --version stay fast
    from .cli import run_add, run_list, run_remove

    if command == "add":
        exit_code = run_add(start_dir, args.logins)
    elif command == "remove":
        exit_code = run_remove(start_dir, args.logins)
    else:
        exit_code = run_list(start_dir, PROG)

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
