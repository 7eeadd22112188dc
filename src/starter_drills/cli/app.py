"""CLI application entry point and command routing for starter-drills.

This module is the **sole error boundary** for the application.  It
catches :class:`~starter_drills.exceptions.DrillError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message, and returns a well-defined exit code.

No domain logic lives here; each command delegates to its own CLI
module, which in turn calls the core layer.
"""

from __future__ import annotations

import argparse
import sys

from starter_drills.cli import exit_codes
from starter_drills.cli.console import console, escape_markup
from starter_drills.exceptions import DrillError
from starter_drills.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``starter-drills area [--shape KIND=VALUE ...] [-v]``
    * ``starter-drills filesize "<size> <unit>"``
    * ``starter-drills echo``
    * ``starter-drills doctor``
    """
    parser = argparse.ArgumentParser(
        prog="starter-drills",
        description="Small command-line exercises: areas, file sizes, echo.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    area = commands.add_parser("area", help="Sum the areas of a list of shapes.")
    area.add_argument(
        "--shape",
        dest="shapes",
        action="append",
        metavar="KIND=VALUE",
        help=(
            "Shape to include, e.g. circle=5 or square=3.  Repeat to build "
            "an ordered list.  Defaults to circle=5 square=3 circle=2."
        ),
    )
    area.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also print each shape's area.",
    )

    filesize = commands.add_parser(
        "filesize",
        help="Show a size in bytes, KB, MB and GB.",
    )
    filesize.add_argument(
        "size",
        nargs="?",
        default=None,
        help='Size and unit as one argument, e.g. "300 kb".',
    )

    commands.add_parser("echo", help="Echo input lines until 'stop'.")
    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_area(tokens: list[str] | None, *, verbose: bool) -> int:
    """Resolve the shape list and dispatch the ``area`` command."""
    from starter_drills.cli.area import run_area
    from starter_drills.core.shapes import DEFAULT_SHAPES, parse_shape

    shapes = DEFAULT_SHAPES if tokens is None else tuple(parse_shape(t) for t in tokens)
    return run_area(shapes, verbose=verbose)


def _handle_filesize(text: str | None) -> int:
    """Dispatch the ``filesize`` command."""
    from starter_drills.cli.filesize import run_filesize

    return run_filesize(text)


def _handle_echo() -> int:
    """Dispatch the ``echo`` command."""
    from starter_drills.cli.echo_prompt import run_echo

    return run_echo()


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from starter_drills.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the starter-drills CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "area":
        return _handle_area(args.shapes, verbose=args.verbose)
    if args.command == "filesize":
        return _handle_filesize(args.size)
    if args.command == "echo":
        return _handle_echo()
    if args.command == "doctor":
        return _handle_doctor()

    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` so that the process never exits with a raw stack
    trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DrillError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
