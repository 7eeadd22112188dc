"""``starter-drills echo`` — echo input lines until the user types ``stop``.

Line sources:

* An interactive terminal gets a questionary text prompt per line.
* Piped stdin is read line by line, printing the same prompt text to
  stdout ahead of each read.

Both sources end the session on exhaustion (EOF, or a cancelled prompt).
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from starter_drills.cli import exit_codes
from starter_drills.cli.console import output
from starter_drills.core.echo import FAREWELL, PROMPT, echo_lines
from starter_drills.exceptions import MissingDependencyError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Pipe input instead, e.g. printf 'hi\\nstop\\n' | starter-drills echo",
        ) from exc
    return questionary


def _prompted_lines() -> Iterator[str]:
    """Yield answers from a questionary text prompt until it is cancelled."""
    questionary = _import_questionary()
    while True:
        answer: str | None = questionary.text(PROMPT).ask()  # None on Ctrl+C / Esc
        if answer is None:
            return
        yield answer


def _piped_lines(stream: TextIO) -> Iterator[str]:
    """Yield raw lines from *stream*, printing the prompt before each read."""
    while True:
        output.print(PROMPT, markup=False)
        line = stream.readline()
        if not line:
            return
        yield line


def run_echo(stream: TextIO | None = None) -> int:
    """Run one echo session against *stream* (default: ``sys.stdin``)."""
    source = sys.stdin if stream is None else stream
    lines = _prompted_lines() if source.isatty() else _piped_lines(source)

    for response in echo_lines(lines):
        output.print(response, markup=False)

    output.print(FAREWELL, markup=False)
    return exit_codes.SUCCESS
