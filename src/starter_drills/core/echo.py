"""Echo-until-stop session logic.

The session itself performs no I/O: it consumes an iterable of input
lines and yields the responses to print, so the CLI decides where lines
come from (a questionary prompt or piped stdin).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

STOP_WORD: str = "stop"
PROMPT: str = "Please type something:"
FAREWELL: str = "Stopping..."


def is_stop_word(line: str) -> bool:
    """Return ``True`` when *line*, stripped of whitespace, is the stop word."""
    return line.strip() == STOP_WORD


def echo_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield ``"You typed: <line>"`` for each line up to and including ``stop``.

    The session also ends when *lines* is exhausted. Trailing newlines
    are dropped from the echoed text.
    """
    for line in lines:
        text = line.rstrip("\r\n")
        yield f"You typed: {text}"
        if is_stop_word(text):
            return
