"""``starter-drills filesize`` — show a size in bytes, KB, MB and GB."""

from __future__ import annotations

from starter_drills.cli import exit_codes
from starter_drills.cli.console import output
from starter_drills.core.file_size import format_file_size
from starter_drills.exceptions import (
    InvalidSizeFormatError,
    InvalidSizeInputError,
    append_usage_hint,
)

USAGE: str = 'starter-drills filesize "<size> <unit>"'


def run_filesize(text: str | None) -> int:
    """Convert *text* and print one line per unit plus the full record.

    Raises
    ------
    InvalidSizeInputError
        When *text* is missing or cannot be parsed.  The usage line is
        appended to the hint before the error leaves this function.
    """
    try:
        if text is None:
            raise InvalidSizeFormatError("No file size provided.")
        sizes = format_file_size(text)
    except InvalidSizeInputError as exc:
        exc.hint = append_usage_hint(exc.hint, USAGE)
        raise

    output.print(f"Bytes: {sizes.bytes}", markup=False)
    output.print(f"Kilobytes: {sizes.kilobytes}", markup=False)
    output.print(f"Megabytes: {sizes.megabytes}", markup=False)
    output.print(f"Gigabytes: {sizes.gigabytes}", markup=False)
    output.print(f"Sizes: {sizes!r}", markup=False)
    return exit_codes.SUCCESS
