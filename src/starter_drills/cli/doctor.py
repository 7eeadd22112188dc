"""``starter-drills doctor`` — environment diagnostics command.

Collects runtime information and renders a summary table (Rich when
available, plain text otherwise).  No business logic resides here.
"""

from __future__ import annotations

import importlib
import platform
import sys
from importlib import metadata

from starter_drills.cli import exit_codes
from starter_drills.cli.console import console
from starter_drills.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _optional_package_check(name: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an optional UI dependency row.

    A missing package only warns: it disables rendering or prompting,
    never a command.
    """
    try:
        importlib.import_module(name)
    except ImportError:
        return name, "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return name, metadata.version(name), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return name, "unknown", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the starter-drills version row."""
    return "starter-drills", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nstarter-drills doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Missing optional UI
        libraries only warn.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _optional_package_check("rich"),
        _optional_package_check("questionary"),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
    else:
        table = Table(
            title="starter-drills doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=16)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
