"""Allow ``python -m starter_drills`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m starter_drills`` behaves identically to the
``starter-drills`` console script.
"""

from __future__ import annotations

from starter_drills.cli.app import cli

if __name__ == "__main__":
    cli()
