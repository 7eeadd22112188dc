"""Shared pytest fixtures and configuration for the starter-drills test suite.

Guidelines
----------
* No real terminal interaction: questionary is always mocked.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io

import pytest


class TtyStream(io.StringIO):
    """In-memory stream that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def tty_stream() -> TtyStream:
    return TtyStream()
