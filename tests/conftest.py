"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """A plain-text console writing to an in-memory buffer."""
    return Console(file=StringIO(), width=200, color_system=None)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create a file below ``tmp_path`` (parents included) and return its path."""

    def _write(rel_path: str, content: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
