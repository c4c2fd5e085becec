"""External command execution for pipeline steps."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StepFailed(Exception):
    """Raised by a step action to report failure; the message is the reason."""


class CommandRunner(Protocol):
    """Runs an external command to completion."""

    def run(self, command: Sequence[str], cwd: Path) -> None:
        """Return on success, raise StepFailed otherwise."""
        ...


class SubprocessRunner:
    """Runs commands as child processes sharing this process's stdout/stderr."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, command: Sequence[str], cwd: Path) -> None:
        argv = list(command)
        logger.debug("Running %s in %s", " ".join(argv), cwd)
        try:
            proc = subprocess.run(argv, cwd=cwd, timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            raise StepFailed(f"{argv[0]} timed out after {e.timeout:g}s") from e
        except FileNotFoundError as e:
            raise StepFailed(f"{argv[0]} not found") from e
        except OSError as e:
            raise StepFailed(f"could not start {argv[0]}: {e}") from e

        if proc.returncode != 0:
            raise StepFailed(f"{argv[0]} exited with code {proc.returncode}")
