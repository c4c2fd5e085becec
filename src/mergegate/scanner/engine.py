"""Scan engine — applies the anti-pattern rule set to a list of files."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePosixPath

from rich.console import Console

from mergegate.scanner.models import ScanResult, Violation
from mergegate.scanner.patterns import PATTERNS, Pattern, iter_violations

logger = logging.getLogger(__name__)

# Base-name fragments that mark a test artifact
TEST_FILE_MARKERS = (".test.", ".spec.", "__tests__")

# Repository tooling is exempt from the rules
TOOLING_DIR = "scripts"


def should_skip(file_path: str) -> bool:
    """Whether a file is exempt from scanning (tests and tooling)."""
    posix = Path(file_path).as_posix()
    base = PurePosixPath(posix).name
    if any(marker in base for marker in TEST_FILE_MARKERS):
        return True
    return posix.startswith(f"{TOOLING_DIR}/") or f"/{TOOLING_DIR}/" in posix


class AntiPatternScanner:
    """Scans an explicit list of files for forbidden constructs.

    Each violation is echoed to the console as soon as it is found and is
    also kept on the returned ``ScanResult``. Relative paths are resolved
    against ``base_dir`` when given, but reported as passed in.
    """

    def __init__(
        self,
        patterns: Sequence[Pattern] = PATTERNS,
        console: Console | None = None,
        base_dir: str | Path | None = None,
    ) -> None:
        self._patterns = patterns
        self._console = console or Console()
        self._base_dir = Path(base_dir) if base_dir is not None else None

    def scan(self, files: Iterable[str]) -> ScanResult:
        """Scan the given files and return aggregated results."""
        start = time.time()
        result = ScanResult()

        for file_path in files:
            result.candidate_count += 1
            if should_skip(file_path):
                logger.debug("Skipping %s: test or tooling file", file_path)
                result.files_skipped += 1
                continue

            content = self._read(file_path)
            if content is None:
                result.files_unreadable += 1
                continue

            result.files_scanned += 1
            for violation in iter_violations(content, file_path, self._patterns):
                self._report(violation)
                result.violations.append(violation)

        result.duration = time.time() - start
        return result

    def _read(self, file_path: str) -> str | None:
        path = Path(file_path)
        if self._base_dir is not None and not path.is_absolute():
            path = self._base_dir / path
        try:
            # No newline translation: a bare CR stays inside its line
            return path.read_bytes().decode("utf-8", errors="ignore")
        except OSError as e:
            # Binary, locked or vanished files count as clean
            logger.debug("Skipping %s: %s", file_path, e)
            return None

    def _report(self, violation: Violation) -> None:
        if violation.line is not None:
            self._echo(f"{violation.line}:{violation.snippet}")
        self._echo(f"  BLOCKED: {violation.pattern_name} in {violation.file_path}")

    def _echo(self, text: str) -> None:
        # Bypass rich rendering so tabs and control characters survive
        out = self._console.file
        out.write(f"{text}\n")
        out.flush()
