"""File selection — walks the source tree and picks files to scan."""

from __future__ import annotations

import itertools
import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

# Extensions eligible for scanning
SCAN_EXTENSIONS = frozenset({".ts", ".tsx"})

# Top-level source areas; nothing outside these is scanned
SOURCE_PREFIXES = ("apps", "packages")

# Directory names pruned at any depth
EXCLUDED_DIRS = frozenset({"node_modules", ".next", "dist", "coverage", ".git"})

MAX_CANDIDATES = 500


def _raise(error: OSError) -> None:
    raise error


class FileSelector:
    """Yields candidate source files below a repository root.

    Paths are yielded relative to the root in POSIX form (``apps/web/x.ts``),
    in directory-walk order. Only the first ``max_files`` candidates are
    produced; larger trees are truncated, not rejected.

    An unreadable directory aborts the walk with the underlying ``OSError``.
    """

    def __init__(
        self,
        root: str | Path,
        extensions: frozenset[str] = SCAN_EXTENSIONS,
        prefixes: tuple[str, ...] = SOURCE_PREFIXES,
        excluded_dirs: frozenset[str] = EXCLUDED_DIRS,
        max_files: int = MAX_CANDIDATES,
    ) -> None:
        self._root = Path(root)
        self._extensions = extensions
        self._prefixes = prefixes
        self._excluded = excluded_dirs
        self._max_files = max_files

    def select(self) -> Iterator[str]:
        """Lazily yield at most ``max_files`` candidate paths."""
        return itertools.islice(self._walk(), self._max_files)

    def collect(self) -> list[str]:
        """Materialize the candidate list, logging when it was truncated."""
        walk = self._walk()
        files = list(itertools.islice(walk, self._max_files))
        if len(files) == self._max_files and next(walk, None) is not None:
            logger.debug(
                "Candidate list truncated to the first %d files", self._max_files
            )
        return files

    def _walk(self) -> Iterator[str]:
        for root, dirs, files in os.walk(self._root, onerror=_raise):
            rel_root = Path(root).relative_to(self._root)
            at_top = rel_root == Path(".")

            # Prune in-place; sorting keeps the walk order stable
            dirs[:] = sorted(
                d
                for d in dirs
                if d not in self._excluded and (not at_top or d in self._prefixes)
            )

            if at_top:
                continue

            for name in sorted(files):
                if os.path.splitext(name)[1] in self._extensions:
                    yield (rel_root / name).as_posix()
