"""Scanner data models — violations and scan results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Scope(enum.Enum):
    """What a pattern is evaluated against."""

    LINE = "line"
    WHOLE_FILE = "whole-file"


@dataclass(frozen=True)
class Violation:
    """A single forbidden construct found in a file."""

    file_path: str
    pattern_name: str
    snippet: str
    line: int | None = None  # None for whole-file patterns


@dataclass
class ScanResult:
    """Aggregate result of one scanner invocation."""

    candidate_count: int = 0
    violations: list[Violation] = field(default_factory=list)
    files_scanned: int = 0
    files_skipped: int = 0
    files_unreadable: int = 0
    duration: float = 0.0

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @property
    def passed(self) -> bool:
        return not self.violations
