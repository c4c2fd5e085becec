"""Pipeline data models — steps and the run report."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field


class StepResult(enum.Enum):
    """Outcome of a single verification step."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class StepKind(enum.Enum):
    """How a step is executed."""

    COMMAND = "command"
    SCAN = "scan"


@dataclass(frozen=True)
class StepSpec:
    """Static description of a step in the fixed pipeline."""

    ordinal: int
    name: str
    label: str
    kind: StepKind = StepKind.COMMAND
    command: tuple[str, ...] = ()
    skippable: bool = False


@dataclass
class Step:
    """A step instance within one run; its result is recorded exactly once."""

    spec: StepSpec
    result: StepResult | None = None
    elapsed: float = 0.0
    reason: str = ""

    @property
    def ordinal(self) -> int:
        return self.spec.ordinal

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def label(self) -> str:
        return self.spec.label

    @property
    def done(self) -> bool:
        return self.result is not None

    def record(
        self, result: StepResult, elapsed: float = 0.0, reason: str = ""
    ) -> None:
        if self.result is not None:
            raise RuntimeError(
                f"Step '{self.name}' already recorded as {self.result.value}"
            )
        self.result = result
        self.elapsed = elapsed
        self.reason = reason


@dataclass(frozen=True)
class RunOptions:
    """Operator-supplied options for a pipeline run."""

    skip_build: bool = False


@dataclass
class RunReport:
    """Aggregate of one pipeline run, built up as steps complete."""

    steps: list[Step] = field(default_factory=list)
    started_at: float = field(default_factory=time.time)
    elapsed: float = 0.0

    def _count(self, result: StepResult) -> int:
        return sum(1 for s in self.steps if s.result is result)

    @property
    def passed(self) -> int:
        return self._count(StepResult.PASSED)

    @property
    def failed(self) -> int:
        return self._count(StepResult.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(StepResult.SKIPPED)

    @property
    def total(self) -> int:
        return len(self.steps)

    @property
    def success(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def finish(self) -> None:
        self.elapsed = time.time() - self.started_at
