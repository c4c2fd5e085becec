"""Pipeline orchestrator — runs every step in order and aggregates results."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from mergegate.pipeline.commands import CommandRunner, StepFailed, SubprocessRunner
from mergegate.pipeline.models import (
    RunOptions,
    RunReport,
    Step,
    StepKind,
    StepResult,
    StepSpec,
)
from mergegate.pipeline.report import Reporter
from mergegate.pipeline.steps import STEPS
from mergegate.scanner.engine import AntiPatternScanner
from mergegate.scanner.selector import FileSelector

logger = logging.getLogger(__name__)


class _NothingToScan(Exception):
    """The file selector found no candidates.

    Recorded as Skipped: an empty selection is not a failure, and this is the
    only automatic skip besides the operator's --skip-build.
    """


class Orchestrator:
    """Runs the verification steps sequentially against one repository.

    A failing step never stops the run: every step executes so that one
    invocation surfaces every failing category. Only ``--skip-build`` (via
    ``RunOptions.skip_build``) marks a step Skipped without running it.
    """

    def __init__(
        self,
        root: str | Path,
        runner: CommandRunner | None = None,
        reporter: Reporter | None = None,
        steps: Sequence[StepSpec] = STEPS,
    ) -> None:
        self._root = Path(root)
        self._runner = runner or SubprocessRunner()
        self._steps = steps
        self._reporter = reporter or Reporter(total_steps=len(steps))

    def run(self, options: RunOptions | None = None) -> RunReport:
        """Execute all steps and return the completed report."""
        options = options or RunOptions()
        report = RunReport()
        steps = [Step(spec=spec) for spec in self._steps]

        for step in steps:
            self._reporter.step_header(step)
            if step.spec.skippable and options.skip_build:
                step.record(StepResult.SKIPPED, reason="via --skip-build")
            else:
                self._execute(step)
            report.steps.append(step)
            self._reporter.step_outcome(step)
            logger.debug("Step %s: %s", step.name, step.result.value)

        report.finish()
        self._reporter.summary(report)
        return report

    def _execute(self, step: Step) -> None:
        start = time.time()
        try:
            self._perform(step.spec)
        except _NothingToScan:
            step.record(
                StepResult.SKIPPED,
                time.time() - start,
                "no TS/TSX files found to scan",
            )
        except StepFailed as e:
            step.record(StepResult.FAILED, time.time() - start, str(e))
        except OSError as e:
            step.record(StepResult.FAILED, time.time() - start, f"I/O error: {e}")
        except Exception as e:
            logger.exception("Step %s raised unexpectedly", step.name)
            step.record(StepResult.FAILED, time.time() - start, repr(e))
        else:
            step.record(StepResult.PASSED, time.time() - start)

    def _perform(self, spec: StepSpec) -> None:
        if spec.kind is StepKind.SCAN:
            self._scan()
        else:
            self._runner.run(spec.command, cwd=self._root)

    def _scan(self) -> None:
        files = FileSelector(self._root).collect()
        if not files:
            raise _NothingToScan()

        scanner = AntiPatternScanner(
            console=self._reporter.console,
            base_dir=self._root,
        )
        result = scanner.scan(files)
        logger.debug(
            "Scanned %d of %d candidate files in %.2fs",
            result.files_scanned,
            result.candidate_count,
            result.duration,
        )
        if not result.passed:
            raise StepFailed(
                f"{result.violation_count} anti-pattern violation(s) found"
            )
