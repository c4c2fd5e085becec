"""Console reporting for pipeline runs."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from mergegate.pipeline.models import RunReport, Step, StepResult

_RESULT_STYLES = {
    StepResult.PASSED: "green",
    StepResult.FAILED: "red",
    StepResult.SKIPPED: "yellow",
}


class Reporter:
    """Renders step headers, step outcomes and the final summary."""

    def __init__(self, console: Console | None = None, total_steps: int = 7) -> None:
        self._console = console or Console()
        self._total = total_steps

    @property
    def console(self) -> Console:
        return self._console

    def _line(self, text: str, style: str = "") -> None:
        self._console.print(Text(text, style=style), soft_wrap=True)

    def _rule(self) -> None:
        self._console.rule(style="cyan")

    def step_header(self, step: Step) -> None:
        self._console.print()
        self._rule()
        self._line(f"[{step.ordinal}/{self._total}] {step.label}", "bold")
        self._rule()

    def step_outcome(self, step: Step) -> None:
        style = _RESULT_STYLES.get(step.result, "")
        seconds = int(step.elapsed)
        if step.result is StepResult.PASSED:
            self._line(f"✓ {step.label} ({seconds}s)", style)
        elif step.result is StepResult.FAILED:
            self._line(f"✗ {step.label} FAILED ({seconds}s)", style)
            if step.reason:
                self._line(f"  {step.reason}", "dim")
        elif step.result is StepResult.SKIPPED:
            self._line(f"⊘ {step.label} skipped ({step.reason})", style)

    def summary(self, report: RunReport) -> None:
        self._console.print()
        self._rule()
        self._line("VERIFICATION SUMMARY", "bold")
        self._rule()
        self._line(f"  ✓ Passed:  {report.passed}", "green")
        self._line(f"  ✗ Failed:  {report.failed}", "red" if report.failed else "dim")
        self._line(
            f"  ⊘ Skipped: {report.skipped}", "yellow" if report.skipped else "dim"
        )
        self._line(f"  Total:   {report.total} checks in {int(report.elapsed)}s")
        self._console.print()

        if report.success:
            self._line("ALL CHECKS PASSED", "bold green")
        else:
            self._line(
                f"VERIFICATION FAILED — {report.failed} check(s) did not pass.",
                "bold red",
            )
