"""CLI command: mergegate-verify — run the full verification pipeline."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from mergegate.cli import configure_logging
from mergegate.config import GateConfig
from mergegate.pipeline.commands import SubprocessRunner
from mergegate.pipeline.models import RunOptions
from mergegate.pipeline.orchestrator import Orchestrator
from mergegate.pipeline.report import Reporter
from mergegate.pipeline.steps import STEPS

console = Console()


@click.command()
@click.option(
    "--skip-build",
    is_flag=True,
    help="Record the production build as skipped instead of running it.",
)
def verify(skip_build: bool) -> None:
    """Run type check, lint, tests, anti-pattern scan, naming and binding
    checks, and the production build, then report a single verdict."""
    config = GateConfig.load()
    configure_logging(config.verbose)

    orchestrator = Orchestrator(
        root=config.root,
        runner=SubprocessRunner(timeout=config.command_timeout),
        reporter=Reporter(console=console, total_steps=len(STEPS)),
    )
    report = orchestrator.run(RunOptions(skip_build=skip_build))
    sys.exit(report.exit_code)
