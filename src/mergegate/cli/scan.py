"""CLI command: check-anti-patterns <file>... — scan an explicit file list."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from mergegate.cli import configure_logging
from mergegate.config import GateConfig
from mergegate.scanner.engine import AntiPatternScanner

logger = logging.getLogger(__name__)

console = Console()


@click.command()
@click.argument("files", nargs=-1, required=True)
def check_anti_patterns(files: tuple[str, ...]) -> None:
    """Block commits whose FILES contain forbidden constructs."""
    config = GateConfig.load()
    configure_logging(config.verbose)

    scanner = AntiPatternScanner(console=console)
    result = scanner.scan(files)
    logger.debug(
        "Scanned %d files (%d skipped, %d unreadable) in %.2fs",
        result.files_scanned,
        result.files_skipped,
        result.files_unreadable,
        result.duration,
    )

    if result.violation_count > 0:
        console.print()
        console.print(
            f"COMMIT BLOCKED: {result.violation_count} "
            "anti-pattern violation(s) found.",
            markup=False,
            highlight=False,
        )
        sys.exit(1)
