"""Global configuration — environment variables and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class GateConfig:
    """Application-wide configuration."""

    root: Path = field(default_factory=Path.cwd)
    verbose: bool = False
    command_timeout: float | None = None  # None — commands run to completion

    @classmethod
    def load(cls) -> GateConfig:
        """Load config from environment variables."""
        config = cls()

        env_root = os.environ.get("MERGEGATE_ROOT")
        if env_root:
            config.root = Path(env_root)

        env_verbose = os.environ.get("MERGEGATE_VERBOSE", "")
        config.verbose = env_verbose.strip().lower() in _TRUTHY

        env_timeout = os.environ.get("MERGEGATE_COMMAND_TIMEOUT")
        if env_timeout:
            timeout = float(env_timeout)
            if timeout <= 0:
                raise ValueError(
                    f"MERGEGATE_COMMAND_TIMEOUT must be positive, got {env_timeout}"
                )
            config.command_timeout = timeout

        return config
