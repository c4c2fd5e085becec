"""The fixed, ordered list of verification steps."""

from __future__ import annotations

from mergegate.pipeline.models import StepKind, StepSpec

STEPS: tuple[StepSpec, ...] = (
    StepSpec(
        ordinal=1,
        name="typecheck",
        label="TypeScript Type Check",
        command=("npx", "turbo", "run", "typecheck"),
    ),
    StepSpec(
        ordinal=2,
        name="lint",
        label="ESLint",
        command=("npx", "turbo", "run", "lint"),
    ),
    StepSpec(
        ordinal=3,
        name="test",
        label="Unit Tests (Vitest)",
        command=("npx", "vitest", "run"),
    ),
    StepSpec(
        ordinal=4,
        name="anti-patterns",
        label="Anti-pattern Scan",
        kind=StepKind.SCAN,
    ),
    StepSpec(
        ordinal=5,
        name="lint:naming",
        label="Naming Convention Check",
        command=("node", "scripts/lint-naming.js"),
    ),
    StepSpec(
        ordinal=6,
        name="wrangler-sync",
        label="Wrangler Binding Sync",
        command=("node", "scripts/check-wrangler-sync.js"),
    ),
    StepSpec(
        ordinal=7,
        name="build",
        label="Production Build",
        command=("npx", "turbo", "run", "build"),
        skippable=True,
    ),
)
