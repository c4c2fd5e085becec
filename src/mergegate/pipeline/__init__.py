"""Verification pipeline: step model, command runner, reporting, orchestration."""
