"""Anti-pattern scanning: file selection, pattern matching, scan engine."""
