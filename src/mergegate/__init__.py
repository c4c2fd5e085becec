"""mergegate — pre-merge verification gate for multi-package source trees."""

__version__ = "0.1.0"
