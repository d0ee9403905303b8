"""Diff subsystem exceptions."""

from __future__ import annotations


class DiffError(Exception):
    """Base class for diff errors."""


class ShapeMismatchError(DiffError, TypeError):
    """Expected and received root values do not share a type."""


class DiffConfigError(DiffError, ValueError):
    """Invalid diff options."""


class DiffAssertionError(AssertionError):
    """Raised by assertion helpers when values differ."""

    def __init__(self, message: str, entries: list[str]) -> None:
        super().__init__(message)
        self.entries = entries
