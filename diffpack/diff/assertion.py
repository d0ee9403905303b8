"""Assertion helpers for test suites and CI checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from diffpack.diff.entry import diff_values
from diffpack.diff.exceptions import DiffAssertionError
from diffpack.diff.formatting import render_report
from diffpack.diff.models import DiffOptions


@dataclass(slots=True)
class AssertionResult:
    """Outcome of an expected vs received assertion."""

    entries: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.entries

    def report(self) -> str:
        return render_report(self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "entry_count": len(self.entries),
            "entries": list(self.entries),
        }


def assert_values(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> AssertionResult:
    """Compare expected vs received and return the assertion outcome."""
    return AssertionResult(entries=diff_values(expected, received, options=options))


def assert_no_diff(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
    message: str | None = None,
) -> None:
    """Raise :class:`DiffAssertionError` carrying the report when values differ."""
    result = assert_values(expected, received, options=options)
    if result.passed:
        return
    headline = message or f"values differ ({len(result.entries)} difference(s))"
    raise DiffAssertionError(f"{headline}\n{result.report()}", result.entries)
