"""Stable public API surface for DiffKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any, TextIO

from diffpack.core import ReflectedNode, Shape, canonicalize, reflect, tagged_union
from diffpack.diff import (
    AssertionResult,
    DiffAssertionError,
    DiffError,
    DiffOptions,
    ShapeMismatchError,
    assert_no_diff as _assert_no_diff,
    assert_values as _assert_values,
    diff_unequal as _diff_unequal,
    diff_values,
    dump_diff as _dump_diff,
)

__version__ = "0.1.0"


def diff(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> list[str]:
    """Build the list of differences between two values.

    Args:
        expected: Expected value.
        received: Received value; must share ``expected``'s type.
        options: Optional depth limit, type check and canonicalizer.

    Returns:
        Rendered difference entries in discovery order (empty when equal).
    """
    return diff_values(expected, received, options=options)


def diff_unequal(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> list[str]:
    """Build differences, returning early when ``expected == received``.

    Args:
        expected: Expected value.
        received: Received value.
        options: Optional diff options.

    Returns:
        Rendered difference entries, or an empty list for equal values.
    """
    return _diff_unequal(expected, received, options=options)


def dump_diff(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
    stream: TextIO | None = None,
) -> list[str]:
    """Print differences between two values.

    Args:
        expected: Expected value.
        received: Received value.
        options: Optional diff options.
        stream: Output stream, standard output when omitted.

    Returns:
        The printed entries.
    """
    return _dump_diff(expected, received, options=options, stream=stream)


def assert_values(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> AssertionResult:
    """Compare two values and return a pass/fail result with the report."""
    return _assert_values(expected, received, options=options)


def assert_no_diff(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
    message: str | None = None,
) -> None:
    """Raise ``DiffAssertionError`` with the rendered report when values differ.

    Args:
        expected: Expected value.
        received: Received value.
        options: Optional diff options.
        message: Headline placed above the report.
    """
    _assert_no_diff(expected, received, options=options, message=message)


__all__ = [
    "__version__",
    "Shape",
    "ReflectedNode",
    "DiffOptions",
    "AssertionResult",
    "DiffError",
    "ShapeMismatchError",
    "DiffAssertionError",
    "tagged_union",
    "canonicalize",
    "reflect",
    "diff",
    "diff_unequal",
    "dump_diff",
    "assert_values",
    "assert_no_diff",
]
