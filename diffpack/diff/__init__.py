"""Diff subsystem for DiffKit."""

from diffpack.diff.assertion import AssertionResult, assert_no_diff, assert_values
from diffpack.diff.engine import compare_values
from diffpack.diff.entry import diff_unequal, diff_values, dump_diff, ensure_same_type
from diffpack.diff.exceptions import (
    DiffAssertionError,
    DiffConfigError,
    DiffError,
    ShapeMismatchError,
)
from diffpack.diff.formatting import (
    INDENT_MARKER,
    render_expected_received,
    render_indentation,
    render_report,
)
from diffpack.diff.models import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, DiffOptions

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "INDENT_MARKER",
    "DiffOptions",
    "DiffError",
    "DiffConfigError",
    "DiffAssertionError",
    "ShapeMismatchError",
    "compare_values",
    "diff_values",
    "diff_unequal",
    "dump_diff",
    "ensure_same_type",
    "AssertionResult",
    "assert_values",
    "assert_no_diff",
    "render_indentation",
    "render_expected_received",
    "render_report",
]
