"""Top-level diff entry points."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from diffpack.core.reflect import union_base
from diffpack.diff.engine import compare_values
from diffpack.diff.exceptions import ShapeMismatchError
from diffpack.diff.models import DEFAULT_OPTIONS, DiffOptions

logger = logging.getLogger(__name__)


def diff_values(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> list[str]:
    """Return every difference between ``expected`` and ``received`` in order.

    Entries are self-contained text blocks, nested differences already inlined.
    An empty list means the two values render identically.
    """
    resolved = options or DEFAULT_OPTIONS
    if resolved.check_types:
        ensure_same_type(expected, received)

    entries: list[str] = []
    compare_values(expected, received, 0, entries.append, resolved)
    logger.debug(
        "diff %s vs %s produced %d entries",
        type(expected).__name__,
        type(received).__name__,
        len(entries),
    )
    return entries


def diff_unequal(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
) -> list[str]:
    """Like :func:`diff_values`, but skip all work when ``==`` says equal.

    Only types that define their own ``__eq__`` are short-circuited; identity
    equality is not treated as a real comparison.
    """
    if has_value_equality(expected) and _equal(expected, received):
        return []
    return diff_values(expected, received, options=options)


def dump_diff(
    expected: Any,
    received: Any,
    *,
    options: DiffOptions | None = None,
    stream: TextIO | None = None,
) -> list[str]:
    """Print each difference to ``stream`` (stdout by default) and return them."""
    entries = diff_unequal(expected, received, options=options)
    target = stream if stream is not None else sys.stdout
    for entry in entries:
        print(entry, file=target)
    return entries


def ensure_same_type(expected: Any, received: Any) -> None:
    """Fail fast when the two roots cannot be compared structurally."""
    if type(expected) is type(received):
        return
    base = union_base(expected)
    if base is not None and base is union_base(received):
        return
    raise ShapeMismatchError(
        "expected and received must share a type: "
        f"got {type(expected).__name__} and {type(received).__name__}"
    )


def has_value_equality(value: Any) -> bool:
    return type(value).__eq__ is not object.__eq__


def _equal(expected: Any, received: Any) -> bool:
    try:
        return bool(expected == received)
    except Exception as error:
        # Element-wise comparisons (array-likes) cannot be collapsed to a bool.
        logger.debug("equality short-circuit unavailable: %s", error)
        return False
