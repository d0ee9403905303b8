"""Recursive structural diff engine.

Expected drives every traversal: its children, keys and elements define the
iteration order, and structure present only on the received side is surfaced
solely through lookups against expected.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Set as AbstractSet
import logging
from typing import Any

from diffpack.core.canonical import caching_canonicalizer, describe
from diffpack.core.models import MISSING, ReflectedNode
from diffpack.core.reflect import reflect
from diffpack.diff.formatting import (
    render_case_count_mismatch,
    render_count_mismatch,
    render_expected_received,
    render_header,
    render_missing_set_elements,
)
from diffpack.diff.models import DEFAULT_OPTIONS, DiffOptions

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]
Render = Callable[[Any], str]


def compare_values(
    expected: Any,
    received: Any,
    level: int,
    emit: Emit,
    options: DiffOptions | None = None,
) -> None:
    """Compare two values and pass each rendered difference to ``emit``."""
    resolved = options or DEFAULT_OPTIONS
    render = caching_canonicalizer(resolved.canonicalizer)
    _compare(expected, received, max(level, 0), emit, resolved, render)


def _compare(
    expected: Any,
    received: Any,
    level: int,
    emit: Emit,
    options: DiffOptions,
    render: Render,
) -> None:
    if level >= options.max_depth:
        if render(expected) != render(received):
            logger.debug("max depth %d reached, comparing subtree as text", options.max_depth)
            emit(
                render_expected_received(
                    describe(expected, canonicalizer=render),
                    describe(received, canonicalizer=render),
                    level,
                )
            )
        return

    expected_node = reflect(expected)
    received_node = reflect(received)

    if not expected_node.children or not received_node.children:
        if render(expected) != render(received):
            emit(_childless_block(expected, expected_node, received, received_node, level, render))
        return

    same_shape = expected_node.shape == received_node.shape
    count_differs = expected_node.count != received_node.count

    if same_shape and expected_node.can_be_empty and count_differs:
        emit(
            render_count_mismatch(
                describe(expected, canonicalizer=render),
                expected_node.count,
                describe(received, canonicalizer=render),
                received_node.count,
                level,
            )
        )
        return

    if same_shape and expected_node.shape == "key_value_map":
        if isinstance(expected, Mapping) and isinstance(received, Mapping):
            _compare_maps(expected, received, level, emit, options, render)
            return

    if same_shape and expected_node.shape == "set":
        if isinstance(expected, AbstractSet) and isinstance(received, AbstractSet):
            _compare_sets(expected, received, level, emit, render)
            return

    if same_shape and expected_node.shape == "tagged_union":
        if count_differs:
            emit(
                render_case_count_mismatch(
                    render(expected),
                    expected_node.count,
                    render(received),
                    received_node.count,
                    level,
                )
            )
            return
        if expected_node.first_label != received_node.first_label:
            emit(
                render_expected_received(
                    expected_node.first_label or "UNKNOWN",
                    received_node.first_label or "UNKNOWN",
                    level,
                )
            )
            return

    _compare_children(expected_node, received_node, level, emit, options, render)


def _childless_block(
    expected: Any,
    expected_node: ReflectedNode,
    received: Any,
    received_node: ReflectedNode,
    level: int,
    render: Render,
) -> str:
    if expected_node.can_be_empty:
        return render_count_mismatch(
            describe(expected, canonicalizer=render),
            expected_node.count,
            describe(received, canonicalizer=render),
            received_node.count,
            level,
        )

    if not received_node.children and expected_node.children:
        received_text = render(received)
        expected_text = _label_or_description(expected, expected_node, render)
    elif not expected_node.children and received_node.children:
        received_text = _label_or_description(received, received_node, render)
        expected_text = render(expected)
    else:
        received_text = describe(received, canonicalizer=render)
        expected_text = describe(expected, canonicalizer=render)
    return render_expected_received(expected_text, received_text, level)


def _label_or_description(value: Any, node: ReflectedNode, render: Render) -> str:
    if node.shape == "tagged_union" and node.first_label is not None:
        return node.first_label
    return describe(value, canonicalizer=render)


def _compare_maps(
    expected: Mapping[Any, Any],
    received: Mapping[Any, Any],
    level: int,
    emit: Emit,
    options: DiffOptions,
    render: Render,
) -> None:
    for key, expected_value in expected.items():
        received_value = received[key] if key in received else MISSING
        results: list[str] = []
        _compare(expected_value, received_value, level + 1, results.append, options, render)
        if results:
            emit(render_header(f"Child key {key}", level) + "".join(results))


def _compare_sets(
    expected: AbstractSet[Any],
    received: AbstractSet[Any],
    level: int,
    emit: Emit,
    render: Render,
) -> None:
    missing = sorted(expected - received, key=render)
    if not missing:
        return
    emit(
        render_missing_set_elements(
            [describe(element, canonicalizer=render) for element in missing],
            level + 1,
        )
    )


def _compare_children(
    expected_node: ReflectedNode,
    received_node: ReflectedNode,
    level: int,
    emit: Emit,
    options: DiffOptions,
    render: Render,
) -> None:
    shape_word = "Enum" if expected_node.shape == "tagged_union" else "Child"

    # Children pair up by position; labels are informational only.
    for expected_child, received_child in zip(expected_node.children, received_node.children):
        if render(expected_child.value) == render(received_child.value):
            continue

        header = render_header(f"{shape_word} {expected_child.label or ''}", level)
        if not reflect(expected_child.value).is_opaque:
            results: list[str] = []
            _compare(
                expected_child.value,
                received_child.value,
                level + 1,
                results.append,
                options,
                render,
            )
            if results:
                emit(header + "".join(results))
            continue

        emit(
            header
            + render_expected_received(
                describe(expected_child.value, canonicalizer=render),
                describe(received_child.value, canonicalizer=render),
                level + 1,
            )
        )
