"""Deterministic canonical rendering used as the diff equality oracle."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from diffpack.core.models import CasePayload, ReflectedNode
from diffpack.core.reflect import case_label, reflect, union_base

_PLAIN_LEAF_TYPES = (str, bytes, bytearray, int, float, complex, type(None))

Renderings = dict[int, tuple[Any, str]]
Assemble = Callable[[list[str]], str]


def canonicalize(value: Any) -> str:
    """Render a value to a stable textual form.

    Map entries and set elements are ordered by their own rendering, so the
    result does not depend on insertion order or the interpreter hash seed.
    Nesting depth is limited only by memory.
    """
    return _render(value, {})


def caching_canonicalizer(canonicalizer: Callable[[Any], str]) -> Callable[[Any], str]:
    """Wrap ``canonicalizer`` so each object is rendered once.

    With the built-in canonicalizer every nested container's rendering is kept
    as well, so walking a tree level by level renders each node once. The
    returned callable holds references to what it rendered and is meant to
    live for a single comparison.
    """
    memo: Renderings = {}
    if canonicalizer is canonicalize:
        return lambda value: _render(value, memo)

    def render(value: Any) -> str:
        cached = _lookup(memo, value)
        if cached is None:
            cached = canonicalizer(value)
            memo[id(value)] = (value, cached)
        return cached

    return render


def describe(value: Any, *, canonicalizer: Callable[[Any], str] | None = None) -> str:
    """Plain, human-facing description of a value for report lines."""
    if isinstance(value, str):
        return value
    node = reflect(value)
    if node.is_opaque and _has_own_text(value):
        try:
            return str(value)
        except Exception:
            pass
    render = canonicalizer or canonicalize
    return render(value)


@dataclass(slots=True)
class _Frame:
    value: Any
    pending: list[Any]
    assemble: Assemble
    rendered: list[str] = field(default_factory=list)
    # Set when a cycle was cut below this frame; such renderings are path dependent.
    cut: bool = False


def _render(value: Any, memo: Renderings) -> str:
    frames: list[_Frame] = []
    active: set[int] = set()
    text = _open(value, frames, active, memo)
    while frames:
        frame = frames[-1]
        if text is not None:
            frame.rendered.append(text)
            text = None
        if len(frame.rendered) < len(frame.pending):
            text = _open(frame.pending[len(frame.rendered)], frames, active, memo)
            continue
        frames.pop()
        active.discard(id(frame.value))
        text = frame.assemble(frame.rendered)
        if not frame.cut:
            memo[id(frame.value)] = (frame.value, text)
    assert text is not None
    return text


def _open(value: Any, frames: list[_Frame], active: set[int], memo: Renderings) -> str | None:
    """Return the rendering of a leaf, or push a frame for a composite."""
    cached = _lookup(memo, value)
    if cached is not None:
        return cached

    node = reflect(value)
    if node.is_opaque:
        return _canonicalize_leaf(value)

    marker = id(value)
    if marker in active:
        for frame in reversed(frames):
            frame.cut = True
            if frame.value is value:
                break
        return f"<cycle {type(value).__name__}>"

    pending, assemble = _plan_composite(value, node)
    active.add(marker)
    frames.append(_Frame(value=value, pending=pending, assemble=assemble))
    return None


def _lookup(memo: Renderings, value: Any) -> str | None:
    cached = memo.get(id(value))
    if cached is not None and cached[0] is value:
        return cached[1]
    return None


def _canonicalize_leaf(value: Any) -> str:
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"

    base = union_base(value)
    if base is not None:
        return f"{base.__name__}.{case_label(value)}"

    if type(value).__repr__ is object.__repr__:
        return f"{type(value).__name__}()"

    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _plan_composite(value: Any, node: ReflectedNode) -> tuple[list[Any], Assemble]:
    """List the values to render first and how to join their renderings."""
    type_name = type(value).__name__

    if node.shape == "tagged_union":
        child = node.children[0]
        base = union_base(value)
        prefix = f"{base.__name__ if base is not None else type_name}.{child.label}"
        if node.count == 1 and isinstance(child.value, CasePayload):
            names = [name for name, _ in child.value.fields]
            return (
                [item for _, item in child.value.fields],
                lambda parts: f"{prefix}({_join_fields(names, parts)})",
            )
        return (
            [item.value for item in node.children],
            lambda parts: f"{prefix}({', '.join(parts)})",
        )

    if node.shape == "key_value_map":
        wrap = _wrapper(value, dict, "{", "}")
        if isinstance(value, Mapping):
            pending: list[Any] = []
            for key, item in value.items():
                pending.extend((key, item))

            def assemble_mapping(parts: list[str]) -> str:
                pairs = sorted(zip(parts[::2], parts[1::2]))
                return wrap(", ".join(f"{key}: {item}" for key, item in pairs))

            return pending, assemble_mapping

        keys = [repr(child.label) for child in node.children]

        def assemble_entries(parts: list[str]) -> str:
            pairs = sorted(zip(keys, parts))
            return wrap(", ".join(f"{key}: {item}" for key, item in pairs))

        return [child.value for child in node.children], assemble_entries

    if node.shape == "set":
        wrap = _wrapper(value, set, "{", "}")

        def assemble_set(parts: list[str]) -> str:
            if not parts:
                return f"{type_name}()"
            return wrap(", ".join(sorted(parts)))

        return [child.value for child in node.children], assemble_set

    if node.shape == "ordered_collection":
        wrap = _wrapper(value, list, "[", "]")
        return [child.value for child in node.children], lambda parts: wrap(", ".join(parts))

    if isinstance(value, CasePayload):
        names = [name for name, _ in value.fields]
        return (
            [item for _, item in value.fields],
            lambda parts: f"({_join_fields(names, parts)})",
        )

    if type(value) is tuple:

        def assemble_tuple(parts: list[str]) -> str:
            if len(parts) == 1:
                return f"({parts[0]},)"
            return f"({', '.join(parts)})"

        return [child.value for child in node.children], assemble_tuple

    names = [child.label or "" for child in node.children]
    return (
        [child.value for child in node.children],
        lambda parts: f"{type_name}({_join_fields(names, parts)})",
    )


def _wrapper(value: Any, plain_type: type, opening: str, closing: str) -> Callable[[str], str]:
    if type(value) is plain_type:
        return lambda body: f"{opening}{body}{closing}"
    type_name = type(value).__name__
    return lambda body: f"{type_name}({opening}{body}{closing})"


def _join_fields(names: list[str], parts: list[str]) -> str:
    return ", ".join(f"{name}={part}" for name, part in zip(names, parts))


def _has_own_text(value: Any) -> bool:
    if isinstance(value, Enum) or union_base(value) is not None:
        return False
    if isinstance(value, _PLAIN_LEAF_TYPES):
        return True
    value_type = type(value)
    return value_type.__str__ is not object.__str__ or value_type.__repr__ is not object.__repr__
