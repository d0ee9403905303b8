"""Structural reflection: classify a value and list its labelled children."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence, Set as AbstractSet
import dataclasses
import datetime
from enum import Enum
import logging
import numbers
from pathlib import PurePath
import re
import types
from typing import Any, TypeVar
import uuid

from diffpack.core.models import MISSING, CasePayload, Child, ReflectedNode

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=type)

_UNION_MARKER = "__diff_tagged_union__"
_OPAQUE = ReflectedNode(shape="opaque")

_LEAF_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    bool,
    numbers.Number,
    type(None),
    type,
    range,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    PurePath,
    re.Pattern,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)


def tagged_union(cls: _T) -> _T:
    """Mark a base class whose subclasses are the cases of a tagged union.

    Each case is reflected as a single child labelled with the case name
    (``__diff_case__`` when the subclass sets it, else the class name). A case
    with one field carries that field's value as payload, a case with several
    fields carries a :class:`CasePayload`, and a case without fields carries
    nothing.
    """
    setattr(cls, _UNION_MARKER, cls)
    return cls


def union_base(value: Any) -> type | None:
    """Return the ``@tagged_union`` base of ``value``'s type, if any."""
    if isinstance(value, type):
        return None
    return getattr(type(value), _UNION_MARKER, None)


def case_label(value: Any) -> str:
    value_type = type(value)
    explicit = value_type.__dict__.get("__diff_case__")
    if isinstance(explicit, str) and explicit:
        return explicit
    return value_type.__name__


def reflect(value: Any) -> ReflectedNode:
    """Report the shape and ordered children of ``value``.

    Values whose structure cannot be determined are opaque. Only stack
    exhaustion propagates.
    """
    try:
        return _reflect(value)
    except RecursionError:
        raise
    except Exception as error:
        logger.debug(
            "reflection failed for %s, treating as opaque: %s",
            type(value).__name__,
            error,
        )
        return _OPAQUE


def _reflect(value: Any) -> ReflectedNode:
    hook = getattr(type(value), "__diff_reflect__", None)
    if hook is not None and not isinstance(value, type):
        node = hook(value)
        return node if isinstance(node, ReflectedNode) else _OPAQUE

    if value is MISSING or isinstance(value, _LEAF_TYPES):
        return _OPAQUE

    # Enum members are tagged-union cases without payload.
    if isinstance(value, Enum):
        return _OPAQUE

    if union_base(value) is not None:
        return _reflect_union(value)

    if isinstance(value, Mapping):
        return ReflectedNode.build(
            "key_value_map",
            [Child(label=str(key), value=item) for key, item in value.items()],
        )

    if isinstance(value, AbstractSet):
        return ReflectedNode.build(
            "set",
            [Child(label=None, value=item) for item in sorted(value, key=_stable_sort_key)],
        )

    if isinstance(value, tuple):
        field_names = getattr(type(value), "_fields", None)
        if isinstance(field_names, tuple):
            labels = [str(name) for name in field_names]
        else:
            labels = [f"[{idx}]" for idx in range(len(value))]
        return ReflectedNode.build(
            "record",
            [Child(label=label, value=item) for label, item in zip(labels, value)],
        )

    if isinstance(value, (Sequence, deque)):
        return ReflectedNode.build(
            "ordered_collection",
            [Child(label=f"[{idx}]", value=item) for idx, item in enumerate(value)],
        )

    attributes = _attribute_items(value)
    if attributes is None:
        return _OPAQUE
    return ReflectedNode.build(
        "record",
        [Child(label=name, value=item) for name, item in attributes],
    )


def _reflect_union(value: Any) -> ReflectedNode:
    fields = _attribute_items(value) or []
    if not fields:
        return _OPAQUE

    payload: Any
    if len(fields) == 1:
        payload = fields[0][1]
    else:
        payload = CasePayload(fields=tuple(fields))
    return ReflectedNode.build(
        "tagged_union",
        [Child(label=case_label(value), value=payload)],
    )


def _attribute_items(value: Any) -> list[tuple[str, Any]] | None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(item.name, getattr(value, item.name)) for item in dataclasses.fields(value)]

    items: list[tuple[str, Any]] = []
    seen: set[str] = set()
    has_state = False

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        has_state = True
        for name, item in instance_dict.items():
            seen.add(name)
            items.append((name, item))

    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__")
        if slots is None:
            continue
        has_state = True
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in seen or name in {"__dict__", "__weakref__"}:
                continue
            if not hasattr(value, name):
                continue
            seen.add(name)
            items.append((name, getattr(value, name)))

    return items if has_state else None


def _stable_sort_key(item: Any) -> str:
    try:
        return repr(item)
    except Exception:
        return type(item).__name__
