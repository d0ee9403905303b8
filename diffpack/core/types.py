"""Type definitions for structural reflection."""

from typing import Literal

Shape = Literal[
    "record",
    "tagged_union",
    "ordered_collection",
    "key_value_map",
    "set",
    "opaque",
]

SHAPES: tuple[str, ...] = (
    "record",
    "tagged_union",
    "ordered_collection",
    "key_value_map",
    "set",
    "opaque",
)

# Shapes whose emptiness is a count rather than a leaf.
CONTAINER_SHAPES = frozenset({"ordered_collection", "key_value_map", "set"})
