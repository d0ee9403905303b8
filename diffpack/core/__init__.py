"""Core reflection models and deterministic primitives for DiffKit."""

from diffpack.core.canonical import caching_canonicalizer, canonicalize, describe
from diffpack.core.models import MISSING, CasePayload, Child, ReflectedNode
from diffpack.core.reflect import case_label, reflect, tagged_union, union_base
from diffpack.core.types import CONTAINER_SHAPES, SHAPES, Shape

__all__ = [
    "Shape",
    "SHAPES",
    "CONTAINER_SHAPES",
    "MISSING",
    "Child",
    "CasePayload",
    "ReflectedNode",
    "reflect",
    "tagged_union",
    "union_base",
    "case_label",
    "canonicalize",
    "caching_canonicalizer",
    "describe",
]
