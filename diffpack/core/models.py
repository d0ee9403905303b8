"""Core data models for reflected values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from diffpack.core.types import CONTAINER_SHAPES, SHAPES, Shape


class _Missing:
    """Placeholder for a map key that is absent on one side."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class Child:
    """A single labelled child of a reflected value."""

    label: str | None
    value: Any


@dataclass(frozen=True, slots=True)
class ReflectedNode:
    """Shape and ordered children of one value."""

    shape: Shape
    children: tuple[Child, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.shape not in SHAPES:
            raise ValueError(f"Unsupported shape: {self.shape}")

    @property
    def count(self) -> int:
        return len(self.children)

    @property
    def is_opaque(self) -> bool:
        return self.shape == "opaque"

    @property
    def can_be_empty(self) -> bool:
        return self.shape in CONTAINER_SHAPES

    @property
    def first_label(self) -> str | None:
        if not self.children:
            return None
        return self.children[0].label

    @classmethod
    def build(cls, shape: Shape, children: list[Child] | tuple[Child, ...]) -> "ReflectedNode":
        """Create a node, downgrading childless non-container shapes to opaque."""
        items = tuple(children)
        if not items and shape not in CONTAINER_SHAPES:
            return cls(shape="opaque")
        return cls(shape=shape, children=items)


@dataclass(frozen=True, slots=True)
class CasePayload:
    """Named fields carried by a tagged-union case with several fields."""

    fields: tuple[tuple[str, Any], ...]

    def __diff_reflect__(self) -> ReflectedNode:
        return ReflectedNode.build(
            "record",
            [Child(label=name, value=value) for name, value in self.fields],
        )

    def __str__(self) -> str:
        rendered = ", ".join(f"{name}={value!r}" for name, value in self.fields)
        return f"({rendered})"
