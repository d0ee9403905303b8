"""Options and result models for structural diffing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from diffpack.core.canonical import canonicalize
from diffpack.diff.exceptions import DiffConfigError

DEFAULT_MAX_DEPTH = 64
MAX_DEPTH_LIMIT = 256


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Knobs for a single comparison.

    ``canonicalizer`` is the equality oracle: two values whose renderings match
    are treated as equal. ``max_depth`` bounds recursion; subtrees below it are
    compared by their renderings, which are built without recursion.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    check_types: bool = True
    canonicalizer: Callable[[Any], str] = field(default=canonicalize)

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise DiffConfigError(f"max_depth must be an integer, got {self.max_depth!r}")
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise DiffConfigError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if not callable(self.canonicalizer):
            raise DiffConfigError("canonicalizer must be callable")

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_depth": self.max_depth,
            "check_types": self.check_types,
            "canonicalizer": getattr(
                self.canonicalizer,
                "__qualname__",
                type(self.canonicalizer).__name__,
            ),
        }


DEFAULT_OPTIONS = DiffOptions()
