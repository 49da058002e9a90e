"""Occurrence range annotations for repeated properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .models import TypeMeta

UNBOUNDED = -1
MAX_SENTINEL = "max"


@dataclass(frozen=True)
class ArrayBounds:
    """Inclusive ``[minimum, maximum]`` range; a ``None`` maximum is open-ended."""

    minimum: int
    maximum: Optional[int]

    @property
    def is_unbounded(self) -> bool:
        return self.maximum is None

    def __str__(self) -> str:
        upper = MAX_SENTINEL if self.maximum is None else str(self.maximum)
        return f"int<{self.minimum},{upper}>"


class ArrayBoundsCalculator:
    """Derives the occurrence range of a collection from its schema meta."""

    def __call__(self, meta: "TypeMeta") -> ArrayBounds:
        minimum = meta.min_occurs
        if minimum is None or minimum < 0:
            minimum = 0
        maximum = meta.max_occurs
        if maximum is None or maximum == UNBOUNDED:
            maximum = None
        return ArrayBounds(minimum=minimum, maximum=maximum)


__all__ = ["ArrayBounds", "ArrayBoundsCalculator", "MAX_SENTINEL", "UNBOUNDED"]
