from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .wall import Wall


@dataclass(frozen=True)
class SquareWalls:
    """The four walls bounding one cell, in top/right/bottom/left order."""
    top: Wall
    right: Wall
    bottom: Wall
    left: Wall

    def __iter__(self) -> Iterator[Wall]:
        yield self.top
        yield self.right
        yield self.bottom
        yield self.left

    def walls(self, is_set: bool) -> List[Wall]:
        """Returns the walls whose state matches is_set."""
        return [w for w in self if w.is_set == is_set]

    def first_wall(self, is_set: bool) -> Optional[Wall]:
        for w in self:
            if w.is_set == is_set:
                return w
        return None

    def set_count(self) -> int:
        return sum(1 for w in self if w.is_set)
