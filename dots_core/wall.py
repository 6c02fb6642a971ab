from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

EdgeKey = Tuple[bool, int, int]  # (is_vertical, column, row)


@dataclass(frozen=True)
class Wall:
    """Snapshot of one edge: its location plus whether it is currently drawn.

    Equality and hashing only look at the location, so a set of walls never
    holds the same edge twice in two different states.
    """
    is_vertical: bool
    column: int
    row: int
    is_set: bool = field(default=False, compare=False)

    @property
    def key(self) -> EdgeKey:
        return (self.is_vertical, self.column, self.row)

    def with_state(self, is_set: bool) -> 'Wall':
        return Wall(self.is_vertical, self.column, self.row, is_set)

    def label(self) -> str:
        """Short text form used by the CLI, e.g. 'v:3:1' or 'h:0:2'."""
        return f"{'v' if self.is_vertical else 'h'}:{self.column}:{self.row}"
