from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Set, Tuple

from .errors import IndexOutOfRange, InvalidDimensions
from .square_walls import SquareWalls
from .wall import EdgeKey, Wall

if TYPE_CHECKING:
    from .recommend import TraceHook

Cell = Tuple[int, int]  # (column, row)


class Board:
    """Edge state of a dots-and-boxes board plus a per-cell count of drawn walls.

    The board is column_count x row_count dots. Vertical edges are stored per
    column of dots, horizontal edges per row of dots, and the cell counts are
    kept in step with every edge change so they never need a rescan.
    """

    def __init__(self, column_count: int, row_count: int) -> None:
        if column_count < 2 or row_count < 2:
            raise InvalidDimensions(
                f"Board needs at least 2x2 dots, got {column_count}x{row_count}."
            )
        self._column_count = column_count
        self._row_count = row_count
        # _columns[c][r]: vertical edge between dots (c, r) and (c, r + 1).
        self._columns: List[List[bool]] = [[False] * (row_count - 1) for _ in range(column_count)]
        # _rows[c][r]: horizontal edge between dots (c, r) and (c + 1, r).
        self._rows: List[List[bool]] = [[False] * row_count for _ in range(column_count - 1)]
        self._wall_count: List[List[int]] = [[0] * (row_count - 1) for _ in range(column_count - 1)]
        self.recompute_all_counts()

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def row_count(self) -> int:
        return self._row_count

    # -------- bounds --------

    def _check_edge(self, is_vertical: bool, column: int, row: int) -> None:
        if column < 0:
            raise IndexOutOfRange(f"Column index {column} is below 0.")
        if row < 0:
            raise IndexOutOfRange(f"Row index {row} is below 0.")
        max_column = self._column_count - 1 if is_vertical else self._column_count - 2
        max_row = self._row_count - 2 if is_vertical else self._row_count - 1
        if column > max_column:
            raise IndexOutOfRange(f"Column index {column} is greater than {max_column}.")
        if row > max_row:
            raise IndexOutOfRange(f"Row index {row} is greater than {max_row}.")

    def _check_cell(self, column: int, row: int) -> None:
        if column < 0:
            raise IndexOutOfRange(f"Column index {column} is below 0.")
        if row < 0:
            raise IndexOutOfRange(f"Row index {row} is below 0.")
        if column > self._column_count - 2:
            raise IndexOutOfRange(f"Column index {column} is greater than {self._column_count - 2}.")
        if row > self._row_count - 2:
            raise IndexOutOfRange(f"Row index {row} is greater than {self._row_count - 2}.")

    # -------- edges --------

    def get_edge(self, is_vertical: bool, column: int, row: int) -> Wall:
        """Returns a snapshot of the edge; later changes to the board do not show in it."""
        self._check_edge(is_vertical, column, row)
        grid = self._columns if is_vertical else self._rows
        return Wall(is_vertical, column, row, grid[column][row])

    def set_edge(self, is_vertical: bool, column: int, row: int, value: bool) -> None:
        """Draws or erases an edge and updates the counts of the cells beside it."""
        self._check_edge(is_vertical, column, row)
        grid = self._columns if is_vertical else self._rows
        if grid[column][row] == value:
            return
        grid[column][row] = value
        delta = 1 if value else -1
        for c, r in self.adjacent_cells(is_vertical, column, row):
            self._wall_count[c][r] += delta

    def set_wall(self, wall: Wall, value: bool) -> None:
        """Sets the edge at wall's location to value; wall.is_set is ignored."""
        self.set_edge(wall.is_vertical, wall.column, wall.row, value)

    def toggle_edge(self, is_vertical: bool, column: int, row: int) -> Wall:
        current = self.get_edge(is_vertical, column, row)
        self.set_edge(is_vertical, column, row, not current.is_set)
        return current.with_state(not current.is_set)

    def adjacent_cells(self, is_vertical: bool, column: int, row: int) -> List[Cell]:
        """Cells bordered by an edge: two for inner edges, one on the outer boundary."""
        self._check_edge(is_vertical, column, row)
        cells: List[Cell] = []
        if is_vertical:
            if column > 0:
                cells.append((column - 1, row))  # left
            if column < self._column_count - 1:
                cells.append((column, row))  # right
        else:
            if row > 0:
                cells.append((column, row - 1))  # above
            if row < self._row_count - 1:
                cells.append((column, row))  # below
        return cells

    def edges(self) -> Iterator[Wall]:
        """Iterates over every edge, vertical family first."""
        for c in range(self._column_count):
            for r in range(self._row_count - 1):
                yield Wall(True, c, r, self._columns[c][r])
        for c in range(self._column_count - 1):
            for r in range(self._row_count):
                yield Wall(False, c, r, self._rows[c][r])

    def unset_edges(self) -> List[Wall]:
        return [w for w in self.edges() if not w.is_set]

    def is_full(self) -> bool:
        return all(w.is_set for w in self.edges())

    # -------- cells --------

    def cells(self) -> Iterator[Cell]:
        for c in range(self._column_count - 1):
            for r in range(self._row_count - 1):
                yield (c, r)

    def get_cell_wall_count(self, column: int, row: int) -> int:
        self._check_cell(column, row)
        return self._wall_count[column][row]

    def get_cell_walls(self, column: int, row: int) -> SquareWalls:
        self._check_cell(column, row)
        return SquareWalls(
            top=Wall(False, column, row, self._rows[column][row]),
            right=Wall(True, column + 1, row, self._columns[column + 1][row]),
            bottom=Wall(False, column, row + 1, self._rows[column][row + 1]),
            left=Wall(True, column, row, self._columns[column][row]),
        )

    def recompute_all_counts(self) -> None:
        """Rebuilds every cell count from the edge arrays."""
        counts = [[0] * (self._row_count - 1) for _ in range(self._column_count - 1)]
        for wall in self.edges():
            if wall.is_set:
                for c, r in self.adjacent_cells(wall.is_vertical, wall.column, wall.row):
                    counts[c][r] += 1
        self._wall_count = counts

    def counts_consistent(self) -> bool:
        """True when the maintained counts match a full recount."""
        scratch = self.copy()
        scratch.recompute_all_counts()
        return scratch._wall_count == self._wall_count

    # -------- analysis --------

    def copy(self) -> 'Board':
        """Returns a fully independent board with the same edges and counts."""
        clone = Board.__new__(Board)
        clone._column_count = self._column_count
        clone._row_count = self._row_count
        clone._columns = [list(col) for col in self._columns]
        clone._rows = [list(col) for col in self._rows]
        clone._wall_count = [list(col) for col in self._wall_count]
        return clone

    def get_recommended_moves(self, trace: Optional['TraceHook'] = None) -> Set[Wall]:
        """Edges worth playing for the side to move. The board itself is left untouched."""
        from .recommend import recommended_moves
        return recommended_moves(self, trace=trace)

    def pretty(self, highlight: Optional[Iterable[Wall]] = None) -> str:
        """ASCII drawing of the board.

        Drawn edges are '---' / '|', highlighted edges '***' / '*'. Cells with
        two or more walls show their count.
        """
        marked: Set[EdgeKey] = {w.key for w in (highlight or ())}
        lines: List[str] = []
        for r in range(self._row_count):
            parts: List[str] = ['+']
            for c in range(self._column_count - 1):
                if (False, c, r) in marked:
                    parts.append('***')
                elif self._rows[c][r]:
                    parts.append('---')
                else:
                    parts.append('   ')
                parts.append('+')
            lines.append(''.join(parts))
            if r == self._row_count - 1:
                break
            parts = []
            for c in range(self._column_count):
                if (True, c, r) in marked:
                    parts.append('*')
                elif self._columns[c][r]:
                    parts.append('|')
                else:
                    parts.append(' ')
                if c < self._column_count - 1:
                    n = self._wall_count[c][r]
                    parts.append(f" {n} " if n >= 2 else '   ')
            lines.append(''.join(parts))
        return "\n".join(lines)
