from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from .board import Board
from .wall import Wall


def wall_to_json(wall: Wall) -> Dict[str, Any]:
    return {
        "isVertical": wall.is_vertical,
        "column": wall.column,
        "row": wall.row,
        "set": wall.is_set,
    }


def walls_to_json(walls: Iterable[Wall]) -> List[Dict[str, Any]]:
    """Sorted by location so responses are stable."""
    return [wall_to_json(w) for w in sorted(walls, key=lambda w: w.key)]


def board_to_json(board: Board) -> Dict[str, Any]:
    """Compact form: dimensions plus the list of drawn edges as [isVertical, column, row]."""
    return {
        "columnCount": board.column_count,
        "rowCount": board.row_count,
        "setEdges": [[w.is_vertical, w.column, w.row] for w in board.edges() if w.is_set],
    }


def parse_int(value: Any) -> int:
    """Accepts ints and decimal strings only; bools, floats and the rest raise ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"expected an integer, got {value!r}")


def parse_flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected true or false, got {value!r}")
    return value


def parse_edge(obj: Any) -> Tuple[bool, int, int]:
    """Accepts [isVertical, column, row] or {"isVertical", "column", "row"}."""
    try:
        if isinstance(obj, dict):
            return parse_flag(obj["isVertical"]), parse_int(obj["column"]), parse_int(obj["row"])
        is_vertical, column, row = obj
        return parse_flag(is_vertical), parse_int(column), parse_int(row)
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"bad edge {obj!r}: {e}") from e


def parse_edge_label(text: str) -> Tuple[bool, int, int]:
    """Parses the CLI form 'v:c:r' / 'h:c:r' (spaces or commas also accepted as separators)."""
    tokens = [t for t in text.replace(',', ' ').replace(':', ' ').split() if t != '']
    if len(tokens) != 3 or tokens[0].lower() not in ('v', 'h'):
        raise ValueError(f"bad edge {text!r}: expected v:column:row or h:column:row")
    try:
        return tokens[0].lower() == 'v', int(tokens[1]), int(tokens[2])
    except ValueError as e:
        raise ValueError(f"bad edge {text!r}: {e}") from e


def board_from_json(obj: Any) -> Board:
    """Rebuilds a Board from board_to_json output.

    Malformed payloads raise ValueError; edges outside the board raise
    IndexOutOfRange from the board itself.
    """
    if not isinstance(obj, dict):
        raise ValueError("board state must be an object")
    try:
        columns = parse_int(obj["columnCount"])
        rows = parse_int(obj["rowCount"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"bad board dimensions: {e}") from e
    board = Board(columns, rows)
    edges = obj.get("setEdges", [])
    if not isinstance(edges, list):
        raise ValueError("setEdges must be a list")
    for item in edges:
        board.set_edge(*parse_edge(item), True)
    return board
