from __future__ import annotations

# Facade module that re-exports the dots and boxes core.
# Used by the Flask app and tests; single-responsibility modules live under dots_core/*.

from dots_core.errors import IndexOutOfRange, InvalidDimensions
from dots_core.wall import EdgeKey, Wall
from dots_core.square_walls import SquareWalls
from dots_core.board import Board, Cell
from dots_core.recommend import (
    PHASE_COMPLETE,
    PHASE_NONE,
    PHASE_SACRIFICE,
    PHASE_SAFE,
    Recommendation,
    TraceHook,
    chain_length,
    completion_moves,
    is_safe,
    print_trace,
    recommend,
    recommended_moves,
    sacrifice_moves,
    safe_moves,
)
from dots_core.codec import (
    board_from_json,
    board_to_json,
    parse_edge,
    parse_edge_label,
    parse_flag,
    parse_int,
    wall_to_json,
    walls_to_json,
)
from dots_core.config import debug_enabled, default_size

__all__ = [
    "Board",
    "Cell",
    "EdgeKey",
    "IndexOutOfRange",
    "InvalidDimensions",
    "PHASE_COMPLETE",
    "PHASE_NONE",
    "PHASE_SACRIFICE",
    "PHASE_SAFE",
    "Recommendation",
    "SquareWalls",
    "TraceHook",
    "Wall",
    "board_from_json",
    "board_to_json",
    "chain_length",
    "completion_moves",
    "debug_enabled",
    "default_size",
    "is_safe",
    "parse_edge",
    "parse_edge_label",
    "parse_flag",
    "parse_int",
    "print_trace",
    "recommend",
    "recommended_moves",
    "sacrifice_moves",
    "safe_moves",
    "wall_to_json",
    "walls_to_json",
]
