from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Optional, Set, Tuple

from .board import Board, Cell
from .wall import EdgeKey, Wall

# trace(event, info): event is 'phase', 'cell', 'chain' or 'result'.
TraceHook = Callable[[str, Dict[str, Any]], None]

PHASE_COMPLETE = 'complete'
PHASE_SAFE = 'safe'
PHASE_SACRIFICE = 'sacrifice'
PHASE_NONE = 'none'


@dataclass(frozen=True)
class Recommendation:
    """Outcome of one analysis: which phase decided, the edges, and sacrifice scores."""
    phase: str
    moves: FrozenSet[Wall]
    chain_lengths: Dict[EdgeKey, int] = field(default_factory=dict)  # filled by the sacrifice phase only


def print_trace(event: str, info: Dict[str, Any]) -> None:
    """Trace sink that prints one tagged line per event."""
    details = ' '.join(f"{k}={v}" for k, v in info.items())
    print(f"[recommend] {event} {details}".rstrip())


def _emit(trace: Optional[TraceHook], event: str, **info: Any) -> None:
    if trace is not None:
        trace(event, info)


def completion_moves(board: Board, trace: Optional[TraceHook] = None) -> Set[Wall]:
    """The missing wall of every cell that already has three."""
    moves: Set[Wall] = set()
    for c, r in board.cells():
        if board.get_cell_wall_count(c, r) != 3:
            continue
        missing = board.get_cell_walls(c, r).first_wall(False)
        if missing is not None:
            _emit(trace, 'cell', phase=PHASE_COMPLETE, cell=(c, r), move=missing.label())
            moves.add(missing)
    return moves


def is_safe(board: Board, wall: Wall) -> bool:
    """True when drawing wall leaves every bordering cell below three walls.

    A boundary edge has a single bordering cell, so only that one is checked.
    """
    return all(board.get_cell_wall_count(c, r) < 2 for c, r in board.adjacent_cells(*wall.key))


def safe_moves(board: Board, trace: Optional[TraceHook] = None) -> Set[Wall]:
    moves: Set[Wall] = set()
    for c, r in board.cells():
        if board.get_cell_wall_count(c, r) >= 2:
            continue
        for wall in board.get_cell_walls(c, r).walls(False):
            if wall in moves:
                continue
            if is_safe(board, wall):
                moves.add(wall)
            else:
                _emit(trace, 'cell', phase=PHASE_SAFE, cell=(c, r), unsafe=wall.label())
    return moves


def _walk_chain(sim: Board, start: Cell) -> int:
    """Captures boxes from start on sim while they keep having three walls.

    Returns the number of boxes taken. Drawing a missing wall that also closes
    the cell on its far side counts both boxes.
    """
    length = 0
    current: Optional[Cell] = start
    while current is not None and sim.get_cell_wall_count(*current) == 3:
        missing = sim.get_cell_walls(*current).first_wall(False)
        if missing is None:
            break
        across = [cell for cell in sim.adjacent_cells(*missing.key) if cell != current]
        nxt = across[0] if across else None
        sim.set_wall(missing, True)
        if nxt is not None and sim.get_cell_wall_count(*nxt) == 4:
            length += 2
        else:
            length += 1
        current = nxt
    return length


def chain_length(board: Board, wall: Wall) -> int:
    """Boxes the opponent can take in a row after wall is drawn.

    Works on a private copy of board. Both sides of the edge are walked in
    turn on that one copy, so a loop is not counted twice.
    """
    sim = board.copy()
    sim.set_wall(wall, True)
    total = 0
    for cell in sim.adjacent_cells(*wall.key):
        total += _walk_chain(sim, cell)
    return total


def sacrifice_moves(board: Board, trace: Optional[TraceHook] = None) -> Tuple[Set[Wall], Dict[EdgeKey, int]]:
    """Edges that give away the fewest boxes, with the score of every edge tried."""
    scores: Dict[EdgeKey, int] = {}
    for c, r in board.cells():
        if board.get_cell_wall_count(c, r) != 2:
            continue
        for wall in board.get_cell_walls(c, r).walls(False):
            if wall.key in scores:
                continue
            scores[wall.key] = chain_length(board, wall)
            _emit(trace, 'chain', cell=(c, r), move=wall.label(), length=scores[wall.key])
    if not scores:
        return set(), scores
    best = min(scores.values())
    moves = {Wall(*key) for key, length in scores.items() if length == best}
    return moves, scores


def recommend(board: Board, trace: Optional[TraceHook] = None) -> Recommendation:
    """Runs the three phases in order and stops at the first one that finds moves."""
    _emit(trace, 'phase', phase=PHASE_COMPLETE)
    moves = completion_moves(board, trace)
    if moves:
        result = Recommendation(PHASE_COMPLETE, frozenset(moves))
    else:
        _emit(trace, 'phase', phase=PHASE_SAFE)
        moves = safe_moves(board, trace)
        if moves:
            result = Recommendation(PHASE_SAFE, frozenset(moves))
        else:
            _emit(trace, 'phase', phase=PHASE_SACRIFICE)
            moves, scores = sacrifice_moves(board, trace)
            phase = PHASE_SACRIFICE if moves else PHASE_NONE
            result = Recommendation(phase, frozenset(moves), scores)
    _emit(trace, 'result', phase=result.phase, moves=sorted(w.label() for w in result.moves))
    return result


def recommended_moves(board: Board, trace: Optional[TraceHook] = None) -> Set[Wall]:
    return set(recommend(board, trace).moves)
