from __future__ import annotations

import argparse
import json
from typing import List, Optional

from .board import Board
from .codec import board_from_json, parse_edge_label
from .config import debug_enabled, default_size
from .errors import IndexOutOfRange, InvalidDimensions
from .recommend import print_trace, recommend


def _show(board: Board, trace: bool) -> None:
    res = recommend(board, trace=print_trace if trace else None)
    print(board.pretty(res.moves))
    labels = sorted(w.label() for w in res.moves)
    print(f"Phase: {res.phase}")
    print('Recommended:', ', '.join(labels) if labels else '(none)')
    if res.chain_lengths:
        print(f"Smallest sacrifice: {min(res.chain_lengths.values())} box(es)")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Dots and boxes move recommender')
    parser.add_argument('--columns', type=int, default=None, help='Dots per row (DOTS_COLUMNS)')
    parser.add_argument('--rows', type=int, default=None, help='Dots per column (DOTS_ROWS)')
    parser.add_argument('--edges', default='', help='Drawn edges, e.g. "v:0:0,h:1:2"')
    parser.add_argument('--load', default=None, help='JSON board file (columnCount/rowCount/setEdges)')
    parser.add_argument('--play', action='store_true', help='Toggle edges interactively')
    parser.add_argument('--trace', action='store_true', help='Print recommender trace')
    args = parser.parse_args(argv)
    trace = args.trace or debug_enabled()

    try:
        if args.load:
            with open(args.load, 'r', encoding='utf-8') as f:
                board = board_from_json(json.load(f))
        else:
            columns, rows = default_size()
            board = Board(
                args.columns if args.columns is not None else columns,
                args.rows if args.rows is not None else rows,
            )
        for item in [t for t in args.edges.split(',') if t.strip() != '']:
            board.set_edge(*parse_edge_label(item), True)
    except (InvalidDimensions, IndexOutOfRange, ValueError, OSError) as e:
        print(f"error: {e}")
        return 2

    _show(board, trace)
    if not args.play:
        return 0

    while True:
        try:
            text = input('Toggle edge as v c r / h c r (blank to quit): ').strip()
        except EOFError:
            break
        if text == '':
            break
        try:
            wall = board.toggle_edge(*parse_edge_label(text))
        except ValueError as e:
            print(f"Could not parse: {e}")
            continue
        except IndexOutOfRange as e:
            print(f"Out of range: {e}")
            continue
        print(f"{wall.label()} is now {'drawn' if wall.is_set else 'erased'}")
        _show(board, trace)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
