from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, Response, jsonify, request

from game import (
    Board,
    IndexOutOfRange,
    InvalidDimensions,
    Recommendation,
    TraceHook,
    board_from_json,
    board_to_json,
    debug_enabled,
    default_size,
    parse_edge,
    parse_int,
    print_trace,
    recommend,
    wall_to_json,
    walls_to_json,
)

app = Flask(__name__)


def _trace() -> Optional[TraceHook]:
    return print_trace if debug_enabled() else None


def _bad_request(message: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), 400


def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _board_from_body(body: Dict[str, Any]) -> Board:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return board_from_json(s_in)


def _analysis_json(res: Recommendation) -> Dict[str, Any]:
    return {
        "phase": res.phase,
        "recommended": walls_to_json(res.moves),
    }


def _int_or_default(value: Optional[Any], default: int) -> int:
    if value is None or value == "":
        return default
    return parse_int(value)


@app.get("/")
def index() -> Any:
    columns, rows = default_size()
    board = Board(columns, rows)
    text = "Dots and Boxes Analysis\n\n" + board.pretty(board.get_recommended_moves()) + "\n"
    return Response(text, mimetype="text/plain")


@app.get("/api/config")
def api_config() -> Any:
    columns, rows = default_size()
    return jsonify({"ok": True, "columns": columns, "rows": rows, "debug": debug_enabled()})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        columns, rows = default_size()
        board = Board(_int_or_default(body.get("columns"), columns), _int_or_default(body.get("rows"), rows))
    except (InvalidDimensions, TypeError, ValueError) as e:
        return _bad_request(f"bad size: {e}")
    res = recommend(board, trace=_trace())
    return jsonify({"ok": True, "state": board_to_json(board), **_analysis_json(res)})


@app.post("/api/toggle")
def api_toggle() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _board_from_body(body)
        wall = board.toggle_edge(*parse_edge(body.get("edge")))
    except (ValueError, IndexOutOfRange) as e:
        return _bad_request(str(e))
    res = recommend(board, trace=_trace())
    return jsonify({
        "ok": True,
        "edge": wall_to_json(wall),
        "state": board_to_json(board),
        **_analysis_json(res),
    })


@app.post("/api/recommend")
def api_recommend() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _board_from_body(body)
    except (ValueError, IndexOutOfRange) as e:
        return _bad_request(f"bad state: {e}")
    res = recommend(board, trace=_trace())
    chains = [
        {"edge": [v, c, r], "length": length}
        for (v, c, r), length in sorted(res.chain_lengths.items())
    ]
    return jsonify({"ok": True, "chainLengths": chains, **_analysis_json(res)})


@app.post("/api/cell")
def api_cell() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _board_from_body(body)
        column, row = (parse_int(x) for x in body.get("cell"))
        count = board.get_cell_wall_count(column, row)
        walls = board.get_cell_walls(column, row)
    except (ValueError, TypeError, IndexOutOfRange) as e:
        return _bad_request(str(e))
    return jsonify({
        "ok": True,
        "count": count,
        "walls": {
            "top": wall_to_json(walls.top),
            "right": wall_to_json(walls.right),
            "bottom": wall_to_json(walls.bottom),
            "left": wall_to_json(walls.left),
        },
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
