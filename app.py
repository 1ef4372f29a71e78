from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    Board,
    Coord,
    GameState,
    GenerationFailed,
    ShisenError,
    apply_move as g_apply_move,
    can_connect as g_can_connect,
    deal_playable_board as g_deal_playable_board,
    find_any_move as g_find_any_move,
    find_connecting_path as g_find_connecting_path,
    legal_partners as g_legal_partners,
    shuffle_until_playable as g_shuffle_until_playable,
    solve as g_solve,
)
from shisen_core.config import default_cols, default_max_attempts, default_rows  # noqa: E402

app = Flask(__name__)


class BadPayload(ValueError):
    """Request body is missing fields or has the wrong shape."""


# ---------- JSON <-> engine types ----------

def _coord_to_json(c: Coord) -> List[int]:
    return [int(c[0]), int(c[1])]


def _move_to_json(move: Optional[tuple]) -> Optional[List[List[int]]]:
    if move is None:
        return None
    return [_coord_to_json(move[0]), _coord_to_json(move[1])]


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "grid": list(b.grid)}


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {"board": board_to_json(s.board), "moves": int(s.moves), "score": int(s.score)}


def _json_to_board(obj: Any) -> Board:
    if not isinstance(obj, dict):
        raise BadPayload("board required")
    try:
        width = int(obj["width"])
        height = int(obj["height"])
        grid = tuple(None if x is None else str(x) for x in obj["grid"])
    except (KeyError, TypeError, ValueError) as e:
        raise BadPayload(f"bad board: {e}")
    if width < 1 or height < 1 or len(grid) != width * height:
        raise BadPayload("bad board: grid size does not match width * height")
    return Board(width=width, height=height, grid=grid)


def _json_to_state(obj: Any) -> GameState:
    if not isinstance(obj, dict):
        raise BadPayload("state required")
    try:
        moves = int(obj.get("moves", 0))
        score = int(obj.get("score", 0))
    except (TypeError, ValueError) as e:
        raise BadPayload(f"bad state: {e}")
    return GameState(board=_json_to_board(obj.get("board")), moves=moves, score=score)


def _json_to_coord(obj: Any, name: str) -> Coord:
    try:
        r, c = obj
        return (int(r), int(c))
    except (TypeError, ValueError):
        raise BadPayload(f"{name} must be a [row, col] pair")


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _state_reply(state: GameState) -> Dict[str, Any]:
    return {
        "ok": True,
        "state": state_to_json(state),
        "status": state.status(),
        "hint": _move_to_json(g_find_any_move(state.board)),
    }


@app.errorhandler(BadPayload)
def _bad_payload(e: BadPayload) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(ShisenError)
def _engine_error(e: ShisenError) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(GenerationFailed)
def _generation_failed(e: GenerationFailed) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 503


# ---------- Game APIs ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        rows = int(body.get("rows", default_rows()))
        cols = int(body.get("cols", default_cols()))
        seed = body.get("seed")
        seed = None if seed is None else int(seed)
    except (TypeError, ValueError) as e:
        raise BadPayload(f"bad size or seed: {e}")
    board = g_deal_playable_board(rows, cols, seed=seed, max_attempts=default_max_attempts())
    return jsonify(_state_reply(GameState(board=board)))


@app.post("/api/connect")
def api_connect() -> Any:
    body = _body()
    board = _json_to_board(body.get("board"))
    a = _json_to_coord(body.get("a"), "a")
    b = _json_to_coord(body.get("b"), "b")
    path = g_find_connecting_path(board, a, b)
    return jsonify({
        "ok": True,
        "connectable": path is not None,
        "path": None if path is None else [_coord_to_json(c) for c in path],
    })


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    state = _json_to_state(body.get("state"))
    a = _json_to_coord(body.get("a"), "a")
    b = _json_to_coord(body.get("b"), "b")
    if not g_can_connect(state.board, a, b):
        return jsonify({"ok": False, "error": "Illegal move", "hint": _move_to_json(g_find_any_move(state.board))}), 400
    return jsonify(_state_reply(g_apply_move(state, a, b)))


@app.post("/api/hint")
def api_hint() -> Any:
    board = _json_to_board(_body().get("board"))
    return jsonify({"ok": True, "hint": _move_to_json(g_find_any_move(board))})


@app.post("/api/partners")
def api_partners() -> Any:
    body = _body()
    board = _json_to_board(body.get("board"))
    pos = _json_to_coord(body.get("pos"), "pos")
    return jsonify({"ok": True, "partners": [_coord_to_json(c) for c in g_legal_partners(board, pos)]})


@app.post("/api/shuffle")
def api_shuffle() -> Any:
    body = _body()
    state = _json_to_state(body.get("state"))
    seed = body.get("seed")
    try:
        seed = None if seed is None else int(seed)
    except (TypeError, ValueError) as e:
        raise BadPayload(f"bad seed: {e}")
    if state.status() == "won":
        return jsonify(_state_reply(state))
    board = g_shuffle_until_playable(state.board, seed=seed)
    return jsonify(_state_reply(state.with_board(board)))


@app.post("/api/solve")
def api_solve() -> Any:
    board = _json_to_board(_body().get("board"))
    res = g_solve(board)
    return jsonify({
        "ok": True,
        "solvable": bool(res.solvable),
        "moves": None if res.moves is None else [_move_to_json(m) for m in res.moves],
        "statesVisited": res.states_visited,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
