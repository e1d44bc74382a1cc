from __future__ import annotations

import os
import random
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import Board, InvalidDirection, Tile, TileView  # noqa: E402

MIN_SIZE = 2
MAX_SIZE = 8


def _env_size() -> int:
    try:
        size = int(os.getenv("MERGE_GRID_SIZE", "4"))
    except ValueError:
        return 4
    return size if MIN_SIZE <= size <= MAX_SIZE else 4


DEFAULT_SIZE = _env_size()

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- Presentation hints ----------

COLOURS: Dict[int, str] = {
    2: "#eee4da",
    4: "#ece0c8",
    8: "#f2b179",
    16: "#f59563",
    32: "#f67c5f",
    64: "#f65d3b",
    128: "#edcf72",
    256: "#edcc61",
    512: "#edc850",
    1024: "#edc53f",
    2048: "#edc22e",
}
GRAY = "#3c3a32"
DARK_TEXT = "#776e65"
LIGHT_TEXT = "#f9f6f2"

# Browser KeyboardEvent.code -> direction
KEY_BINDINGS: Dict[str, str] = {
    "ArrowUp": "up",
    "ArrowLeft": "left",
    "ArrowDown": "down",
    "ArrowRight": "right",
    "KeyW": "up",
    "KeyA": "left",
    "KeyS": "down",
    "KeyD": "right",
}


def tile_colour(value: int) -> str:
    """Background for a tile; gray for the larger tiles (> 2048) not in the palette."""
    return COLOURS.get(value, GRAY)


def text_colour(value: int) -> str:
    # values 2 and 4 have a dark font, all others a light one
    return DARK_TEXT if value <= 4 else LIGHT_TEXT


def _animation(t: TileView) -> str:
    if t.is_new:
        return "spawn"
    if t.is_upgraded:
        return "upgrade"
    return "slide"


def _tile_to_json(t: TileView) -> Dict[str, Any]:
    return {
        "value": int(t.value),
        "x": int(t.x),
        "y": int(t.y),
        "previousX": int(t.previous_x),
        "previousY": int(t.previous_y),
        "isNew": bool(t.is_new),
        "isUpgraded": bool(t.is_upgraded),
        "isDeleted": bool(t.is_deleted),
        # render hints
        "colour": tile_colour(t.value),
        "textColour": text_colour(t.value),
        # deleted tiles slide under the tile they combine into
        "zIndex": 2 if t.is_deleted else 3,
        "animation": _animation(t),
    }


def _board_to_json(b: Board) -> Dict[str, Any]:
    snap = b.snapshot()
    return {
        "size": int(snap.size),
        "score": int(snap.score),
        "tiles": [_tile_to_json(t) for t in snap.tiles],
    }


def _json_int(obj: Dict[str, Any], name: str, default: Optional[int] = None) -> int:
    # JSON true/false and 2.9 would otherwise slip through int()
    value = obj[name] if default is None else obj.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _json_bool(obj: Dict[str, Any], name: str) -> bool:
    value = obj.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _json_to_tile(obj: Dict[str, Any]) -> Tile:
    if not isinstance(obj, dict):
        raise ValueError(f"tile must be an object, got {obj!r}")
    x = _json_int(obj, "x")
    y = _json_int(obj, "y")
    return Tile(
        value=_json_int(obj, "value"),
        x=x,
        y=y,
        previous_x=_json_int(obj, "previousX", x),
        previous_y=_json_int(obj, "previousY", y),
        is_new=_json_bool(obj, "isNew"),
        is_upgraded=_json_bool(obj, "isUpgraded"),
        is_deleted=_json_bool(obj, "isDeleted"),
    )


def _json_to_board(obj: Dict[str, Any], seed: Optional[int] = None) -> Board:
    size = _json_int(obj, "size")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"size must be between {MIN_SIZE} and {MAX_SIZE}")
    tiles = [_json_to_tile(t) for t in obj.get("tiles", [])]
    return Board.from_tiles(size, tiles, score=_json_int(obj, "score", 0), rng=random.Random(seed))


def _board_response(board: Board, **extra: Any) -> Dict[str, Any]:
    moves = board.available_moves()
    out: Dict[str, Any] = {"ok": True}
    out.update(extra)
    out["state"] = _board_to_json(board)
    out["availableMoves"] = moves
    out["gameOver"] = not moves
    return out


def _error(message: str, status: int = 400) -> Any:
    app.logger.warning("rejected %s %s: %s", request.method, request.path, message)
    return jsonify({"ok": False, "error": message}), status


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _seed_from(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed", None)
    if isinstance(seed, (bool, float)):
        raise ValueError(f"seed must be an integer, got {seed!r}")
    return None if seed is None else int(seed)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    try:
        size = _json_int(body, "size", DEFAULT_SIZE)
        seed = _seed_from(body)
    except (TypeError, ValueError) as e:
        return _error(f"bad request: {e}")
    if not MIN_SIZE <= size <= MAX_SIZE:
        return _error(f"size must be between {MIN_SIZE} and {MAX_SIZE}")
    board = Board.new_game(size, seed=seed)
    app.logger.info("new %dx%d game (seed=%s)", size, size, seed)
    return jsonify(_board_response(board))


def _direction_from(body: Dict[str, Any]) -> str:
    if "key" in body and "direction" not in body:
        key = body["key"]
        if not isinstance(key, str) or key not in KEY_BINDINGS:
            raise InvalidDirection(f"Unknown key: {key!r}")
        return KEY_BINDINGS[key]
    return body.get("direction")


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return _error("state required")
    try:
        seed = _seed_from(body)
    except (TypeError, ValueError) as e:
        return _error(f"bad request: {e}")
    try:
        board = _json_to_board(s_in, seed=seed)
    except (KeyError, TypeError, ValueError) as e:
        return _error(f"bad state: {e}")
    try:
        moved = board.move(_direction_from(body))
    except InvalidDirection as e:
        return _error(str(e))
    return jsonify(_board_response(board, moved=moved))


@app.post("/api/moves")
def api_moves() -> Any:
    body = _json_body()
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return _error("state required")
    try:
        board = _json_to_board(s_in)
    except (KeyError, TypeError, ValueError) as e:
        return _error(f"bad state: {e}")
    moves: List[str] = board.available_moves()
    return jsonify({"ok": True, "availableMoves": moves, "gameOver": not moves})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
