from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from flask import Flask, jsonify, render_template, request

# Project-local core
from .export import share_payload, supported_formats
from .info import info_overlay
from .palette import PALETTE_SIZE, PaletteState
from .store import DEFAULT_MAX_PALETTES, PaletteNotFound, PaletteStore, color_source

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "MAX_PALETTES": DEFAULT_MAX_PALETTES,
    "SEED": None,  # int -> reproducible colour sequence
    "LOG_LEVEL": "INFO",
}


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("HEXSPLASH")
    if config:
        app.config.from_mapping(config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    store = PaletteStore(
        max_palettes=int(app.config["MAX_PALETTES"]),
        generate=color_source(app.config["SEED"]),
    )
    app.extensions["palette_store"] = store

    def snapshot(pid: str, state: PaletteState):
        return jsonify({"id": pid, **state.snapshot()})

    def cell_action(pid: str, index: int, op: Callable[[PaletteState, int], None]):
        state = store.get(pid)
        if not 0 <= index < len(state):
            return jsonify({"error": f"cell index {index} out of range"}), 404
        op(state, index)
        return snapshot(pid, state)

    @app.errorhandler(PaletteNotFound)
    def palette_not_found(exc: PaletteNotFound):
        return jsonify({"error": f"unknown palette '{exc.args[0]}'"}), 404

    @app.route("/")
    def index():
        return render_template("index.html", info=info_overlay(), size=PALETTE_SIZE)

    @app.route("/api/info")
    def info():
        return jsonify(info_overlay())

    @app.route("/api/palettes", methods=["POST"])
    def open_palette():
        body = request.get_json(silent=True)
        colors = body.get("colors") if isinstance(body, dict) else None
        try:
            pid, state = store.create(colors)
        except (TypeError, ValueError) as e:
            return jsonify({"error": f"invalid palette: {e}"}), 400
        return snapshot(pid, state), 201

    @app.route("/api/palettes/<pid>")
    def read_palette(pid: str):
        return snapshot(pid, store.get(pid))

    @app.route("/api/palettes/<pid>", methods=["DELETE"])
    def close_palette(pid: str):
        store.discard(pid)
        return "", 204

    @app.route("/api/palettes/<pid>/generate", methods=["POST"])
    def generate(pid: str):
        state = store.get(pid)
        state.regenerate_all()
        return snapshot(pid, state)

    @app.route("/api/palettes/<pid>/unlock", methods=["POST"])
    def unlock(pid: str):
        state = store.get(pid)
        state.unlock_all()
        return snapshot(pid, state)

    @app.route("/api/palettes/<pid>/cells/<int:index>/regenerate", methods=["POST"])
    def regenerate_cell(pid: str, index: int):
        return cell_action(pid, index, PaletteState.regenerate_one)

    @app.route("/api/palettes/<pid>/cells/<int:index>/lock", methods=["POST"])
    def lock_cell(pid: str, index: int):
        return cell_action(pid, index, PaletteState.toggle_lock)

    @app.route("/api/palettes/<pid>/share")
    def share(pid: str):
        state = store.get(pid)
        fmt = (request.args.get("format") or "hex").strip().lower()
        if fmt not in supported_formats():
            return (
                jsonify(
                    {
                        "error": f"unknown format '{fmt}'",
                        "supported": supported_formats(),
                    }
                ),
                400,
            )
        try:
            payload = share_payload(state.colors, fmt)
        except Exception as exc:
            log.exception("Export failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
