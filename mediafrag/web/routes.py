"""Web API routes for mediafrag."""

import dataclasses
import math
import threading
import uuid

from flask import Blueprint, current_app, jsonify, request

from mediafrag.controller import FragmentController
from mediafrag.events import LocalEventBus
from mediafrag.fragment import parse_media_fragment
from mediafrag.media import SimulatedMedia

bp = Blueprint("api", __name__)

# In-memory session store: session_id -> session dict
_sessions: dict[str, dict] = {}
_sessions_lock = threading.Lock()


def _window_json(window):
    return window.to_dict() if window is not None else None


def _session_status(session: dict) -> dict:
    controller: FragmentController = session["controller"]
    media: SimulatedMedia = session["media"]
    return {
        "position": round(media.current_time, 6),
        "paused": media.paused,
        "ended": media.ended,
        "state": controller.boundary_state.value,
        "window": _window_json(controller.window),
    }


def _get_session(session_id: str) -> dict | None:
    with _sessions_lock:
        return _sessions.get(session_id)


@bp.route("/api/parse")
def parse():
    url = request.args.get("url")
    if not url:
        return jsonify({"error": "Missing 'url' parameter"}), 400
    return jsonify({"window": _window_json(parse_media_fragment(url))})


@bp.route("/api/sessions", methods=["POST"])
def create_session():
    body = request.get_json(silent=True) or {}
    url = body.get("url")
    if not url:
        return jsonify({"error": "Missing 'url' field"}), 400
    try:
        duration = float(body["duration"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "Missing or invalid 'duration' field"}), 400
    if not math.isfinite(duration) or duration <= 0:
        return jsonify({"error": "'duration' must be a positive finite number"}), 400

    config = dataclasses.replace(current_app.config["PLAYER_CONFIG"])
    bus = LocalEventBus()
    controller = FragmentController(config, bus)
    window = controller.load_source(url)
    media = SimulatedMedia(duration, time_update_interval=config.time_update_interval)
    controller.attach_media(media)

    session_id = uuid.uuid4().hex[:12]
    with _sessions_lock:
        _sessions[session_id] = {
            "url": url,
            "controller": controller,
            "media": media,
            "bus": bus,
        }

    return jsonify({
        "session_id": session_id,
        "window": _window_json(window),
        "start_position": config.start_position,
    })


@bp.route("/api/sessions/<session_id>", methods=["GET"])
def session_status(session_id: str):
    session = _get_session(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    return jsonify(_session_status(session))


@bp.route("/api/sessions/<session_id>/advance", methods=["POST"])
def advance(session_id: str):
    session = _get_session(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404

    body = request.get_json(silent=True) or {}
    try:
        seconds = float(body.get("seconds", 1.0))
    except (TypeError, ValueError):
        return jsonify({"error": "Invalid 'seconds' field"}), 400
    if not math.isfinite(seconds) or seconds < 0:
        return jsonify({"error": "'seconds' must be a non-negative finite number"}), 400

    bus: LocalEventBus = session["bus"]
    media: SimulatedMedia = session["media"]
    seen = len(bus.history)
    media.play()
    media.advance(seconds)

    resp = _session_status(session)
    resp["events"] = [
        {"type": kind.value, "window": _window_json(payload)}
        for kind, payload in bus.history[seen:]
    ]
    return jsonify(resp)


@bp.route("/api/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str):
    with _sessions_lock:
        session = _sessions.pop(session_id, None)
    if session is None:
        return jsonify({"error": "Session not found"}), 404
    session["controller"].destroy()
    return jsonify({"status": "deleted"})
