from __future__ import annotations

from flask import jsonify


def json_error(message: str, status: int, **extra):
    """JSON error body in the shape the kiosk client reads: {"error": ...}."""
    body = {"error": message}
    body.update(extra)
    return jsonify(body), status
