from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..container import Container
from ..core.exceptions import (
    AlreadyCompletedError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    OutsideGeofenceError,
    StoreUnavailableError,
    ValidationError,
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="punch_attendance")
    def punch_attendance():
        """Auto in/out punch for a face-matched employee."""

        data = request.get_json(silent=True) or {}
        device_id = data.get("deviceId")
        try:
            container.geofence_guard.check(data.get("latitude"), data.get("longitude"))
            result = container.attendance_service.record_punch(data.get("employeeId"), device_id)
            return jsonify(result.to_json()), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except OutsideGeofenceError as e:
            return json_error(str(e), 403)
        except AuthorizationError as e:
            return json_error(str(e), 403, details=f"Device ID: {device_id}")
        except NotFoundError as e:
            return json_error(str(e), 404)
        except AlreadyCompletedError as e:
            return json_error(str(e), 400)
        except ConflictError as e:
            app.logger.warning("Concurrent punch rejected: %s", e)
            return json_error(str(e), 409)
        except StoreUnavailableError as e:
            app.logger.error("Punch failed: %s", e)
            return json_error(str(e), 500)
        except Exception:
            app.logger.exception("Unexpected error while recording punch")
            return json_error("Internal server error", 500)
