from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..core.exceptions import ConflictError, StoreUnavailableError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["POST"], endpoint="register_employee")
    def register_employee():
        data = request.get_json(silent=True) or {}
        try:
            container.roster_service.register(
                employee_id=data.get("employeeId"),
                name=data.get("name"),
                face_descriptor=data.get("faceDescriptor"),
                device_id=data.get("deviceId"),
            )
            return jsonify({"message": "Employee registered"}), 201
        except ValidationError as e:
            return json_error(str(e), 400)
        except ConflictError as e:
            return json_error(str(e), 409)
        except StoreUnavailableError as e:
            app.logger.error("Employee registration failed: %s", e)
            return json_error(str(e), 500)
        except Exception:
            app.logger.exception("Unexpected error while registering employee")
            return json_error("Internal server error", 500)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            roster = container.roster_service.list_roster()
            return jsonify([e.to_json() for e in roster]), 200
        except StoreUnavailableError as e:
            app.logger.error("Roster query failed: %s", e)
            return json_error(str(e), 500)
        except Exception:
            app.logger.exception("Unexpected error while listing employees")
            return json_error("Internal server error", 500)
