from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..container import Container
from ..core.exceptions import AuthenticationError, StoreUnavailableError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        try:
            container.admin_auth_service.authenticate(data.get("email"), data.get("password"))
            return jsonify({"success": True, "message": "Login successful"}), 200
        except ValidationError as e:
            return json_error(str(e), 400, success=False)
        except AuthenticationError as e:
            return json_error(str(e), 401, success=False)

    @app.route("/api/settings/update-pin", methods=["POST"], endpoint="update_pin")
    def update_pin():
        data = request.get_json(silent=True) or {}
        try:
            container.pin_service.update_pin(data.get("newPin"))
            return jsonify({"success": True, "message": "PIN updated"}), 200
        except ValidationError as e:
            return json_error(str(e), 400, success=False)
        except StoreUnavailableError as e:
            app.logger.error("PIN update failed: %s", e)
            return json_error(str(e), 500, success=False)
        except Exception:
            app.logger.exception("Unexpected error while updating PIN")
            return json_error("Internal server error", 500, success=False)

    @app.route("/api/settings/verify-pin", methods=["POST"], endpoint="verify_pin")
    def verify_pin():
        data = request.get_json(silent=True) or {}
        try:
            if container.pin_service.verify_pin(data.get("pin")):
                return jsonify({"success": True}), 200
            return json_error("Incorrect PIN", 401, success=False)
        except StoreUnavailableError as e:
            app.logger.error("PIN check failed: %s", e)
            return json_error(str(e), 500, success=False)
        except Exception:
            app.logger.exception("Unexpected error while checking PIN")
            return json_error("Internal server error", 500, success=False)
