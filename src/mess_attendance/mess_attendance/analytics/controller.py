from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.responses import json_error
from ..container import Container
from ..core.exceptions import StoreUnavailableError, ValidationError


def register(app: Flask, container: Container) -> None:
    def _filters() -> dict:
        """Read ?start=&end=&employeeId= from the query string."""

        out: dict = {}
        for key in ("start", "end"):
            value = (request.args.get(key) or "").strip()
            if value:
                try:
                    out[key] = parse_iso_date(value)
                except ValueError:
                    raise ValidationError(f"{key} must be a date in YYYY-MM-DD format")
        employee_id = (request.args.get("employeeId") or "").strip()
        if employee_id:
            out["employee_id"] = employee_id
        return out

    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        try:
            data = container.analytics_service.build_dashboard(**_filters())
            return jsonify(data.to_json()), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except StoreUnavailableError as e:
            app.logger.error("Analytics query failed: %s", e)
            return json_error(str(e), 500)
        except Exception:
            app.logger.exception("Unexpected error while building analytics")
            return json_error("Internal server error", 500)

    @app.route("/api/analytics/export", methods=["GET"], endpoint="analytics_export")
    def analytics_export():
        try:
            content = container.analytics_service.export_csv(**_filters())
        except ValidationError as e:
            return json_error(str(e), 400)
        except StoreUnavailableError as e:
            app.logger.error("Attendance export failed: %s", e)
            return json_error(str(e), 500)
        except Exception:
            app.logger.exception("Unexpected error while exporting attendance")
            return json_error("Internal server error", 500)

        filename = container.analytics_service.export_filename()
        return app.response_class(
            content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
