from __future__ import annotations

from flask import Flask

from ..common.http import error_response, json_body, ok, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError, InvalidOperation


def _id_list(data: dict, key: str) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidOperation(f"{key} must be a list of student ids")
    return value


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<class_id>/attendance/<day>", methods=["GET"], endpoint="attendance_detail")
    def attendance_detail(class_id: str, day: str):
        """Existing marks for the day, so the marking screen can pre-fill."""
        try:
            container.class_service.get_class(class_id)
            record = container.attendance_service.get_attendance(class_id, day)
            return ok(record.to_dict() if record else None)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("loading attendance")

    @app.route("/api/classes/<class_id>/attendance/<day>", methods=["PUT"], endpoint="attendance_mark")
    def attendance_mark(class_id: str, day: str):
        try:
            data = json_body()
            record = container.attendance_service.mark_attendance(
                class_id,
                day,
                _id_list(data, "present"),
                _id_list(data, "absent"),
            )
            return ok(record.to_dict(), message="Attendance saved")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("saving attendance")
