from __future__ import annotations

from flask import Flask

from ..common.http import error_response, json_body, ok, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<class_id>/students", methods=["GET"], endpoint="students_list")
    def students_list(class_id: str):
        try:
            # Unknown class is a 404, not an empty roster.
            container.class_service.get_class(class_id)
            students = container.student_service.list_students(class_id)
            return ok([s.to_dict() for s in students])
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("loading students")

    @app.route("/api/classes/<class_id>/students", methods=["POST"], endpoint="students_create")
    def students_create(class_id: str):
        try:
            data = json_body()
            student = container.student_service.add_student(class_id, data.get("name"), data.get("rollNo"))
            return ok(student.to_dict(), status=201, message="Student added")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("adding student")

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="students_update")
    def students_update(student_id: str):
        try:
            data = json_body()
            container.student_service.update_student(student_id, data.get("name"), data.get("rollNo"))
            return ok(container.student_service.get_student(student_id).to_dict(), message="Student saved")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("saving student")

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        try:
            container.student_service.delete_student(student_id)
            return ok(message="Student deleted")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("deleting student")
