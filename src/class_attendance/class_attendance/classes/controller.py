from __future__ import annotations

from flask import Flask

from ..common.http import error_response, json_body, ok, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    def classes_list():
        try:
            return ok([c.to_dict() for c in container.class_service.list_classes()])
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("loading classes")

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    def classes_create():
        try:
            data = json_body()
            group = container.class_service.add_class(data.get("name"), data.get("section"))
            return ok(group.to_dict(), status=201, message="Class added")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("adding class")

    @app.route("/api/classes/<class_id>", methods=["GET"], endpoint="classes_detail")
    def classes_detail(class_id: str):
        try:
            return ok(container.class_service.get_class(class_id).to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("loading class")

    @app.route("/api/classes/<class_id>", methods=["PUT"], endpoint="classes_update")
    def classes_update(class_id: str):
        try:
            data = json_body()
            container.class_service.update_class(class_id, data.get("name"), data.get("section"))
            return ok(container.class_service.get_class(class_id).to_dict(), message="Class saved")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("saving class")
