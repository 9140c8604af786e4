from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.http import error_response, ok, unexpected_error
from ..container import Container
from ..core.constants import CSV_MIME_TYPE
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<class_id>/report", methods=["GET"], endpoint="report_monthly")
    def report_monthly(class_id: str):
        """Report for the current calendar month."""
        try:
            return ok(container.report_service.monthly_report(class_id).to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("building report")

    @app.route("/api/classes/<class_id>/report.csv", methods=["GET"], endpoint="report_csv")
    def report_csv(class_id: str):
        # EmptyReport comes back as a 200 notice instead of a near-empty file.
        try:
            filename, data = container.report_service.render_csv(class_id)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("exporting CSV")

        # send_file adds an RFC 5987 filename* value for names outside Latin-1.
        return send_file(io.BytesIO(data), mimetype=CSV_MIME_TYPE, as_attachment=True, download_name=filename)

    @app.route("/api/classes/<class_id>/report/export", methods=["POST"], endpoint="report_export")
    def report_export(class_id: str):
        """Save the CSV to the export folder and hand it to the share target."""
        try:
            result = container.report_service.export_monthly_csv(class_id)
            return ok(
                {"path": str(result.path), "filename": result.filename, "outcome": result.outcome.value},
                message=result.message,
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return unexpected_error("exporting CSV")
