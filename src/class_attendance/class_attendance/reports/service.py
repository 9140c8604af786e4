from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..classes.repository import get_class
from ..common.datetime_utils import month_name, today_local
from ..core.constants import CSV_MIME_TYPE, CSV_SHARE_TITLE
from ..core.enums import ExportOutcome
from ..core.exceptions import StoreUnavailable
from ..storage.repository import DatasetStore
from .aggregator import build_report
from .csv_exporter import export_filename, to_csv
from .model import ExportResult, MonthlyReport
from .sharing import FileExportWriter, NoShareTarget, ShareTarget

logger = logging.getLogger(__name__)


class ReportService:
    """Monthly report for the current calendar month, plus CSV export."""

    def __init__(
        self,
        store: DatasetStore,
        *,
        writer: Optional[FileExportWriter] = None,
        share_target: Optional[ShareTarget] = None,
        today: Callable[[], date] = today_local,
    ):
        self._store = store
        self._writer = writer or FileExportWriter()
        self._share_target = share_target or NoShareTarget()
        self._today = today

    def monthly_report(self, class_id: str, *, today: Optional[date] = None) -> MonthlyReport:
        """Report for the calendar month containing ``today`` (default: the clock)."""
        today = today or self._today()
        year, month = today.year, today.month

        dataset = self._store.load()
        group = get_class(dataset, class_id)
        rows = build_report(dataset, class_id, year, month)
        return MonthlyReport(
            class_id=group.id,
            class_name=group.name,
            year=year,
            month=month,
            month_name=month_name(month),
            rows=rows,
        )

    def render_csv(self, class_id: str) -> tuple[str, bytes]:
        """Return ``(filename, utf-8 bytes)`` for this month's report."""
        report = self.monthly_report(class_id)
        csv_text = to_csv(report.rows)
        filename = export_filename(report.class_name or report.class_id, report.month, report.year)
        return filename, csv_text.encode("utf-8")

    def export_monthly_csv(self, class_id: str) -> ExportResult:
        """Save this month's CSV and offer it to the share target.

        Falls back to reporting the saved location when sharing is unavailable.
        """
        filename, data = self.render_csv(class_id)
        try:
            path = self._writer.write(filename, data)
        except OSError as e:
            logger.warning("Failed to save export %s: %s", filename, e)
            raise StoreUnavailable(f"Cannot save {filename}") from e

        if self._share_target.is_available():
            self._share_target.share(path, mime_type=CSV_MIME_TYPE, title=CSV_SHARE_TITLE)
            return ExportResult(path=path, filename=filename, outcome=ExportOutcome.SHARED)

        logger.info("Sharing unavailable, CSV saved to %s", path)
        return ExportResult(path=path, filename=filename, outcome=ExportOutcome.SAVED)
