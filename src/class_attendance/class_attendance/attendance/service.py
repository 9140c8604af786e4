from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import format_iso_date
from ..common.validators import require_iso_date
from ..storage.repository import DatasetStore
from ..storage.session import dataset_session
from . import repository
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, store: DatasetStore):
        self._store = store

    def get_attendance(self, class_id: str, date: str) -> Optional[AttendanceRecord]:
        day = format_iso_date(require_iso_date(date))
        return repository.get_attendance(self._store.load(), class_id, day)

    def mark_attendance(
        self,
        class_id: str,
        date: str,
        present_student_ids: Iterable[str],
        absent_student_ids: Iterable[str] = (),
    ) -> AttendanceRecord:
        day = format_iso_date(require_iso_date(date))
        with dataset_session(self._store) as session:
            session.dataset = repository.mark_attendance(
                session.dataset,
                class_id,
                day,
                present_student_ids,
                absent_student_ids,
            )
            record = repository.get_attendance(session.dataset, class_id, day)

        present = sum(1 for v in record.records.values() if v)
        logger.info("Marked attendance for class %s on %s: %d/%d present", class_id, day, present, len(record.records))
        return record
