from __future__ import annotations

from typing import Iterable, Optional

from ..classes.repository import get_class
from ..common.datetime_utils import format_iso_date
from ..common.validators import require_iso_date
from ..core.exceptions import InvalidOperation
from ..storage.model import Dataset
from ..students.repository import list_students
from .model import AttendanceRecord


def get_attendance(dataset: Dataset, class_id: str, date: str) -> Optional[AttendanceRecord]:
    for a in dataset.attendance:
        if a.class_id == class_id and a.date == date:
            return a
    return None


def list_attendance(dataset: Dataset, class_id: str) -> tuple[AttendanceRecord, ...]:
    return tuple(a for a in dataset.attendance if a.class_id == class_id)


def mark_attendance(
    dataset: Dataset,
    class_id: str,
    date: str,
    present_student_ids: Iterable[str],
    absent_student_ids: Iterable[str] = (),
) -> Dataset:
    """Upsert the attendance record of ``class_id`` on ``date``.

    An existing record for the same day is replaced in place. Every id must be a
    current student of the class; otherwise the whole call is rejected.
    """
    get_class(dataset, class_id)
    day = format_iso_date(require_iso_date(date))

    present = set(present_student_ids)
    absent = set(absent_student_ids)
    both = present & absent
    if both:
        raise InvalidOperation(f"Students marked both present and absent: {sorted(both)}")

    roster = {s.id for s in list_students(dataset, class_id)}
    foreign = (present | absent) - roster
    if foreign:
        raise InvalidOperation(f"Students not in class {class_id!r}: {sorted(foreign)}")

    # Keep roster order in the mapping so the saved file is stable.
    records: dict[str, bool] = {}
    for s in list_students(dataset, class_id):
        if s.id in present:
            records[s.id] = True
        elif s.id in absent:
            records[s.id] = False

    record = AttendanceRecord(class_id=class_id, date=day, records=records)
    if get_attendance(dataset, class_id, day) is None:
        return dataset.with_attendance(dataset.attendance + (record,))
    return dataset.with_attendance(record if a.key == record.key else a for a in dataset.attendance)
