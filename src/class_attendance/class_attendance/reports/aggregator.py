from __future__ import annotations

from ..attendance.repository import list_attendance
from ..common.datetime_utils import month_prefix
from ..common.validators import require_month
from ..storage.model import Dataset
from ..students.repository import list_students
from .model import ReportRow


def rounded_percent(present: int, total: int) -> int:
    """``present / total * 100`` rounded half up; 0 when nothing was recorded."""
    if total <= 0:
        return 0
    return (200 * present + total) // (2 * total)


def build_report(dataset: Dataset, class_id: str, year: int, month: int) -> list[ReportRow]:
    """Per-student presence counts for one class and calendar month.

    ``total`` is the number of days attendance was taken for the class that
    month, so it is the same on every row. Pure: reads ``dataset`` only.
    """
    year, month = require_month(year, month)
    prefix = month_prefix(year, month)

    days = [a for a in list_attendance(dataset, class_id) if a.date.startswith(prefix)]
    total = len(days)

    rows = []
    for student in list_students(dataset, class_id):
        present = sum(1 for a in days if a.is_present(student.id))
        rows.append(
            ReportRow(
                student_id=student.id,
                name=student.name,
                present=present,
                total=total,
                percent=rounded_percent(present, total),
            )
        )
    return rows
