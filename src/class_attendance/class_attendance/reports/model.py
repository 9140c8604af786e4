from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.enums import ExportOutcome


@dataclass(frozen=True)
class ReportRow:
    """Read-model: one student's attendance for a month."""

    student_id: str
    name: str
    present: int
    total: int
    percent: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "name": self.name,
            "present": self.present,
            "total": self.total,
            "percent": self.percent,
        }


@dataclass(frozen=True)
class MonthlyReport:
    class_id: str
    class_name: str
    year: int
    month: int
    month_name: str
    rows: list[ReportRow]

    def to_dict(self) -> dict[str, Any]:
        return {
            "classId": self.class_id,
            "className": self.class_name,
            "year": self.year,
            "month": self.month,
            "monthName": self.month_name,
            "rows": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class ExportResult:
    path: Path
    filename: str
    outcome: ExportOutcome

    @property
    def message(self) -> str:
        if self.outcome == ExportOutcome.SHARED:
            return f"Shared {self.filename}"
        return f"CSV saved to: {self.path}"
