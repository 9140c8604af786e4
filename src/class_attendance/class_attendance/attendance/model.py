from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance of one class on one date.

    ``records`` maps student id to the present flag. A student without a key was
    not recorded that day, which is not the same as ``False`` (marked absent).
    """

    class_id: str
    date: str
    records: dict[str, bool] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        return self.class_id, self.date

    def is_present(self, student_id: str) -> bool:
        return bool(self.records.get(student_id))

    def without_student(self, student_id: str) -> "AttendanceRecord":
        if student_id not in self.records:
            return self
        return AttendanceRecord(
            class_id=self.class_id,
            date=self.date,
            records={k: v for k, v in self.records.items() if k != student_id},
        )

    def to_dict(self) -> dict[str, Any]:
        return {"classId": self.class_id, "date": self.date, "records": dict(self.records)}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AttendanceRecord":
        records = raw.get("records") or {}
        if not isinstance(records, dict):
            raise TypeError("records must be an object")
        return cls(
            class_id=str(raw["classId"]),
            date=str(raw["date"]),
            records={str(k): bool(v) for k, v in records.items()},
        )
