from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from ..attendance.model import AttendanceRecord
from ..classes.model import ClassGroup
from ..core.exceptions import StoreUnavailable
from ..students.model import Student


@dataclass(frozen=True)
class Dataset:
    """Aggregate root: everything the app persists, as one value.

    Repository functions never mutate a dataset; they return a new one.
    """

    classes: tuple[ClassGroup, ...] = field(default_factory=tuple)
    students: tuple[Student, ...] = field(default_factory=tuple)
    attendance: tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "students", tuple(self.students))
        object.__setattr__(self, "attendance", tuple(self.attendance))

    @classmethod
    def empty(cls) -> "Dataset":
        return cls()

    def with_classes(self, classes: Iterable[ClassGroup]) -> "Dataset":
        return replace(self, classes=tuple(classes))

    def with_students(self, students: Iterable[Student]) -> "Dataset":
        return replace(self, students=tuple(students))

    def with_attendance(self, attendance: Iterable[AttendanceRecord]) -> "Dataset":
        return replace(self, attendance=tuple(attendance))

    def all_ids(self) -> set[str]:
        return {c.id for c in self.classes} | {s.id for s in self.students}

    def to_dict(self) -> dict[str, Any]:
        return {
            "classes": [c.to_dict() for c in self.classes],
            "students": [s.to_dict() for s in self.students],
            "attendance": [a.to_dict() for a in self.attendance],
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Dataset":
        """Build a dataset from the persisted blob.

        Missing top-level keys are treated as empty lists. Anything else that
        does not have the expected shape raises ``StoreUnavailable``.
        """
        if not isinstance(raw, dict):
            raise StoreUnavailable("Data file does not contain an object")
        try:
            return cls(
                classes=tuple(ClassGroup.from_dict(c) for c in raw.get("classes") or []),
                students=tuple(Student.from_dict(s) for s in raw.get("students") or []),
                attendance=tuple(AttendanceRecord.from_dict(a) for a in raw.get("attendance") or []),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise StoreUnavailable(f"Data file is malformed: {e}") from e
