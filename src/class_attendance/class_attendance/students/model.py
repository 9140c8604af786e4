from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in exactly one class."""

    id: str
    class_id: str
    name: str
    roll_no: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "classId": self.class_id, "name": self.name}
        if self.roll_no:
            out["rollNo"] = self.roll_no
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Student":
        return cls(
            id=str(raw["id"]),
            class_id=str(raw["classId"]),
            name=str(raw["name"]),
            roll_no=raw.get("rollNo") or None,
        )
