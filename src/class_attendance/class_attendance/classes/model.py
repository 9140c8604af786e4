from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ClassGroup:
    """Domain entity: a class roster (name plus optional section)."""

    id: str
    name: str
    section: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.section}" if self.section else self.name

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.section:
            out["section"] = self.section
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ClassGroup":
        return cls(id=str(raw["id"]), name=str(raw["name"]), section=raw.get("section") or None)
