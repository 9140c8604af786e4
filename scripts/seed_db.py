from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    group = container.class_service.add_class("Grade 5", "A")
    students = [
        container.student_service.add_student(group.id, name, str(roll))
        for roll, name in enumerate(["Alice", "Bob", "Chloe", "Dara"], start=1)
    ]

    # First week of the current month; everyone but the last student each day.
    first = date.today().replace(day=1)
    for offset in range(5):
        day = first + timedelta(days=offset)
        present = [s.id for s in students[: len(students) - 1 - offset % 2]]
        container.attendance_service.mark_attendance(group.id, day.isoformat(), present)

    print(f"OK: Seeded demo class {group.display_name} -> {settings.DATA_FILE}")


if __name__ == "__main__":
    main()
