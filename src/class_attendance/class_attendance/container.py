from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .classes.service import ClassService
from .core.constants import MEMORY_DATA_FILE
from .reports.service import ReportService
from .reports.sharing import FileExportWriter, ShareTarget
from .storage.json_store import JsonDatasetStore
from .storage.memory_store import InMemoryDatasetStore
from .storage.repository import DatasetStore
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: DatasetStore

    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_store(data_file: str) -> DatasetStore:
    if data_file == MEMORY_DATA_FILE:
        return InMemoryDatasetStore()
    return JsonDatasetStore(data_file)


def build_container(
    *,
    data_file: str,
    export_dir: Optional[str] = None,
    share_target: Optional[ShareTarget] = None,
    store: Optional[DatasetStore] = None,
) -> Container:
    store = store or build_store(data_file)

    return Container(
        store=store,
        class_service=ClassService(store),
        student_service=StudentService(store),
        attendance_service=AttendanceService(store),
        report_service=ReportService(
            store,
            writer=FileExportWriter(export_dir),
            share_target=share_target,
        ),
    )
