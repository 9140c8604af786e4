from __future__ import annotations

from typing import Optional

from ..classes.repository import get_class
from ..common.ids import IdFactory, fresh_id, new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import STUDENT_ID_PREFIX
from ..core.exceptions import NotFound
from ..storage.model import Dataset
from .model import Student


def list_students(dataset: Dataset, class_id: str) -> tuple[Student, ...]:
    """Students of a class in the order they were added."""
    return tuple(s for s in dataset.students if s.class_id == class_id)


def find_student(dataset: Dataset, student_id: str) -> Optional[Student]:
    for s in dataset.students:
        if s.id == student_id:
            return s
    return None


def get_student(dataset: Dataset, student_id: str) -> Student:
    found = find_student(dataset, student_id)
    if not found:
        raise NotFound(f"Student {student_id!r} does not exist")
    return found


def add_student(
    dataset: Dataset,
    class_id: str,
    name: str,
    roll_no: Optional[str] = None,
    *,
    id_factory: IdFactory = new_id,
) -> tuple[Dataset, Student]:
    get_class(dataset, class_id)
    student = Student(
        id=fresh_id(STUDENT_ID_PREFIX, dataset.all_ids(), id_factory),
        class_id=class_id,
        name=require_non_empty(name, "Student name"),
        roll_no=optional_text(roll_no),
    )
    return dataset.with_students(dataset.students + (student,)), student


def update_student(dataset: Dataset, student_id: str, name: str, roll_no: Optional[str] = None) -> Dataset:
    current = get_student(dataset, student_id)
    updated = Student(
        id=current.id,
        class_id=current.class_id,
        name=require_non_empty(name, "Student name"),
        roll_no=optional_text(roll_no),
    )
    return dataset.with_students(updated if s.id == student_id else s for s in dataset.students)


def delete_student(dataset: Dataset, student_id: str) -> Dataset:
    """Remove a student and purge its key from every attendance record."""
    get_student(dataset, student_id)
    return Dataset(
        classes=dataset.classes,
        students=tuple(s for s in dataset.students if s.id != student_id),
        attendance=tuple(a.without_student(student_id) for a in dataset.attendance),
    )
