from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..storage.repository import DatasetStore
from ..storage.session import dataset_session
from . import repository
from .model import Student

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, store: DatasetStore):
        self._store = store

    def list_students(self, class_id: str) -> Sequence[Student]:
        return repository.list_students(self._store.load(), class_id)

    def get_student(self, student_id: str) -> Student:
        return repository.get_student(self._store.load(), student_id)

    def add_student(self, class_id: str, name: str, roll_no: Optional[str] = None) -> Student:
        with dataset_session(self._store) as session:
            session.dataset, student = repository.add_student(session.dataset, class_id, name, roll_no)
        logger.info("Added student %s to class %s", student.id, class_id)
        return student

    def update_student(self, student_id: str, name: str, roll_no: Optional[str] = None) -> None:
        with dataset_session(self._store) as session:
            session.dataset = repository.update_student(session.dataset, student_id, name, roll_no)
        logger.info("Updated student %s", student_id)

    def delete_student(self, student_id: str) -> None:
        """Delete a student together with its attendance marks."""
        with dataset_session(self._store) as session:
            session.dataset = repository.delete_student(session.dataset, student_id)
        logger.info("Deleted student %s", student_id)
