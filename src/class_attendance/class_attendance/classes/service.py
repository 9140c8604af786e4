from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..storage.repository import DatasetStore
from ..storage.session import dataset_session
from . import repository
from .model import ClassGroup

logger = logging.getLogger(__name__)


class ClassService:
    """Use cases: create, rename and list classes."""

    def __init__(self, store: DatasetStore):
        self._store = store

    def list_classes(self) -> Sequence[ClassGroup]:
        return repository.list_classes(self._store.load())

    def get_class(self, class_id: str) -> ClassGroup:
        return repository.get_class(self._store.load(), class_id)

    def add_class(self, name: str, section: Optional[str] = None) -> ClassGroup:
        with dataset_session(self._store) as session:
            session.dataset, group = repository.add_class(session.dataset, name, section)
        logger.info("Added class %s (%s)", group.id, group.display_name)
        return group

    def update_class(self, class_id: str, name: str, section: Optional[str] = None) -> None:
        with dataset_session(self._store) as session:
            session.dataset = repository.update_class(session.dataset, class_id, name, section)
        logger.info("Updated class %s", class_id)
