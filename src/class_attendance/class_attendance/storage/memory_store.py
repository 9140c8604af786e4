from __future__ import annotations

from typing import Any, Optional

from .model import Dataset
from .repository import DatasetStore


class InMemoryDatasetStore(DatasetStore):
    """Keeps the serialized dataset in memory.

    Storing the plain dict (not the Dataset object) keeps load/save semantics
    identical to the JSON store: every load builds a fresh value.
    """

    def __init__(self, initial: Optional[Dataset] = None):
        self._blob: Optional[dict[str, Any]] = initial.to_dict() if initial else None
        self.save_count = 0

    def load(self) -> Dataset:
        if self._blob is None:
            return Dataset.empty()
        return Dataset.from_dict(self._blob)

    def save(self, dataset: Dataset) -> None:
        self._blob = dataset.to_dict()
        self.save_count += 1
