from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from .model import Dataset
from .repository import DatasetStore


@dataclass
class DatasetSession:
    original: Dataset
    dataset: Dataset

    @property
    def changed(self) -> bool:
        return self.dataset != self.original


@contextmanager
def dataset_session(store: DatasetStore) -> Iterator[DatasetSession]:
    """Load, let the caller replace ``session.dataset``, then save.

    Nothing is saved when the block raises or leaves the dataset unchanged.
    """
    dataset = store.load()
    session = DatasetSession(original=dataset, dataset=dataset)
    yield session
    if session.changed:
        store.save(session.dataset)
