from __future__ import annotations

from typing import Protocol

from .model import Dataset


class DatasetStore(Protocol):
    """Persistence interface for the whole dataset.

    Note (DIP): services depend on this interface, not on a concrete file format.
    ``save`` always overwrites the full dataset.
    """

    def load(self) -> Dataset:
        raise NotImplementedError

    def save(self, dataset: Dataset) -> None:
        raise NotImplementedError
