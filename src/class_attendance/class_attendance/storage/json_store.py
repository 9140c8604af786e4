from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ..core.exceptions import StoreUnavailable
from .model import Dataset
from .repository import DatasetStore

logger = logging.getLogger(__name__)


def write_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` so readers see either the old or the new file.

    The bytes go to a temp file in the same directory first, which is then
    renamed over the target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class JsonDatasetStore(DatasetStore):
    """Dataset persisted as a single JSON file."""

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dataset:
        if not self._path.exists():
            logger.info("No data file at %s, starting with an empty dataset", self._path)
            return Dataset.empty()

        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read data file %s: %s", self._path, e)
            raise StoreUnavailable(f"Cannot read data file {self._path}") from e

        return Dataset.from_dict(raw)

    def save(self, dataset: Dataset) -> None:
        payload = json.dumps(dataset.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")
        try:
            write_atomic(self._path, payload)
        except OSError as e:
            logger.warning("Failed to write data file %s: %s", self._path, e)
            raise StoreUnavailable(f"Cannot write data file {self._path}") from e
        logger.debug("Saved dataset to %s (%d bytes)", self._path, len(payload))
