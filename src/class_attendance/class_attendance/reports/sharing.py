from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from ..core.exceptions import InvalidOperation
from ..storage.json_store import write_atomic

logger = logging.getLogger(__name__)


class ShareTarget(Protocol):
    """Whatever can offer a saved file to the user (share sheet, mail, ...)."""

    def is_available(self) -> bool:
        raise NotImplementedError

    def share(self, path: Path, *, mime_type: str, title: str) -> None:
        raise NotImplementedError


class NoShareTarget(ShareTarget):
    """Used when nothing can share files; exports are only saved."""

    def is_available(self) -> bool:
        return False

    def share(self, path: Path, *, mime_type: str, title: str) -> None:
        raise RuntimeError("Sharing is not available")


class FileExportWriter:
    """Writes export bytes into a directory the user can reach."""

    def __init__(self, export_dir: Optional[str] = None):
        self._dir = Path(export_dir) if export_dir else Path(tempfile.gettempdir())

    @property
    def export_dir(self) -> Path:
        return self._dir

    def write(self, filename: str, data: bytes) -> Path:
        path = (self._dir / filename).resolve()
        if path.parent != self._dir.resolve():
            raise InvalidOperation(f"Export file name {filename!r} must not contain a path")
        write_atomic(path, data)
        logger.info("Wrote export %s (%d bytes)", path, len(data))
        return path
