from __future__ import annotations

from enum import Enum


class ExportOutcome(str, Enum):
    """What happened to an exported CSV after it was written."""

    SHARED = "SHARED"
    SAVED = "SAVED"
