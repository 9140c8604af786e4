"""CSV rendering of monthly report rows.

Fields are written as-is, without quoting. A name containing a comma or a
newline produces a row with extra columns; this is a known limitation of the
export format.
"""

from __future__ import annotations

import os
import re
from typing import Sequence

from ..core.constants import CSV_HEADER
from ..core.exceptions import EmptyReport
from .model import ReportRow

_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile("[" + re.escape("/\\" + os.sep + (os.altsep or "")) + "]")


def to_csv(rows: Sequence[ReportRow]) -> str:
    if not rows:
        raise EmptyReport("No attendance data to export for this month.")

    lines = [CSV_HEADER]
    lines.extend(f"{r.name},{r.present},{r.total},{r.percent}" for r in rows)
    return "\n".join(lines)


def export_filename(label: str, month: int, year: int) -> str:
    """``attendance_<label>_<month>_<year>.csv`` with whitespace runs as ``_``.

    Path separators in the label become ``_`` too, so the result is always a
    single file name.
    """
    label = _SEPARATORS.sub("_", label)
    return _WHITESPACE.sub("_", f"attendance_{label}_{int(month)}_{int(year)}.csv")
