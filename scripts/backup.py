"""Backup the attendance data file.

Note: the whole dataset is one JSON file, so a backup is a timestamped copy of it.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from config import get_settings_module


def backup_data_file(data_file: Path, out_dir: Path, *, now: Optional[datetime] = None) -> Path:
    if not data_file.exists():
        raise FileNotFoundError(f"No data file at {data_file}")

    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_data_{ts}.json"
    shutil.copy2(data_file, out_file)
    return out_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_file = Path(settings.DATA_FILE)

    try:
        out_file = backup_data_file(data_file, Path(__file__).resolve().parents[1] / "backups")
    except FileNotFoundError as e:
        raise SystemExit(str(e))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
