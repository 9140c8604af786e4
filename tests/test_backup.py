from __future__ import annotations

from datetime import datetime

import pytest

from scripts.backup import backup_data_file


def test_backup_copies_data_file(tmp_path):
    data_file = tmp_path / "attendance.json"
    data_file.write_text('{"classes": [], "students": [], "attendance": []}', encoding="utf-8")

    out = backup_data_file(data_file, tmp_path / "backups", now=datetime(2024, 5, 2, 8, 30, 0))

    assert out.name == "attendance_data_20240502_083000.json"
    assert out.read_text(encoding="utf-8") == data_file.read_text(encoding="utf-8")


def test_backup_without_data_file_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        backup_data_file(tmp_path / "missing.json", tmp_path / "backups")
