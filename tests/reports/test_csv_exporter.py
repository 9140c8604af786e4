from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.core.exceptions import EmptyReport
from src.class_attendance.class_attendance.reports.csv_exporter import export_filename, to_csv
from src.class_attendance.class_attendance.reports.model import ReportRow


def test_csv_has_header_and_one_line_per_row():
    rows = [
        ReportRow(student_id="s1", name="Alice", present=2, total=2, percent=100),
        ReportRow(student_id="s2", name="Bob", present=1, total=2, percent=50),
    ]

    assert to_csv(rows) == "Name,Present,Total,Percent\nAlice,2,2,100\nBob,1,2,50"


def test_csv_writes_names_unquoted():
    rows = [ReportRow(student_id="s1", name="Doe, Jane", present=1, total=1, percent=100)]

    assert to_csv(rows).splitlines()[1] == "Doe, Jane,1,1,100"


def test_empty_rows_raise_empty_report():
    with pytest.raises(EmptyReport):
        to_csv([])


def test_export_filename_replaces_whitespace():
    assert export_filename("Grade 5  A", 5, 2024) == "attendance_Grade_5_A_5_2024.csv"
    assert export_filename("class_1", 12, 2023) == "attendance_class_1_12_2023.csv"


def test_export_filename_replaces_path_separators():
    assert export_filename("/../../escaped", 10, 2026) == "attendance__.._.._escaped_10_2026.csv"
    assert export_filename("A\\B", 1, 2024) == "attendance_A_B_1_2024.csv"
