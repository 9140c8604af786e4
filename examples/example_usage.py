"""Example: use the service layer directly (without Flask).

Controllers stay thin; every rule lives in the services and repository functions.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE, export_dir=settings.EXPORT_DIR)
    for group in container.class_service.list_classes():
        report = container.report_service.monthly_report(group.id)
        print(f"{group.display_name} - {report.month_name} {report.year}")
        for row in report.rows:
            print(f"  {row.name}: {row.present}/{row.total} ({row.percent}%)")


if __name__ == "__main__":
    main()
