"""Example: call the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    office = container.auth_service.authenticate("admin", "admin123", "central_office")
    for school in container.school_service.list_schools():
        print(school.id, school.name)

    report = container.report_service.build_report(office)
    print(report.summary.to_dict())


if __name__ == "__main__":
    main()
