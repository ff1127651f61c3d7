from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .schools.mysql_school_repository import MySQLSchoolRepository
from .schools.repository import SchoolRepository
from .schools.service import SchoolService
from .users.mysql_credential_repository import (
    MySQLCentralOfficeCredentialRepository,
    MySQLTeacherCredentialRepository,
)
from .users.repository import CentralOfficeCredentialRepository, TeacherCredentialRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    schools_repo: SchoolRepository
    teachers_repo: TeacherCredentialRepository
    central_office_repo: CentralOfficeCredentialRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    school_service: SchoolService
    attendance_service: AttendanceService
    report_service: ReportService


def build_services(
    *,
    schools_repo: SchoolRepository,
    teachers_repo: TeacherCredentialRepository,
    central_office_repo: CentralOfficeCredentialRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    attendance_service = AttendanceService(attendance_repo, schools_repo)
    return Container(
        schools_repo=schools_repo,
        teachers_repo=teachers_repo,
        central_office_repo=central_office_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(teachers_repo, central_office_repo),
        school_service=SchoolService(schools_repo),
        attendance_service=attendance_service,
        report_service=ReportService(attendance_service),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return build_services(
        schools_repo=MySQLSchoolRepository(conn),
        teachers_repo=MySQLTeacherCredentialRepository(conn),
        central_office_repo=MySQLCentralOfficeCredentialRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
