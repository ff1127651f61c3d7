from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import pytest
from werkzeug.security import generate_password_hash

from src.school_attendance.school_attendance.attendance.model import (
    AttendanceFilter,
    AttendanceInput,
    AttendanceRecord,
)
from src.school_attendance.school_attendance.core.enums import Role, Section
from src.school_attendance.school_attendance.schools.model import School
from src.school_attendance.school_attendance.users.model import (
    CentralOfficeCredential,
    Identity,
    TeacherCredential,
)


class InMemorySchools:
    def __init__(self, schools: Sequence[School]):
        self._schools = {s.id: s for s in schools}

    def list_all(self):
        return sorted(self._schools.values(), key=lambda s: s.name)

    def names_by_ids(self, school_ids):
        return {sid: self._schools[sid].name for sid in school_ids if sid in self._schools}


class InMemoryCredentials:
    def __init__(self, rows):
        self._rows = {r.username.lower(): r for r in rows}
        self.lookups: list[str] = []

    def get_by_username(self, username: str):
        self.lookups.append(username)
        return self._rows.get(username.lower())


class InMemoryAttendance:
    """Keyed by (school_id, section, date) like the unique index in MySQL."""

    def __init__(self):
        self._rows: dict[tuple[str, Section, date], AttendanceRecord] = {}
        self._id = 0
        self.batches: list[int] = []

    def upsert(self, record: AttendanceInput) -> AttendanceRecord:
        existing = self._rows.get(record.key)
        if existing:
            rid = existing.id
        else:
            self._id += 1
            rid = self._id
        stored = AttendanceRecord(
            id=rid,
            school_id=record.school_id,
            section=record.section,
            date=record.date,
            boys_present=record.boys_present,
            girls_present=record.girls_present,
            teacher_id=record.teacher_id,
        )
        self._rows[record.key] = stored
        return stored

    def upsert_many(self, records):
        self.batches.append(len(records))
        return [self.upsert(r) for r in records]

    def query(self, flt: AttendanceFilter):
        out = [
            r
            for r in self._rows.values()
            if (flt.date_from is None or r.date >= flt.date_from)
            and (flt.date_to is None or r.date <= flt.date_to)
            and (flt.school_id is None or r.school_id == flt.school_id)
        ]
        out.sort(key=lambda r: (r.school_id, r.section.value))
        out.sort(key=lambda r: r.date, reverse=True)
        return out

    def all(self):
        return list(self._rows.values())


# Cheap hashes keep the suite fast; the algorithm is irrelevant to these tests.
def fast_hash(password: str) -> str:
    return generate_password_hash(password, method="pbkdf2:sha256:1000")


@pytest.fixture
def schools():
    return InMemorySchools([School(id="S1", name="Riverside"), School(id="S2", name="Hillview")])


@pytest.fixture
def teacher_creds():
    return InMemoryCredentials(
        [
            TeacherCredential(
                id=7, username="tuser", password_hash=fast_hash("correct_pw"), school_id="S1", full_name="Tess User"
            ),
            TeacherCredential(id=8, username="other", password_hash=fast_hash("pw2"), school_id="S2"),
        ]
    )


@pytest.fixture
def office_creds():
    return InMemoryCredentials(
        [CentralOfficeCredential(id=1, username="admin", password_hash=fast_hash("admin123"))]
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def teacher() -> Identity:
    return Identity(id=7, username="tuser", role=Role.TEACHER, school_id="S1", full_name="Tess User")


@pytest.fixture
def office() -> Identity:
    return Identity(id=1, username="admin", role=Role.CENTRAL_OFFICE)


def make_record(*, section="1A", on=date(2024, 3, 1), boys=0, girls=0, school_id="S1", rid=1) -> AttendanceRecord:
    return AttendanceRecord(
        id=rid,
        school_id=school_id,
        section=Section(section),
        date=on,
        boys_present=boys,
        girls_present=girls,
    )


@pytest.fixture(name="make_record")
def make_record_fixture():
    return make_record
