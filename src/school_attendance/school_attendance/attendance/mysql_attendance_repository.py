from __future__ import annotations

from typing import Sequence

from ..core.enums import Section
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceFilter, AttendanceInput, AttendanceRecord
from .repository import AttendanceRepository

# The unique key uq_attendance_school_section_date resolves concurrent writes;
# no read-then-write happens here.
UPSERT_SQL = """
    INSERT INTO attendance_records(school_id, section, date, boys_present, girls_present, teacher_id)
    VALUES(%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE boys_present=VALUES(boys_present),
                            girls_present=VALUES(girls_present),
                            teacher_id=VALUES(teacher_id)
"""

SELECT_BY_KEY_SQL = """
    SELECT id, school_id, section, date, boys_present, girls_present, teacher_id
    FROM attendance_records
    WHERE school_id=%s AND section=%s AND date=%s
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        school_id=str(r["school_id"]),
        section=Section(r["section"]),
        date=r["date"],
        boys_present=int(r["boys_present"]),
        girls_present=int(r["girls_present"]),
        teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _upsert_with_cursor(self, cur, record: AttendanceInput) -> AttendanceRecord:
        cur.execute(
            UPSERT_SQL,
            (
                record.school_id,
                record.section.value,
                record.date,
                int(record.boys_present),
                int(record.girls_present),
                record.teacher_id,
            ),
        )
        cur.execute(SELECT_BY_KEY_SQL, (record.school_id, record.section.value, record.date))
        row = fetchone(cur)
        if not row:
            raise StorageError("Upserted attendance row could not be read back")
        return _row_to_record(row)

    def upsert(self, record: AttendanceInput) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._upsert_with_cursor(cur, record)

    def upsert_many(self, records: Sequence[AttendanceInput]) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            return [self._upsert_with_cursor(cur, r) for r in records]

    def query(self, flt: AttendanceFilter) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if flt.date_from is not None:
            clauses.append("date >= %s")
            params.append(flt.date_from)
        if flt.date_to is not None:
            clauses.append("date <= %s")
            params.append(flt.date_to)
        if flt.school_id is not None:
            clauses.append("school_id=%s")
            params.append(flt.school_id)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, school_id, section, date, boys_present, girls_present, teacher_id
                FROM attendance_records
                {where}
                ORDER BY date DESC, school_id ASC, CAST(section AS CHAR) ASC
                """,
                tuple(params),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
