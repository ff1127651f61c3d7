from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CentralOfficeCredential, TeacherCredential
from .repository import CentralOfficeCredentialRepository, TeacherCredentialRepository


class MySQLTeacherCredentialRepository(TeacherCredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[TeacherCredential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash, school_id, full_name
                FROM teachers
                WHERE LOWER(username)=%s
                """,
                (username.lower(),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return TeacherCredential(
                id=int(row["id"]),
                username=row["username"],
                password_hash=row["password_hash"],
                school_id=str(row["school_id"]),
                full_name=row.get("full_name"),
            )


class MySQLCentralOfficeCredentialRepository(CentralOfficeCredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[CentralOfficeCredential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash
                FROM central_office_users
                WHERE LOWER(username)=%s
                """,
                (username.lower(),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return CentralOfficeCredential(
                id=int(row["id"]),
                username=row["username"],
                password_hash=row["password_hash"],
            )
