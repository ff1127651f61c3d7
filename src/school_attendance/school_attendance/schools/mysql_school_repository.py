from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import School
from .repository import SchoolRepository


class MySQLSchoolRepository(SchoolRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[School]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM schools ORDER BY name ASC, id ASC")
            rows = fetchall(cur)
            return [School(id=str(r["id"]), name=r["name"]) for r in rows]

    def names_by_ids(self, school_ids: Iterable[str]) -> Mapping[str, str]:
        ids = sorted({str(s) for s in school_ids})
        if not ids:
            return {}

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, name FROM schools WHERE id IN ({placeholders})", tuple(ids))
            return {str(r["id"]): r["name"] for r in fetchall(cur)}
