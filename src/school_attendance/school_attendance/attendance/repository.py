from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceFilter, AttendanceInput, AttendanceRecord


class AttendanceRepository(Protocol):
    """The only writer of attendance state.

    At most one row may exist per (school_id, section, date); a write for an
    existing key replaces boys/girls/teacher_id in place.
    """

    def upsert(self, record: AttendanceInput) -> AttendanceRecord:
        raise NotImplementedError

    def upsert_many(self, records: Sequence[AttendanceInput]) -> Sequence[AttendanceRecord]:
        """Apply every upsert in one transaction; all rows or none."""

        raise NotImplementedError

    def query(self, flt: AttendanceFilter) -> Sequence[AttendanceRecord]:
        """Newest date first, ties by (school_id, section) ascending."""

        raise NotImplementedError
