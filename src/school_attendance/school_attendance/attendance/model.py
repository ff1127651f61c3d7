from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Section


@dataclass(frozen=True)
class AttendanceInput:
    """A validated write, keyed by (school_id, section, date)."""

    school_id: str
    section: Section
    date: date
    boys_present: int
    girls_present: int
    teacher_id: Optional[int] = None

    @property
    def key(self) -> tuple[str, Section, date]:
        return (self.school_id, self.section, self.date)


@dataclass(frozen=True)
class AttendanceRecord:
    """The stored head count for one section on one day."""

    id: int
    school_id: str
    section: Section
    date: date
    boys_present: int
    girls_present: int
    teacher_id: Optional[int] = None

    @property
    def total(self) -> int:
        return self.boys_present + self.girls_present

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "school_id": self.school_id,
            "section": self.section.value,
            "date": self.date.strftime("%Y-%m-%d"),
            "boys_present": self.boys_present,
            "girls_present": self.girls_present,
            "teacher_id": self.teacher_id,
        }


@dataclass(frozen=True)
class AttendanceFilter:
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    school_id: Optional[str] = None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for listing/export: a record plus its school's display name."""

    record: AttendanceRecord
    school_name: Optional[str]

    def to_dict(self) -> dict:
        out = self.record.to_dict()
        out["school"] = {"id": self.record.school_id, "name": self.school_name}
        return out
