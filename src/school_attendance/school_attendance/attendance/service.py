from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import optional_date, require_date
from ..common.result import Err
from ..common.validators import parse_count, parse_section
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..schools.repository import SchoolRepository
from ..users.model import Identity
from .model import AttendanceFilter, AttendanceInput, AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


def _collect_row(
    *, school_id: str, work_date: date, teacher_id: Optional[int], data: Mapping[str, Any]
) -> tuple[Optional[AttendanceInput], list[str]]:
    """Validate one submitted row; returns (input, errors) and never coerces."""

    section = parse_section(data.get("section"))
    boys = parse_count(data.get("boys_present"), "boys_present")
    girls = parse_count(data.get("girls_present"), "girls_present")

    errors = [r.message for r in (section, boys, girls) if isinstance(r, Err)]
    if errors:
        return None, errors

    return (
        AttendanceInput(
            school_id=school_id,
            section=section.value,
            date=work_date,
            boys_present=boys.value,
            girls_present=girls.value,
            teacher_id=teacher_id,
        ),
        [],
    )


class AttendanceService:
    """Use case: record daily head counts and list them back.

    The caller passes the authenticated Identity into every call; nothing about
    the user is kept between calls.
    """

    def __init__(self, attendance: AttendanceRepository, schools: SchoolRepository):
        self._attendance = attendance
        self._schools = schools

    @staticmethod
    def _teacher_school(identity: Identity, school_id: Optional[str]) -> str:
        if identity.role != Role.TEACHER:
            raise AuthorizationError("Only teachers can submit attendance")
        if not identity.school_id:
            raise AuthorizationError("Teacher is not linked to a school")
        if school_id and str(school_id).strip() != identity.school_id:
            raise AuthorizationError("Teachers can only submit attendance for their own school")
        return identity.school_id

    def submit(
        self,
        identity: Identity,
        *,
        section: Any,
        date: Any,
        boys_present: Any,
        girls_present: Any,
        school_id: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or replace the record for (teacher's school, section, date)."""

        school_id = self._teacher_school(identity, school_id)
        work_date = require_date(date)

        record, errors = _collect_row(
            school_id=school_id,
            work_date=work_date,
            teacher_id=identity.id,
            data={"section": section, "boys_present": boys_present, "girls_present": girls_present},
        )
        if errors:
            raise ValidationError("; ".join(errors))

        return self._attendance.upsert(record)

    def submit_batch(
        self,
        identity: Identity,
        *,
        records: Sequence[Mapping[str, Any]],
        date: Any,
        school_id: Optional[str] = None,
    ) -> int:
        """Validate every row first, then upsert them together (all or nothing)."""

        school_id = self._teacher_school(identity, school_id)
        work_date = require_date(date)
        if not isinstance(records, (list, tuple)) or not records:
            raise ValidationError("records must be a non-empty list")

        inputs: list[AttendanceInput] = []
        errors: list[str] = []
        seen: set = set()
        for i, data in enumerate(records, start=1):
            if not isinstance(data, Mapping):
                errors.append(f"row {i}: must be an object")
                continue

            record, row_errors = _collect_row(
                school_id=school_id, work_date=work_date, teacher_id=identity.id, data=data
            )
            errors.extend(f"row {i}: {e}" for e in row_errors)
            if record is None:
                continue
            if record.section in seen:
                errors.append(f"row {i}: duplicate section {record.section.value}")
                continue
            seen.add(record.section)
            inputs.append(record)

        if errors:
            raise ValidationError("; ".join(errors))

        return len(self._attendance.upsert_many(inputs))

    def list_records(
        self,
        identity: Identity,
        *,
        date_from: Any = None,
        date_to: Any = None,
        school_id: Optional[str] = None,
    ) -> list[AttendanceReportRow]:
        start = optional_date(date_from, "date_from")
        end = optional_date(date_to, "date_to")
        if start and end and start > end:
            raise ValidationError("date_from must not be after date_to")

        school_id = str(school_id).strip() if school_id else None
        if identity.role == Role.TEACHER:
            if school_id and school_id != identity.school_id:
                raise AuthorizationError("Teachers can only view their own school")
            school_id = identity.school_id

        records = self._attendance.query(AttendanceFilter(date_from=start, date_to=end, school_id=school_id))
        names = self._schools.names_by_ids(r.school_id for r in records) if records else {}
        return [AttendanceReportRow(record=r, school_name=names.get(r.school_id)) for r in records]
