from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..attendance.model import AttendanceReportRow
from ..attendance.service import AttendanceService
from ..common.datetime_utils import optional_date
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import Identity
from .aggregator import ReportSummary, summarize
from .export import report_filename, rows_to_csv


@dataclass(frozen=True)
class ReportData:
    rows: list[AttendanceReportRow]
    summary: ReportSummary


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class ReportService:
    """Use case: central office dashboards and CSV export."""

    def __init__(self, attendance: AttendanceService):
        self._attendance = attendance

    @staticmethod
    def _require_central_office(identity: Identity) -> None:
        if identity.role != Role.CENTRAL_OFFICE:
            raise AuthorizationError("Reports are only available to the central office")

    def build_report(
        self,
        identity: Identity,
        *,
        date_from: Any = None,
        date_to: Any = None,
        school_id: Optional[str] = None,
    ) -> ReportData:
        self._require_central_office(identity)
        rows = self._attendance.list_records(identity, date_from=date_from, date_to=date_to, school_id=school_id)
        return ReportData(rows=rows, summary=summarize(r.record for r in rows))

    def export_csv(
        self,
        identity: Identity,
        *,
        date_from: Any = None,
        date_to: Any = None,
        school_id: Optional[str] = None,
    ) -> CsvExport:
        data = self.build_report(identity, date_from=date_from, date_to=date_to, school_id=school_id)
        return CsvExport(
            filename=report_filename(optional_date(date_from, "date_from"), optional_date(date_to, "date_to")),
            content=rows_to_csv(data.rows),
        )
