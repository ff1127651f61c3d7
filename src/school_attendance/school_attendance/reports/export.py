from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceReportRow
from ..core.constants import CSV_HEADERS


def report_filename(date_from: Optional[date], date_to: Optional[date]) -> str:
    start = date_from.strftime("%Y-%m-%d") if date_from else "all"
    end = date_to.strftime("%Y-%m-%d") if date_to else "all"
    return f"attendance-report-{start}-{end}.csv"


def rows_to_csv(rows: Iterable[AttendanceReportRow]) -> str:
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for row in rows:
        r = row.record
        writer.writerow(
            [
                r.date.strftime("%Y-%m-%d"),
                row.school_name or "Unknown",
                r.section.value,
                r.boys_present,
                r.girls_present,
                r.total,
            ]
        )
    return out.getvalue()
