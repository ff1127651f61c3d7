"""Summary totals over an in-memory list of attendance records.

Every function here is pure: no I/O and the result does not depend on the
order of the input records.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Protocol

from ..core.enums import Section


class CountedRow(Protocol):
    section: Section
    date: date
    boys_present: int
    girls_present: int


@dataclass(frozen=True)
class SectionTotal:
    section: str
    boys: int
    girls: int
    total: int


@dataclass(frozen=True)
class DateTotal:
    date: date
    boys: int
    girls: int
    total: int


@dataclass(frozen=True)
class GenderTotals:
    boys: int = 0
    girls: int = 0

    @property
    def total(self) -> int:
        return self.boys + self.girls


@dataclass(frozen=True)
class ReportSummary:
    record_count: int
    by_section: list[SectionTotal]
    by_date: list[DateTotal]
    by_gender: GenderTotals

    def to_dict(self) -> dict:
        return {
            "record_count": self.record_count,
            "by_section": [
                {"section": s.section, "boys": s.boys, "girls": s.girls, "total": s.total} for s in self.by_section
            ],
            "by_date": [
                {"date": d.date.strftime("%Y-%m-%d"), "boys": d.boys, "girls": d.girls, "total": d.total}
                for d in self.by_date
            ],
            "by_gender": {"boys": self.by_gender.boys, "girls": self.by_gender.girls, "total": self.by_gender.total},
        }


def _section_key(section) -> str:
    return section.value if isinstance(section, Section) else str(section)


def section_totals(records: Iterable[CountedRow]) -> list[SectionTotal]:
    """Group by section; ordered by the section label as a string ("10" < "2")."""

    sums: dict[str, list[int]] = {}
    for r in records:
        s = sums.setdefault(_section_key(r.section), [0, 0])
        s[0] += r.boys_present
        s[1] += r.girls_present

    return [
        SectionTotal(section=k, boys=b, girls=g, total=b + g)
        for k, (b, g) in sorted(sums.items())
    ]


def date_totals(records: Iterable[CountedRow]) -> list[DateTotal]:
    """Group by day; ordered chronologically."""

    sums: dict[date, list[int]] = {}
    for r in records:
        s = sums.setdefault(r.date, [0, 0])
        s[0] += r.boys_present
        s[1] += r.girls_present

    return [DateTotal(date=d, boys=b, girls=g, total=b + g) for d, (b, g) in sorted(sums.items())]


def gender_totals(records: Iterable[CountedRow]) -> GenderTotals:
    boys = 0
    girls = 0
    for r in records:
        boys += r.boys_present
        girls += r.girls_present
    return GenderTotals(boys=boys, girls=girls)


def summarize(records: Iterable[CountedRow]) -> ReportSummary:
    rows = list(records)
    return ReportSummary(
        record_count=len(rows),
        by_section=section_totals(rows),
        by_date=date_totals(rows),
        by_gender=gender_totals(rows),
    )
