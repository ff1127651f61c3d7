from __future__ import annotations

from typing import Sequence

from .model import School
from .repository import SchoolRepository


class SchoolService:
    def __init__(self, schools: SchoolRepository):
        self._schools = schools

    def list_schools(self) -> Sequence[School]:
        return sorted(self._schools.list_all(), key=lambda s: (s.name, s.id))
