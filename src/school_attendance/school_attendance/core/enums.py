from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """The two fixed login roles; each has its own credential table."""

    TEACHER = "teacher"
    CENTRAL_OFFICE = "central_office"


class Section(str, Enum):
    """Class/grade groups a school reports attendance for."""

    S1A = "1A"
    S1B = "1B"
    S2 = "2"
    S3 = "3"
    S4 = "4"
    S5 = "5"
