from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class School:
    """Reference data, managed outside this application."""

    id: str
    name: str
