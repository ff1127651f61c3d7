from __future__ import annotations

import re

from ..core.constants import MAX_COUNT
from ..core.enums import Section
from ..core.exceptions import ValidationError
from .result import Err, Ok, Result

_INT_RE = re.compile(r"[+-]?\d+")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def parse_count(value, field_name: str) -> Result[int]:
    """Parse a head count without coercing bad input to zero."""
    if value is None or isinstance(value, bool):
        return Err(f"{field_name} is required")

    if isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if not value.is_integer():
            return Err(f"{field_name} must be a whole number")
        n = int(value)
    else:
        text = str(value).strip()
        if not text:
            return Err(f"{field_name} is required")
        if not _INT_RE.fullmatch(text):
            return Err(f"{field_name} must be a whole number")
        try:
            n = int(text)
        except ValueError:
            return Err(f"{field_name} is too large")

    if n < 0:
        return Err(f"{field_name} must not be negative")
    if n > MAX_COUNT:
        return Err(f"{field_name} must not exceed {MAX_COUNT}")
    return Ok(n)


def parse_section(value) -> Result[Section]:
    if value is None or not str(value).strip():
        return Err("section is required")
    try:
        return Ok(Section(str(value).strip()))
    except ValueError:
        return Err(f"Invalid section: {value}")
