from __future__ import annotations

from datetime import date

import pytest

from src.school_attendance.school_attendance.common.datetime_utils import optional_date, require_date
from src.school_attendance.school_attendance.common.result import Err, Ok
from src.school_attendance.school_attendance.common.validators import parse_count, parse_section
from src.school_attendance.school_attendance.core.enums import Section
from src.school_attendance.school_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("value,expected", [(0, 0), (12, 12), ("7", 7), (" 15 ", 15), (3.0, 3), ("+4", 4)])
def test_parse_count_accepts_whole_non_negative_numbers(value, expected):
    assert parse_count(value, "boys_present") == Ok(expected)


@pytest.mark.parametrize("value", [-1, "-2", "abc", "", None, 1.5, True, "1e3", "--5"])
def test_parse_count_rejects_instead_of_coercing(value):
    result = parse_count(value, "boys_present")

    assert isinstance(result, Err)
    assert "boys_present" in result.message


def test_parse_section_enumeration():
    assert parse_section("1A") == Ok(Section.S1A)
    assert parse_section(" 5 ") == Ok(Section.S5)
    assert isinstance(parse_section("9"), Err)
    assert isinstance(parse_section("1a"), Err)
    assert isinstance(parse_section(None), Err)


def test_dates_parse_iso_strings_and_pass_dates_through():
    assert require_date("2024-03-01") == date(2024, 3, 1)
    assert require_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert optional_date("", "date_from") is None
    assert optional_date(None, "date_from") is None

    with pytest.raises(ValidationError):
        require_date("2024-02-30")


def test_parse_count_rejects_values_the_column_cannot_hold():
    assert parse_count(4294967295, "girls_present") == Ok(4294967295)
    assert isinstance(parse_count(2**40, "girls_present"), Err)
    assert isinstance(parse_count("4294967296", "girls_present"), Err)


def test_parse_count_rejects_huge_digit_strings_without_raising():
    result = parse_count("9" * 5000, "boys_present")

    assert isinstance(result, Err)
    assert "boys_present" in result.message
