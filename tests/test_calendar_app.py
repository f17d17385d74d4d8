import calendar
import re
from datetime import date

import pytest

from ossim.calendar_app import day_number, month_name, number_of_days, render_year

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.mark.parametrize("year", [1900, 1999, 2000, 2023, 2024, 2100])
def test_day_number_matches_weekday(year):
    for month in range(1, 13):
        for day in (1, 13, 28):
            assert day_number(day, month, year) == date(year, month, day).isoweekday() % 7


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
def test_number_of_days_matches_stdlib(year):
    for index in range(12):
        assert number_of_days(index, year) == calendar.monthrange(year, index + 1)[1]


def test_month_names_from_zero():
    assert month_name(0) == "January"
    assert month_name(11) == "December"


@pytest.mark.parametrize("index", [-1, 12])
def test_month_name_out_of_range(index):
    with pytest.raises(IndexError):
        month_name(index)


def test_day_number_rejects_bad_month():
    with pytest.raises(ValueError):
        day_number(1, 13, 2024)


def test_render_names_every_month():
    text = render_year(2024)
    assert "Calendar for 2024" in text
    assert all(name in text for name in calendar.month_name[1:])
    assert text.count("Sun  Mon  Tue  Wed  Thu  Fri  Sat") == 12


@pytest.mark.parametrize("year", [2023, 2024])
def test_render_lists_every_day(year):
    plain = _ANSI.sub("", render_year(year))
    days = [
        int(token)
        for line in plain.splitlines()
        if "Calendar" not in line
        for token in line.split()
        if token.isdigit()
    ]
    expected = sum(calendar.monthrange(year, m)[1] for m in range(1, 13))
    assert len(days) == expected


def test_render_january_starts_on_its_weekday():
    year = 2025
    plain = _ANSI.sub("", render_year(year))
    lines = plain.splitlines()
    header = lines.index("  Sun  Mon  Tue  Wed  Thu  Fri  Sat")
    assert lines[header + 1].startswith("    " * day_number(1, 1, year) + "   1")