from datetime import date

import pytest

from app.services.month_labels import (
    format_window,
    is_valid_month_label,
    month_index,
    parse_month_label,
)


@pytest.mark.parametrize("label,expected", [
    ("Mar 15", date(2025, 3, 15)),
    ("March 15", date(2025, 3, 15)),
    ("march 15", date(2025, 3, 15)),
    ("MAR 15", date(2025, 3, 15)),
    ("Sept 1", date(2025, 9, 1)),
    ("Dec 31", date(2025, 12, 31)),
    ("Apr 1st", date(2025, 4, 1)),
    ("  Jun   20  ", date(2025, 6, 20)),
])
def test_parses_valid_labels(label, expected):
    assert parse_month_label(label, 2025) == expected


@pytest.mark.parametrize("label", [
    None, "", "   ", "Mar", "Smarch 5", "Mar x", "Mar -3", "Feb 30", "Apr 31", "Jan 0", "15 Mar",
])
def test_rejects_invalid_labels(label):
    assert parse_month_label(label, 2025) is None


def test_first_matching_month_wins():
    assert month_index("Ma") == 3
    assert month_index("J") == 1
    assert month_index("Ju") == 6
    assert month_index("") is None
    assert month_index("Marchy") is None


def test_feb_29_depends_on_year():
    assert parse_month_label("Feb 29", 2024) == date(2024, 2, 29)
    assert parse_month_label("Feb 29", 2025) is None


def test_is_valid_month_label_accepts_leap_day():
    assert is_valid_month_label("Feb 29")
    assert is_valid_month_label("October 3")
    assert not is_valid_month_label("Feb 30")
    assert not is_valid_month_label("Smarch 5")


def test_format_window():
    assert format_window("Mar 15", "Apr 1") == "Mar 15 - Apr 1"
    assert format_window("Mar 15", None) == "Not specified"
    assert format_window(None, None) == "Not specified"
