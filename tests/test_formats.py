import pytest

from eventbot.core.formats import (
    compile_format, normalize_date, normalize_time, parse_date, parse_time,
)


@pytest.mark.parametrize("text, expected", [
    ("2025-03-10", "2025-03-10"),
    ("2025 03 10", "2025-03-10"),
    ("2025/03/10", "2025-03-10"),
    ("25-03-10", "2025-03-10"),
    ("25 03 10", "2025-03-10"),
    ("10-03-2025", "2025-03-10"),
    ("10/03/2025", "2025-03-10"),
    ("10.03.2025", "2025-03-10"),
    ("03/10/2025", "2025-10-03"),
    ("1-3-2025", "2025-03-01"),
    ("1/3/2025", "2025-03-01"),
    ("10.03.25", "2025-03-10"),
    ("1/3/25", "2025-03-01"),
    ("31/12/99", "1999-12-31"),
    ("10 Mar 2025", "2025-03-10"),
    ("1 mar 2025", "2025-03-01"),
    ("10 May 2025", "2025-05-10"),
    ("10 March 2025", "2025-03-10"),
    ("1 DECEMBER 2025", "2025-12-01"),
    ("March 10, 2025", "2025-03-10"),
    ("march 1, 2025", "2025-03-01"),
    ("10,03,2025", "2025-03-10"),
])
def test_recognized_dates(text, expected):
    assert normalize_date(text) == expected


def test_earlier_pattern_wins_for_two_digit_years():
    # YY-MM-DD is listed before DD-MM-YY
    assert normalize_date("10-03-25") == "2010-03-25"


def test_two_digit_year_pivot():
    assert normalize_date("68-01-01") == "2068-01-01"
    assert normalize_date("69-01-01") == "1969-01-01"


@pytest.mark.parametrize("text", [
    "not-a-date",
    "",
    "2025-13-01",
    "30/02/2025",
    "2025-3-10",
    "10 Sept 2025",
    "10 Marchh 2025",
    "10/03/2025 extra",
    "10-03/2025",
    "tomorrow",
    "٢٠٢٥-٠٣-١٠",
    "１０/０３/２０２５",
])
def test_unrecognized_dates(text):
    assert parse_date(text) is None
    assert normalize_date(text) is None


@pytest.mark.parametrize("text", ["2025-03-10", "10/03/2025", "1 mar 2025", "March 10, 2025", "31/12/99"])
def test_date_round_trip(text):
    assert parse_date(normalize_date(text)) == parse_date(text)


@pytest.mark.parametrize("text, expected", [
    ("09:30", "09:30"),
    ("9:30", "09:30"),
    ("00:00", "00:00"),
    ("23:59", "23:59"),
    ("21.45", "21:45"),
    ("9.05", "09:05"),
    ("09-30", "09:30"),
    ("9-30", "09:30"),
    ("09 30", "09:30"),
    ("9 30", "09:30"),
    ("09:30:15", "09:30"),
    ("9:30:59", "09:30"),
    ("09:30 PM", "21:30"),
    ("9:30 PM", "21:30"),
    ("9:30 pm", "21:30"),
    ("9:30 p.m.", "21:30"),
    ("12:00 AM", "00:00"),
    ("12:15 PM", "12:15"),
    ("11:59:59 PM", "23:59"),
    ("7:05:00 am", "07:05"),
    ("24:00", "00:00"),
    ("24:00:00", "00:00"),
])
def test_recognized_times(text, expected):
    assert normalize_time(text) == expected


@pytest.mark.parametrize("text", [
    "24:30",
    "24:00:01",
    "25:00",
    "０９:３０",
    "٩:٣٠",
    "9:60",
    "13:00 PM",
    "0:30 AM",
    "930",
    "9:3",
    "9:30PM",
    "noon",
    "",
])
def test_unrecognized_times(text):
    assert parse_time(text) is None


@pytest.mark.parametrize("text", ["09:30", "9.05", "9:30 PM", "11:59:59 PM", "12:00 AM"])
def test_time_round_trip(text):
    assert parse_time(normalize_time(text)) == parse_time(text)


def test_compiled_format_is_anchored_and_case_insensitive():
    regex = compile_format("D MMM YYYY")
    assert regex.fullmatch("5 JAN 2024")
    assert regex.fullmatch("05 Jan 2024") is not None
    assert regex.fullmatch("5 Jan 24") is None
