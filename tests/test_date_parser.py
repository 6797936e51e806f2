"""Tests for date and month parsing."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from spendtrack.utils.date_parser import parse_date, parse_month


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_long_date():
    """Test parsing a written-out date."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("Yesterday") == date.today() - timedelta(days=1)


def test_parse_this_month():
    """Test parsing 'this month'."""
    assert parse_date("this month") == date.today().replace(day=1)


def test_parse_last_month():
    """Test parsing 'last month'."""
    expected = (date.today() - relativedelta(months=1)).replace(day=1)
    assert parse_date("last month") == expected


def test_parse_invalid_date():
    """Test that garbage raises ValueError."""
    with pytest.raises(ValueError):
        parse_date("not a date")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2024-03", "2024-03"),
        ("2024-3", "2024-03"),
        ("2024-12-25", "2024-12"),
        (" 2024-11 ", "2024-11"),
    ],
)
def test_parse_month(text, expected):
    """Test month normalization."""
    assert parse_month(text) == expected


@pytest.mark.parametrize("text", [None, "", "overall", "OVERALL"])
def test_parse_month_overall(text):
    """Test that 'overall' and empty input mean no month filter."""
    assert parse_month(text) is None


def test_parse_month_relative():
    """Test relative month names."""
    assert parse_month("this month") == date.today().strftime("%Y-%m")


@pytest.mark.parametrize("text", ["2024-13", "2024-00", "someday"])
def test_parse_month_invalid(text):
    """Test invalid months raise ValueError."""
    with pytest.raises(ValueError):
        parse_month(text)
