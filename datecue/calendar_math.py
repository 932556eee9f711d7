#!/usr/bin/env python3
"""
Calendar Arithmetic

Pure date calculations relative to "today":
- Weekday targeting: "this friday", "next monday", "last sunday"
- Period boundaries: week, month, quarter and year starts and ends
- Relative spans: days, weeks, months and years

Every function takes an optional ``today`` so callers (and tests) can pin the
current date. Weekdays use Python's numbering: Monday=0 .. Sunday=6.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

MONDAY = 0
WEDNESDAY = 2
SATURDAY = 5
SUNDAY = 6

QUARTER_START_MONTHS = (1, 4, 7, 10)


class Period(Enum):
    """Calendar periods a keyword can refer to instead of a day offset"""
    NEXT_WEEK = "next_week"
    LAST_WEEK = "last_week"
    NEXT_MONTH = "next_month"
    LAST_MONTH = "last_month"
    NEXT_YEAR = "next_year"
    LAST_YEAR = "last_year"
    NEXT_QUARTER = "next_quarter"
    LAST_QUARTER = "last_quarter"
    THIS_WEEKEND = "this_weekend"
    END_OF_WEEK = "end_of_week"
    END_OF_MONTH = "end_of_month"
    END_OF_YEAR = "end_of_year"
    MID_WEEK = "mid_week"
    MID_MONTH = "mid_month"


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


# Weekdays

def this_weekday(target: int, today: Optional[date] = None) -> date:
    """Upcoming occurrence of ``target``, or today if today already matches"""
    today = _today(today)
    return today + timedelta(days=(target - today.weekday()) % 7)


def next_weekday(target: int, today: Optional[date] = None) -> date:
    """
    ``target`` in the following week

    Always strictly after today: when today is ``target`` or ``target`` falls
    earlier in the week, a full week is added.
    """
    today = _today(today)
    current = today.weekday()
    days_ahead = (target - current) % 7
    if days_ahead == 0 or target < current:
        days_ahead += 7
    return today + timedelta(days=days_ahead)


def last_weekday(target: int, today: Optional[date] = None) -> date:
    """
    ``target`` in the preceding week

    Always strictly before today: when today is ``target`` or ``target`` falls
    later in the week, a full week is subtracted.
    """
    today = _today(today)
    current = today.weekday()
    days_since = (current - target) % 7
    if days_since == 0 or target > current:
        days_since += 7
    return today - timedelta(days=days_since)


# Weeks

def next_week_start(today: Optional[date] = None) -> date:
    """Monday of next week (never today)"""
    today = _today(today)
    days_until_monday = (MONDAY - today.weekday()) % 7 or 7
    return today + timedelta(days=days_until_monday)


def last_week_start(today: Optional[date] = None) -> date:
    """Monday of the previous week (never today)"""
    today = _today(today)
    return today - timedelta(days=today.weekday() + 7)


def this_weekend(today: Optional[date] = None) -> date:
    """Saturday of this week; today if it is already Saturday or Sunday"""
    today = _today(today)
    if today.weekday() in (SATURDAY, SUNDAY):
        return today
    return today + timedelta(days=SATURDAY - today.weekday())


def end_of_week(today: Optional[date] = None) -> date:
    """Upcoming Sunday, or today if today is Sunday"""
    today = _today(today)
    return today + timedelta(days=SUNDAY - today.weekday())


def mid_week(today: Optional[date] = None) -> date:
    """Wednesday of the current week, looking back if it has already passed"""
    today = _today(today)
    days_diff = (WEDNESDAY - today.weekday()) % 7
    # More than three days ahead means this week's Wednesday is behind us
    if days_diff > 3:
        days_diff -= 7
    return today + timedelta(days=days_diff)


# Months

def first_of_next_month(today: Optional[date] = None) -> date:
    today = _today(today)
    return today.replace(day=1) + relativedelta(months=1)


def first_of_last_month(today: Optional[date] = None) -> date:
    today = _today(today)
    return today.replace(day=1) - relativedelta(months=1)


def end_of_month(today: Optional[date] = None) -> date:
    return first_of_next_month(today) - timedelta(days=1)


def mid_month(today: Optional[date] = None) -> date:
    return _today(today).replace(day=15)


# Quarters

def next_quarter_start(today: Optional[date] = None) -> date:
    """First day of the next quarter (Jan, Apr, Jul or Oct)"""
    today = _today(today)
    if today.month > 9:
        return date(today.year + 1, 1, 1)
    month = next(m for m in QUARTER_START_MONTHS if m > today.month)
    return date(today.year, month, 1)


def last_quarter_start(today: Optional[date] = None) -> date:
    """First day of the previous quarter"""
    today = _today(today)
    if today.month <= 3:
        return date(today.year - 1, 10, 1)
    current_start = max(m for m in QUARTER_START_MONTHS if m <= today.month)
    return date(today.year, current_start - 3, 1)


# Years

def first_of_next_year(today: Optional[date] = None) -> date:
    return date(_today(today).year + 1, 1, 1)


def first_of_last_year(today: Optional[date] = None) -> date:
    return date(_today(today).year - 1, 1, 1)


def end_of_year(today: Optional[date] = None) -> date:
    return date(_today(today).year, 12, 31)


# Relative spans

def add_days(n: int, today: Optional[date] = None) -> date:
    return _today(today) + timedelta(days=n)


def add_weeks(n: int, today: Optional[date] = None) -> date:
    return _today(today) + timedelta(weeks=n)


def add_months(n: int, today: Optional[date] = None) -> date:
    """Calendar month arithmetic, clamping the day to the target month"""
    return _today(today) + relativedelta(months=n)


def sub_months(n: int, today: Optional[date] = None) -> date:
    return _today(today) - relativedelta(months=n)


def add_years(n: int, today: Optional[date] = None) -> date:
    return _today(today) + relativedelta(years=n)


def sub_years(n: int, today: Optional[date] = None) -> date:
    return _today(today) - relativedelta(years=n)


_PERIOD_FUNCTIONS = {
    Period.NEXT_WEEK: next_week_start,
    Period.LAST_WEEK: last_week_start,
    Period.NEXT_MONTH: first_of_next_month,
    Period.LAST_MONTH: first_of_last_month,
    Period.NEXT_YEAR: first_of_next_year,
    Period.LAST_YEAR: first_of_last_year,
    Period.NEXT_QUARTER: next_quarter_start,
    Period.LAST_QUARTER: last_quarter_start,
    Period.THIS_WEEKEND: this_weekend,
    Period.END_OF_WEEK: end_of_week,
    Period.END_OF_MONTH: end_of_month,
    Period.END_OF_YEAR: end_of_year,
    Period.MID_WEEK: mid_week,
    Period.MID_MONTH: mid_month,
}


def resolve_period(period: Period, today: Optional[date] = None) -> date:
    """Compute the date a period tag refers to"""
    return _PERIOD_FUNCTIONS[period](today)


def resolve_keyword(value: Union[int, Period], today: Optional[date] = None) -> date:
    """
    Compute the date for a keyword table value

    Args:
        value: Day offset from today, or a Period tag
        today: Reference date (defaults to the current date)

    Returns:
        Resolved date
    """
    if isinstance(value, Period):
        return resolve_period(value, today)
    return add_days(value, today)
