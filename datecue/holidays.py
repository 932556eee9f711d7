#!/usr/bin/env python3
"""
Holiday Tables

Holidays recognised in text, each mapped to a function of the year:
- Static holidays fall on the same month/day every year
- Dynamic holidays are computed per year (Easter-relative or
  "nth weekday of month")
"""

import calendar
from datetime import date, timedelta
from typing import Callable, Dict, List

HolidayCalculator = Callable[[int], date]

MONDAY = calendar.MONDAY
THURSDAY = calendar.THURSDAY
SUNDAY = calendar.SUNDAY


def easter_sunday(year: int) -> date:
    """
    Easter Sunday in the Gregorian calendar (Butcher's algorithm)

    Args:
        year: Calendar year

    Returns:
        Date of Easter Sunday
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    The nth occurrence of a weekday in a month

    Args:
        year: Calendar year
        month: Month 1-12
        weekday: Monday=0 .. Sunday=6
        n: Occurrence, 1 for the first

    Returns:
        Date of the occurrence
    """
    first = date(year, month, 1)
    first_occurrence = first + timedelta(days=(weekday - first.weekday()) % 7)
    return first_occurrence + timedelta(weeks=n - 1)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """The last occurrence of a weekday in a month"""
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    return last_day - timedelta(days=(last_day.weekday() - weekday) % 7)


def _fixed(month: int, day: int) -> HolidayCalculator:
    return lambda year: date(year, month, day)


def _good_friday(year: int) -> date:
    return easter_sunday(year) - timedelta(days=2)


def _easter_monday(year: int) -> date:
    return easter_sunday(year) + timedelta(days=1)


def _mothers_day(year: int) -> date:
    return nth_weekday_of_month(year, 5, SUNDAY, 2)


def _fathers_day(year: int) -> date:
    return nth_weekday_of_month(year, 6, SUNDAY, 3)


def _thanksgiving(year: int) -> date:
    return nth_weekday_of_month(year, 11, THURSDAY, 4)


def _labor_day(year: int) -> date:
    return nth_weekday_of_month(year, 9, MONDAY, 1)


def _memorial_day(year: int) -> date:
    return last_weekday_of_month(year, 5, MONDAY)


STATIC_HOLIDAYS: Dict[str, HolidayCalculator] = {
    'new year': _fixed(1, 1),
    'new years day': _fixed(1, 1),
    "new year's day": _fixed(1, 1),
    'new year day': _fixed(1, 1),
    'new years eve': _fixed(12, 31),
    "new year's eve": _fixed(12, 31),
    'new year eve': _fixed(12, 31),
    'christmas': _fixed(12, 25),
    'christmas day': _fixed(12, 25),
    'xmas': _fixed(12, 25),
    'christmas eve': _fixed(12, 24),
    'valentines day': _fixed(2, 14),
    "valentine's day": _fixed(2, 14),
    'valentine day': _fixed(2, 14),
    'halloween': _fixed(10, 31),
    'independence day': _fixed(7, 4),  # USA
    'st patricks day': _fixed(3, 17),
    "st patrick's day": _fixed(3, 17),
    "st. patrick's day": _fixed(3, 17),
    'st patrick day': _fixed(3, 17),
    'april fools day': _fixed(4, 1),
    "april fools' day": _fixed(4, 1),
    'april fool day': _fixed(4, 1),
    'earth day': _fixed(4, 22),
    'may day': _fixed(5, 1),
}

DYNAMIC_HOLIDAYS: Dict[str, HolidayCalculator] = {
    'easter': easter_sunday,
    'easter sunday': easter_sunday,
    'good friday': _good_friday,
    'easter monday': _easter_monday,
    'mothers day': _mothers_day,
    "mother's day": _mothers_day,
    'mother day': _mothers_day,
    'fathers day': _fathers_day,
    "father's day": _fathers_day,
    'father day': _fathers_day,
    'thanksgiving': _thanksgiving,
    'labor day': _labor_day,
    'labour day': _labor_day,
    'memorial day': _memorial_day,
}

ALL_HOLIDAYS: Dict[str, HolidayCalculator] = {**STATIC_HOLIDAYS, **DYNAMIC_HOLIDAYS}


def holiday_names() -> List[str]:
    """Holiday names, longest first so "christmas eve" is tried before "christmas" """
    return sorted(ALL_HOLIDAYS, key=len, reverse=True)
