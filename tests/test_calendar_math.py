#!/usr/bin/env python3
"""
Tests for Calendar Arithmetic
"""

import unittest
from datetime import date, timedelta
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from datecue import calendar_math
from datecue.calendar_math import Period

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

# Friday
TODAY = date(2023, 3, 31)


class TestWeekdayTargeting(unittest.TestCase):
    """Test this/next/last weekday calculations"""

    def test_this_weekday_same_day(self):
        self.assertEqual(calendar_math.this_weekday(FRIDAY, TODAY), TODAY)

    def test_this_weekday_upcoming(self):
        self.assertEqual(calendar_math.this_weekday(SATURDAY, TODAY), date(2023, 4, 1))
        self.assertEqual(calendar_math.this_weekday(MONDAY, TODAY), date(2023, 4, 3))

    def test_next_weekday_same_day_adds_week(self):
        self.assertEqual(calendar_math.next_weekday(FRIDAY, TODAY), date(2023, 4, 7))

    def test_next_weekday_earlier_in_week(self):
        """Monday is earlier than Friday, so it lands in the following week"""
        self.assertEqual(calendar_math.next_weekday(MONDAY, TODAY), date(2023, 4, 10))

    def test_next_weekday_later_in_week(self):
        self.assertEqual(calendar_math.next_weekday(SATURDAY, TODAY), date(2023, 4, 1))

    def test_last_weekday_same_day_subtracts_week(self):
        self.assertEqual(calendar_math.last_weekday(FRIDAY, TODAY), date(2023, 3, 24))

    def test_last_weekday_earlier_in_week(self):
        self.assertEqual(calendar_math.last_weekday(MONDAY, TODAY), date(2023, 3, 27))

    def test_last_weekday_later_in_week(self):
        self.assertEqual(calendar_math.last_weekday(SATURDAY, TODAY), date(2023, 3, 18))

    def test_next_and_last_are_strict(self):
        """next_weekday is always after today, last_weekday always before"""
        for offset in range(14):
            today = TODAY + timedelta(days=offset)
            for target in range(7):
                upcoming = calendar_math.next_weekday(target, today)
                previous = calendar_math.last_weekday(target, today)
                self.assertGreater(upcoming, today)
                self.assertLess(previous, today)
                self.assertEqual(upcoming.weekday(), target)
                self.assertEqual(previous.weekday(), target)


class TestWeekBoundaries(unittest.TestCase):
    """Test week starts, weekends and mid week"""

    def test_next_week_start(self):
        self.assertEqual(calendar_math.next_week_start(TODAY), date(2023, 4, 3))

    def test_next_week_start_on_monday(self):
        self.assertEqual(calendar_math.next_week_start(date(2023, 3, 27)), date(2023, 4, 3))

    def test_last_week_start(self):
        self.assertEqual(calendar_math.last_week_start(TODAY), date(2023, 3, 20))

    def test_last_week_start_on_monday(self):
        self.assertEqual(calendar_math.last_week_start(date(2023, 3, 27)), date(2023, 3, 20))

    def test_this_weekend_on_weekday(self):
        self.assertEqual(calendar_math.this_weekend(TODAY), date(2023, 4, 1))
        self.assertEqual(calendar_math.this_weekend(date(2023, 3, 27)), date(2023, 4, 1))

    def test_this_weekend_on_saturday(self):
        self.assertEqual(calendar_math.this_weekend(date(2023, 4, 1)), date(2023, 4, 1))

    def test_this_weekend_on_sunday(self):
        """Sunday is already the weekend, not six days before Saturday"""
        self.assertEqual(calendar_math.this_weekend(date(2023, 4, 2)), date(2023, 4, 2))

    def test_end_of_week(self):
        self.assertEqual(calendar_math.end_of_week(TODAY), date(2023, 4, 2))
        self.assertEqual(calendar_math.end_of_week(date(2023, 4, 2)), date(2023, 4, 2))

    def test_mid_week_after_wednesday_looks_back(self):
        self.assertEqual(calendar_math.mid_week(TODAY), date(2023, 3, 29))
        self.assertEqual(calendar_math.mid_week(date(2023, 3, 30)), date(2023, 3, 29))

    def test_mid_week_before_wednesday(self):
        self.assertEqual(calendar_math.mid_week(date(2023, 3, 27)), date(2023, 3, 29))
        self.assertEqual(calendar_math.mid_week(date(2023, 3, 29)), date(2023, 3, 29))

    def test_mid_week_on_sunday(self):
        self.assertEqual(calendar_math.mid_week(date(2023, 4, 2)), date(2023, 4, 5))


class TestMonthQuarterYear(unittest.TestCase):
    """Test month, quarter and year boundaries"""

    def test_first_of_next_month_rolls_year(self):
        self.assertEqual(calendar_math.first_of_next_month(date(2023, 12, 15)), date(2024, 1, 1))

    def test_first_of_last_month_rolls_year(self):
        self.assertEqual(calendar_math.first_of_last_month(date(2024, 1, 31)), date(2023, 12, 1))

    def test_twelve_months_reach_next_year(self):
        current = date(2023, 1, 20)
        for _ in range(12):
            current = calendar_math.first_of_next_month(current)
        self.assertEqual(current, calendar_math.first_of_next_year(date(2023, 1, 20)))

    def test_end_of_month(self):
        self.assertEqual(calendar_math.end_of_month(TODAY), date(2023, 3, 31))
        self.assertEqual(calendar_math.end_of_month(date(2024, 2, 10)), date(2024, 2, 29))
        self.assertEqual(calendar_math.end_of_month(date(2023, 2, 10)), date(2023, 2, 28))

    def test_mid_month(self):
        self.assertEqual(calendar_math.mid_month(TODAY), date(2023, 3, 15))

    def test_quarters_in_first_quarter(self):
        self.assertEqual(calendar_math.next_quarter_start(TODAY), date(2023, 4, 1))
        self.assertEqual(calendar_math.last_quarter_start(TODAY), date(2022, 10, 1))

    def test_quarters_in_second_quarter(self):
        today = date(2023, 5, 10)
        self.assertEqual(calendar_math.next_quarter_start(today), date(2023, 7, 1))
        self.assertEqual(calendar_math.last_quarter_start(today), date(2023, 1, 1))

    def test_quarters_in_last_quarter(self):
        today = date(2023, 11, 5)
        self.assertEqual(calendar_math.next_quarter_start(today), date(2024, 1, 1))
        self.assertEqual(calendar_math.last_quarter_start(today), date(2023, 7, 1))

    def test_year_boundaries(self):
        self.assertEqual(calendar_math.first_of_next_year(TODAY), date(2024, 1, 1))
        self.assertEqual(calendar_math.first_of_last_year(TODAY), date(2022, 1, 1))
        self.assertEqual(calendar_math.end_of_year(TODAY), date(2023, 12, 31))


class TestRelativeSpans(unittest.TestCase):
    """Test day, week, month and year arithmetic"""

    def test_days_and_weeks(self):
        self.assertEqual(calendar_math.add_days(3, TODAY), date(2023, 4, 3))
        self.assertEqual(calendar_math.add_days(-3, TODAY), date(2023, 3, 28))
        self.assertEqual(calendar_math.add_weeks(2, TODAY), date(2023, 4, 14))

    def test_months_clamp_day(self):
        self.assertEqual(calendar_math.add_months(1, date(2023, 1, 31)), date(2023, 2, 28))
        self.assertEqual(calendar_math.sub_months(1, TODAY), date(2023, 2, 28))
        self.assertEqual(calendar_math.add_months(12, TODAY), date(2024, 3, 31))

    def test_years_from_leap_day(self):
        self.assertEqual(calendar_math.add_years(1, date(2024, 2, 29)), date(2025, 2, 28))
        self.assertEqual(calendar_math.sub_years(4, date(2024, 2, 29)), date(2020, 2, 29))


class TestKeywordResolution(unittest.TestCase):
    """Test period and offset dispatch"""

    def test_every_period_resolves(self):
        for period in Period:
            self.assertIsInstance(calendar_math.resolve_period(period, TODAY), date)

    def test_resolve_keyword_offset(self):
        self.assertEqual(calendar_math.resolve_keyword(-2, TODAY), date(2023, 3, 29))

    def test_resolve_keyword_period(self):
        self.assertEqual(calendar_math.resolve_keyword(Period.NEXT_QUARTER, TODAY), date(2023, 4, 1))

    def test_defaults_to_current_date(self):
        self.assertEqual(calendar_math.add_days(0), date.today())


if __name__ == '__main__':
    unittest.main()
