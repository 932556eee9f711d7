#!/usr/bin/env python3
"""
Date Reference Matcher

Finds and removes one date reference, trying in order:
1. Holidays: "christmas", "next easter", "last thanksgiving"
2. Relative spans: "in 3 days", "2 months ago"
3. Qualified weekdays: "this friday", "next monday", "last sunday"
4. Multi-word keywords: "next week", "end of month"
5. Single-word keywords: "tomorrow", "nextweek"

The first stage that matches decides the date.
"""

import re
import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from datecue import calendar_math
from datecue.exceptions import DateOutOfRangeError
from datecue.holidays import ALL_HOLIDAYS, HolidayCalculator, holiday_names
from datecue.lexicon import (
    COMPOUND_KEYWORDS,
    SINGLE_KEYWORDS,
    RELATIVE_FUTURE_PATTERN,
    RELATIVE_PAST_PATTERN,
    WEEKDAY_QUALIFIER_PATTERN,
    WEEKDAYS,
    KeywordValue,
)
from datecue.time_matcher import remove_span

logger = logging.getLogger("datecue.date_matcher")

DateMatch = Tuple[str, date]

_NON_LETTERS = re.compile(r'[^a-z]')


def _holiday_pattern(name: str) -> Pattern:
    words = r'\s+'.join(re.escape(word) for word in name.split())
    return re.compile(rf'\b(?:(next|last)\s+)?{words}\b', re.IGNORECASE)


# Longest names first so "christmas eve" wins over "christmas"
_HOLIDAY_PATTERNS: List[Tuple[str, HolidayCalculator, Pattern]] = [
    (name, ALL_HOLIDAYS[name], _holiday_pattern(name)) for name in holiday_names()
]

_COMPOUND_PATTERNS: List[Tuple[str, Pattern]] = [
    (phrase, re.compile(re.escape(phrase), re.IGNORECASE)) for phrase in COMPOUND_KEYWORDS
]

_FUTURE_SPANS: Dict[str, Callable[[int, date], date]] = {
    'day': calendar_math.add_days,
    'week': calendar_math.add_weeks,
    'month': calendar_math.add_months,
    'year': calendar_math.add_years,
}

_PAST_SPANS: Dict[str, Callable[[int, date], date]] = {
    'day': lambda n, today: calendar_math.add_days(-n, today),
    'week': lambda n, today: calendar_math.add_weeks(-n, today),
    'month': calendar_math.sub_months,
    'year': calendar_math.sub_years,
}

_WEEKDAY_QUALIFIERS = {
    'this': calendar_math.this_weekday,
    'next': calendar_math.next_weekday,
    'last': calendar_math.last_weekday,
}


class DateMatcher:
    """Extracts one date reference from text"""

    def __init__(self, today: Optional[date] = None):
        """
        Args:
            today: Reference date; the current date is used when omitted
        """
        self._today = today

    @property
    def today(self) -> date:
        return self._today if self._today is not None else date.today()

    def match(self, text: str) -> Optional[DateMatch]:
        """
        Find a date reference in text

        Args:
            text: Input text (time expressions already removed)

        Returns:
            (remaining_text, date) or None if the text has no date reference
        """
        today = self.today

        for stage in (
            self.match_holiday,
            self.match_relative_span,
            self.match_weekday,
            self.match_compound_keyword,
            self.match_single_keyword,
        ):
            result = stage(text, today)
            if result is not None:
                logger.debug(f"{stage.__name__} matched '{text}' -> {result[1].isoformat()}")
                return result

        logger.debug(f"No date reference in '{text}'")
        return None

    def match_holiday(self, text: str, today: date) -> Optional[DateMatch]:
        """
        Match a holiday name, optionally qualified with "next" or "last"

        - bare name: this year's holiday, or next year's once it has passed
        - "next": this year's if still ahead, otherwise next year's
        - "last": this year's if already behind, otherwise last year's
        """
        for name, calculator, pattern in _HOLIDAY_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue

            qualifier = (match.group(1) or '').lower()
            this_year = calculator(today.year)

            if qualifier == 'next':
                holiday = this_year if this_year > today else calculator(today.year + 1)
            elif qualifier == 'last':
                holiday = this_year if this_year < today else calculator(today.year - 1)
            else:
                holiday = this_year if this_year >= today else calculator(today.year + 1)

            return remove_span(text, match.start(), match.end()), holiday

        return None

    def match_relative_span(self, text: str, today: date) -> Optional[DateMatch]:
        """
        Match "in N days/weeks/months/years" or "N ... ago"

        Raises:
            DateOutOfRangeError: If the span lands outside the calendar range
        """
        for pattern, spans, count_group, unit_group in (
            (RELATIVE_FUTURE_PATTERN, _FUTURE_SPANS, 1, 2),
            (RELATIVE_PAST_PATTERN, _PAST_SPANS, 1, 2),
        ):
            match = pattern.search(text)
            if match:
                count = int(match.group(count_group))
                unit = match.group(unit_group).lower()
                try:
                    resolved = spans[unit](count, today)
                except (OverflowError, ValueError) as e:
                    raise DateOutOfRangeError(f"'{match.group(0)}' is out of range: {e}") from e
                return remove_span(text, match.start(), match.end()), resolved

        return None

    def match_weekday(self, text: str, today: date) -> Optional[DateMatch]:
        """Match "this|next|last <weekday>" """
        match = WEEKDAY_QUALIFIER_PATTERN.search(text)
        if not match:
            return None

        qualifier, day_name = match.group(1).lower(), match.group(2).lower()
        target = _WEEKDAY_QUALIFIERS[qualifier](WEEKDAYS[day_name], today)
        return remove_span(text, match.start(), match.end()), target

    def match_compound_keyword(self, text: str, today: date) -> Optional[DateMatch]:
        """
        Match a multi-word keyword such as "next week"

        When several phrases occur, the earliest one wins; at the same start
        position the longer phrase wins.
        """
        best = None
        for phrase, pattern in _COMPOUND_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue
            key = (match.start(), -(match.end() - match.start()))
            if best is None or key < best[0]:
                best = (key, phrase, match)

        if best is None:
            return None

        _, phrase, match = best
        return remove_span(text, match.start(), match.end()), self._resolve(COMPOUND_KEYWORDS[phrase], today)

    def match_single_keyword(self, text: str, today: date) -> Optional[DateMatch]:
        """Match the first whitespace-separated word that is a keyword once punctuation is dropped"""
        words = text.split()

        for index, word in enumerate(words):
            clean_word = _NON_LETTERS.sub('', word.lower())
            if clean_word in SINGLE_KEYWORDS:
                remaining = words[:index] + words[index + 1:]
                return ' '.join(remaining).strip(), self._resolve(SINGLE_KEYWORDS[clean_word], today)

        return None

    @staticmethod
    def _resolve(value: KeywordValue, today: date) -> date:
        return calendar_math.resolve_keyword(value, today)
