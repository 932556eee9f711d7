#!/usr/bin/env python3
"""
Lexicon

Static keyword tables and compiled patterns shared by the matchers.
Keywords map either to a day offset from today or to a Period tag; each
multi-word phrase is also accepted written without spaces ("nextweek").
"""

import re
from typing import Dict, Union

from datecue.calendar_math import Period

KeywordValue = Union[int, Period]

_PHRASES: Dict[str, KeywordValue] = {
    'yesterday': -1,
    'today': 0,
    'tomorrow': 1,
    'day after tomorrow': 2,
    'day before yesterday': -2,
    'next week': Period.NEXT_WEEK,
    'last week': Period.LAST_WEEK,
    'next month': Period.NEXT_MONTH,
    'last month': Period.LAST_MONTH,
    'next year': Period.NEXT_YEAR,
    'last year': Period.LAST_YEAR,
    'next quarter': Period.NEXT_QUARTER,
    'last quarter': Period.LAST_QUARTER,
    'this weekend': Period.THIS_WEEKEND,
    'end of week': Period.END_OF_WEEK,
    'end of month': Period.END_OF_MONTH,
    'end of year': Period.END_OF_YEAR,
    'mid week': Period.MID_WEEK,
    'mid month': Period.MID_MONTH,
}


def _with_compact_forms(phrases: Dict[str, KeywordValue]) -> Dict[str, KeywordValue]:
    keywords: Dict[str, KeywordValue] = {}
    for phrase, value in phrases.items():
        if ' ' in phrase:
            keywords[phrase.replace(' ', '')] = value
        keywords[phrase] = value
    return keywords


DATE_KEYWORDS: Dict[str, KeywordValue] = _with_compact_forms(_PHRASES)

# Multi-word phrases, matched as substrings of the text
COMPOUND_KEYWORDS: Dict[str, KeywordValue] = {k: v for k, v in DATE_KEYWORDS.items() if ' ' in k}

# Single tokens, matched word by word
SINGLE_KEYWORDS: Dict[str, KeywordValue] = {k: v for k, v in DATE_KEYWORDS.items() if ' ' not in k}

# Weekday mappings (Monday=0 .. Sunday=6)
WEEKDAYS: Dict[str, int] = {
    'monday': 0,
    'tuesday': 1,
    'wednesday': 2,
    'thursday': 3,
    'friday': 4,
    'saturday': 5,
    'sunday': 6
}

_WEEKDAY_ALTERNATION = '|'.join(WEEKDAYS)
_UNITS = r'(day|week|month|year)s?'

# "in 3 days", "in 2 months"
RELATIVE_FUTURE_PATTERN = re.compile(rf'\bin\s+(\d+)\s+{_UNITS}\b', re.IGNORECASE)

# "3 days ago", "1 year ago"
RELATIVE_PAST_PATTERN = re.compile(rf'\b(\d+)\s+{_UNITS}\s+ago\b', re.IGNORECASE)

# "this friday", "next monday", "last sunday"
WEEKDAY_QUALIFIER_PATTERN = re.compile(
    rf'\b(this|next|last)\s+({_WEEKDAY_ALTERNATION})\b', re.IGNORECASE
)

# "at 10", "@ 9:30pm", "at 14:30:15"
TIME_PATTERN = re.compile(
    r'(?:\bat\s*|(?<!\S)@\s*)(\d{1,2})(?!\d)(?::(\d{1,2}))?(?::(\d{1,2}))?(?:\s*(am|pm)\b)?',
    re.IGNORECASE
)

NOON_PATTERN = re.compile(r'\b(?:at\s+)?noon\b', re.IGNORECASE)
MIDNIGHT_PATTERN = re.compile(r'\b(?:at\s+)?midnight\b', re.IGNORECASE)
MORNING_PATTERN = re.compile(r'\bin\s+the\s+morning\b', re.IGNORECASE)
EVENING_PATTERN = re.compile(r'\bin\s+the\s+evening\b', re.IGNORECASE)
