#!/usr/bin/env python3
"""
Natural Date Parser

Extracts a date, and optionally a time of day, from short free text:
- "wash car tomorrow"             -> "wash car", tomorrow
- "meeting next quarter at 10am"  -> "meeting", first day of next quarter, 10:00
- "dinner today in the evening"   -> "dinner", today, 20:00 (configurable)

The time is extracted first, then the date from what is left.
"""

import logging
from datetime import date
from typing import Optional

from datecue.config import Configuration
from datecue.date_matcher import DateMatcher
from datecue.exceptions import InvalidInputError, NoDateFoundError
from datecue.models import Result
from datecue.time_matcher import TimeMatcher

logger = logging.getLogger("datecue.parser")


class DateParser:
    """Parse natural language date and time references out of text"""

    def __init__(self, config: Optional[Configuration] = None, today: Optional[date] = None,
                 default_to_today: bool = False):
        """
        Initialize the parser

        Args:
            config: Settings for "in the morning"/"in the evening"; the shared
                configuration is read on every call when omitted
            today: Fixed reference date; the current date when omitted
            default_to_today: Return today's date with the text unchanged
                instead of raising NoDateFoundError when no date is found
        """
        self.time_matcher = TimeMatcher(config)
        self.date_matcher = DateMatcher(today)
        self.default_to_today = default_to_today

    def parse(self, text: Optional[str]) -> Result:
        """
        Parse a date (and time) reference out of text

        Args:
            text: Text containing a date reference

        Returns:
            Result with the cleaned text, date and optional time

        Raises:
            InvalidInputError: If text is None or empty
            NoDateFoundError: If no date reference is found and
                default_to_today is off
            MalformedTimeError: If a numeric time is out of range
        """
        if text is None:
            raise InvalidInputError("Cannot parse None input")
        if not text:
            raise InvalidInputError("Cannot parse empty input")

        time_of_day, remaining = self.time_matcher.extract(text)

        matched = self.date_matcher.match(remaining)
        if matched is None:
            if not self.default_to_today:
                raise NoDateFoundError(remaining)
            logger.debug(f"No date in '{text}', defaulting to today")
            matched = (remaining, self.date_matcher.today)

        clean_text, resolved = matched
        result = Result(clean_text, resolved, time_of_day)
        logger.debug(f"Parsed '{text}' -> {result!r}")
        return result


def parse(text: Optional[str], today: Optional[date] = None) -> Result:
    """
    Convenience function to parse text with the shared configuration

    Args:
        text: Text containing a date reference
        today: Fixed reference date; the current date when omitted

    Returns:
        Result with the cleaned text, date and optional time
    """
    return DateParser(today=today).parse(text)
