#!/usr/bin/env python3
"""
Time-of-Day Matcher

Finds and removes a single time expression:
- Words: "noon", "midnight", "in the morning", "in the evening"
- Numbers: "at 10", "at 9:30pm", "@ 14:30:15"
"""

import logging
from typing import Optional, Tuple

from datecue.config import Configuration, get_configuration
from datecue.lexicon import (
    EVENING_PATTERN,
    MIDNIGHT_PATTERN,
    MORNING_PATTERN,
    NOON_PATTERN,
    TIME_PATTERN,
)
from datecue.models import TimeOfDay

logger = logging.getLogger("datecue.time_matcher")


def remove_span(text: str, start: int, end: int) -> str:
    """Cut text[start:end] out and strip the ends"""
    return (text[:start] + text[end:]).strip()


class TimeMatcher:
    """Extracts at most one time of day from text"""

    def __init__(self, config: Optional[Configuration] = None):
        """
        Args:
            config: Settings for "morning"/"evening"; the shared
                configuration is used when omitted
        """
        self._config = config

    @property
    def config(self) -> Configuration:
        return self._config if self._config is not None else get_configuration()

    def extract(self, text: str) -> Tuple[Optional[TimeOfDay], str]:
        """
        Extract a time expression from text

        Args:
            text: Input text

        Returns:
            (time, remaining_text); time is None and the text is returned
            unchanged when nothing matched

        Raises:
            MalformedTimeError: If a numeric time is out of range
            ConfigurationError: If "morning"/"evening" is used and the
                shared configuration cannot be built
        """
        match = NOON_PATTERN.search(text)
        if match:
            return self._found(TimeOfDay(12, 0, 0), text, match)

        match = MIDNIGHT_PATTERN.search(text)
        if match:
            return self._found(TimeOfDay(0, 0, 0), text, match)

        match = MORNING_PATTERN.search(text)
        if match:
            morning, _ = self.config.snapshot()
            return self._found(morning.to_time_of_day(), text, match)

        match = EVENING_PATTERN.search(text)
        if match:
            _, evening = self.config.snapshot()
            return self._found(evening.to_time_of_day(), text, match)

        match = TIME_PATTERN.search(text)
        if match:
            return self._found(self._numeric_time(match), text, match)

        return None, text

    @staticmethod
    def _numeric_time(match) -> TimeOfDay:
        hour_str, minute_str, second_str, meridiem = match.groups()
        hour = int(hour_str)
        minute = int(minute_str) if minute_str else 0
        second = int(second_str) if second_str else 0

        # Without am/pm the hour is read as 24-hour time
        if meridiem:
            meridiem = meridiem.lower()
            if meridiem == 'pm' and hour < 12:
                hour += 12
            elif meridiem == 'am' and hour == 12:
                hour = 0

        return TimeOfDay(hour, minute, second)

    @staticmethod
    def _found(time_of_day: TimeOfDay, text: str, match) -> Tuple[TimeOfDay, str]:
        logger.debug(f"Matched time '{match.group(0)}' -> {time_of_day}")
        return time_of_day, remove_span(text, match.start(), match.end())
