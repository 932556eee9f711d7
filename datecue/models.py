#!/usr/bin/env python3
"""
Value Objects

Immutable values produced by a parse call:
- TimeOfDay: an hour/minute/second triple without a date
- ClockTime: an hour/minute pair used for configurable defaults
- Result: the cleaned text plus the extracted date and time
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from datecue.exceptions import MalformedTimeError


@dataclass(frozen=True)
class TimeOfDay:
    """A wall-clock time of day (no date, no time zone)"""
    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise MalformedTimeError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise MalformedTimeError(f"Minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise MalformedTimeError(f"Second out of range: {self.second}")

    def to_time(self) -> time:
        """Convert to a ``datetime.time``"""
        return time(self.hour, self.minute, self.second)

    def __str__(self):
        if self.second == 0:
            return f"{self.hour:02d}:{self.minute:02d}"
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class ClockTime:
    """Hour and minute pair, e.g. the default time for "in the morning" """
    hour: int
    minute: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise MalformedTimeError(f"Invalid clock time: {self.hour}:{self.minute}")

    def to_time_of_day(self) -> TimeOfDay:
        return TimeOfDay(self.hour, self.minute, 0)

    def __str__(self):
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class Result:
    """
    Outcome of a successful parse

    Attributes:
        text: Input text with the date and time references removed
        date: Resolved calendar date
        time: Extracted time of day, if any
    """
    text: str
    date: Optional[date]
    time: Optional[TimeOfDay] = None

    @property
    def datetime(self) -> Optional[datetime]:
        """Date and time combined, or None unless both are present"""
        if self.date is None or self.time is None:
            return None
        return datetime.combine(self.date, self.time.to_time())
