"""
datecue: pull date and time references out of short free-text notes.

    >>> result = datecue.parse("wash car tomorrow")
    >>> result.text
    'wash car'
"""

from datecue.config import Configuration, configure, get_configuration, load_config, reset_configuration
from datecue.exceptions import (
    ConfigurationError,
    DateOutOfRangeError,
    InvalidInputError,
    MalformedTimeError,
    NoDateFoundError,
    ParseError,
)
from datecue.models import ClockTime, Result, TimeOfDay
from datecue.parser import DateParser, parse

__version__ = "0.1.0"

__all__ = [
    "ClockTime",
    "Configuration",
    "ConfigurationError",
    "DateOutOfRangeError",
    "DateParser",
    "InvalidInputError",
    "MalformedTimeError",
    "NoDateFoundError",
    "ParseError",
    "Result",
    "TimeOfDay",
    "configure",
    "get_configuration",
    "load_config",
    "parse",
    "reset_configuration",
]
