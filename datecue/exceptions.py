"""Exceptions raised while parsing date and time references."""


class ParseError(ValueError):
    """Base error for anything that stops a parse call"""


class InvalidInputError(ParseError):
    """Input text was None or empty"""


class NoDateFoundError(ParseError):
    """No date reference was found in the input text"""

    def __init__(self, text: str):
        super().__init__(f"No valid date reference found in '{text}'")
        self.text = text


class MalformedTimeError(ParseError):
    """A time expression produced an hour, minute or second out of range"""


class DateOutOfRangeError(ParseError):
    """A date reference resolves to a date before 0001-01-01 or after 9999-12-31"""


class ConfigurationError(ValueError):
    """A configuration value could not be understood"""
