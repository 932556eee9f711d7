"""Configuration for datecue: default times for "in the morning" / "in the evening"."""

import os
import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Tuple

from datecue.exceptions import ConfigurationError, MalformedTimeError
from datecue.models import ClockTime

logger = logging.getLogger("datecue.config")

DEFAULT_MORNING_TIME = ClockTime(8, 0)
DEFAULT_EVENING_TIME = ClockTime(20, 0)

MORNING_TIME_VAR = "DATECUE_MORNING_TIME"
EVENING_TIME_VAR = "DATECUE_EVENING_TIME"


def parse_clock_time(value: str) -> ClockTime:
    """Parse an "HH:MM" (or "HH") string into a ClockTime."""
    hour_str, _, minute_str = value.strip().partition(':')
    try:
        return ClockTime(int(hour_str), int(minute_str) if minute_str else 0)
    except (ValueError, MalformedTimeError) as e:
        raise ConfigurationError(f"Invalid time '{value}', expected HH:MM") from e


def _coerce(value) -> ClockTime:
    if isinstance(value, ClockTime):
        return value
    if isinstance(value, str):
        return parse_clock_time(value)
    if isinstance(value, dict):
        try:
            return ClockTime(int(value['hour']), int(value.get('minute', 0)))
        except (KeyError, TypeError, ValueError, MalformedTimeError) as e:
            raise ConfigurationError(f"Invalid time setting: {value!r}") from e
    if isinstance(value, tuple) and len(value) == 2:
        try:
            return ClockTime(int(value[0]), int(value[1]))
        except (TypeError, ValueError, MalformedTimeError) as e:
            raise ConfigurationError(f"Invalid time setting: {value!r}") from e
    raise ConfigurationError(f"Unsupported time setting: {value!r}")


class Configuration:
    """Mutable parser settings, safe to read while another thread reconfigures"""

    def __init__(self, morning_time=DEFAULT_MORNING_TIME, evening_time=DEFAULT_EVENING_TIME):
        """
        Args:
            morning_time: ClockTime, "HH:MM", {"hour": h, "minute": m} or (h, m)
            evening_time: Same forms as morning_time
        """
        self._lock = threading.RLock()
        self._morning_time = _coerce(morning_time)
        self._evening_time = _coerce(evening_time)

    @property
    def morning_time(self) -> ClockTime:
        with self._lock:
            return self._morning_time

    @morning_time.setter
    def morning_time(self, value):
        clock_time = _coerce(value)
        with self._lock:
            self._morning_time = clock_time

    @property
    def evening_time(self) -> ClockTime:
        with self._lock:
            return self._evening_time

    @evening_time.setter
    def evening_time(self, value):
        clock_time = _coerce(value)
        with self._lock:
            self._evening_time = clock_time

    def snapshot(self) -> Tuple[ClockTime, ClockTime]:
        """Read (morning_time, evening_time) together."""
        with self._lock:
            return self._morning_time, self._evening_time

    def update(self, mutator: Callable[["Configuration"], None]) -> "Configuration":
        """Apply ``mutator`` to this configuration while holding its lock."""
        with self._lock:
            mutator(self)
        return self

    def reset(self):
        with self._lock:
            self._morning_time = DEFAULT_MORNING_TIME
            self._evening_time = DEFAULT_EVENING_TIME

    @classmethod
    def from_env(cls) -> "Configuration":
        """
        Create a Configuration from environment variables

        Reads DATECUE_MORNING_TIME and DATECUE_EVENING_TIME ("HH:MM"); unset
        variables fall back to the defaults.

        Raises:
            ConfigurationError: If a variable holds an invalid time
        """
        morning = os.environ.get(MORNING_TIME_VAR)
        evening = os.environ.get(EVENING_TIME_VAR)
        return cls(
            morning_time=morning if morning else DEFAULT_MORNING_TIME,
            evening_time=evening if evening else DEFAULT_EVENING_TIME,
        )

    def __repr__(self):
        morning, evening = self.snapshot()
        return f"Configuration(morning_time={morning}, evening_time={evening})"


_configuration: Optional[Configuration] = None
_configuration_lock = threading.Lock()


def get_configuration() -> Configuration:
    """Return the shared configuration, creating it from the environment on first use."""
    global _configuration
    if _configuration is None:
        with _configuration_lock:
            if _configuration is None:
                _configuration = Configuration.from_env()
                logger.debug(f"Created shared configuration: {_configuration}")
    return _configuration


def configure(mutator: Callable[[Configuration], None]) -> Configuration:
    """
    Change the shared configuration

    Example:
        configure(lambda c: setattr(c, "morning_time", "07:30"))
    """
    config = get_configuration().update(mutator)
    logger.debug(f"Configuration updated: {config}")
    return config


def reset_configuration():
    """Restore the shared configuration to its defaults."""
    get_configuration().reset()


def load_env_file(filepath) -> bool:
    """Load KEY=VALUE lines from a file into the environment."""
    try:
        with open(filepath, 'r') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if not line or line.startswith('#'):
                    continue
                # Split on the first equals sign
                if '=' in line:
                    key, value = line.split('=', 1)
                    os.environ[key.strip()] = value.strip()
        return True
    except OSError as e:
        logger.error(f"Error loading environment variables: {e}")
        return False


def load_config(filepath=None) -> Configuration:
    """
    Load settings from an env file and rebuild the shared configuration

    Args:
        filepath: Settings file; defaults to config/settings.env in the
            current directory

    Returns:
        The shared Configuration, updated from the environment
    """
    settings_file = Path(filepath) if filepath else Path.cwd() / "config" / "settings.env"

    if settings_file.exists():
        load_env_file(settings_file)
    else:
        logger.debug(f"Config file not found: {settings_file}, using environment and defaults")

    loaded = Configuration.from_env()
    morning, evening = loaded.snapshot()

    def apply(config):
        config.morning_time = morning
        config.evening_time = evening

    return configure(apply)
