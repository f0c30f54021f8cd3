from enum import Enum

from src.coral.logging.errors import InvalidLogLevelError


class LogLevel(str, Enum):
    """
    Closed set of log levels, ordered from most to least verbose.

    Rank and colour for each level live in log_level_profile.LOG_LEVELS.
    """

    debug = "debug"   # Developer diagnostics
    info = "info"     # Normal operation
    warn = "warn"     # Unexpected but recoverable
    error = "error"   # Operation failed


def parse_log_level(value) -> LogLevel:
    """
    Resolve a LogLevel or its string name.

    Anything outside the closed set raises InvalidLogLevelError;
    there is no fallback level.
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel(value.strip().lower())
        except ValueError:
            pass
    raise InvalidLogLevelError(value, [level.value for level in LogLevel])
