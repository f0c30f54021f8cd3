from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from src.coral.logging import colors
from src.coral.logging.log_level import LogLevel, parse_log_level

TextStyle = Callable[[str], str]


@dataclass(frozen=True)
class LogLevelProfile:
    """
    Rank and styling for a single log level.

    Profiles are built once at import time and shared by every logger.
    """

    filter: int
    # Rank of the level. A message is shown when its rank is
    # greater than or equal to the logger's current rank.

    set_color: TextStyle
    # Foreground style applied to every fragment of an emitted line.

    set_background_color: TextStyle
    # Background style. Kept with the profile but not applied to output.

    key: LogLevel


# Styles resolve the colour function at call time so it can be patched.
LOG_LEVELS: Mapping[LogLevel, LogLevelProfile] = MappingProxyType({
    LogLevel.debug: LogLevelProfile(
        filter=0,
        set_color=lambda text: colors.cyan(text),
        set_background_color=lambda text: colors.bg_cyan(text),
        key=LogLevel.debug,
    ),
    LogLevel.info: LogLevelProfile(
        filter=1,
        set_color=lambda text: colors.white(text),
        set_background_color=lambda text: colors.bg_white(text),
        key=LogLevel.info,
    ),
    LogLevel.warn: LogLevelProfile(
        filter=2,
        set_color=lambda text: colors.yellow(text),
        set_background_color=lambda text: colors.bg_yellow(text),
        key=LogLevel.warn,
    ),
    LogLevel.error: LogLevelProfile(
        filter=3,
        set_color=lambda text: colors.red(text),
        set_background_color=lambda text: colors.bg_red(text),
        key=LogLevel.error,
    ),
})


def severity_rank(level) -> int:
    return LOG_LEVELS[parse_log_level(level)].filter


def check_level(current_level, level) -> bool:
    """
    True when a message at `level` passes a logger set to `current_level`.
    Equal ranks pass.
    """
    return severity_rank(level) >= severity_rank(current_level)


def style_for(level) -> Tuple[TextStyle, TextStyle]:
    profile = LOG_LEVELS[parse_log_level(level)]
    return profile.set_color, profile.set_background_color
