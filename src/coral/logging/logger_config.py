"""
Module: logger_config.py
Location: src/coral/logging/

Environment-driven defaults for loggers.

CORAL_LOG_LEVEL   default threshold (debug, info, warn, error); unset means info
CORAL_COLOR       0/false/no/off disables ANSI styling
NO_COLOR          any non-empty value disables ANSI styling
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.coral.logging.log_level import LogLevel, parse_log_level
from src.coral.logging.logger import Logger, create_logger

LOG_LEVEL_ENV = "CORAL_LOG_LEVEL"
COLOR_ENV = "CORAL_COLOR"
NO_COLOR_ENV = "NO_COLOR"

DEFAULT_LOG_LEVEL = LogLevel.info

_FALSE_VALUES = ("0", "false", "no", "off")


def env_flag(environ: Mapping[str, str], name: str, default: str = "1") -> bool:
    v = (environ.get(name) or default).strip().lower()
    return v not in _FALSE_VALUES


@dataclass(frozen=True)
class LoggerConfig:
    """Threshold and colour settings shared by loggers built from the environment."""

    level: LogLevel = DEFAULT_LOG_LEVEL
    color: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Read settings from `environ` (os.environ by default).

        An unknown CORAL_LOG_LEVEL raises InvalidLogLevelError instead
        of falling back to the default.
        """
        if environ is None:
            environ = os.environ

        raw_level = (environ.get(LOG_LEVEL_ENV) or "").strip()
        level = parse_log_level(raw_level) if raw_level else DEFAULT_LOG_LEVEL

        color = env_flag(environ, COLOR_ENV) and not environ.get(NO_COLOR_ENV)
        return cls(level=level, color=color)


def load_logger_config(environ: Optional[Mapping[str, str]] = None) -> LoggerConfig:
    return LoggerConfig.from_env(environ)


def create_logger_from_env(context: str, environ: Optional[Mapping[str, str]] = None) -> Logger:
    config = load_logger_config(environ)
    return create_logger(context, config.level, color=config.color)
