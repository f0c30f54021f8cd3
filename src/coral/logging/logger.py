"""
Module: logger.py
Location: src/coral/logging/

Leveled console logger.

A Logger is bound to a fixed context label and a mutable threshold.
It exposes debug(), info(), warn() and error(); each one checks the
threshold at call time, so set_log_level() affects every later call.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from src.coral.logging.clock import Clock, SystemClock, format_timestamp
from src.coral.logging.colors import strip_style
from src.coral.logging.console_sink import ConsoleSink, LogSink
from src.coral.logging.context import derive_context_string
from src.coral.logging.log_level import LogLevel, parse_log_level
from src.coral.logging.log_level_profile import LOG_LEVELS, LogLevelProfile, check_level


class Logger:
    """
    Console logger bound to one context.

    The per-level emit methods are attached in __init__ from LOG_LEVELS,
    one closure per level, each holding a reference to this logger
    rather than a copy of its threshold.
    """

    # Attached per instance in __init__.
    debug: Callable[..., None]
    info: Callable[..., None]
    warn: Callable[..., None]
    error: Callable[..., None]

    def __init__(
        self,
        context: str,
        current_level: LogLevel,
        *,
        sink: Optional[LogSink] = None,
        clock: Optional[Clock] = None,
        color: bool = True,
    ):
        self.current_level = parse_log_level(current_level)
        self.context = context
        self.color = color
        # When False, styled fragments are stripped before reaching the sink.

        self._label = derive_context_string(context)
        self._sink = sink if sink is not None else ConsoleSink()
        self._clock = clock if clock is not None else SystemClock()

        for level, profile in LOG_LEVELS.items():
            setattr(self, level.value, self._make_emitter(profile))

    @property
    def label(self) -> str:
        return self._label

    def _make_emitter(self, profile: LogLevelProfile) -> Callable[..., None]:
        level = profile.key
        write_line = getattr(self._sink, f"write_{level.value}_line")

        def style(text: str) -> str:
            styled = profile.set_color(text)
            return styled if self.color else strip_style(styled)

        def emit(*args: Any) -> None:
            if not check_level(self.current_level, level):
                return

            write_line(
                style(format_timestamp(self._clock.now())),
                style(f"| {self._label}"),
                *(style(f"{arg}") for arg in args),
            )

        emit.__name__ = level.value
        emit.__doc__ = f"Write a {level.value} line when the threshold allows it."
        return emit

    def __repr__(self) -> str:
        return f"Logger(context={self.context!r}, current_level={self.current_level.value!r})"


def create_logger(
    context: str,
    current_level: LogLevel,
    *,
    sink: Optional[LogSink] = None,
    clock: Optional[Clock] = None,
    color: bool = True,
) -> Logger:
    """
    Build a logger for `context` that shows messages at `current_level`
    and above.

    The context label is derived once here; use a new logger to change it.
    """
    return Logger(context, current_level, sink=sink, clock=clock, color=color)


def set_log_level(log: Logger, level: LogLevel) -> Logger:
    """
    Change the threshold of `log` in place and return it.

    The level is validated before the logger is touched.
    """
    log.current_level = parse_log_level(level)
    return log
