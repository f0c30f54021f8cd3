from datetime import datetime
from typing import Protocol

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Clock(Protocol):
    """Source of the current time for emitted lines."""

    def now(self) -> datetime: ...


class SystemClock:
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(moment: datetime) -> str:
    # Zero-padded, 24-hour, local time.
    return moment.strftime(TIMESTAMP_FORMAT)
