import sys
from typing import Optional, Protocol, TextIO


class LogSink(Protocol):
    """
    Line-oriented destination with one entry point per log level.

    Each method receives already-styled fragments in output order
    (timestamp, context marker, then each argument) and writes
    them as a single line.
    """

    def write_debug_line(self, *fragments: str) -> None: ...

    def write_info_line(self, *fragments: str) -> None: ...

    def write_warn_line(self, *fragments: str) -> None: ...

    def write_error_line(self, *fragments: str) -> None: ...


class ConsoleSink:
    """
    Console sink that writes debug/info lines to stdout and
    warn/error lines to stderr.

    Fragments are joined with a single space. Write failures
    propagate to the caller.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        # Resolved per write so redirected/captured streams are honoured.
        self._stdout = stdout
        self._stderr = stderr

    def _write(self, stream: Optional[TextIO], default_name: str, fragments) -> None:
        target = stream if stream is not None else getattr(sys, default_name)
        target.write(" ".join(fragments) + "\n")
        target.flush()

    def write_debug_line(self, *fragments: str) -> None:
        self._write(self._stdout, "stdout", fragments)

    def write_info_line(self, *fragments: str) -> None:
        self._write(self._stdout, "stdout", fragments)

    def write_warn_line(self, *fragments: str) -> None:
        self._write(self._stderr, "stderr", fragments)

    def write_error_line(self, *fragments: str) -> None:
        self._write(self._stderr, "stderr", fragments)
