"""Writer rendering log lines into an arbitrary text stream.

Purpose
-------
Serve terminals, pipes and files alike: anything with ``write``/``flush``.

Contents
--------
* :data:`TIMESTAMP_FORMAT` - ``strftime`` pattern for line prefixes.
* :class:`StreamWriter` - concrete :class:`LogWriter`.

Line layout
-----------
``[<timestamp> ]<colour_start>[<prepend> ]<body><colour_end>`` followed by a
newline; the metadata line, when present, uses the same layout.
"""

from __future__ import annotations

from contextlib import suppress
from types import TracebackType
from typing import TextIO

from lib_log_relay.adapters.clock import SystemClock
from lib_log_relay.application.ports.time import ClockPort

from .base import LogWriter

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class StreamWriter(LogWriter):
    """Write formatted log lines to ``stream``.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> writer = StreamWriter(buffer)
    >>> writer.enable_timestamp(False)
    >>> writer.add_meta("user", "alice")
    >>> writer.write("connected")
    >>> buffer.getvalue()
    'user=alice\\nconnected\\n'
    """

    def __init__(self, stream: TextIO, *, clock: ClockPort | None = None) -> None:
        super().__init__()
        self._stream = stream
        self._clock = clock or SystemClock()

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None:
        with self._consuming_metadata():
            stamp = self._timestamp_prefix()
            meta_line = self._meta_line()
            if meta_line:
                self._emit(f"{stamp}{colour_start}{self._meta_line_prefix()}{meta_line}{colour_end}")
            self._emit(f"{stamp}{colour_start}{self._message_prefix()}{data}{colour_end}")

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        """Flush the stream; the caller keeps ownership and closes it."""

        self.flush()

    def __enter__(self) -> "StreamWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        stream = getattr(self, "_stream", None)
        if stream is None or getattr(stream, "closed", False):
            return
        with suppress(OSError, ValueError):
            stream.flush()

    def _timestamp_prefix(self) -> str:
        if not self.timestamp_enabled:
            return ""
        return self._clock.now().strftime(TIMESTAMP_FORMAT) + " "

    def _emit(self, line: str) -> None:
        self._stream.write(line + "\n")


__all__ = ["StreamWriter", "TIMESTAMP_FORMAT"]
