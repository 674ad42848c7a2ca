"""System clock adapter used for timestamp prefixes."""

from __future__ import annotations

from datetime import datetime

from lib_log_relay.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Return the current local time, timezone-aware."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


__all__ = ["SystemClock"]
