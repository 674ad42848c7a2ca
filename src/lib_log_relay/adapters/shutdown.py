"""Background task that terminates the process after a grace period.

Purpose
-------
Give in-flight notifications (delivered asynchronously by the transport) a
short window to leave the process before a fatal condition ends it.

Contents
--------
* :data:`DEFAULT_GRACE_SECONDS` - default delay before termination.
* :class:`DelayedShutdown` - start-once, non-cancellable termination timer.

System Role
-----------
Owned by :class:`lib_log_relay.application.use_cases.event_sender.EventSender`
and started from its fatal path. The worker thread is non-daemonic and keeps
no reference to its owner, so it runs to completion even when the sender is
discarded first.
"""

from __future__ import annotations

import logging
import os
import signal
import threading
import time
from collections.abc import Callable

LOGGER = logging.getLogger(__name__)

DEFAULT_GRACE_SECONDS = 3.0


class DelayedShutdown:
    """Sleep for ``delay`` seconds, then send ``signum`` to this process.

    Examples
    --------
    >>> sent = []
    >>> task = DelayedShutdown(delay=0, kill=lambda pid, sig: sent.append(sig), sleep=lambda _: None)
    >>> task.start(), task.start()
    (True, False)
    >>> task.join(1.0)
    >>> len(sent)
    1
    """

    def __init__(
        self,
        *,
        delay: float = DEFAULT_GRACE_SECONDS,
        signum: int = signal.SIGHUP,
        kill: Callable[[int, int], None] = os.kill,
        sleep: Callable[[float], None] = time.sleep,
        pid: int | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay
        self._signum = signum
        self._kill = kill
        self._sleep = sleep
        self._pid = pid
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def started(self) -> bool:
        return self._thread is not None

    def start(self) -> bool:
        """Start the timer; return ``False`` when it was already running.

        There is no ``cancel``: once started the process will be terminated.
        """

        with self._lock:
            if self._thread is not None:
                return False
            pid = self._pid if self._pid is not None else os.getpid()
            self._thread = threading.Thread(
                target=_terminate_later,
                args=(self._delay, pid, self._signum, self._kill, self._sleep),
                name="lib_log_relay-delayed-shutdown",
                daemon=False,
            )
            self._thread.start()
            LOGGER.debug("delayed shutdown scheduled in %.1fs (signal %d)", self._delay, self._signum)
            return True

    def join(self, timeout: float | None = None) -> None:
        """Wait for the timer thread; intended for tests with stubbed ``kill``."""

        thread = self._thread
        if thread is not None:
            thread.join(timeout)


def _terminate_later(
    delay: float,
    pid: int,
    signum: int,
    kill: Callable[[int, int], None],
    sleep: Callable[[float], None],
) -> None:
    sleep(delay)
    kill(pid, signum)


__all__ = ["DEFAULT_GRACE_SECONDS", "DelayedShutdown"]
