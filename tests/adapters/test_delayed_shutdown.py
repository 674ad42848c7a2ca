from __future__ import annotations

import gc
import signal
import threading

import pytest

from lib_log_relay.adapters.shutdown import DelayedShutdown
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _KillRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []
        self.done = threading.Event()

    def __call__(self, pid: int, signum: int) -> None:
        self.calls.append((pid, signum))
        self.done.set()


def test_start_is_one_shot() -> None:
    kill = _KillRecorder()
    task = DelayedShutdown(delay=0, kill=kill, sleep=lambda _: None, pid=4242)

    assert task.start() is True
    assert task.start() is False
    task.join(2.0)

    assert kill.calls == [(4242, signal.SIGHUP)]
    assert task.started


def test_timer_sleeps_for_the_grace_period_first() -> None:
    order: list[str] = []

    def _sleep(seconds: float) -> None:
        order.append(f"sleep {seconds}")

    def _kill(pid: int, signum: int) -> None:
        order.append("kill")

    task = DelayedShutdown(delay=1.5, kill=_kill, sleep=_sleep, pid=1)
    task.start()
    task.join(2.0)

    assert order == ["sleep 1.5", "kill"]


def test_concurrent_starts_create_a_single_timer() -> None:
    kill = _KillRecorder()
    task = DelayedShutdown(delay=0, kill=kill, sleep=lambda _: None, pid=1)
    results: list[bool] = []
    lock = threading.Lock()

    def _start() -> None:
        outcome = task.start()
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=_start) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    task.join(2.0)

    assert results.count(True) == 1
    assert len(kill.calls) == 1


def test_timer_outlives_its_owner() -> None:
    kill = _KillRecorder()
    gate = threading.Event()
    task = DelayedShutdown(delay=0, kill=kill, sleep=lambda _: gate.wait(2.0), pid=7)
    task.start()
    del task
    gc.collect()
    gate.set()

    assert kill.done.wait(2.0)
    assert kill.calls == [(7, signal.SIGHUP)]


def test_timer_thread_is_not_daemonic(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[threading.Thread] = []
    real_thread = threading.Thread

    class _TrackingThread(real_thread):  # type: ignore[misc, valid-type]
        def __init__(self, *args, **kwargs) -> None:
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr(threading, "Thread", _TrackingThread)
    task = DelayedShutdown(delay=0, kill=lambda pid, sig: None, sleep=lambda _: None, pid=1)
    task.start()
    task.join(2.0)

    assert created and created[0].daemon is False


def test_custom_signal_is_delivered() -> None:
    kill = _KillRecorder()
    task = DelayedShutdown(delay=0, signum=signal.SIGTERM, kill=kill, sleep=lambda _: None, pid=3)
    task.start()
    task.join(2.0)

    assert kill.calls == [(3, signal.SIGTERM)]


def test_negative_delay_is_rejected() -> None:
    with pytest.raises(ValueError):
        DelayedShutdown(delay=-1)


def test_not_started_until_requested() -> None:
    task = DelayedShutdown(delay=0, kill=lambda pid, sig: None, sleep=lambda _: None)

    assert task.started is False
    assert task.delay == 0
