"""Event sender bridging a local writer with remote signal subscribers.

Purpose
-------
Tell remote parties about status transitions, required attention, backend
registration and log lines, while also rendering log lines through the local
writer. Provides the fatal path that logs a final message and then ends the
process after a grace period.

Contents
--------
* :data:`DEFAULT_LOG_LEVEL` - log level (0-6) passing every category.
* :data:`SESSION_MANAGER_SERVICE` / :data:`LOG_SERVICE` - default services
  resolved by :meth:`EventSender.create`.
* :class:`EventSender` - the signal-emission use case.

System Role
-----------
One instance per backend session. Sends are synchronous and best-effort:
delivery failures are logged by the signal helpers and never raised to the
caller. :meth:`EventSender.log_fatal` is the only path that leads to process
termination.
"""

from __future__ import annotations

import logging

from lib_log_relay.adapters.shutdown import DEFAULT_GRACE_SECONDS, DelayedShutdown
from lib_log_relay.application.ports.process import ShutdownTimerPort
from lib_log_relay.application.ports.transport import SignalTransportPort
from lib_log_relay.application.ports.writer import WriterPort
from lib_log_relay.application.signals import (
    AttentionRequiredSignal,
    LogSignal,
    RecipientSets,
    RegistrationRequestSignal,
    StatusChangeSignal,
)
from lib_log_relay.domain.attention import AttentionEvent, AttentionGroup, AttentionType
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup
from lib_log_relay.domain.status import StatusEvent, StatusMajor, StatusMinor

LOGGER = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = 6
MAX_LOG_LEVEL = 6
SESSION_MANAGER_SERVICE = "org.liblogrelay.sessions"
LOG_SERVICE = "org.liblogrelay.log"


class EventSender:
    """Send log, status, attention and registration signals for one session.

    Parameters
    ----------
    transport:
        :class:`SignalTransportPort` used for every delivery.
    log_group:
        Group used by the convenience helpers and the fatal path.
    session_token:
        Token stamped on every outgoing log event.
    writer:
        Optional local :class:`WriterPort`; ``None`` disables local output.
    recipients:
        Per-kind target sets. Frozen by the constructor.
    log_level:
        Filter threshold 0-6; see :attr:`LogCategory.min_log_level`.
    fatal_grace_seconds:
        Delay between the fatal log line and process termination.
    shutdown:
        Optional termination timer; defaults to :class:`DelayedShutdown`.

    Examples
    --------
    >>> from lib_log_relay.adapters.signals import InMemorySignalTransport
    >>> transport = InMemorySignalTransport()
    >>> sender = EventSender.create(transport, LogGroup.BACKENDPROC, "tok-1")
    >>> sender.send_status_change(StatusMajor.CONNECTION, StatusMinor.CONN_CONNECTING)
    >>> sender.get_last_status_change().minor.name
    'CONN_CONNECTING'
    >>> [item.signal_name for item in transport.delivered]
    ['StatusChange', 'StatusChange']
    """

    def __init__(
        self,
        transport: SignalTransportPort,
        log_group: LogGroup,
        session_token: str,
        writer: WriterPort | None = None,
        *,
        recipients: RecipientSets,
        log_level: int = DEFAULT_LOG_LEVEL,
        fatal_grace_seconds: float = DEFAULT_GRACE_SECONDS,
        shutdown: ShutdownTimerPort | None = None,
    ) -> None:
        recipients.freeze()
        self._transport = transport
        self._log_group = LogGroup(log_group)
        self._session_token = session_token
        self._writer = writer
        self._recipients = recipients
        self._log_level = _validate_log_level(log_level)
        self._shutdown = shutdown if shutdown is not None else DelayedShutdown(delay=fatal_grace_seconds)
        self._sig_log = LogSignal(transport, recipients)
        self._sig_status = StatusChangeSignal(transport, recipients)
        self._sig_attention = AttentionRequiredSignal(transport, recipients)
        self._sig_registration = RegistrationRequestSignal(transport, recipients)
        self._last_logged: LogEvent | None = None

    @classmethod
    def create(
        cls,
        transport: SignalTransportPort,
        log_group: LogGroup,
        session_token: str,
        writer: WriterPort | None = None,
        *,
        session_manager_service: str = SESSION_MANAGER_SERVICE,
        log_service: str = LOG_SERVICE,
        log_level: int = DEFAULT_LOG_LEVEL,
        fatal_grace_seconds: float = DEFAULT_GRACE_SECONDS,
        shutdown: ShutdownTimerPort | None = None,
    ) -> "EventSender":
        """Resolve the default recipients through ``transport`` and build a sender.

        Status, attention and log signals go to the session manager and the
        log service; registration requests go to the session manager only.
        """

        recipients = RecipientSets.defaults(
            session_manager=transport.resolve_address(session_manager_service),
            log_service=transport.resolve_address(log_service),
        )
        return cls(
            transport,
            log_group,
            session_token,
            writer,
            recipients=recipients,
            log_level=log_level,
            fatal_grace_seconds=fatal_grace_seconds,
            shutdown=shutdown,
        )

    @property
    def session_token(self) -> str:
        return self._session_token

    @property
    def log_group(self) -> LogGroup:
        return self._log_group

    @property
    def writer(self) -> WriterPort | None:
        return self._writer

    @property
    def recipients(self) -> RecipientSets:
        return self._recipients

    @property
    def log_level(self) -> int:
        return self._log_level

    def set_log_level(self, level: int) -> None:
        self._log_level = _validate_log_level(level)

    @property
    def shutdown_started(self) -> bool:
        return self._shutdown.started

    def send_status_change(
        self,
        status: StatusEvent | StatusMajor,
        minor: StatusMinor | None = None,
        message: str = "",
    ) -> None:
        """Notify subscribers of a status transition.

        Accepts either a ready :class:`StatusEvent` or the raw
        ``(major, minor, message)`` triple.
        """

        if isinstance(status, StatusEvent):
            if minor is not None or message:
                raise TypeError("pass either a StatusEvent or major/minor/message, not both")
            event = status
        else:
            if minor is None:
                raise TypeError("minor status is required together with a major status")
            event = StatusEvent(status, minor, message)
        self._sig_status.send(event)

    def get_last_status_change(self) -> StatusEvent | None:
        """Return the most recently sent status event, or ``None``."""

        return self._sig_status.last

    def send_attention_required(self, attention_type: AttentionType, group: AttentionGroup, message: str) -> None:
        self._sig_attention.send(AttentionEvent(attention_type, group, message))

    def send_registration_request(self, address: str, token: str, pid: int) -> bool:
        """Ask the session manager to register this backend; ``False`` on delivery failure."""

        return self._sig_registration.send(address, token, pid)

    def log(self, event: LogEvent, duplicate_check: bool = False) -> None:
        """Write ``event`` locally and send it as a ``Log`` signal.

        The event is re-tagged with this session's token first. Events below
        the configured log level are dropped; with ``duplicate_check`` an event
        identical to the previously logged one is dropped as well.
        """

        tagged = event.with_session_token(self._session_token)
        if tagged.category.min_log_level > self._log_level:
            return
        if duplicate_check and tagged == self._last_logged:
            LOGGER.debug("suppressed duplicate log event: %s", tagged.message)
            return
        self._last_logged = tagged
        try:
            if self._writer is not None:
                self._writer.write_event(tagged)
        finally:
            # The remote channel still gets the event when local output fails.
            self._sig_log.send(tagged)

    def debug(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.DEBUG, message, duplicate_check)

    def verb2(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.VERB2, message, duplicate_check)

    def verb1(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.VERB1, message, duplicate_check)

    def info(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.INFO, message, duplicate_check)

    def warn(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.WARN, message, duplicate_check)

    def error(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.ERROR, message, duplicate_check)

    def critical(self, message: str, duplicate_check: bool = False) -> None:
        self._log_with_group(LogCategory.CRIT, message, duplicate_check)

    def log_fatal(self, message: str) -> None:
        """Log ``message`` as FATAL, then schedule process termination.

        A failing local writer is logged on the diagnostic logger; the ``Log``
        signal is still sent and the termination timer still starts. A second
        call while the timer is pending only logs. Returns once the timer is
        scheduled; the process ends after the grace period.
        """

        try:
            self.log(LogEvent(self._log_group, LogCategory.FATAL, message))
        except Exception:
            LOGGER.exception("local writer failed on the fatal path")
        finally:
            if not self._shutdown.start():
                LOGGER.debug("process termination already scheduled")

    def _log_with_group(self, category: LogCategory, message: str, duplicate_check: bool) -> None:
        self.log(LogEvent(self._log_group, category, message), duplicate_check)


def _validate_log_level(level: int) -> int:
    if not 0 <= int(level) <= MAX_LOG_LEVEL:
        raise ValueError(f"log level must be between 0 and {MAX_LOG_LEVEL}, got {level!r}")
    return int(level)


__all__ = ["DEFAULT_LOG_LEVEL", "EventSender", "LOG_SERVICE", "SESSION_MANAGER_SERVICE"]
