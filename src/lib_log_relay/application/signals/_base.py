"""Signal kinds, per-kind recipient sets and the shared delivery routine.

Purpose
-------
Keep recipient membership independent per notification kind and make every
delivery best-effort: failures are logged on the diagnostic logger and turned
into a ``False`` result, never into an exception.

Contents
--------
* :class:`SignalKind` - ``Log``, ``StatusChange``, ``AttentionRequired``,
  ``RegistrationRequest``.
* :class:`RecipientSets` - append-only target lists, frozen after setup.
* :class:`Signal` - base class sending one payload to every target of a kind.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, ClassVar, Mapping

from lib_log_relay.application.ports.transport import SignalTransportPort

LOGGER = logging.getLogger(__name__)


class SignalKind(Enum):
    LOG = "Log"
    STATUS_CHANGE = "StatusChange"
    ATTENTION_REQUIRED = "AttentionRequired"
    REGISTRATION_REQUEST = "RegistrationRequest"

    @property
    def signal_name(self) -> str:
        return self.value


class RecipientSets:
    """Target addresses per :class:`SignalKind`.

    Examples
    --------
    >>> sets = RecipientSets.defaults(session_manager=":1.1", log_service=":1.2")
    >>> sets.targets(SignalKind.STATUS_CHANGE)
    (':1.1', ':1.2')
    >>> sets.targets(SignalKind.REGISTRATION_REQUEST)
    (':1.1',)
    """

    def __init__(self) -> None:
        self._targets: dict[SignalKind, tuple[str, ...]] = {kind: () for kind in SignalKind}
        self._frozen = False

    @classmethod
    def defaults(cls, *, session_manager: str, log_service: str) -> "RecipientSets":
        """Status, attention and log go to both services; registration only to the session manager."""

        sets = cls()
        for kind in (SignalKind.LOG, SignalKind.STATUS_CHANGE, SignalKind.ATTENTION_REQUIRED):
            sets.add(kind, session_manager)
            sets.add(kind, log_service)
        sets.add(SignalKind.REGISTRATION_REQUEST, session_manager)
        return sets

    def add(self, kind: SignalKind, address: str) -> None:
        if self._frozen:
            raise RuntimeError("recipient sets are read-only once frozen")
        if not address:
            raise ValueError("recipient address must not be empty")
        current = self._targets[kind]
        if address not in current:
            self._targets[kind] = current + (address,)

    def targets(self, kind: SignalKind) -> tuple[str, ...]:
        return self._targets[kind]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen


class Signal:
    """Deliver one kind of signal to its recipient set."""

    kind: ClassVar[SignalKind]

    def __init__(self, transport: SignalTransportPort, recipients: RecipientSets) -> None:
        self._transport = transport
        self._recipients = recipients

    @property
    def name(self) -> str:
        return self.kind.signal_name

    @property
    def targets(self) -> tuple[str, ...]:
        return self._recipients.targets(self.kind)

    def emit(self, payload: Mapping[str, Any]) -> bool:
        """Send ``payload`` to every target; ``True`` only if all deliveries succeeded."""

        targets = self.targets
        if not targets:
            LOGGER.debug("%s signal has no recipients", self.name)
            return False
        delivered = True
        for recipient in targets:
            try:
                ok = bool(self._transport.send(recipient, self.name, payload))
            except Exception as exc:
                LOGGER.warning("%s signal to %s failed: %s", self.name, recipient, exc)
                ok = False
            else:
                if not ok:
                    LOGGER.warning("%s signal to %s was not delivered", self.name, recipient)
            delivered = delivered and ok
        return delivered


__all__ = ["RecipientSets", "Signal", "SignalKind"]
