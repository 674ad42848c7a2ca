"""Runtime settings resolved from call arguments and ``LOG_RELAY_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from lib_log_relay.adapters.shutdown import DEFAULT_GRACE_SECONDS
from lib_log_relay.adapters.writers.colour import ColourMode
from lib_log_relay.application.use_cases.event_sender import DEFAULT_LOG_LEVEL, MAX_LOG_LEVEL

WRITER_KINDS = ("stream", "colour", "syslog", "journald")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RuntimeSettings:
    """Validated configuration for one writer and event sender.

    Attributes
    ----------
    writer:
        Backend kind, one of :data:`WRITER_KINDS`.
    timestamp, metadata, message_prepend:
        Initial writer feature flags.
    colour_mode:
        Colour policy for the ``colour`` writer.
    log_level:
        Event sender filter threshold (0-6).
    fatal_grace_seconds:
        Delay between a fatal log line and process termination.
    syslog_ident, journald_prefix:
        Backend specific naming.
    """

    writer: str = "stream"
    timestamp: bool = True
    metadata: bool = True
    message_prepend: bool = True
    colour_mode: ColourMode = ColourMode.BY_CATEGORY
    log_level: int = DEFAULT_LOG_LEVEL
    fatal_grace_seconds: float = DEFAULT_GRACE_SECONDS
    syslog_ident: str = "lib_log_relay"
    journald_prefix: str = "EVT_"

    def __post_init__(self) -> None:
        if self.writer not in WRITER_KINDS:
            raise ValueError(f"writer must be one of {', '.join(WRITER_KINDS)}; got {self.writer!r}")
        if not 0 <= self.log_level <= MAX_LOG_LEVEL:
            raise ValueError(f"log_level must be between 0 and {MAX_LOG_LEVEL}")
        if self.fatal_grace_seconds < 0:
            raise ValueError("fatal_grace_seconds must be >= 0")


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def build_runtime_settings(
    *,
    writer: str = "stream",
    timestamp: bool = True,
    metadata: bool = True,
    message_prepend: bool = True,
    colour_mode: str | ColourMode = ColourMode.BY_CATEGORY,
    log_level: int = DEFAULT_LOG_LEVEL,
    fatal_grace_seconds: float = DEFAULT_GRACE_SECONDS,
    syslog_ident: str = "lib_log_relay",
    journald_prefix: str = "EVT_",
    environ: Mapping[str, str] | None = None,
) -> RuntimeSettings:
    """Merge arguments with ``LOG_RELAY_*`` environment overrides.

    Environment variables take precedence so deployments can reconfigure a
    service without code changes.

    Examples
    --------
    >>> build_runtime_settings(environ={"LOG_RELAY_WRITER": "journald"}).writer
    'journald'
    """

    env = os.environ if environ is None else environ
    mode = env.get("LOG_RELAY_COLOUR_MODE", colour_mode)
    return RuntimeSettings(
        writer=env.get("LOG_RELAY_WRITER", writer).strip().lower(),
        timestamp=_env_bool(env, "LOG_RELAY_TIMESTAMP", timestamp),
        metadata=_env_bool(env, "LOG_RELAY_METADATA", metadata),
        message_prepend=_env_bool(env, "LOG_RELAY_MESSAGE_PREPEND", message_prepend),
        colour_mode=mode if isinstance(mode, ColourMode) else ColourMode.from_name(mode),
        log_level=int(env.get("LOG_RELAY_LOG_LEVEL", log_level)),
        fatal_grace_seconds=float(env.get("LOG_RELAY_FATAL_GRACE", fatal_grace_seconds)),
        syslog_ident=env.get("LOG_RELAY_SYSLOG_IDENT", syslog_ident),
        journald_prefix=env.get("LOG_RELAY_JOURNALD_PREFIX", journald_prefix),
    )


__all__ = ["RuntimeSettings", "WRITER_KINDS", "build_runtime_settings"]
