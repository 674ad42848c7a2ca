"""Click command line interface for demonstrating writers and signals.

Purpose
-------
Give operators a quick way to check how each writer renders events and what
the event sender puts on the wire, without a running service.

Contents
--------
* :func:`summary_info` - metadata banner as a string.
* :func:`cli` - command group with ``info``, ``demo`` and ``signals``.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
import sys
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters.signals import InMemorySignalTransport
from .adapters.writers import LogWriter
from .adapters.writers.colour import ColourMode
from .domain import (
    AttentionGroup,
    AttentionType,
    LogCategory,
    LogEvent,
    LogGroup,
    LogTag,
    StatusMajor,
    StatusMinor,
)
from .runtime import WRITER_KINDS, build_runtime_settings, create_event_sender, create_writer

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

DEMO_SESSION_TOKEN = "demo-session"


def summary_info() -> str:
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_RELAY_* settings from the nearest .env (or set {config_module.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Structured event logging with remote signal notification."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print distribution metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--writer", "writer_kind", type=click.Choice(WRITER_KINDS), default="colour", show_default=True)
@click.option(
    "--colour-mode",
    type=click.Choice([mode.value for mode in ColourMode]),
    default=ColourMode.BY_CATEGORY.value,
    show_default=True,
)
@click.option("--timestamp/--no-timestamp", default=True, show_default=True)
@click.option("--metadata/--no-metadata", default=True, show_default=True)
def cli_demo(writer_kind: str, colour_mode: str, timestamp: bool, metadata: bool) -> None:
    """Render one event per category through the selected writer."""

    settings = build_runtime_settings(
        writer=writer_kind,
        colour_mode=colour_mode,
        timestamp=timestamp,
        metadata=metadata,
    )
    writer = create_writer(settings, stream=sys.stdout)
    tag = LogTag(DEMO_SESSION_TOKEN, "demo")
    for category in LogCategory:
        writer.add_meta("session", tag)
        writer.add_meta("category", category.name, skip=True)
        writer.set_prepend_meta("category")
        writer.write_event(LogEvent(LogGroup.CLIENT, category, f"{category.name.lower()} sample message"))
    _flush(writer)


@cli.command("signals", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--log-level", type=click.IntRange(0, 6), default=6, show_default=True)
def cli_signals(log_level: int) -> None:
    """Drive an event sender over an in-memory transport and list the deliveries."""

    settings = build_runtime_settings(writer="stream", timestamp=False, log_level=log_level)
    writer = create_writer(settings, stream=sys.stdout)
    transport = InMemorySignalTransport()
    sender = create_event_sender(settings, transport, LogGroup.BACKENDPROC, DEMO_SESSION_TOKEN, writer)

    sender.send_registration_request(":1.99", DEMO_SESSION_TOKEN, os.getpid())
    sender.send_status_change(StatusMajor.CONNECTION, StatusMinor.CONN_CONNECTING, "connecting")
    sender.debug("resolving remote host")
    sender.info("connected")
    sender.send_attention_required(AttentionType.CREDENTIALS, AttentionGroup.USER_PASSWORD, "username and password required")
    sender.send_status_change(StatusMajor.CONNECTION, StatusMinor.CONN_CONNECTED)
    _flush(writer)

    click.echo("")
    for item in transport.delivered:
        click.echo(f"{item.recipient:<6} {item.signal_name:<20} {dict(item.payload)}")
    click.echo(f"last status: {sender.get_last_status_change()}")


def _flush(writer: LogWriter) -> None:
    flush = getattr(writer, "flush", None)
    if callable(flush):
        flush()


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli` and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
