"""Distribution metadata shown by ``lib_log_relay info``."""

from __future__ import annotations

from typing import Callable

name = "lib_log_relay"
title = "Structured event logging with remote signal notification"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_relay"


def info_lines() -> list[str]:
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    width = max(len(label) for label, _ in fields)
    return [f"Info for {name}:", ""] + [f"    {label:<{width}} = {value}" for label, value in fields]


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line (default: ``print``).

    Examples
    --------
    >>> captured = []
    >>> print_info(writer=captured.append)
    >>> captured[0]
    'Info for lib_log_relay:\\n'
    """

    emit = writer or (lambda text: print(text, end=""))
    for line in info_lines():
        emit(line + "\n")
