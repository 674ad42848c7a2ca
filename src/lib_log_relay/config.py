"""Optional ``.env`` loading for the CLI and host services.

Purpose
-------
Let operators keep ``LOG_RELAY_*`` settings in a nearby ``.env`` file. Values
already present in the environment always win over the file.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` - resolve CLI flag vs environment toggle.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_RELAY_USE_DOTENV"
DOTENV_FILENAME = ".env"

_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_attempted = False
_dotenv_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def _find_dotenv(start: Path | None) -> Path | None:
    if start is None:
        found = find_dotenv(DOTENV_FILENAME, usecwd=True)
        return Path(found).resolve() if found else None
    # find_dotenv only searches from the cwd or the calling frame's file.
    for directory in (start, *start.parents):
        candidate = directory / DOTENV_FILENAME
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Returns the loaded file, or ``None`` when no file was found. Repeated calls
    return the first result without reloading.
    """

    global _dotenv_attempted, _dotenv_path
    if _dotenv_attempted:
        return _dotenv_path
    _dotenv_attempted = True
    path = _find_dotenv(search_from.resolve() if search_from is not None else None)
    if path is not None:
        load_dotenv(path, override=False)
    _dotenv_path = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_attempted, _dotenv_path
    _dotenv_attempted = False
    _dotenv_path = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
