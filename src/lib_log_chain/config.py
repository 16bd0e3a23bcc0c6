"""Optional ``.env`` loading for CLI runs and local development.

Purpose
-------
Let operators keep ``LOG_*`` overrides in a ``.env`` file next to the project
instead of exporting them in every shell.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` - decide between CLI flag and environment toggle.
* :func:`enable_dotenv` - locate the nearest ``.env`` and load it.

System Role
-----------
Values already present in the environment keep precedence over ``.env``
entries; the loaded file is remembered so repeated calls are cheap.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_CHAIN_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_LOADED_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise the :data:`DOTENV_ENV_VAR` toggle
    decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def find_dotenv_file() -> Path | None:
    """Return the nearest ``.env`` walking upwards from the working directory."""

    found = find_dotenv(usecwd=True)
    return Path(found).resolve() if found else None


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the loaded path, or ``None`` when no file was found.
    """

    global _LOADED_PATH
    if _LOADED_PATH is not None:
        return _LOADED_PATH
    path = find_dotenv_file()
    if path is None:
        return None
    load_dotenv(path, override=False)
    _LOADED_PATH = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    """Forget the previously loaded ``.env`` path."""

    global _LOADED_PATH
    _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "find_dotenv_file", "should_use_dotenv"]
