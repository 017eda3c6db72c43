"""Environment configuration helpers for the command line.

Purpose
-------
Decide whether to load a ``.env`` file and load it once per process using
``python-dotenv``. The library functions themselves read no configuration;
only :mod:`lib_cowsay.cli` consults these helpers.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle for ``.env`` loading.
* :data:`MESSAGE_ENV_VAR` - default message for ``lib_cowsay say``.
* :func:`should_use_dotenv` - precedence between CLI flag and environment.
* :func:`enable_dotenv` - locate and load the nearest ``.env``.
* :func:`default_message` - message used when none is supplied.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LIB_COWSAY_USE_DOTENV"
MESSAGE_ENV_VAR = "LIB_COWSAY_MESSAGE"
FALLBACK_MESSAGE = "Moo"

_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)

_DOTENV_LOCK = Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise a truthy ``env_value`` enables it.

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


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from the working directory. Only the first call
    per process reads a file; later calls return the path found the first
    time.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
        if candidate is not None:
            load_dotenv(candidate, override=False)
            logger.debug("loaded environment from %s", candidate)
        _DOTENV_LOADED = True
        _DOTENV_PATH = candidate
        return candidate


def default_message(env: dict[str, str] | None = None) -> str:
    """Return the configured default message or :data:`FALLBACK_MESSAGE`.

    Examples
    --------
    >>> default_message({MESSAGE_ENV_VAR: "Hi"})
    'Hi'
    >>> default_message({})
    'Moo'
    """

    source = os.environ if env is None else env
    return source.get(MESSAGE_ENV_VAR) or FALLBACK_MESSAGE


def _reset_dotenv_state_for_testing() -> None:
    """Forget previous ``.env`` loading so tests start from a clean slate."""

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "FALLBACK_MESSAGE",
    "MESSAGE_ENV_VAR",
    "default_message",
    "enable_dotenv",
    "should_use_dotenv",
]
