"""
Runtime configuration for densematrix.

Holds process-wide settings that are not per-matrix state. Currently
this is the debug switch consulted by Matrix.debug and the stream it
writes to.

The debug flag defaults to the DENSEMATRIX_DEBUG environment variable,
read once at import time. Use set_debug() or the debug_mode() context
manager to change it at runtime.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, TextIO

DEBUG_ENV_VAR = 'DENSEMATRIX_DEBUG'

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in _TRUTHY


@dataclass
class Settings:
    """
    Process-wide densematrix settings.

    Attributes:
        debug: If True, Matrix.debug writes a dump; otherwise it is a no-op
        sink: Default stream for debug dumps, or None for sys.stderr
    """
    debug: bool
    sink: TextIO | None = None


_settings = Settings(debug=_env_flag(DEBUG_ENV_VAR))


def get_settings() -> Settings:
    """Return the live settings object."""
    return _settings


def set_debug(enabled: bool) -> None:
    """Enable or disable debug dumps."""
    _settings.debug = bool(enabled)


def set_debug_sink(sink: TextIO | None) -> None:
    """Set the default debug stream (None restores sys.stderr)."""
    _settings.sink = sink


@contextmanager
def debug_mode(enabled: bool = True, sink: TextIO | None = None) -> Iterator[Settings]:
    """
    Temporarily override the debug settings.

    Usage:
        with debug_mode(sink=buffer):
            A.debug()

    Args:
        enabled: Debug flag inside the block
        sink: Debug stream inside the block; None keeps the current one

    Yields:
        The live Settings object
    """
    saved = replace(_settings)
    _settings.debug = bool(enabled)
    if sink is not None:
        _settings.sink = sink
    try:
        yield _settings
    finally:
        _settings.debug = saved.debug
        _settings.sink = saved.sink
