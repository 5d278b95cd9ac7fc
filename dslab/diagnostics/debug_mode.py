"""Debug mode for dslab engines.

When debug mode is on, every engine re-validates its invariants after each
mutation (see :mod:`dslab.diagnostics.core`) and raises ``ValueError`` on the
first violation. The initial state comes from the ``DSLAB_DEBUG`` environment
variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "DSLAB_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_flag(raw: Optional[str]) -> bool:
    """
    Interpret an environment variable value as an on/off switch.

    Parameters
    ----------
    raw:
        Value as read from the environment, or None when unset.

    Returns
    -------
    bool
        True for ``1``, ``true``, ``yes`` or ``on`` (any case, surrounding
        whitespace ignored); False otherwise.
    """
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY


_debug_enabled: bool = parse_flag(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return whether engines currently check their invariants after mutating."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Switch invariant checking on or off for every engine in the process.

    Parameters
    ----------
    enabled:
        New setting. Any truthy value turns checking on.

    Returns
    -------
    bool
        The setting that was in force before the call.
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with invariant checking forced on or off.

    The previous setting is restored on exit, including when the block raises.

    Example
    -------
    >>> table = HashTable(capacity=7)
    >>> with debug_context(True):
    ...     _ = table.insert("cat", "x")  # table validated after the insert
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
