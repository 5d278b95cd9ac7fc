"""Engine configuration for dslab.

Defaults can be overridden through the environment:

- ``DSLAB_HASH_CAPACITY``: bucket count for new hash tables (default 7).
- ``DSLAB_DIRECTED``: whether new graphs are directed (default off).
- ``DSLAB_DEBUG``: run invariant checks after every mutation (default off).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional

from dslab.diagnostics.debug_mode import DEBUG_ENV_VAR, parse_flag, set_debug_enabled

if TYPE_CHECKING:
    from dslab.graphs import Graph
    from dslab.hashing import HashTable

DEFAULT_HASH_CAPACITY = 7

_CAPACITY_ENV_VAR = "DSLAB_HASH_CAPACITY"
_DIRECTED_ENV_VAR = "DSLAB_DIRECTED"


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration shared by the engine factories.

    Args:
        hash_capacity: Number of buckets in a new hash table. Must be >= 1.
            The capacity never changes after construction.
        directed: Whether new graphs treat edges as directed.
        debug: Whether invariant checks run after every mutation.
    """

    hash_capacity: int = DEFAULT_HASH_CAPACITY
    directed: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.hash_capacity, bool) or not isinstance(self.hash_capacity, int):
            raise ValueError(f"hash_capacity must be an int, got {self.hash_capacity!r}")
        if self.hash_capacity < 1:
            raise ValueError(f"hash_capacity must be >= 1, got {self.hash_capacity}")


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Build an :class:`EngineConfig` from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Config with unset variables falling back to the defaults.

    Raises:
        ValueError: If ``DSLAB_HASH_CAPACITY`` is not a positive integer.
    """
    if environ is None:
        environ = os.environ

    raw_capacity = environ.get(_CAPACITY_ENV_VAR)
    capacity = DEFAULT_HASH_CAPACITY
    if raw_capacity is not None and raw_capacity.strip():
        try:
            capacity = int(raw_capacity)
        except ValueError:
            raise ValueError(
                f"{_CAPACITY_ENV_VAR} must be a positive integer, got {raw_capacity!r}"
            ) from None

    return EngineConfig(
        hash_capacity=capacity,
        directed=parse_flag(environ.get(_DIRECTED_ENV_VAR)),
        debug=parse_flag(environ.get(DEBUG_ENV_VAR)),
    )


def default_config() -> EngineConfig:
    """Return the config engines fall back to when built without arguments."""
    return config_from_env()


def apply_config(config: EngineConfig) -> None:
    """Apply the process-wide parts of ``config`` (currently debug mode)."""
    set_debug_enabled(config.debug)


def new_hash_table(config: Optional[EngineConfig] = None) -> "HashTable":
    """Create an empty hash table sized by ``config``."""
    from dslab.hashing import HashTable

    config = config or default_config()
    return HashTable(capacity=config.hash_capacity)


def new_graph(config: Optional[EngineConfig] = None) -> "Graph":
    """Create an empty graph whose direction comes from ``config``."""
    from dslab.graphs import Graph

    config = config or default_config()
    return Graph(directed=config.directed)


__all__ = [
    "DEFAULT_HASH_CAPACITY",
    "EngineConfig",
    "config_from_env",
    "default_config",
    "apply_config",
    "new_hash_table",
    "new_graph",
]
