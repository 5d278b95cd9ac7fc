"""
Outcome vocabulary shared by the three engines.

User-facing failures (blank input, missing keys, graph uniqueness
violations) are never raised. Every engine operation returns a result record
whose ``status`` names what happened and whose ``message`` is ready to show
to the user. Engines subclass :class:`OperationResult` to attach payloads such
as the probed bucket index or a traversal order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    """Outcome of an engine operation."""

    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    DUPLICATE_VERTEX = "duplicate_vertex"
    DUPLICATE_EDGE = "duplicate_edge"
    SELF_LOOP = "self_loop"
    UNKNOWN_VERTEX = "unknown_vertex"


@dataclass(frozen=True)
class OperationResult:
    """
    Base result container returned by every engine operation.

    Attributes:
        status: Enumeration describing the outcome.
        message: Human-readable description of the outcome.
        changed: True if the operation mutated engine state.
    """

    status: Status
    message: str = ""
    changed: bool = False

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def is_blank(text: object) -> bool:
    """Return True if ``text`` is not a string or holds only whitespace."""
    return not isinstance(text, str) or not text.strip()


__all__ = ["Status", "OperationResult", "is_blank"]
