"""
Fixed-capacity hash table with separate chaining.

Each bucket is an ordered list of ``(key, value)`` pairs. Colliding keys are
appended to the same bucket and found by linear scan. The bucket count is
fixed at construction and the table never resizes, so the index space stays
small enough to display.

Complexity:
    - insert/search/remove: O(1 + bucket length)
    - clear: O(capacity)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from dslab.core import OperationResult, Status, is_blank
from dslab.diagnostics import assert_valid_hash_table, is_debug_enabled
from dslab.logging import get_logger

from .utils import char_code_hash

logger = get_logger(__name__)

Entry = Tuple[str, str]


@dataclass(frozen=True)
class HashResult(OperationResult):
    """
    Result of a hash table operation.

    Attributes:
        key: Key the operation was called with.
        index: Bucket index that was probed (None when input was rejected
            before hashing, or for ``clear``).
        value: Value found or stored.
        previous: Value that was overwritten by an update or removed.
    """

    key: str = ""
    index: Optional[int] = None
    value: Optional[str] = None
    previous: Optional[str] = None

    @property
    def updated(self) -> bool:
        """True if an insert overwrote an existing key."""
        return self.ok and self.value is not None and self.previous is not None


class HashTable:
    """
    Chained hash map from string keys to string values.

    Attributes:
        capacity: Number of buckets, fixed for the lifetime of the table.

    Example:
        >>> table = HashTable(capacity=7)
        >>> table.insert("cat", "x").index
        4
        >>> table.insert("act", "y").index
        4
        >>> table.search("act").value
        'y'
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize an empty table.

        Args:
            capacity: Bucket count. Defaults to the configured capacity
                (``DSLAB_HASH_CAPACITY``, 7 when unset).

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if capacity is None:
            from dslab.config import default_config

            capacity = default_config().hash_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._buckets: List[List[Entry]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key)[1] is not None

    def __repr__(self) -> str:
        return f"HashTable(capacity={self._capacity}, size={self._size})"

    def hash(self, key: str) -> int:
        """Return the bucket index for ``key``."""
        return char_code_hash(key, self._capacity)

    def _find(self, key: str) -> Tuple[int, Optional[int]]:
        """Return (bucket index, position within bucket or None)."""
        index = self.hash(key)
        for position, (stored_key, _) in enumerate(self._buckets[index]):
            if stored_key == key:
                return index, position
        return index, None

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            assert_valid_hash_table(self)

    def insert(self, key: str, value: str) -> HashResult:
        """
        Insert a key/value pair, or update the value if the key exists.

        Updating keeps the entry at its position in the bucket.

        Args:
            key: Non-blank string key.
            value: Non-blank string value.

        Returns:
            ``OK`` result with ``previous`` set when an existing value was
            overwritten, or ``INVALID_INPUT`` for a blank key or value.
        """
        if is_blank(key) or is_blank(value):
            logger.debug("insert rejected: blank key or value (key=%r)", key)
            return HashResult(
                Status.INVALID_INPUT,
                "Both a key and a value are required.",
                key=key if isinstance(key, str) else "",
            )

        index, position = self._find(key)
        bucket = self._buckets[index]

        if position is not None:
            previous = bucket[position][1]
            bucket[position] = (key, value)
            logger.debug("updated %r in bucket %d: %r -> %r", key, index, previous, value)
            self._after_mutation()
            return HashResult(
                Status.OK,
                f'Value updated for key "{key}" (index {index}).',
                changed=True,
                key=key,
                index=index,
                value=value,
                previous=previous,
            )

        bucket.append((key, value))
        self._size += 1
        logger.debug("inserted %r into bucket %d (chain length %d)", key, index, len(bucket))
        self._after_mutation()
        return HashResult(
            Status.OK,
            f"Inserted {key} -> {value} (index {index}).",
            changed=True,
            key=key,
            index=index,
            value=value,
        )

    def search(self, key: str) -> HashResult:
        """
        Look up ``key`` in its bucket.

        Returns:
            ``OK`` result carrying the value, or ``NOT_FOUND`` carrying the
            index of the bucket that was scanned. ``INVALID_INPUT`` for a
            blank key.
        """
        if is_blank(key):
            return HashResult(Status.INVALID_INPUT, "A key is required to search.")

        index, position = self._find(key)
        if position is None:
            logger.debug("search miss for %r in bucket %d", key, index)
            return HashResult(
                Status.NOT_FOUND, f'Key "{key}" not found.', key=key, index=index
            )

        value = self._buckets[index][position][1]
        return HashResult(
            Status.OK, f"Found {key} -> {value} (index {index}).", key=key, index=index, value=value
        )

    def remove(self, key: str) -> HashResult:
        """
        Delete ``key`` from its bucket, keeping the order of the other entries.

        Returns:
            ``OK`` result with the removed value in ``previous``,
            ``NOT_FOUND`` if the key is absent, or ``INVALID_INPUT``.
        """
        if is_blank(key):
            return HashResult(Status.INVALID_INPUT, "A key is required to remove.")

        index, position = self._find(key)
        if position is None:
            logger.debug("remove miss for %r in bucket %d", key, index)
            return HashResult(
                Status.NOT_FOUND, f'Key "{key}" not found.', key=key, index=index
            )

        _, previous = self._buckets[index].pop(position)
        self._size -= 1
        logger.debug("removed %r from bucket %d", key, index)
        self._after_mutation()
        return HashResult(
            Status.OK,
            f"Removed {key} (index {index}).",
            changed=True,
            key=key,
            index=index,
            previous=previous,
        )

    def clear(self) -> HashResult:
        """Empty every bucket. The capacity is unchanged."""
        had_entries = self._size > 0
        self._buckets = [[] for _ in range(self._capacity)]
        self._size = 0
        logger.debug("cleared table with capacity %d", self._capacity)
        self._after_mutation()
        return HashResult(Status.OK, "Hash table cleared.", changed=had_entries)

    def bucket(self, index: int) -> Tuple[Entry, ...]:
        """
        Return a snapshot of one bucket.

        Raises:
            IndexError: If index is outside ``range(capacity)``.
        """
        if not 0 <= index < self._capacity:
            raise IndexError(f"bucket index {index} out of range for capacity {self._capacity}")
        return tuple(self._buckets[index])

    def buckets(self) -> Tuple[Tuple[Entry, ...], ...]:
        """Return an immutable snapshot of all buckets, in index order."""
        return tuple(tuple(bucket) for bucket in self._buckets)

    def items(self) -> Iterator[Entry]:
        """Yield ``(key, value)`` pairs bucket by bucket, in chain order."""
        for bucket in self._buckets:
            yield from list(bucket)

    def load_factor(self) -> float:
        """Return entries per bucket."""
        return self._size / self._capacity
