"""
Hash functions for the chained hash table.

The table uses the textbook "sum of character codes" hash so that learners
can compute bucket indices by hand. Anagrams ("cat", "act") always collide,
which makes chaining easy to demonstrate.
"""

from typing import List


def char_codes(key: str) -> List[int]:
    """
    Return the code point of every character in ``key``.

    Example:
        >>> char_codes("cat")
        [99, 97, 116]
    """
    return [ord(ch) for ch in key]


def char_code_hash(key: str, capacity: int) -> int:
    """
    Sum the character codes of ``key`` and reduce modulo ``capacity``.

    Args:
        key: String key to hash.
        capacity: Number of buckets (must be >= 1).

    Returns:
        Bucket index in ``range(capacity)``.

    Raises:
        ValueError: If capacity is less than 1.

    Example:
        >>> char_code_hash("cat", 7)
        4
        >>> char_code_hash("act", 7)
        4
    """
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")
    return sum(char_codes(key)) % capacity
