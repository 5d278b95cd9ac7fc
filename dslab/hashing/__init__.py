"""
Chained hash table engine.

Provides a fixed-capacity hash map with separate chaining and the
sum-of-character-codes hash function used to place keys in buckets.
"""

from .core import Entry, HashResult, HashTable
from .utils import char_code_hash, char_codes

__all__ = [
    "Entry",
    "HashResult",
    "HashTable",
    "char_code_hash",
    "char_codes",
]
