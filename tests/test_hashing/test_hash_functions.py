"""Tests for the character-code hash function."""

import pytest

from dslab.hashing import HashTable, char_code_hash, char_codes


def test_char_codes():
    """Test per-character code points."""
    assert char_codes("cat") == [99, 97, 116]
    assert char_codes("") == []


def test_known_values():
    """Test hand-computed indices for capacity 7."""
    assert char_code_hash("cat", 7) == 312 % 7
    assert char_code_hash("cat", 7) == 4
    assert char_code_hash("a", 7) == 6
    assert char_code_hash("", 7) == 0


def test_anagrams_share_index():
    """Test that anagrams always collide."""
    for capacity in [1, 2, 7, 13, 101]:
        assert char_code_hash("listen", capacity) == char_code_hash("silent", capacity)


def test_capacity_one():
    """Test that a single bucket takes every key."""
    assert char_code_hash("anything", 1) == 0


def test_invalid_capacity():
    """Test capacity below one."""
    with pytest.raises(ValueError):
        char_code_hash("cat", 0)


def test_table_hash_uses_capacity():
    """Test that HashTable.hash binds the table's capacity."""
    table = HashTable(capacity=13)
    assert table.hash("cat") == 312 % 13
