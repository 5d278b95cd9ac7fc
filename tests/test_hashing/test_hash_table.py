"""Tests for the chained hash table."""

import pytest

from dslab.core import Status
from dslab.diagnostics import is_valid_hash_table
from dslab.hashing import HashTable


class TestInsert:
    """Tests for insert and update semantics."""

    def test_insert_reports_index(self):
        """Test that insert reports the bucket it used."""
        table = HashTable(capacity=7)
        result = table.insert("cat", "x")

        assert result.status is Status.OK
        assert result.changed is True
        assert result.index == 4
        assert result.updated is False
        assert table.bucket(4) == (("cat", "x"),)
        assert len(table) == 1

    def test_anagrams_collide_and_stay_searchable(self):
        """Test chaining: anagrams share a bucket but keep their own values."""
        table = HashTable(capacity=7)
        first = table.insert("cat", "x")
        second = table.insert("act", "y")

        assert first.index == second.index
        assert table.bucket(first.index) == (("cat", "x"), ("act", "y"))
        assert table.search("cat").value == "x"
        assert table.search("act").value == "y"

    def test_reinsert_updates_without_growing(self):
        """Test that inserting an existing key overwrites its value."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")
        table.insert("act", "y")

        result = table.insert("cat", "z")

        assert result.ok
        assert result.updated is True
        assert result.previous == "x"
        assert len(table) == 2
        # Updated entry keeps its place in the chain
        assert table.bucket(4) == (("cat", "z"), ("act", "y"))

    @pytest.mark.parametrize(
        "key, value",
        [("", "x"), ("   ", "x"), ("cat", ""), ("cat", " \t"), (None, "x"), ("cat", None)],
    )
    def test_blank_input_rejected(self, key, value):
        """Test that blank keys or values are rejected without mutation."""
        table = HashTable(capacity=7)
        result = table.insert(key, value)

        assert result.status is Status.INVALID_INPUT
        assert result.changed is False
        assert len(table) == 0
        assert all(len(bucket) == 0 for bucket in table.buckets())


class TestSearch:
    """Tests for lookups."""

    def test_search_hit(self):
        """Test a successful search returns value and index."""
        table = HashTable(capacity=7)
        table.insert("dog", "woof")

        result = table.search("dog")
        assert result.ok
        assert result.value == "woof"
        assert result.index == table.hash("dog")
        assert result.changed is False

    def test_search_miss_reports_probed_index(self):
        """Test that a miss still tells which bucket was scanned."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")

        result = table.search("tac")
        assert result.status is Status.NOT_FOUND
        assert result.index == 4
        assert result.value is None

    def test_search_blank_key(self):
        """Test search with a blank key."""
        table = HashTable(capacity=7)
        assert table.search("").status is Status.INVALID_INPUT

    def test_contains(self):
        """Test membership operator."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")
        assert "cat" in table
        assert "act" not in table
        assert 42 not in table


class TestRemove:
    """Tests for removal."""

    def test_remove_preserves_chain_order(self):
        """Test removing from the middle of a chain keeps the others in order."""
        table = HashTable(capacity=7)
        for key, value in [("cat", "1"), ("act", "2"), ("tac", "3")]:
            table.insert(key, value)

        result = table.remove("act")

        assert result.ok
        assert result.previous == "2"
        assert result.index == 4
        assert table.bucket(4) == (("cat", "1"), ("tac", "3"))
        assert len(table) == 2
        assert table.search("act").status is Status.NOT_FOUND

    def test_remove_missing(self):
        """Test removing a key that is not present."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")

        result = table.remove("dog")
        assert result.status is Status.NOT_FOUND
        assert result.changed is False
        assert len(table) == 1

    def test_remove_blank_key(self):
        """Test removal with a blank key."""
        table = HashTable(capacity=7)
        assert table.remove("  ").status is Status.INVALID_INPUT


class TestClearAndViews:
    """Tests for clear and the read-only views."""

    def test_clear(self):
        """Test that clear empties every bucket but keeps the capacity."""
        table = HashTable(capacity=5)
        for key in ["a", "b", "c", "d"]:
            table.insert(key, key.upper())

        result = table.clear()

        assert result.ok
        assert result.changed is True
        assert len(table) == 0
        assert table.capacity == 5
        assert table.buckets() == ((),) * 5

    def test_clear_empty_table(self):
        """Test that clearing an empty table reports no change."""
        table = HashTable(capacity=7)
        result = table.clear()
        assert result.ok
        assert result.changed is False

    def test_buckets_snapshot_is_detached(self):
        """Test that a bucket snapshot does not change with later inserts."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")
        snapshot = table.buckets()
        table.insert("act", "y")

        assert snapshot[4] == (("cat", "x"),)
        assert len(snapshot) == 7

    def test_bucket_index_out_of_range(self):
        """Test bucket() bounds checking."""
        table = HashTable(capacity=7)
        with pytest.raises(IndexError):
            table.bucket(7)
        with pytest.raises(IndexError):
            table.bucket(-1)

    def test_items_and_load_factor(self):
        """Test iteration order and load factor."""
        table = HashTable(capacity=7)
        table.insert("cat", "x")
        table.insert("a", "1")
        table.insert("act", "y")

        # "cat"/"act" live in bucket 4, "a" in bucket 6
        assert list(table.items()) == [("cat", "x"), ("act", "y"), ("a", "1")]
        assert table.load_factor() == pytest.approx(3 / 7)


class TestConstruction:
    """Tests for capacity handling."""

    @pytest.mark.parametrize("capacity", [0, -3, True, 2.5, "7"])
    def test_invalid_capacity(self, capacity):
        """Test that a non-positive or non-int capacity raises."""
        with pytest.raises(ValueError):
            HashTable(capacity=capacity)

    def test_default_capacity(self, monkeypatch):
        """Test that the default capacity is 7."""
        monkeypatch.delenv("DSLAB_HASH_CAPACITY", raising=False)
        assert HashTable().capacity == 7

    def test_default_capacity_from_env(self, monkeypatch):
        """Test that DSLAB_HASH_CAPACITY changes the default."""
        monkeypatch.setenv("DSLAB_HASH_CAPACITY", "11")
        table = HashTable()
        assert table.capacity == 11
        assert len(table.buckets()) == 11


class TestRandomized:
    """Randomized comparison against a plain dict."""

    def test_matches_dict(self, rng):
        """Test a random operation sequence against dict semantics."""
        table = HashTable(capacity=7)
        reference = {}
        alphabet = list("abcde")

        for _ in range(300):
            length = int(rng.integers(1, 4))
            key = "".join(rng.choice(alphabet, size=length))
            if rng.random() < 0.7:
                value = str(int(rng.integers(0, 100)))
                table.insert(key, value)
                reference[key] = value
            else:
                result = table.remove(key)
                assert result.ok == (key in reference)
                reference.pop(key, None)

        assert len(table) == len(reference)
        assert dict(table.items()) == reference
        assert is_valid_hash_table(table)
