"""Example: Chained Hash Table with dslab

Walks through inserts, a collision, an update, a search miss and a removal,
printing the bucket layout the way a visual panel would show it.
"""

from dslab import HashTable, Status


def print_buckets(table: HashTable) -> None:
    for index, bucket in enumerate(table.buckets()):
        chain = "  ->  ".join(f"{key}: {value}" for key, value in bucket) or "(empty)"
        print(f"  [{index}] {chain}")
    print(f"  entries={len(table)}  load factor={table.load_factor():.2f}")


def main():
    print("=" * 60)
    print("Hash table with separate chaining (capacity 7)")
    print("=" * 60)

    table = HashTable(capacity=7)

    for key, value in [("cat", "meow"), ("dog", "woof"), ("act", "play"), ("owl", "hoot")]:
        result = table.insert(key, value)
        print(result.message)

    print("\n'cat' and 'act' are anagrams, so they share a bucket:")
    print_buckets(table)

    print()
    print(table.insert("cat", "purr").message)
    print(table.search("act").message)

    miss = table.search("cow")
    print(f"{miss.message} (probed bucket {miss.index})")
    assert miss.status is Status.NOT_FOUND

    print(table.remove("dog").message)
    print(table.insert("", "nothing").message)

    print("\nFinal layout:")
    print_buckets(table)


if __name__ == "__main__":
    main()
