import logging

import pytest

from utils.data_structures.hash_table import (
    DEFAULT_CAPACITY,
    DEFAULT_LOAD_FACTOR_THRESHOLD,
    HashTable,
)
from utils.data_structures.hash_table_adt import CollisionResolutionScheme, HashTableADT
from utils.exceptions import (
    DuplicateKeyError,
    HashTableError,
    IllegalNullKeyError,
    KeyNotFoundError,
    RehashIntegrityError,
)


def insert_many(table, books, count):
    for book in books[:count]:
        table.insert(book.key, book)


def remove_many(table, books, count):
    for book in books[:count]:
        table.remove(book.key)


def test_collision_scheme(table) -> None:
    """
    The table reports separate chaining, using an identifier in the 1..9 range.
    """
    scheme = table.get_collision_resolution_scheme()
    assert scheme == CollisionResolutionScheme.CHAINED_BUCKET
    assert 1 <= int(scheme) <= 9
    assert isinstance(table, HashTableADT)


def test_is_empty(table) -> None:
    assert table.num_keys() == 0
    assert len(table) == 0


def test_is_not_empty(table, books) -> None:
    table.insert(books[0].key, books[0])
    assert table.num_keys() == 1


def test_default_construction() -> None:
    table = HashTable()
    assert table.get_capacity() == DEFAULT_CAPACITY == 101
    assert table.get_load_factor_threshold() == DEFAULT_LOAD_FACTOR_THRESHOLD == 0.75
    assert table.num_keys() == 0


@pytest.mark.parametrize("capacity", [0, -1, 2.5, True, "10", None])
def test_invalid_capacity(capacity) -> None:
    with pytest.raises(ValueError):
        HashTable(capacity, 0.75)


@pytest.mark.parametrize("threshold", [0, -0.5, 1.5, "0.5", None, False])
def test_invalid_load_factor_threshold(threshold) -> None:
    with pytest.raises(ValueError):
        HashTable(10, threshold)


def test_insert_then_get_returns_same_record(books) -> None:
    table = HashTable()
    insert_many(table, books, 50)
    for book in books[:50]:
        assert table.get(book.key) is book


def test_first_insert_keeps_capacity_and_second_grows(table, books) -> None:
    """
    Capacity 2 with threshold 0.49: one insert keeps capacity 2, the second grows it to 5.
    """
    table.insert(books[0].key, books[0])
    assert table.get_capacity() == 2
    table.insert(books[1].key, books[1])
    assert table.get_capacity() == 2 * 2 + 1


def test_resize_keeps_entries_retrievable(books) -> None:
    table = HashTable(10, 0.8)
    insert_many(table, books, 9)
    assert table.get_capacity() == 21
    assert table.num_keys() == 9
    for book in books[:9]:
        assert table.get(book.key) == book


def test_insert_500_keys(books) -> None:
    table = HashTable(50, 0.8)
    insert_many(table, books, 500)
    assert table.num_keys() == 500
    # 50 -> 101 -> 203 -> 407 -> 815
    assert table.get_capacity() == 815
    for book in books[:500]:
        assert table.get(book.key) == book
    assert sum(table.bucket_sizes()) == 500


def test_growth_is_single_pass() -> None:
    """
    A resize runs once per insert even if the new capacity is still over the threshold.
    """
    table = HashTable(1, 0.1)
    table.insert("a", 1)
    assert table.get_capacity() == 1
    table.insert("b", 2)
    assert table.get_capacity() == 3
    assert table.load_factor() > table.get_load_factor_threshold()
    table.insert("c", 3)
    assert table.get_capacity() == 7
    assert [table.get(key) for key in "abc"] == [1, 2, 3]


def test_get_throws_correct_exceptions(books) -> None:
    table = HashTable(101, 0.75)
    table.insert(books[0].key, books[0])

    with pytest.raises(IllegalNullKeyError):
        table.get(None)

    with pytest.raises(KeyNotFoundError) as excinfo:
        table.get(books[1].key)
    assert excinfo.value.key == books[1].key


def test_insert_throws_correct_exceptions(table, books) -> None:
    with pytest.raises(IllegalNullKeyError):
        table.insert(None, books[0])
    assert table.num_keys() == 0

    table.insert(books[0].key, books[0])
    table.insert(books[1].key, books[1])
    capacity = table.get_capacity()

    with pytest.raises(DuplicateKeyError):
        table.insert(books[1].key, books[2])

    # A failed insert changes nothing and the first record survives
    assert table.num_keys() == 2
    assert table.get_capacity() == capacity
    assert table.get(books[1].key) is books[1]


def test_duplicate_detected_after_resize(books) -> None:
    table = HashTable(3, 0.5)
    insert_many(table, books, 10)
    for book in books[:10]:
        with pytest.raises(DuplicateKeyError):
            table.insert(book.key, book)
    assert table.num_keys() == 10


def test_null_key_never_changes_num_keys(table, books) -> None:
    insert_many(table, books, 3)
    for operation in (lambda: table.insert(None, books[5]),
                      lambda: table.get(None),
                      lambda: table.remove(None),
                      lambda: table.contains(None)):
        with pytest.raises(IllegalNullKeyError):
            operation()
        assert table.num_keys() == 3


def test_errors_share_a_base_class() -> None:
    assert issubclass(IllegalNullKeyError, HashTableError)
    assert issubclass(DuplicateKeyError, HashTableError)
    assert issubclass(KeyNotFoundError, LookupError)


def test_non_string_key_rejected(table) -> None:
    with pytest.raises(TypeError):
        table.insert(42, "value")
    assert table.num_keys() == 0


def test_remove_throws_illegal_null_key(table) -> None:
    with pytest.raises(IllegalNullKeyError):
        table.remove(None)


def test_num_keys_after_multiple_inserts_and_removes(table, books) -> None:
    insert_many(table, books, 10)
    assert table.num_keys() == 10
    remove_many(table, books, 10)
    assert table.num_keys() == 0
    insert_many(table, books, 20)
    assert table.num_keys() == 20


def test_remove_returns_correct_boolean(books) -> None:
    table = HashTable(100, 0.8)
    insert_many(table, books, 10)

    assert table.remove(books[5].key) is True
    assert table.num_keys() == 9
    with pytest.raises(KeyNotFoundError):
        table.get(books[5].key)

    # Absent key: False, not an error
    assert table.remove(books[20].key) is False
    assert table.remove(books[5].key) is False
    assert table.num_keys() == 9


def test_remove_does_not_shrink(table, books) -> None:
    insert_many(table, books, 20)
    capacity = table.get_capacity()
    remove_many(table, books, 20)
    assert table.get_capacity() == capacity


def test_getters_unchanged_by_operations(books) -> None:
    table = HashTable(1000, 0.5)
    insert_many(table, books, 100)
    remove_many(table, books, 50)
    assert table.get_capacity() == 1000
    assert table.get_load_factor_threshold() == 0.5


def test_contains(table, books) -> None:
    table.insert(books[0].key, books[0])
    assert table.contains(books[0].key)
    assert books[0].key in table
    assert not table.contains(books[1].key)
    assert books[1].key not in table


def test_index_is_non_negative_for_negative_hash(monkeypatch) -> None:
    table = HashTable(7, 0.75)
    # Shadow the builtin hash inside the module with one that returns a negative value
    monkeypatch.setattr("utils.data_structures.hash_table.hash", lambda key: -123456789, raising=False)
    index = table.index_of("any key")
    assert 0 <= index < 7
    assert index == table.index_of("any key")


def test_colliding_keys_chain_in_one_bucket(monkeypatch) -> None:
    table = HashTable(7, 1.0)
    monkeypatch.setattr(table, "index_of", lambda key: 0)

    for key in ("alpha", "beta", "gamma"):
        table.insert(key, key.upper())

    assert table.bucket_sizes()[0] == 3
    assert table.remove("beta") is True
    assert table.get("alpha") == "ALPHA"
    assert table.get("gamma") == "GAMMA"
    assert table.bucket_sizes()[0] == 2


def test_keys_values_items(books) -> None:
    table = HashTable(5, 0.75)
    insert_many(table, books, 12)
    assert sorted(table.keys()) == sorted(book.key for book in books[:12])
    assert len(table.values()) == 12
    assert {entry.key: entry.value for entry in table.items()} == {book.key: book for book in books[:12]}


def test_resize_is_logged(table, books, caplog) -> None:
    caplog.set_level(logging.INFO, logger="utils.data_structures.hash_table")
    insert_many(table, books, 2)
    assert "from capacity 2 to 5" in caplog.text


def test_rehash_integrity_fault(table, books, monkeypatch) -> None:
    """
    If entries go missing during a rehash, the table raises an internal fault.
    """
    table.insert(books[0].key, books[0])
    monkeypatch.setattr(table, "_place", lambda entry: None)
    with pytest.raises(RehashIntegrityError):
        table.insert(books[1].key, books[1])
