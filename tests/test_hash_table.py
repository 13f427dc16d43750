import pytest

from algokit.hash_table import HashTable


def test_insert_and_get():
    d1 = HashTable()
    d1.insert("first", "hi")
    d1.insert("secnd", "ih")
    assert len(d1) == 2
    assert d1.get("first") == "hi"
    assert d1.get("secnd") == "ih"


def test_duplicate_key_rejected():
    table = HashTable()
    assert table.insert("key", 1) is True
    assert table.insert("key", 2) is False
    assert table.get("key") == 1
    assert len(table) == 1


def test_get_missing_raises_key_error():
    table = HashTable()
    table.insert("present", 1)
    with pytest.raises(KeyError):
        table.get("absent")


def test_remove():
    table = HashTable()
    table.insert("a", 1)
    table.insert("b", 2)
    assert table.remove("a") is True
    assert table.remove("a") is False
    assert len(table) == 1
    assert "a" not in table
    assert table.get("b") == 2


def test_reinsert_after_remove():
    table = HashTable()
    table.insert("a", 1)
    table.remove("a")
    assert table.insert("a", 5) is True
    assert table.get("a") == 5
    assert len(table) == 1


def test_many_entries_survive_resizing():
    table = HashTable()
    keys = [f"key{i}" for i in range(200)]
    for i, key in enumerate(keys):
        assert table.insert(key, i) is True
    assert len(table) == 200
    assert [table.get(key) for key in keys] == list(range(200))


def test_churn_keeps_entries_reachable():
    table = HashTable()
    for i in range(100):
        table.insert(f"k{i}", i)
    for i in range(0, 100, 2):
        assert table.remove(f"k{i}") is True
    for i in range(100, 150):
        table.insert(f"k{i}", i)
    assert len(table) == 100
    assert all(table.get(f"k{i}") == i for i in range(1, 100, 2))
    assert all(table.get(f"k{i}") == i for i in range(100, 150))
    assert all(f"k{i}" not in table for i in range(0, 100, 2))


def test_find_by_value():
    table = HashTable()
    table.insert("first", "hi")
    assert table.find("hi") is True
    assert table.find("bye") is False
    table.remove("first")
    assert table.find("hi") is False