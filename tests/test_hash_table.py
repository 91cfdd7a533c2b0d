import pytest

from integral.hash_table import BYTES_IN_MEGABYTE, HashTable

MASK64 = (1 << 64) - 1
ENTRY_SIZE = 4096


def make_table(mb=1):
    return HashTable(dict, ENTRY_SIZE, mb)


def test_length_follows_size():
    table = make_table()
    assert len(table) == BYTES_IN_MEGABYTE // ENTRY_SIZE
    table.resize(2)
    assert len(table) == 2 * BYTES_IN_MEGABYTE // ENTRY_SIZE


def test_index_range_and_monotonic():
    table = make_table()
    assert table.index(0) == 0
    assert table.index(MASK64) == len(table) - 1
    keys = [0, 1 << 20, 1 << 40, 1 << 62, 1 << 63, MASK64]
    indices = [table.index(k) for k in keys]
    assert indices == sorted(indices)


def test_set_and_get_round_trip():
    table = make_table()
    key = 0x1234_5678_9ABC_DEF0
    table[key] = {"depth": 5}
    assert table[key] == {"depth": 5}


def test_entries_are_mutable_in_place():
    table = make_table()
    key = 1 << 50
    table[key]["score"] = 17
    assert table[key]["score"] == 17


def test_clear_restores_fresh_entries():
    table = make_table()
    table[MASK64] = {"move": "e2e4"}
    table.clear()
    assert table[MASK64] == {}
    assert len(table) == BYTES_IN_MEGABYTE // ENTRY_SIZE


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(dict, ENTRY_SIZE, 0)


def test_empty_table_access():
    table = HashTable(dict, ENTRY_SIZE)
    assert len(table) == 0
    with pytest.raises(IndexError):
        table[5]