import pytest

from dstructs.hashtable import (
    ChainedHashTable,
    format_table,
    linear_probe,
    multiplicative_hash,
)

SAMPLE = [22, 41, 53, 46, 30, 13, 12, 67]


def _sample_table() -> ChainedHashTable:
    table = ChainedHashTable(11, multiplicative_hash)
    for key in SAMPLE:
        assert table.insert(key)
    return table


def test_multiplicative_hash_value():
    assert multiplicative_hash(22, 11) == 0


def test_linear_probe_wraps_around():
    assert linear_probe(10, 11) == 0
    assert linear_probe(3, 11) == 4


def test_every_key_sits_in_its_hash_bucket():
    table = _sample_table()
    for index, chain in enumerate(table.buckets()):
        for key in chain:
            assert multiplicative_hash(key, 11) == index
    assert sorted(k for chain in table.buckets() for k in chain) == sorted(SAMPLE)
    assert len(table) == len(SAMPLE)


def test_collisions_are_chained_head_first():
    table = _sample_table()
    assert table.buckets()[multiplicative_hash(41, 11)] == (30, 41)
    assert table.buckets()[multiplicative_hash(12, 11)] == (67, 12)


def test_search_and_contains():
    table = _sample_table()
    assert table.search(53) == multiplicative_hash(53, 11)
    assert table.search(54) is None
    assert 46 in table
    assert 47 not in table


def test_duplicate_insert_rejected():
    table = _sample_table()
    assert not table.insert(22)
    assert len(table) == len(SAMPLE)


def test_delete_removes_and_returns_key():
    table = _sample_table()
    assert table.delete(41) == 41
    assert 41 not in table
    assert 30 in table
    assert len(table) == len(SAMPLE) - 1
    assert table.delete(30) == 30
    assert table.buckets()[multiplicative_hash(30, 11)] == ()


def test_delete_missing_raises_key_error():
    table = _sample_table()
    with pytest.raises(KeyError):
        table.delete(99)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        ChainedHashTable(0, multiplicative_hash)


def test_custom_hash_function_is_used():
    table = ChainedHashTable(5, lambda key, size: 0)
    for key in (1, 2, 3):
        table.insert(key)
    assert table.buckets()[0] == (3, 2, 1)
    assert all(chain == () for chain in table.buckets()[1:])


def test_format_table_layout():
    table = ChainedHashTable(3, lambda key, size: key % size)
    table.insert(4)
    table.insert(1)
    assert format_table(table) == "\n0 :\n1 : 1  4 \n2 :"