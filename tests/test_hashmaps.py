import pytest

from netlogkit.hashmaps import ChainedHashMap, LinearProbingHashMap


def _demo_linear():
    table = LinearProbingHashMap(5)
    results = [table.put(k, k) for k in (1, 5, 11, 15, 2, 8)]
    return table, results


def test_linear_demo_values():
    table, results = _demo_linear()
    assert results == [True, True, True, True, True, False]
    assert table.get(5) == 5
    assert table.get(15) == 15


def test_linear_full_table_rejects_and_missing_key_raises():
    table, _ = _demo_linear()
    assert len(table) == table.capacity
    with pytest.raises(KeyError):
        table.get(8)


def test_linear_colliding_keys_round_trip():
    table = LinearProbingHashMap(7)
    keys = [3, 10, 17, 24, 0]
    for key in keys:
        assert table.put(key, f"v{key}")
    assert [table.get(k) for k in keys] == [f"v{k}" for k in keys]


def test_linear_empty_state():
    table = LinearProbingHashMap(3)
    assert table.is_empty()
    table.put(4, "x")
    assert not table.is_empty()
    assert len(table) == 1


def test_linear_duplicate_key_returns_first():
    table = LinearProbingHashMap(4)
    table.put(2, "first")
    table.put(2, "second")
    assert len(table) == 2
    assert table.get(2) == "first"


@pytest.mark.parametrize("cls", [LinearProbingHashMap, ChainedHashMap])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(0)


def test_chained_demo_values_and_positions():
    table = ChainedHashMap(5)
    for key in (1, 5, 11, 15, 2, 12):
        assert table.put(key, key)
    assert [table.get(k) for k in (5, 15, 2, 12)] == [5, 15, 2, 12]
    assert table.position(5) == (0, 0)
    assert table.position(15) == (0, 1)
    assert table.position(12) == (2, 1)


def test_chained_never_fills_up():
    table = ChainedHashMap(2)
    for key in range(20):
        assert table.put(key, key * 10)
    assert len(table) == 20
    assert all(table.get(k) == k * 10 for k in range(20))


def test_chained_missing_key():
    table = ChainedHashMap(3)
    assert table.is_empty()
    table.put(1, "a")
    with pytest.raises(KeyError):
        table.get(4)
    with pytest.raises(KeyError):
        table.position(4)