import pytest
from jsonpath_rfc9535 import LRUCache


def test_get_put():
    cache = LRUCache(2)
    assert cache.get("a") is None
    assert cache.get("a", 0) == 0
    cache.put("a", 1)
    assert cache.get("a") == 1
    assert "a" in cache
    assert len(cache) == 1


def test_eviction():
    cache = LRUCache(2)
    cache.put("p1", 1)
    cache.put("p2", 2)
    cache.put("p3", 3)
    assert "p1" not in cache
    assert cache.keys() == ["p2", "p3"]


def test_get_refreshes():
    cache = LRUCache(2)
    cache.put("p1", 1)
    cache.put("p2", 2)
    assert cache.get("p1") == 1
    cache.put("p3", 3)
    assert "p1" in cache
    assert "p2" not in cache
    assert cache.keys() == ["p1", "p3"]


def test_put_existing_refreshes():
    cache = LRUCache(2)
    cache.put("p1", 1)
    cache.put("p2", 2)
    cache.put("p1", 10)
    cache.put("p3", 3)
    assert cache.get("p1") == 10
    assert "p2" not in cache
    assert len(cache) == 2


def test_contains_does_not_refresh():
    cache = LRUCache(2)
    cache.put("p1", 1)
    cache.put("p2", 2)
    assert "p1" in cache
    cache.put("p3", 3)
    assert "p1" not in cache


def test_zero_capacity():
    cache = LRUCache(0)
    cache.put("a", 1)
    assert cache.get("a") is None
    assert len(cache) == 0


def test_negative_capacity():
    with pytest.raises(ValueError):
        LRUCache(-1)


def test_clear():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.clear()
    assert len(cache) == 0
    assert cache.get("a") is None
