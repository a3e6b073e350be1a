from algobox.caches import LRUCache


def test_lru_cache_example_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LRUCache(3)
    assert cache.get(42) == -1


def test_update_refreshes_value_and_recency():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(1) == 10
    assert cache.get(3) == 3


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(20):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert len(cache) == 3
    assert [cache.get(k) for k in (17, 18, 19)] == [34, 36, 38]
    assert cache.get(16) == -1


def test_zero_capacity_stores_nothing():
    cache = LRUCache(0)
    cache.put(1, 1)
    assert cache.get(1) == -1
    assert len(cache) == 0


def test_get_protects_key_from_eviction():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.get(1)
    cache.put(3, 3)
    assert cache.get(1) == 1
    assert cache.get(2) == -1