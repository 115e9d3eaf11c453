import random

import pytest

from mapkit.datastructures import ChainingMap, ListMap, structural_hash

FACTORIES = {
    "list": ListMap,
    "chaining": ChainingMap,
    "chaining-small": lambda: ChainingMap(3),
    "chaining-structural": lambda: ChainingMap(hash_policy=structural_hash),
}


@pytest.fixture(params=list(FACTORIES), ids=list(FACTORIES))
def m(request):
    return FACTORIES[request.param]()


def contents(m):
    return sorted((e.key(), e.value()) for e in m.entries())


def test_size_tracks_inserts_minus_removes(m):
    rng = random.Random(7)
    model = {}
    inserts = removes = 0
    for _ in range(500):
        k = rng.randint(-20, 40)
        if rng.random() < 0.6:
            v = rng.randint(0, 1000)
            if m.put(k, v) is None:
                inserts += 1
            model[k] = v
        elif m.remove(k) is not None:
            removes += 1
            del model[k]
        assert m.size() == inserts - removes == len(model)
    assert contents(m) == sorted(model.items())


def test_put_then_get(m):
    assert m.put(5, "five") is None
    assert m.get(5) == "five"
    assert 5 in m
    assert 6 not in m


def test_replace_keeps_size(m):
    m.put(3, "v1")
    assert m.size() == 1
    assert m.put(3, "v2") == "v1"
    assert m.size() == 1
    assert m.get(3) == "v2"


def test_remove_twice(m):
    m.put(9, "nine")
    assert m.remove(9) == "nine"
    assert m.get(9) is None
    assert m.remove(9) is None
    assert m.is_empty()


def test_get_default_and_none_values(m):
    assert m.get(1, "fallback") == "fallback"
    m.put(1, None)
    assert 1 in m
    assert m.get(1, "fallback") is None
    assert len(m) == 1


def test_views_share_order(m):
    for k in [4, 17, 30, -2, 8, 21]:
        m.put(k, k * 10)
    ks = list(m.keys())
    vs = list(m.values())
    es = [(e.key(), e.value()) for e in m.entries()]
    assert es == list(zip(ks, vs))
    assert sorted(ks) == [-2, 4, 8, 17, 21, 30]
    assert list(iter(m)) == ks


def test_views_are_single_pass(m):
    m.put(1, "a")
    it = m.entries()
    assert [e.key() for e in it] == [1]
    assert list(it) == []


def test_get_does_not_mutate(m):
    m.put(1, "a")
    before = contents(m)
    m.get(1)
    m.get(2)
    assert contents(m) == before
    assert m.size() == 1
