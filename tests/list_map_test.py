from mapkit.datastructures import ListMap


def pairs(m):
    return [(e.key(), e.value()) for e in m.entries()]


def test_empty_map():
    m = ListMap()
    assert m.size() == 0
    assert m.is_empty()
    assert m.get(7) is None
    assert m.remove(7) is None


def test_insert_replace_get():
    m = ListMap()
    assert m.put(1, "a") is None
    assert m.put(2, "b") is None
    assert m.put(1, "c") == "a"
    assert m.size() == 2
    assert m.get(1) == "c"
    assert m.get(2) == "b"
    assert pairs(m) == [(1, "c"), (2, "b")]


def test_remove_then_reinsert_moves_to_end():
    m = ListMap()
    m.put(1, "a")
    m.put(2, "b")
    m.put(1, "c")

    assert m.remove(1) == "c"
    assert m.size() == 1
    assert m.remove(1) is None
    assert m.put(1, "d") is None
    assert m.size() == 2
    assert pairs(m) == [(2, "b"), (1, "d")]


def test_accepts_any_comparable_key():
    m = ListMap()
    m.put("hello", 1)
    m.put((1, 2), 2)
    m.put(["unhashable"], 3)
    assert m.get("hello") == 1
    assert m.get((1, 2)) == 2
    assert m.get(["unhashable"]) == 3
    assert m.remove(["unhashable"]) == 3
    assert m.size() == 2


def test_str_rendering():
    m = ListMap()
    assert str(m) == "[ ]"
    m.put(1, "a")
    m.put(2, "b")
    assert str(m) == "[ { 1, a } { 2, b } ]"
