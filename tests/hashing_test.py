import pytest

from mapkit.datastructures import ChainingMap, UnsupportedKeyError, integer_mod, structural_hash


class Ticket:
    """Integer-valued key via __index__."""

    def __init__(self, n):
        self.n = n

    def __index__(self):
        return self.n

    def __eq__(self, other):
        return isinstance(other, Ticket) and other.n == self.n

    def __hash__(self):
        return hash(self.n)


@pytest.mark.parametrize(
    "key, expected",
    [(0, 0), (12, 12), (13, 0), (27, 1), (-1, 12), (-13, 0), (-27, 12)],
)
def test_integer_mod_stays_in_range(key, expected):
    assert integer_mod(key, 13) == expected


def test_congruent_keys_share_a_bucket():
    assert len({integer_mod(k, 13) for k in (5, 18, 31, -8)}) == 1


def test_integer_mod_accepts_index_types():
    assert integer_mod(Ticket(15), 13) == 2
    m = ChainingMap()
    m.put(Ticket(15), "t")
    assert m.chain(2) == [(Ticket(15), "t")]


@pytest.mark.parametrize("key", ["7", 7.0, True, b"x", None])
def test_integer_mod_rejects_other_keys(key):
    with pytest.raises(UnsupportedKeyError) as exc:
        integer_mod(key, 13)
    assert exc.value.key is key


def test_structural_hash_places_any_hashable_key():
    m = ChainingMap(7, hash_policy=structural_hash)
    m.put("hello", 1)
    m.put((1, 2), 2)
    assert m.get("hello") == 1
    assert m.get((1, 2)) == 2
    assert 0 <= m.bucket_index("hello") < 7
    assert m.chain(m.bucket_index("hello"))[0] == ("hello", 1)


def test_structural_hash_rejects_unhashable_keys():
    m = ChainingMap(hash_policy=structural_hash)
    with pytest.raises(UnsupportedKeyError):
        m.put([1, 2], "list")
    assert m.size() == 0
