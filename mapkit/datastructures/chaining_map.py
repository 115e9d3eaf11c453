from __future__ import annotations
import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .hashing import HashPolicy, integer_mod
from .linked_list import LinkedList, Position
from .map_base import Entry, Map, _MapEntry

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_Chain = LinkedList[_MapEntry[K, V]]


class _ChainIterator(Generic[K, V]):
    """Walks every chain of a bucket array in ascending bucket order.

    Holds the index of the next bucket to look at and an iterator over the
    chain currently being drained.
    """

    __slots__ = ("_buckets", "_index", "_it", "_pending")

    def __init__(self, buckets: List[Optional[_Chain]]) -> None:
        self._buckets = buckets
        self._index = 0
        self._it: Optional[Iterator[_MapEntry[K, V]]] = None
        # One element read ahead from _it, since list iterators have no has_next.
        self._pending: List[_MapEntry[K, V]] = []

    def has_next(self) -> bool:
        if self._pending:
            return True
        while True:
            if self._it is not None:
                for e in self._it:
                    self._pending.append(e)
                    return True
                self._it = None
            while self._index < len(self._buckets) and self._buckets[self._index] is None:
                self._index += 1
            if self._index == len(self._buckets):
                return False
            self._it = iter(self._buckets[self._index])  # type: ignore[arg-type]
            self._index += 1

    def __iter__(self) -> "_ChainIterator[K, V]":
        return self

    def __next__(self) -> Entry[K, V]:
        if not self.has_next():
            raise StopIteration
        return self._pending.pop()


class ChainingMap(Map[K, V]):
    """A separate-chaining hash map with a fixed number of buckets.

    Notes:
    - The bucket count is set at construction and never changes (no rehash).
    - Lazy bucket creation: a slot stays None until its first insert.
    - Each chain is a :class:`LinkedList` of entries searched linearly.
    - Iteration is by ascending bucket index, then chain insertion order.
    """

    DEFAULT_SIZE = 13

    __slots__ = ("_buckets", "_size", "_hash")

    def __init__(self, bucket_count: int = DEFAULT_SIZE, hash_policy: HashPolicy = integer_mod) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self._buckets: List[Optional[_Chain]] = [None] * bucket_count
        self._size: int = 0
        self._hash: HashPolicy = hash_policy

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def bucket_index(self, key: K) -> int:
        """Compute the bucket index of *key* under this map's policy."""
        return self._hash(key, len(self._buckets))

    @staticmethod
    def _find(chain: _Chain, key: K) -> Optional[Position[_MapEntry[K, V]]]:
        if chain.is_empty():
            return None
        p: Optional[Position[_MapEntry[K, V]]] = chain.first()
        while p is not None:
            if p.element().key() == key:
                return p
            p = chain.next(p)
        return None

    # -----------------------------
    # Core operations
    # -----------------------------
    def size(self) -> int:
        return self._size

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        chain = self._buckets[self.bucket_index(key)]
        if chain is None:
            return default
        p = self._find(chain, key)
        return default if p is None else p.element().value()

    def put(self, key: K, value: V) -> Optional[V]:
        """Insert or update *key*; return the replaced value or None."""
        idx = self.bucket_index(key)
        chain = self._buckets[idx]
        if chain is None:
            logger.debug("allocating chain for bucket %d", idx)
            chain = self._buckets[idx] = LinkedList()
            p = None
        else:
            p = self._find(chain, key)
        if p is None:
            chain.insert_last(_MapEntry(key, value))
            self._size += 1
            return None
        return chain.replace(p, _MapEntry(key, value)).value()

    def remove(self, key: K) -> Optional[V]:
        chain = self._buckets[self.bucket_index(key)]
        if chain is None:
            return None
        p = self._find(chain, key)
        if p is None:
            return None
        value = chain.remove(p).value()
        self._size -= 1
        return value

    def entries(self) -> Iterator[Entry[K, V]]:
        return _ChainIterator(self._buckets)

    # -----------------------------
    # Inspection
    # -----------------------------
    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def chain(self, index: int) -> List[Tuple[K, V]]:
        """Return a snapshot of bucket *index* as (key, value) pairs in chain order."""
        if not 0 <= index < len(self._buckets):
            raise IndexError("bucket index out of range")
        bucket = self._buckets[index]
        if bucket is None:
            return []
        return [(e.key(), e.value()) for e in bucket]

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def __str__(self) -> str:
        lines = []
        for i, bucket in enumerate(self._buckets):
            line = f"{i:>2}: "
            if bucket is not None:
                line += "[ " + "".join(f"{e} " for e in bucket) + "]"
            lines.append(line + "\n")
        return "".join(lines)
