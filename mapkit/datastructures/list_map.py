from __future__ import annotations
from typing import Iterator, Optional, TypeVar

from .linked_list import LinkedList, Position
from .map_base import Entry, Map, _MapEntry

K = TypeVar("K")
V = TypeVar("V")


class ListMap(Map[K, V]):
    """Map backed by a single linked list searched linearly.

    Every lookup is O(n). Entries are kept in the order their keys were
    first inserted; replacing a value keeps the entry's place, removing it
    leaves no trace.
    """

    __slots__ = ("_list",)

    def __init__(self) -> None:
        self._list: LinkedList[_MapEntry[K, V]] = LinkedList()

    def _find(self, key: K) -> Optional[Position[_MapEntry[K, V]]]:
        """Return the position of the entry with *key*, or None."""
        if self._list.is_empty():
            return None
        p: Optional[Position[_MapEntry[K, V]]] = self._list.first()
        while p is not None:
            if p.element().key() == key:
                return p
            p = self._list.next(p)
        return None

    def size(self) -> int:
        return self._list.size()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        p = self._find(key)
        if p is None:
            return default
        return p.element().value()

    def put(self, key: K, value: V) -> Optional[V]:
        p = self._find(key)
        if p is None:
            self._list.insert_last(_MapEntry(key, value))
            return None
        return self._list.replace(p, _MapEntry(key, value)).value()

    def remove(self, key: K) -> Optional[V]:
        p = self._find(key)
        if p is None:
            return None
        return self._list.remove(p).value()

    def entries(self) -> Iterator[Entry[K, V]]:
        return iter(self._list)

    def __str__(self) -> str:
        return "[ " + "".join(f"{e} " for e in self._list) + "]"
