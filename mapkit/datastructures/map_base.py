from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# Private marker so ``in`` can tell a missing key from a stored None.
_MISSING = object()


class Entry(ABC, Generic[K, V]):
    """A live (key, value) binding held by a :class:`Map`."""

    __slots__ = ()

    @abstractmethod
    def key(self) -> K:
        """Return the key of the entry."""

    @abstractmethod
    def value(self) -> V:
        """Return the value of the entry."""


class _MapEntry(Entry[K, V]):
    """Concrete entry record shared by the map implementations."""

    __slots__ = ("_key", "_value")

    def __init__(self, key: K, value: V) -> None:
        self._key = key
        self._value = value

    def key(self) -> K:
        return self._key

    def value(self) -> V:
        return self._value

    def __str__(self) -> str:
        return f"{{ {self._key}, {self._value} }}"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self._key!r}, {self._value!r})"


class Map(ABC, Generic[K, V]):
    """Common contract for the key -> value containers in this package.

    ``None`` is the absence indicator: ``get``, ``put`` and ``remove`` return
    it when there was no binding for the key. The ``keys``, ``values`` and
    ``entries`` views are single-pass iterators yielding the same order;
    mutating the map while one of them is live is not supported.
    """

    __slots__ = ()

    # -----------------------------
    # Core operations
    # -----------------------------
    @abstractmethod
    def size(self) -> int:
        """Number of live entries."""

    @abstractmethod
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value bound to *key*, or *default* if there is none."""

    @abstractmethod
    def put(self, key: K, value: V) -> Optional[V]:
        """Bind *key* to *value*; return the previous value or None."""

    @abstractmethod
    def remove(self, key: K) -> Optional[V]:
        """Drop the binding for *key*; return its value or None."""

    @abstractmethod
    def entries(self) -> Iterator[Entry[K, V]]:
        """Iterate over the live entries."""

    def is_empty(self) -> bool:
        return self.size() == 0

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def keys(self) -> Iterator[K]:
        for e in self.entries():
            yield e.key()

    def values(self) -> Iterator[V]:
        for e in self.entries():
            yield e.value()

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{e.key()!r}: {e.value()!r}" for e in self.entries())
        return f"{type(self).__name__}({{{pairs}}})"
