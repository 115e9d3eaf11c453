from __future__ import annotations
from typing import Generic, Iterator, Optional, TypeVar

from .errors import InvalidCursorError

T = TypeVar("T")


class _LLNode(Generic[T]):
    """A lightweight node for a doubly-linked list."""

    __slots__ = ("element", "prev", "next")

    def __init__(
        self,
        element: Optional[T] = None,
        prev: Optional["_LLNode[T]"] = None,
        next: Optional["_LLNode[T]"] = None,
    ) -> None:
        self.element = element
        self.prev = prev
        self.next = next


class Position(Generic[T]):
    """Opaque handle to one element of a :class:`LinkedList`.

    A position stays valid while its node is in the list, no matter what is
    inserted or removed around it.
    """

    __slots__ = ("_container", "_node")

    def __init__(self, container: "LinkedList[T]", node: _LLNode[T]) -> None:
        self._container = container
        self._node = node

    def element(self) -> T:
        """Return the element stored at this position."""
        return self._node.element  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._node is self._node  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Position({self._node.element!r})"


class LinkedList(Generic[T]):
    """Doubly-linked list addressed through :class:`Position` handles.

    Insertion at either end, and replacement or removal at a known position,
    are O(1). Traversal walks positions with :meth:`first` and :meth:`next`.

    Header and trailer sentinels bracket the real nodes, so every real node
    always has both neighbours and unlinking never special-cases the ends.
    """

    __slots__ = ("_header", "_trailer", "_size")

    def __init__(self) -> None:
        self._header: _LLNode[T] = _LLNode()
        self._trailer: _LLNode[T] = _LLNode()
        self._header.next = self._trailer
        self._trailer.prev = self._header
        self._size = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _validate(self, p: Position[T]) -> _LLNode[T]:
        """Return the node behind *p*, or raise if *p* is not a live position here."""
        if not isinstance(p, Position):
            raise InvalidCursorError(f"expected a Position, got {type(p).__name__}")
        if p._container is not self:
            raise InvalidCursorError("position does not belong to this list")
        if p._node.next is None:
            raise InvalidCursorError("position refers to a removed element")
        return p._node

    def _make_position(self, node: _LLNode[T]) -> Optional[Position[T]]:
        if node is self._header or node is self._trailer:
            return None
        return Position(self, node)

    def _insert_between(self, element: T, prev: _LLNode[T], nxt: _LLNode[T]) -> Position[T]:
        node = _LLNode(element, prev, nxt)
        prev.next = node
        nxt.prev = node
        self._size += 1
        return Position(self, node)

    # -----------------------------
    # Accessors
    # -----------------------------
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def first(self) -> Position[T]:
        """Return the position of the first element.

        Raises:
            IndexError: if the list is empty.
        """
        if self.is_empty():
            raise IndexError("first from empty list")
        return Position(self, self._header.next)  # type: ignore[arg-type]

    def last(self) -> Position[T]:
        """Return the position of the last element.

        Raises:
            IndexError: if the list is empty.
        """
        if self.is_empty():
            raise IndexError("last from empty list")
        return Position(self, self._trailer.prev)  # type: ignore[arg-type]

    def next(self, p: Position[T]) -> Optional[Position[T]]:
        """Return the position after *p*, or None if *p* is the last one."""
        node = self._validate(p)
        return self._make_position(node.next)  # type: ignore[arg-type]

    def prev(self, p: Position[T]) -> Optional[Position[T]]:
        """Return the position before *p*, or None if *p* is the first one."""
        node = self._validate(p)
        return self._make_position(node.prev)  # type: ignore[arg-type]

    # -----------------------------
    # Mutators
    # -----------------------------
    def insert_first(self, element: T) -> Position[T]:
        return self._insert_between(element, self._header, self._header.next)  # type: ignore[arg-type]

    def insert_last(self, element: T) -> Position[T]:
        """Append *element* at the tail and return its position."""
        return self._insert_between(element, self._trailer.prev, self._trailer)  # type: ignore[arg-type]

    def replace(self, p: Position[T], element: T) -> T:
        """Store *element* at *p* and return the element it replaced."""
        node = self._validate(p)
        old = node.element
        node.element = element
        return old  # type: ignore[return-value]

    def remove(self, p: Position[T]) -> T:
        """Unlink the node at *p* and return its element.

        Only *p* (and copies of it) become invalid; every other position
        keeps addressing its element.
        """
        node = self._validate(p)
        node.prev.next = node.next  # type: ignore[union-attr]
        node.next.prev = node.prev  # type: ignore[union-attr]
        self._size -= 1
        element = node.element
        # Cleared links mark the node as removed for _validate.
        node.prev = node.next = None
        node.element = None
        return element  # type: ignore[return-value]

    # -----------------------------
    # Iteration
    # -----------------------------
    def positions(self) -> Iterator[Position[T]]:
        """Yield positions from head to tail."""
        node = self._header.next
        while node is not self._trailer:
            yield Position(self, node)  # type: ignore[arg-type]
            node = node.next  # type: ignore[union-attr]

    def __iter__(self) -> Iterator[T]:
        """Yield elements from head to tail."""
        node = self._header.next
        while node is not self._trailer:
            yield node.element  # type: ignore[misc, union-attr]
            node = node.next  # type: ignore[union-attr]

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LinkedList([{', '.join(repr(e) for e in self)}])"
