from __future__ import annotations


class MapError(Exception):
    """Base class for errors raised by the map containers."""


class UnsupportedKeyError(MapError, TypeError):
    """The hashing policy cannot place *key* in a bucket."""

    def __init__(self, key: object) -> None:
        super().__init__(f"unsupported key {key!r} of type {type(key).__name__}")
        self.key = key


class InvalidCursorError(MapError, ValueError):
    """A Position was used that does not address a live node of this list."""
