"""Hashing policies for :class:`~mapkit.datastructures.chaining_map.ChainingMap`.

A policy is any callable ``policy(key, bucket_count) -> int`` that returns a
bucket index in ``[0, bucket_count)`` and raises
:class:`~mapkit.datastructures.errors.UnsupportedKeyError` for keys it cannot
place. It must give the same index for equal keys for as long as the map
lives.
"""

from __future__ import annotations
import operator
from typing import Any, Callable

from .errors import UnsupportedKeyError

HashPolicy = Callable[[Any, int], int]


def integer_mod(key: Any, bucket_count: int) -> int:
    """Place integer-valued keys at ``key mod bucket_count``.

    Anything implementing ``__index__`` counts as integer-valued, except
    ``bool``. Python's ``%`` is floored, so negative keys still land in
    ``[0, bucket_count)``.
    """
    if isinstance(key, bool):
        raise UnsupportedKeyError(key)
    try:
        k = operator.index(key)
    except TypeError:
        raise UnsupportedKeyError(key) from None
    return k % bucket_count


def structural_hash(key: Any, bucket_count: int) -> int:
    """Place any hashable key using the built-in ``hash``.

    String hashes are salted per process, so bucket placement (and with it
    iteration order) is only stable within one interpreter run.
    """
    try:
        h = hash(key)
    except TypeError:
        raise UnsupportedKeyError(key) from None
    return h % bucket_count
