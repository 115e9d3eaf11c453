from .errors import InvalidCursorError, MapError, UnsupportedKeyError
from .linked_list import LinkedList, Position
from .map_base import Entry, Map
from .list_map import ListMap
from .hashing import HashPolicy, integer_mod, structural_hash
from .chaining_map import ChainingMap

__all__ = [
    "MapError",
    "UnsupportedKeyError",
    "InvalidCursorError",
    "LinkedList",
    "Position",
    "Entry",
    "Map",
    "ListMap",
    "ChainingMap",
    "HashPolicy",
    "integer_mod",
    "structural_hash",
]
