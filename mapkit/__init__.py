"""Linked-list and chained-hash map containers."""

from .datastructures import ChainingMap, ListMap, Map

__version__ = "0.1.0"

__all__ = ["ChainingMap", "ListMap", "Map", "__version__"]
