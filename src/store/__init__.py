"""Store - адаптер внешнего key-value store."""

from .key_value import InMemoryKeyValueStore, KeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
]
