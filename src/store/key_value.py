"""KeyValueStore - адаптер внешнего key-value store.

Store, репликация и консенсус находятся вне state machine. Ядро видит
только два синхронных вызова:
- get(key) → bytes | None (None = ключ отсутствует)
- put(key, value) - перезапись значения

С точки зрения одного invocation store строго консистентен (snapshot).
Адаптер поднимает PersistenceError при сбое чтения/записи.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from src.core.errors import PersistenceError


class KeyValueStore(ABC):
    """Интерфейс key-value store, предоставляемый host runtime."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Прочитать значение по ключу; None если ключ отсутствует."""

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Записать значение по ключу (перезапись)."""

    def contains(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store для embedding в host и для тестов."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise PersistenceError(
                f"value for key {key!r} must be bytes, got {type(value).__name__}",
                identifier=key,
            )
        self._data[key] = bytes(value)

    def keys(self) -> List[str]:
        """Ключи в порядке первой записи."""
        return list(self._data)

    def snapshot(self) -> Dict[str, bytes]:
        return dict(self._data)
