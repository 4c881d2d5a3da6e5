"""Credential Store - пары username → credential blob (например, eCert).

Записи хранятся напрямую по ключу username как сырые байты. Для ядра
хранилище read-only, запись возможна только при bootstrap.
"""

from typing import Union

from src.core.errors import InvalidArguments, NotFound
from src.store.key_value import KeyValueStore


class CredentialStore:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def add(self, name: str, blob: Union[str, bytes]) -> None:
        """
        Raises:
            InvalidArguments: пустое имя
            PersistenceError: сбой записи
        """
        if not name:
            raise InvalidArguments("credential name must be non-empty", identifier=name)
        if isinstance(blob, str):
            blob = blob.encode("utf-8")
        self.store.put(name, blob)

    def get(self, name: str) -> bytes:
        """
        Raises:
            NotFound: credential для name отсутствует
        """
        blob = self.store.get(name)
        if blob is None:
            raise NotFound(f"Couldn't retrieve credential for user {name}", identifier=name)
        return blob
