"""Bootstrap - инициализация ledger при deploy.

Аргументы - плоская последовательность пар (name, credential blob).

Порядок:
1. Проверка аргументов (до любой записи)
2. Проверка, что каталог ещё не инициализирован (повторный bootstrap
   затёр бы существующие id каталога)
3. Запись credentials
4. Запись пустого каталога последней: каталог служит маркером
   "ledger инициализирован"
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger

from src.core.errors import AlreadyExists, InvalidArguments
from src.ledger.catalog_store import AssetCatalogStore
from src.ledger.config import OP_INIT, LedgerConfig
from src.ledger.credentials import CredentialStore
from src.store.key_value import KeyValueStore


def parse_credential_pairs(args: Sequence[str]) -> List[Tuple[str, str]]:
    """
    Разбор плоского списка в пары (name, blob).

    Raises:
        InvalidArguments: нечётное число аргументов или пустое имя
    """
    if len(args) % 2 != 0:
        raise InvalidArguments(
            f"expected (name, credential) pairs, got {len(args)} arguments",
            operation=OP_INIT,
        )

    pairs = []
    for i in range(0, len(args), 2):
        name, blob = args[i], args[i + 1]
        if not name:
            raise InvalidArguments(
                f"empty credential name at position {i}", operation=OP_INIT
            )
        pairs.append((name, blob))
    return pairs


class LedgerBootstrap:
    def __init__(self, store: KeyValueStore, config: Optional[LedgerConfig] = None):
        self.config = config or LedgerConfig()
        self.catalog = AssetCatalogStore(store, self.config.catalog_key)
        self.credentials = CredentialStore(store)

    def initialize(self, args: Sequence[str]) -> None:
        """
        Raises:
            InvalidArguments: аргументы не образуют пары
            AlreadyExists: ledger уже инициализирован, либо имя credential
                совпадает с sentinel ключом каталога
            PersistenceError: сбой записи
        """
        pairs = parse_credential_pairs(args)

        for name, _ in pairs:
            if name == self.config.catalog_key:
                raise AlreadyExists(
                    f"credential name collides with catalog key {name!r}",
                    operation=OP_INIT,
                    identifier=name,
                )

        if self.catalog.is_initialized():
            raise AlreadyExists(
                "ledger already initialized",
                operation=OP_INIT,
                identifier=self.config.catalog_key,
            )

        for name, blob in pairs:
            self.credentials.add(name, blob)

        self.catalog.initialize()
        logger.info(f"ledger initialized: {len(pairs)} credentials seeded")
