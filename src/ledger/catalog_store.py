"""Asset Catalog Store - персистентная запись каталога по sentinel ключу.

Каталог изменяется только append() сразу после успешного сохранения Asset:
запись Asset всегда предшествует записи каталога. Прерывание между двумя
шагами оставляет Asset без записи в каталоге (допустимое промежуточное
состояние), но никогда не оставляет id каталога без Asset.

Сериализация вызовов гарантируется host, локов внутри нет.
"""

import json

from jsonschema import ValidationError as SchemaValidationError
from loguru import logger
from pydantic import ValidationError

from src.core.contracts import validate_asset_catalog
from src.core.domain.catalog import AssetCatalog
from src.core.errors import AlreadyExists, Corrupt, NotFound
from src.store.key_value import KeyValueStore


class AssetCatalogStore:
    """Read → append → write каталога Asset id."""

    def __init__(self, store: KeyValueStore, key: str = "currHolder"):
        self.store = store
        self.key = key

    def is_initialized(self) -> bool:
        return self.store.get(self.key) is not None

    def initialize(self) -> AssetCatalog:
        """
        Запись пустого каталога при bootstrap.

        Raises:
            AlreadyExists: каталог уже инициализирован (повторный bootstrap
                не должен затирать существующие записи)
            PersistenceError: сбой записи
        """
        if self.is_initialized():
            raise AlreadyExists("asset catalog already initialized", identifier=self.key)

        catalog = AssetCatalog()
        self.store.put(self.key, catalog.to_bytes())
        logger.info(f"asset catalog initialized at key={self.key}")
        return catalog

    def load(self) -> AssetCatalog:
        """
        Raises:
            NotFound: каталог не инициализирован
            Corrupt: запись не десериализуется
        """
        payload = self.store.get(self.key)
        if payload is None:
            raise NotFound("Unable to get asset catalog", identifier=self.key)

        try:
            data = json.loads(payload)
            validate_asset_catalog(data)
            return AssetCatalog.model_validate(data)
        except (ValueError, SchemaValidationError, ValidationError) as e:
            logger.error(f"Corrupt asset catalog record {payload!r}: {e}")
            raise Corrupt("Corrupt asset catalog record", identifier=self.key) from e

    def append(self, asset_id: str) -> AssetCatalog:
        """
        Добавить id в конец каталога.

        Вызывать только после того, как Asset с этим id сохранён.

        Raises:
            NotFound: каталог не инициализирован
            Corrupt: запись каталога не десериализуется
            AlreadyExists: id уже в каталоге
            PersistenceError: сбой записи
        """
        catalog = self.load()
        if asset_id in catalog:
            raise AlreadyExists(f"asset {asset_id!r} already cataloged", identifier=asset_id)

        catalog = catalog.append(asset_id)
        self.store.put(self.key, catalog.to_bytes())
        logger.debug(f"asset catalog append: id={asset_id} size={len(catalog)}")
        return catalog
