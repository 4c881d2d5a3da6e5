"""Asset Record Store - Asset записи в key-value store по ключу id.

Каждое чтение холодное (кэша между invocation нет). Десериализация строгая:
сначала JSON, затем контракт asset.json, затем Pydantic модель. Любое
несоответствие → Corrupt; значения по умолчанию не подставляются.

create() не проверяет авторизацию: это ответственность Router.
"""

import json
from typing import Optional

from jsonschema import ValidationError as SchemaValidationError
from loguru import logger
from pydantic import ValidationError

from src.core.contracts import validate_asset
from src.core.domain.asset import Asset
from src.core.errors import AlreadyExists, Corrupt, InvalidArguments, NotFound
from src.store.key_value import KeyValueStore


def decode_asset(payload: bytes, asset_id: Optional[str] = None) -> Asset:
    """
    Десериализация записи Asset.

    Raises:
        Corrupt: payload не JSON, нарушает контракт или модель
    """
    try:
        data = json.loads(payload)
        validate_asset(data)
        asset = Asset.model_validate(data)
    except (ValueError, SchemaValidationError, ValidationError) as e:
        logger.error(f"Corrupt asset record {payload!r}: {e}")
        raise Corrupt(
            f"Corrupt asset record {payload!r}", identifier=asset_id
        ) from e

    if asset_id is not None and asset.id != asset_id:
        raise Corrupt(
            f"asset record stored at {asset_id!r} carries id {asset.id!r}",
            identifier=asset_id,
        )
    return asset


class AssetRecordStore:
    """Сериализация/десериализация Asset в key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def exists(self, asset_id: str) -> bool:
        return self.store.get(asset_id) is not None

    def get(self, asset_id: str) -> Asset:
        """
        Raises:
            NotFound: записи нет
            Corrupt: запись не десериализуется
            PersistenceError: сбой чтения
        """
        payload = self.store.get(asset_id)
        if payload is None:
            raise NotFound(f"asset {asset_id!r} not found", identifier=asset_id)
        return decode_asset(payload, asset_id)

    def create(self, asset_id: str, name: str, kind: int, owner: str) -> Asset:
        """
        Создание Asset с пустыми balances.

        Raises:
            InvalidArguments: id пустой
            AlreadyExists: Asset с таким id уже есть
            PersistenceError: сбой записи
        """
        if not asset_id:
            raise InvalidArguments("asset id must be non-empty", identifier=asset_id)

        if self.exists(asset_id):
            raise AlreadyExists(
                f"asset {asset_id!r} already exists", identifier=asset_id
            )

        try:
            asset = Asset(id=asset_id, name=name, kind=kind, owner=owner)
        except ValidationError as e:
            raise InvalidArguments(
                f"invalid asset fields: {e.errors()[0]['msg']}", identifier=asset_id
            ) from e

        self.save(asset)
        logger.info(f"asset created: id={asset.id} kind={asset.kind} owner={asset.owner}")
        return asset

    def save(self, asset: Asset) -> None:
        """
        Перезапись записи по ключу asset.id.

        Raises:
            PersistenceError: сбой записи
        """
        self.store.put(asset.id, asset.to_bytes())
