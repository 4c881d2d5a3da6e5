"""Конфигурация asset ledger.

Политика авторизации data-driven: таблица operation → набор разрешённых
ролей. Операции, отсутствующие в таблице, роли не требуют.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from src.core.domain.roles import Role


# Имена операций
OP_CREATE_ASSET = "createAsset"
OP_PING = "ping"
OP_GET_ASSET_INFO = "getAssetInfo"
OP_GET_CREDENTIAL = "getCredential"
OP_GET_BALANCE = "getBalance"
OP_GET_ASSET_CATALOG = "getAssetCatalog"
OP_INIT = "init"


def default_permissions() -> Mapping[str, FrozenSet[Role]]:
    """Только regulator может создавать активы."""
    return MappingProxyType({OP_CREATE_ASSET: frozenset({Role.REGULATOR})})


@dataclass(frozen=True)
class LedgerConfig:
    """Конфигурация ledger.

    - catalog_key: sentinel ключ записи каталога в key-value store
    - ping_payload: фиксированный liveness payload
    - username_attribute / role_attribute: имена атрибутов caller context
    - permissions: operation → роли, которым операция разрешена
    """
    catalog_key: str = "currHolder"
    ping_payload: bytes = b"Hello, world!"
    username_attribute: str = "username"
    role_attribute: str = "role"
    permissions: Mapping[str, FrozenSet[Role]] = field(default_factory=default_permissions)
