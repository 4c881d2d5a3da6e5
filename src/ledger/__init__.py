"""Asset Ledger - deterministic state machine над внешним key-value store.

- Identity Resolver: (username, role) вызывающего из execution context
- Authorization Gate: роль → разрешённые операции (data-driven)
- Asset Record Store / Asset Catalog Store: персистентные записи
- Balance Evaluator: баланс держателя
- Operation Router: mutating и read-only entry points
"""

from .asset_store import AssetRecordStore
from .authorization import AuthorizationGate, AuthorizationResult
from .balance import balance_of
from .bootstrap import LedgerBootstrap
from .catalog_store import AssetCatalogStore
from .config import LedgerConfig
from .credentials import CredentialStore
from .identity import AttributeContext, IdentityResolver
from .router import InvocationResult, OperationRouter

__all__ = [
    "AssetRecordStore",
    "AssetCatalogStore",
    "AuthorizationGate",
    "AuthorizationResult",
    "AttributeContext",
    "CredentialStore",
    "IdentityResolver",
    "InvocationResult",
    "LedgerBootstrap",
    "LedgerConfig",
    "OperationRouter",
    "balance_of",
]
