"""
Contract Validation Module

Модуль для валидации JSON записей asset ledger.
"""

from .validators import (
    AssetCatalogValidator,
    AssetValidator,
    ContractValidator,
    CurrentBalanceValidator,
    SchemaLoader,
    validate_asset,
    validate_asset_catalog,
    validate_current_balance,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AssetValidator",
    "AssetCatalogValidator",
    "CurrentBalanceValidator",
    # Functions
    "validate_asset",
    "validate_asset_catalog",
    "validate_current_balance",
]
