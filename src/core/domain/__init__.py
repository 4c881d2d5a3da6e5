"""
Domain models and value objects.

Contains ledger entities: Asset, AssetCatalog, CurrentBalance, Role, CallerContext.
"""

from src.core.domain.asset import Asset, CurrentBalance, canonical_json
from src.core.domain.catalog import AssetCatalog
from src.core.domain.roles import CallerContext, Role

__all__ = [
    "Asset",
    "CurrentBalance",
    "canonical_json",
    "AssetCatalog",
    "CallerContext",
    "Role",
]
