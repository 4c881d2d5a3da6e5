"""Balance Evaluator - баланс держателя по Asset.

Чистая функция: отсутствующий держатель → 0, ошибок не бывает.
"""

from src.core.domain.asset import Asset, CurrentBalance


def balance_of(asset: Asset, holder: str) -> CurrentBalance:
    return CurrentBalance(identity=holder, balance=asset.balance_of(holder))
