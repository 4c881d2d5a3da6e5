"""
Asset - Модель актива и баланса держателя

Immutable Pydantic модели:
- Asset: именованный fungible инструмент с mapping держатель → баланс
- CurrentBalance: результат запроса баланса {identity, balance}

Сериализация каноническая (sorted keys, compact separators, UTF-8):
все реплики ledger должны записывать побайтно одинаковые записи.
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


def canonical_json(data: Any) -> bytes:
    """Каноническая JSON сериализация для записи в ledger."""
    return json.dumps(
        data, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


class Asset(BaseModel):
    """
    Актив (одна единица fungible инструмента).

    - id, name, kind неизменяемы после создания
    - owner задаётся при создании (transfer владения не поддерживается)
    - balances: держатель → сумма; отсутствие ключа означает нулевой баланс
    """

    id: str = Field(..., min_length=1, description="Глобально уникальный идентификатор")
    name: str = Field(..., description="Описательное имя")
    kind: int = Field(..., description="Целочисленный код категории")
    owner: str = Field(..., description="Identity владельца")
    balances: Dict[str, float] = Field(
        default_factory=dict, description="Балансы держателей"
    )

    model_config = {"frozen": True}

    @field_validator("balances")
    @classmethod
    def validate_holder_keys(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Ключи balances - непустые identity."""
        for holder in v:
            if not holder:
                raise ValueError("balances holder identity must be non-empty")
        return v

    def to_bytes(self) -> bytes:
        return canonical_json(self.model_dump())

    def balance_of(self, holder: str) -> float:
        """Баланс holder; отсутствующий ключ → 0."""
        return self.balances.get(holder, 0.0)


class CurrentBalance(BaseModel):
    """Баланс держателя по одному активу."""

    identity: str = Field(..., description="Identity держателя")
    balance: float = Field(..., description="Сумма")

    model_config = {"frozen": True}

    def to_bytes(self) -> bytes:
        return canonical_json(self.model_dump())
