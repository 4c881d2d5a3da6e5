"""
AssetCatalog - Append-only реестр идентификаторов активов

Единственная process-wide запись: упорядоченная последовательность всех
созданных Asset id (порядок вставки == порядок создания).

Модель immutable: append() возвращает новый каталог. Удаление и
переупорядочивание не поддерживаются. In-memory кэша нет, каждое
изменение - read → append → write персистентной записи.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from .asset import canonical_json


class AssetCatalog(BaseModel):
    """Каталог Asset id в порядке создания."""

    ids: Tuple[str, ...] = Field(
        default_factory=tuple, description="Asset id в порядке создания"
    )

    model_config = {"frozen": True}

    @field_validator("ids")
    @classmethod
    def validate_unique_ids(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("catalog ids must be unique")
        return v

    def append(self, asset_id: str) -> "AssetCatalog":
        """
        Добавить id в конец последовательности.

        Raises:
            ValueError: если id пустой или уже есть в каталоге
        """
        if not asset_id:
            raise ValueError("asset id must be non-empty")
        if asset_id in self.ids:
            raise ValueError(f"asset id already cataloged: {asset_id}")
        return AssetCatalog(ids=self.ids + (asset_id,))

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def to_bytes(self) -> bytes:
        return canonical_json({"ids": list(self.ids)})
