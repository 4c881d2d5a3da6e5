"""
JSON Schema Contract Validators

Модуль для валидации записей ledger согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- asset.json (запись Asset по ключу id)
- asset_catalog.json (запись каталога по sentinel ключу)
- current_balance.json (результат getBalance)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (входят в пакет).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'asset')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class AssetValidator(ContractValidator):
    def __init__(self):
        super().__init__("asset")


class AssetCatalogValidator(ContractValidator):
    def __init__(self):
        super().__init__("asset_catalog")


class CurrentBalanceValidator(ContractValidator):
    def __init__(self):
        super().__init__("current_balance")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_asset(data: Dict[str, Any]) -> None:
    """
    Валидация записи Asset.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AssetValidator().validate(data)


def validate_asset_catalog(data: Dict[str, Any]) -> None:
    """
    Валидация записи каталога.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AssetCatalogValidator().validate(data)


def validate_current_balance(data: Dict[str, Any]) -> None:
    """
    Валидация результата getBalance.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurrentBalanceValidator().validate(data)
