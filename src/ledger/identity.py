"""Identity Resolver - username и role вызывающего из execution context.

Host передаёт execution context, поддерживающий read_attribute(name).
Резолв выполняется один раз на invocation, без кэширования.
Любая невозможность прочитать атрибут → IdentityUnavailable (fail closed).
"""

from typing import Any, Mapping, Optional, Union

from loguru import logger
from pydantic import ValidationError

from src.core.domain.roles import CallerContext
from src.core.errors import IdentityUnavailable
from src.ledger.config import LedgerConfig


class AttributeContext:
    """Mapping-backed execution context (атрибуты сертификата вызывающего)."""

    def __init__(self, attributes: Optional[Mapping[str, Union[str, bytes]]] = None):
        self._attributes = dict(attributes or {})

    def read_attribute(self, name: str) -> Union[str, bytes]:
        """
        Raises:
            KeyError: если атрибут отсутствует
        """
        return self._attributes[name]


class IdentityResolver:
    """Извлекает (identity, role) вызывающего из execution context."""

    def __init__(self, config: Optional[LedgerConfig] = None):
        self.config = config or LedgerConfig()

    def resolve(self, context: Any) -> CallerContext:
        """
        Args:
            context: host execution context с методом read_attribute(name)

        Returns:
            CallerContext с identity и role

        Raises:
            IdentityUnavailable: атрибут отсутствует или context не
                поддерживает чтение атрибутов
        """
        identity = self._read(context, self.config.username_attribute)
        role = self._read(context, self.config.role_attribute)

        try:
            caller = CallerContext(identity=identity, role=role)
        except ValidationError as e:
            raise IdentityUnavailable(
                f"caller attributes rejected: {e.errors()[0]['msg']}", identifier=identity
            ) from e
        logger.debug(f"caller: {caller.identity}, affiliation: {caller.role}")
        return caller

    def _read(self, context: Any, name: str) -> str:
        read_attribute = getattr(context, "read_attribute", None)
        if not callable(read_attribute):
            raise IdentityUnavailable(
                "execution context does not support attribute lookup",
                identifier=name,
            )

        try:
            value = read_attribute(name)
        except Exception as e:
            # любой сбой lookup у host означает, что identity недоступна
            raise IdentityUnavailable(
                f"Couldn't get attribute '{name}'. Error: {e}", identifier=name
            ) from e

        if isinstance(value, (bytes, bytearray)):
            try:
                value = bytes(value).decode("utf-8")
            except UnicodeDecodeError as e:
                raise IdentityUnavailable(
                    f"attribute '{name}' is not valid UTF-8", identifier=name
                ) from e

        if not isinstance(value, str):
            raise IdentityUnavailable(
                f"attribute '{name}' must be a string, got {type(value).__name__}",
                identifier=name,
            )
        if not value:
            raise IdentityUnavailable(f"attribute '{name}' is empty", identifier=name)

        return value
