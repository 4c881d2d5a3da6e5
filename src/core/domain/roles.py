"""
Roles & Caller Context

Роль вызывающего читается из execution context как строка и сопоставляется
с перечислением Role. Нераспознанная строка роли не является ошибкой:
такой вызывающий остаётся валидной identity, но не получает разрешений.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Роли участников ledger."""

    REGULATOR = "regulator"
    SUBSCRIBER = "subscriber"
    PRIVATE = "private"
    USER = "user"

    @classmethod
    def parse(cls, value: str) -> Optional["Role"]:
        """
        Сопоставить строку роли с Role.

        Returns:
            Role или None, если строка не распознана
        """
        try:
            return cls(value)
        except ValueError:
            return None


class CallerContext(BaseModel):
    """
    Вызывающий (ephemeral, один на invocation, не персистится).

    role хранится как исходная строка из context; role_enum - её
    распознанное значение (None для неизвестных ролей).
    """

    identity: str = Field(..., description="Username вызывающего")
    role: str = Field(..., description="Роль вызывающего (как прочитана из context)")

    model_config = {"frozen": True}

    @property
    def role_enum(self) -> Optional[Role]:
        return Role.parse(self.role)
