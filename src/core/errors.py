"""
Ledger Errors - иерархия ошибок state machine

Каждая ошибка терминальна для вызова, который её поднял: ретраев нет,
ошибка возвращается вызывающему как результат invocation.

Ошибка несёт контекст (operation, identifier), достаточный для диагностики.
"""

from typing import Optional


class LedgerError(Exception):
    """
    Базовая ошибка asset ledger.

    Attributes:
        kind: стабильное имя вида ошибки (например, "NotFound")
        operation: имя операции, в которой возникла ошибка
        identifier: идентификатор (asset id, username, ключ), если применимо
    """

    kind: str = "LedgerError"

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        identifier: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.identifier = identifier

    def with_operation(self, operation: str) -> "LedgerError":
        """Проставить operation, если она ещё не задана (возвращает self)."""
        if self.operation is None:
            self.operation = operation
        return self

    def __str__(self) -> str:
        parts = [f"{self.kind}: {self.message}"]
        if self.operation is not None:
            parts.append(f"operation={self.operation}")
        if self.identifier is not None:
            parts.append(f"id={self.identifier}")
        return " | ".join(parts)


class IdentityUnavailable(LedgerError):
    """Не удалось получить username/role из execution context."""

    kind = "IdentityUnavailable"


class PermissionDenied(LedgerError):
    """Роль вызывающего не входит в набор разрешённых ролей операции."""

    kind = "PermissionDenied"


class NotFound(LedgerError):
    kind = "NotFound"


class AlreadyExists(LedgerError):
    kind = "AlreadyExists"


class Corrupt(LedgerError):
    """Запись в key-value store не десериализуется или нарушает контракт."""

    kind = "Corrupt"


class PersistenceError(LedgerError):
    """Сбой чтения/записи во внешнем key-value store."""

    kind = "PersistenceError"


class InvalidArguments(LedgerError):
    """Операция распознана, но аргументы неверны (arity, формат)."""

    kind = "InvalidArguments"


class UnknownOperation(LedgerError):
    """Имя операции не распознано данным entry point."""

    kind = "UnknownOperation"
