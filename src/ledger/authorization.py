"""Authorization Gate - допуск вызывающего к операции.

Политика задаётся таблицей LedgerConfig.permissions (operation → роли):
- операция в таблице → роль вызывающего должна входить в её набор
- операции нет в таблице → роль не требуется
- нераспознанная строка роли не даёт никаких разрешений

Gate stateless и fail-closed: решение "разрешено" возможно только при
успешно резолвленном CallerContext; ошибки резолва до gate не доходят.
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional

from src.core.domain.roles import CallerContext, Role
from src.core.errors import PermissionDenied
from src.ledger.config import LedgerConfig


@dataclass(frozen=True)
class AuthorizationResult:
    """Результат Authorization Gate."""

    allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    operation: str
    caller_role: str
    required_roles: Optional[FrozenSet[Role]]

    # Детали
    details: str


class AuthorizationGate:
    """Authorization Gate: сравнение роли вызывающего с required роли операции."""

    def __init__(self, permissions: Optional[Mapping[str, FrozenSet[Role]]] = None):
        if permissions is None:
            permissions = LedgerConfig().permissions
        self.permissions = permissions

    def required_roles(self, operation: str) -> Optional[FrozenSet[Role]]:
        """Набор разрешённых ролей; None если операция роли не требует."""
        return self.permissions.get(operation)

    @staticmethod
    def authorize(role: str, required_role: Role) -> bool:
        """Чистая проверка равенства роли с required ролью."""
        return Role.parse(role) == required_role

    def evaluate(self, caller: CallerContext, operation: str) -> AuthorizationResult:
        """
        Оценка допуска caller к operation.

        Args:
            caller: резолвленный вызывающий
            operation: имя операции

        Returns:
            AuthorizationResult с решением о допуске
        """
        required = self.required_roles(operation)

        if required is None:
            return AuthorizationResult(
                allowed=True,
                block_reason="",
                operation=operation,
                caller_role=caller.role,
                required_roles=None,
                details=f"PASS: {operation} requires no role",
            )

        if any(self.authorize(caller.role, r) for r in required):
            return AuthorizationResult(
                allowed=True,
                block_reason="",
                operation=operation,
                caller_role=caller.role,
                required_roles=required,
                details=f"PASS: role={caller.role}",
            )

        if caller.role_enum is None:
            block_reason = "role_unrecognized"
        else:
            block_reason = "role_not_permitted"

        return AuthorizationResult(
            allowed=False,
            block_reason=block_reason,
            operation=operation,
            caller_role=caller.role,
            required_roles=required,
            details=(
                f"Permission Denied. {operation}. {caller.role} not in "
                f"{sorted(r.value for r in required)}"
            ),
        )

    def check(self, caller: CallerContext, operation: str) -> AuthorizationResult:
        """
        То же, что evaluate(), но отказ поднимает PermissionDenied.

        Raises:
            PermissionDenied: роль вызывающего не разрешена
        """
        result = self.evaluate(caller, operation)
        if not result.allowed:
            raise PermissionDenied(
                result.details, operation=operation, identifier=caller.identity
            )
        return result
