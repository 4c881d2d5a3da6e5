"""Unit тесты для Authorization Gate.

Coverage:
- regulator допущен к createAsset
- subscriber/private/user/нераспознанные роли → отказ
- операции вне таблицы permissions не требуют роли
- data-driven таблица permissions
"""

import pytest

from src.core.domain import CallerContext, Role
from src.core.errors import PermissionDenied
from src.ledger import AuthorizationGate


@pytest.fixture
def gate():
    return AuthorizationGate()


def caller(role: str) -> CallerContext:
    return CallerContext(identity="someone", role=role)


# =============================================================================
# PASS SCENARIOS
# =============================================================================


def test_regulator_may_create(gate):
    result = gate.evaluate(caller("regulator"), "createAsset")

    assert result.allowed is True
    assert result.block_reason == ""
    assert result.required_roles == frozenset({Role.REGULATOR})
    assert "PASS" in result.details


@pytest.mark.parametrize("op", ["ping", "getAssetInfo", "getBalance", "getCredential"])
def test_unlisted_operation_requires_no_role(gate, op):
    result = gate.evaluate(caller("user"), op)

    assert result.allowed is True
    assert result.required_roles is None


# =============================================================================
# BLOCK SCENARIOS
# =============================================================================


@pytest.mark.parametrize("role", ["subscriber", "private", "user"])
def test_known_roles_without_create_permission(gate, role):
    result = gate.evaluate(caller(role), "createAsset")

    assert result.allowed is False
    assert result.block_reason == "role_not_permitted"
    assert "Permission Denied" in result.details


def test_unrecognized_role_denied(gate):
    result = gate.evaluate(caller("admin"), "createAsset")

    assert result.allowed is False
    assert result.block_reason == "role_unrecognized"


def test_check_raises_permission_denied(gate):
    with pytest.raises(PermissionDenied) as exc:
        gate.check(caller("user"), "createAsset")

    assert exc.value.operation == "createAsset"
    assert exc.value.identifier == "someone"


def test_authorize_is_pure_equality():
    assert AuthorizationGate.authorize("regulator", Role.REGULATOR) is True
    assert AuthorizationGate.authorize("user", Role.REGULATOR) is False
    assert AuthorizationGate.authorize("REGULATOR", Role.REGULATOR) is False


# =============================================================================
# DATA-DRIVEN POLICY
# =============================================================================


def test_custom_permission_table():
    gate = AuthorizationGate({
        "createAsset": frozenset({Role.REGULATOR, Role.PRIVATE}),
        "getCredential": frozenset({Role.REGULATOR}),
    })

    assert gate.evaluate(caller("private"), "createAsset").allowed is True
    assert gate.evaluate(caller("user"), "getCredential").allowed is False
    assert gate.evaluate(caller("user"), "ping").allowed is True
