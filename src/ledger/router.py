"""Operation Router - entry points asset ledger state machine.

Два entry point, каждый - тотальная функция (operation, args) → InvocationResult:
- invoke(): mutating entry (createAsset, ping)
- query(): read-only entry (getAssetInfo, getCredential, ping, getBalance,
  getAssetCatalog)

Порядок обработки одного вызова:
1. Identity Resolver → CallerContext (ошибка блокирует любую операцию,
   включая ping)
2. Поиск операции в entry → UnknownOperation
3. Authorization Gate по таблице permissions → PermissionDenied
4. Проверка arity → InvalidArguments (до любого обращения к store)
5. Выполнение операции

createAsset - двухфазная последовательность без транзакции:
Asset save → Catalog append. Между фазами допустимо состояние
"Asset существует, но не в каталоге"; обратное состояние невозможно.

Детерминизм: ни время, ни случайность не влияют на control flow и на
записываемые значения.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from jsonschema import ValidationError as SchemaValidationError
from loguru import logger

from src.core.contracts import validate_current_balance
from src.core.domain.roles import CallerContext
from src.core.errors import Corrupt, InvalidArguments, LedgerError, UnknownOperation
from src.ledger.asset_store import AssetRecordStore
from src.ledger.authorization import AuthorizationGate
from src.ledger.balance import balance_of
from src.ledger.bootstrap import LedgerBootstrap
from src.ledger.catalog_store import AssetCatalogStore
from src.ledger.config import (
    OP_CREATE_ASSET,
    OP_GET_ASSET_CATALOG,
    OP_GET_ASSET_INFO,
    OP_GET_BALANCE,
    OP_GET_CREDENTIAL,
    OP_INIT,
    OP_PING,
    LedgerConfig,
)
from src.ledger.credentials import CredentialStore
from src.ledger.identity import IdentityResolver
from src.store.key_value import KeyValueStore


MUTATING_ENTRY = "invoke"
READ_ONLY_ENTRY = "query"


@dataclass(frozen=True)
class InvocationResult:
    """Результат вызова entry point."""

    operation: str
    payload: bytes = b""
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


Handler = Callable[[CallerContext, Sequence[str]], bytes]


class OperationRouter:
    """Маршрутизация (operation, args) к компонентам ledger."""

    def __init__(self, store: KeyValueStore, config: Optional[LedgerConfig] = None):
        self.config = config or LedgerConfig()
        self.store = store

        self.identity = IdentityResolver(self.config)
        self.gate = AuthorizationGate(self.config.permissions)
        self.assets = AssetRecordStore(store)
        self.catalog = AssetCatalogStore(store, self.config.catalog_key)
        self.credentials = CredentialStore(store)
        self.bootstrap = LedgerBootstrap(store, self.config)

        # operation → (arity, handler)
        self._mutating: Dict[str, Tuple[int, Handler]] = {
            OP_CREATE_ASSET: (4, self._create_asset),
            OP_PING: (0, self._ping),
        }
        self._read_only: Dict[str, Tuple[int, Handler]] = {
            OP_GET_ASSET_INFO: (1, self._get_asset_info),
            OP_GET_CREDENTIAL: (1, self._get_credential),
            OP_PING: (0, self._ping),
            OP_GET_BALANCE: (2, self._get_balance),
            OP_GET_ASSET_CATALOG: (0, self._get_asset_catalog),
        }

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def init(self, args: Sequence[str]) -> InvocationResult:
        """Bootstrap: seed credentials + пустой каталог."""
        try:
            self.bootstrap.initialize(list(args))
        except LedgerError as e:
            return self._fail(OP_INIT, e)
        return InvocationResult(operation=OP_INIT)

    def invoke(self, context: Any, function: str, args: Sequence[str]) -> InvocationResult:
        """Mutating entry."""
        return self._dispatch(MUTATING_ENTRY, self._mutating, context, function, args)

    def query(self, context: Any, function: str, args: Sequence[str]) -> InvocationResult:
        """Read-only entry."""
        return self._dispatch(READ_ONLY_ENTRY, self._read_only, context, function, args)

    def _dispatch(
        self,
        entry: str,
        handlers: Dict[str, Tuple[int, Handler]],
        context: Any,
        function: str,
        args: Sequence[str],
    ) -> InvocationResult:
        args = list(args)
        try:
            caller = self.identity.resolve(context)
            logger.debug(f"{entry}: function={function} caller={caller.identity}")

            if function not in handlers:
                raise UnknownOperation(
                    f"Received unknown function invocation {function}",
                    operation=function,
                )
            arity, handler = handlers[function]

            self.gate.check(caller, function)

            if len(args) != arity:
                raise InvalidArguments(
                    f"Incorrect number of arguments passed: expected {arity}, got {len(args)}",
                    operation=function,
                )

            payload = handler(caller, args)
        except LedgerError as e:
            return self._fail(function, e)

        return InvocationResult(operation=function, payload=payload)

    @staticmethod
    def _fail(operation: str, error: LedgerError) -> InvocationResult:
        error.with_operation(operation)
        logger.warning(f"invocation failed: {error}")
        return InvocationResult(operation=operation, error=error)

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def _ping(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        return self.config.ping_payload

    def _create_asset(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        asset_id, name, kind, owner = args
        if asset_id == self.config.catalog_key:
            raise InvalidArguments(
                f"asset id collides with catalog key {asset_id!r}",
                operation=OP_CREATE_ASSET,
                identifier=asset_id,
            )

        try:
            kind_code = int(kind)
        except (TypeError, ValueError) as e:
            raise InvalidArguments(
                f"asset kind must be an integer, got {kind!r}",
                operation=OP_CREATE_ASSET,
                identifier=asset_id,
            ) from e

        # Фаза 1: Asset запись. Фаза 2: append в каталог.
        asset = self.assets.create(asset_id, name, kind_code, owner)
        self.catalog.append(asset.id)
        return b""

    def _get_asset_info(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        return self.assets.get(args[0]).to_bytes()

    def _get_credential(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        return self.credentials.get(args[0])

    def _get_balance(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        asset_id, holder = args
        asset = self.assets.get(asset_id)
        current = balance_of(asset, holder)
        try:
            validate_current_balance(current.model_dump())
        except SchemaValidationError as e:
            raise Corrupt(
                f"balance of {holder!r} violates contract: {e.message}",
                operation=OP_GET_BALANCE,
                identifier=asset_id,
            ) from e
        return current.to_bytes()

    def _get_asset_catalog(self, caller: CallerContext, args: Sequence[str]) -> bytes:
        return self.catalog.load().to_bytes()
