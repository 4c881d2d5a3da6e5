"""Общие fixtures для unit тестов asset ledger."""

import pytest
from loguru import logger

from src.ledger import AttributeContext, OperationRouter
from src.store import InMemoryKeyValueStore


@pytest.fixture(autouse=True)
def disable_logger_sinks():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def kv():
    """Пустой in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def router(kv):
    """Router над инициализированным ledger (alice/bob credentials)."""
    r = OperationRouter(kv)
    result = r.init(["alice", "certA", "bob", "certB"])
    assert result.ok
    return r


@pytest.fixture
def regulator():
    return AttributeContext({"username": "reg", "role": "regulator"})


@pytest.fixture
def subscriber():
    return AttributeContext({"username": "sub", "role": "subscriber"})
