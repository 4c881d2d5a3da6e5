"""Unit тесты для configure_logging."""

from loguru import logger

from src.ledger import AttributeContext, OperationRouter
from src.store import InMemoryKeyValueStore
from src.utils.logger import configure_logging


def test_failed_invocation_logged_as_warning():
    messages = []
    configure_logging("WARNING", sink=messages.append)

    router = OperationRouter(InMemoryKeyValueStore())
    router.query(AttributeContext({"username": "u", "role": "user"}), "nope", [])

    assert len(messages) == 1
    assert "UnknownOperation" in messages[0]
    assert "WARNING" in messages[0]


def test_debug_suppressed_at_info_level():
    messages = []
    configure_logging("INFO", sink=messages.append)

    logger.debug("hidden")
    logger.info("shown")

    assert len(messages) == 1
    assert "shown" in messages[0]
