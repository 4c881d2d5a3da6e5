"""Настройка loguru sink для host процесса.

Логи не участвуют в control flow и не попадают в записи ledger.
"""

import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def configure_logging(level: str = "INFO", sink: Any = None) -> int:
    """
    Заменить все sinks одним (по умолчанию stderr) с заданным уровнем.

    Returns:
        id добавленного sink
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
    )
