"""
Shared fixtures.

Keeps configuration overrides, TASKORDER_* environment variables and the
taskorder log handler from leaking between tests.
"""

import logging
import os

import pytest

from taskorder import logger as taskorder_logger
from taskorder.core.config_manager import ENV_LOG_LEVEL, ENV_MAX_TASKS, get_config_manager

_ENV_VARS = (ENV_LOG_LEVEL, ENV_MAX_TASKS)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Reset config overrides and TASKORDER_* variables around each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config_manager().clear()
    yield
    get_config_manager().clear()
    # .env loading writes straight to os.environ; monkeypatch restores originals afterwards
    for name in _ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Detach the stderr handler installed by configure_logging."""
    yield
    root = logging.getLogger(taskorder_logger.ROOT_LOGGER_NAME)
    if taskorder_logger._handler is not None:
        root.removeHandler(taskorder_logger._handler)
        taskorder_logger._handler = None
    root.setLevel(logging.NOTSET)
