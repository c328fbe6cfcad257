"""
Tests for taskorder.logger
"""
import logging

import pytest

from taskorder import logger as taskorder_logger
from taskorder.core.errors import ConfigurationError
from taskorder.logger import configure_logging, get_logger


def test_get_logger_nests_under_root():
    assert get_logger("taskorder.core.scheduler").name == "taskorder.core.scheduler"
    assert get_logger("taskorder").name == "taskorder"
    assert get_logger("plugins.extra").name == "taskorder.plugins.extra"


def test_configure_logging_sets_level():
    root = configure_logging("debug")
    assert root.name == "taskorder"
    assert root.level == logging.DEBUG


def test_configure_logging_from_environment(monkeypatch):
    monkeypatch.setenv("TASKORDER_LOG_LEVEL", "ERROR")
    assert configure_logging().level == logging.ERROR


def test_configure_logging_defaults_to_warning():
    assert configure_logging().level == logging.WARNING


def test_configure_logging_adds_single_handler():
    configure_logging("INFO")
    configure_logging("DEBUG")
    root = logging.getLogger("taskorder")
    assert root.handlers.count(taskorder_logger._handler) == 1


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError, match="Invalid log level"):
        configure_logging("CHATTY")
