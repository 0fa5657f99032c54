"""Tests for knowledge_base._logging."""

import logging

import pytest

from knowledge_base._logging import configure_logging

LOGGER_NAMES = ("knowledge_base", "controller", "view")


@pytest.fixture
def restore_loggers():
    """Put the application loggers back the way they were."""
    saved = {
        name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level,
               logging.getLogger(name).propagate)
        for name in LOGGER_NAMES
    }
    for name in LOGGER_NAMES:
        logging.getLogger(name).handlers = []
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_shared_handler_format(self, restore_loggers, monkeypatch):
        monkeypatch.setenv("KNOWLEDGE_BASE_LOG_LEVEL", "debug")

        configure_logging()

        handler = logging.getLogger("knowledge_base").handlers[0]
        assert handler.formatter._fmt == "[%(levelname)s] %(name)s: %(message)s"
        assert handler.formatter.datefmt is None
        for name in LOGGER_NAMES:
            logger = logging.getLogger(name)
            assert logger.handlers == [handler]
            assert logger.level == logging.DEBUG
            assert not logger.propagate

    def test_second_call_is_noop(self, restore_loggers):
        configure_logging()
        configure_logging()

        assert len(logging.getLogger("knowledge_base").handlers) == 1

    def test_unknown_level_falls_back_to_info(self, restore_loggers, monkeypatch):
        monkeypatch.setenv("KNOWLEDGE_BASE_LOG_LEVEL", "chatty")

        configure_logging()

        assert logging.getLogger("knowledge_base").level == logging.INFO
