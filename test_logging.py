"""
Tests for package logging setup.
"""

import logging

import pytest

from es_query_builder import get_logger, setup_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("es_query_builder")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_package_logger_is_silent_by_default(capsys):
    get_logger("es_query_builder.test_silence").warning("goes nowhere")

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_package_logger_has_null_handler():
    assert any(isinstance(h, logging.NullHandler) for h in get_logger().handlers)


def test_get_logger_namespaces():
    assert get_logger().name == "es_query_builder"
    assert get_logger("es_query_builder.query").name == "es_query_builder.query"


def test_setup_does_not_duplicate_handlers(restore_package_logger):
    setup_logging(level="INFO")
    logger = setup_logging(level="debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_writes_to_stderr(restore_package_logger, capsys):
    setup_logging(level="INFO")

    get_logger("es_query_builder.adapters").info("translated")

    assert "translated" in capsys.readouterr().err
