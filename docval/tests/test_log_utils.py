import logging

from docval.utils.log_utils import get_logger


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("DOCVAL_LOG_LEVEL", "debug")
    logger = get_logger("docval.test.level_from_env")
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("DOCVAL_LOG_LEVEL", "verbose")
    logger = get_logger("docval.test.unknown_level")
    assert logger.level == logging.INFO


def test_default_level(monkeypatch):
    monkeypatch.delenv("DOCVAL_LOG_LEVEL", raising=False)
    logger = get_logger("docval.test.default_level")
    assert logger.level == logging.INFO


def test_handler_not_duplicated():
    logger = get_logger("docval.test.handlers")
    count = len(logger.handlers)
    get_logger("docval.test.handlers")
    assert len(logger.handlers) == count
