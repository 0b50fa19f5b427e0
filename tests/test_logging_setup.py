import logging

import pytest

from wheeltimer.services.logging import LOG_FILENAME, LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def test_setup_logging_writes_rotating_file(tmp_path, clean_logger):
    logger = setup_logging(logging.DEBUG, log_dir=tmp_path)
    assert logger is clean_logger
    kinds = sorted(type(h).__name__ for h in logger.handlers)
    assert kinds == ["RotatingFileHandler", "StreamHandler"]

    logging.getLogger("wheeltimer.test").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path, clean_logger):
    setup_logging(log_dir=tmp_path)
    count = len(clean_logger.handlers)
    setup_logging(logging.WARNING, log_dir=tmp_path)
    assert len(clean_logger.handlers) == count
    assert clean_logger.level == logging.WARNING
