from __future__ import annotations

import logging

import pytest

from glint.utils.logger import setup_logging


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger("glint")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def test_default_only_logs_to_stderr(fresh_logger) -> None:
    logger = setup_logging()
    assert logger is fresh_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_setup_is_idempotent(fresh_logger) -> None:
    setup_logging()
    setup_logging(log_level="DEBUG")
    assert len(fresh_logger.handlers) == 1


def test_log_file_receives_debug(fresh_logger, tmp_path) -> None:
    log_file = tmp_path / "logs" / "glint.log"
    logger = setup_logging(log_file=str(log_file), log_level="debug")
    logging.getLogger("glint.rules.builder").debug("Compiled %d rules", 3)
    for handler in logger.handlers:
        handler.flush()
    assert "Compiled 3 rules" in log_file.read_text()


def test_unknown_level_falls_back_to_warning(fresh_logger) -> None:
    assert setup_logging(log_level="chatty").level == logging.WARNING
