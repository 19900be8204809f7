# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest

from js_sifter.logger import LOGGER_NAME, configure, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure()


def test_reconfiguring_never_duplicates_handlers():
    configure()
    lg = configure(level="DEBUG")
    assert lg is logging.getLogger(LOGGER_NAME)
    assert len(lg.handlers) == 1
    assert lg.level == logging.DEBUG
    assert lg.propagate is False


def test_log_file_is_written(tmp_path):
    log_file = tmp_path / "sift.log"
    lg = init_logging(level="INFO", log_file=log_file, log_format="%(levelname)s %(message)s")
    assert sum(isinstance(h, RotatingFileHandler) for h in lg.handlers) == 1

    lg.info("https://example.com/a.js | %d strings found", 3)
    for handler in lg.handlers:
        handler.flush()
    assert "INFO https://example.com/a.js | 3 strings found" in log_file.read_text(encoding="utf-8")

    configure()
    assert not any(isinstance(h, RotatingFileHandler) for h in logging.getLogger(LOGGER_NAME).handlers)
