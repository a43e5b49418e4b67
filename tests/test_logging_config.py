"""Logging setup tests."""
from __future__ import annotations

import logging

import pytest

from rastermath import rotation, setup_logging
from rastermath.transform import Axis


def _active_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


@pytest.fixture
def package_logger():
    logger = logging.getLogger("rastermath")
    saved = list(logger.handlers)
    yield logger
    for handler in _active_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.handlers[:] = saved
    logger.setLevel(logging.NOTSET)


def test_package_is_silent_by_default() -> None:
    logger = logging.getLogger("rastermath")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_setup_logging_installs_single_handler(package_logger, capsys) -> None:
    setup_logging()
    setup_logging()
    assert len(_active_handlers(package_logger)) == 1
    assert "Logging initialized." in capsys.readouterr().out


def test_setup_logging_writes_file(package_logger, tmp_path) -> None:
    log_file = tmp_path / "rastermath.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    rotation(45, Axis.X)
    for handler in package_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "rastermath.transform" in text
