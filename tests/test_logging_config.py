"""Tests for core.logging_config."""

import logging
import logging.handlers
from pathlib import Path

import pytest

from core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)


def test_file_handler_only_by_default(tmp_path: Path) -> None:
    setup_logging(tmp_path, {"logging": {"file": "logs/setup.log", "level": "debug"}})
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.handlers.RotatingFileHandler)

    logging.getLogger("onboarding.test").info("hello")
    root.handlers[0].flush()
    assert "hello" in (tmp_path / "logs" / "setup.log").read_text()


def test_console_handler_optional(tmp_path: Path) -> None:
    setup_logging(tmp_path, {"logging": {"log_to_console": True, "level": "bogus"}})
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 2
