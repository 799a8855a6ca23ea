"""Tests for logger configuration."""

from __future__ import annotations

import logging
import os
import time

import pytest

from emitter.lib.logger import CustomFormatter, clean_old_logs, configure_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_clean_old_logs_keeps_newest(tmp_path):
    """Test that only the most recent log files are kept."""
    now = time.time()
    for i in range(4):
        path = tmp_path / f"{i}.log"
        path.write_text("x")
        os.utime(path, (now + i, now + i))
    (tmp_path / "notes.txt").write_text("not a log")

    clean_old_logs(tmp_path, max_files=2)

    remaining = sorted(p.name for p in tmp_path.iterdir())
    assert remaining == ["2.log", "3.log", "notes.txt"]


def test_clean_old_logs_missing_dir(tmp_path):
    """Test that a directory that does not exist is treated as empty."""
    clean_old_logs(tmp_path / "missing")


def test_custom_formatter_pads_level_name():
    """Test that level names are padded to a fixed width."""
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    formatted = CustomFormatter("%(levelname)s|%(message)s").format(record)

    assert formatted == "INFO    |hello"


def test_configure_logger_console_only():
    """Test that without a log dir only a console handler is installed."""
    handlers = configure_logger(log_level=logging.DEBUG)

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger().handlers == handlers


def test_configure_logger_writes_file(tmp_path):
    """Test that a log file is created in the log dir."""
    log_dir = tmp_path / "logs"

    handlers = configure_logger(log_level=logging.INFO, log_dir=log_dir)
    logging.info("written to file")
    for handler in handlers:
        handler.flush()

    log_files = list(log_dir.glob("*.log"))
    assert len(handlers) == 2
    assert len(log_files) == 1
    assert "written to file" in log_files[0].read_text()


def test_configure_logger_accepts_str_dir(tmp_path):
    """Test that the log dir may be given as a string."""
    handlers = configure_logger(log_dir=str(tmp_path))

    assert len(handlers) == 2
