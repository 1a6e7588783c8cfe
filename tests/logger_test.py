"""
Tests the package logger
"""

import pytest

from pywhoami.exceptions.exceptions import ConfigurationError
from pywhoami.logging.logger import get_logger


def test_logger_is_reused():
    """
    Tests that a logger is shared while its settings are unchanged
    """
    first = get_logger("reuse-test")
    assert get_logger("reuse-test") is first
    assert get_logger("reuse-test", verbose=True) is not first
    assert len(get_logger("reuse-test", verbose=True).logger.handlers) == 2


def test_stream_separation(capsys):
    """
    Tests that info goes to stdout, warnings to stderr, and debug only when verbose
    """
    logger = get_logger("stream-test")
    logger.log_debug("hidden detail")
    logger.log_info("hello")
    logger.log_warning("careful")

    captured = capsys.readouterr()
    assert "hidden detail" not in captured.out
    assert "INFO - ℹ️ hello" in captured.out
    assert "WARNING - ⚠️ careful" in captured.err

    get_logger("stream-test", verbose=True).log_debug("shown detail", emoji="🧪")
    assert "DEBUG - 🧪 shown detail" in capsys.readouterr().out


def test_file_logging(tmp_path):
    """
    Tests per-logger and combined log files
    """
    logger = get_logger("file-test", log_dir=tmp_path)
    logger.log_info("to the file")
    logger.log_error("went wrong")

    assert "to the file" in (tmp_path / "file-test-stdout.log").read_text()
    assert "went wrong" in (tmp_path / "file-test-stderr.log").read_text()
    assert "to the file" in (tmp_path / "pywhoami-stdout.log").read_text()


def test_empty_name_rejected():
    """
    Tests that a logger needs a name
    """
    with pytest.raises(ConfigurationError):
        get_logger("")
