"""
logger.py - Logging utilities for pywhoami with emoji support and Unix-style stream separation.

This module provides the logging used across pywhoami, designed to:

- Separate console output by stream:
    - DEBUG and INFO messages: `stdout`
    - WARNING, ERROR, and CRITICAL messages: `stderr`
- Provide optional emoji prefixes for log levels to improve readability
- Include millisecond-precision timestamps in all messages
- Optionally log to files with full tracebacks for later inspection:
    - `{log_name}-stdout.log`: DEBUG and INFO messages
    - `{log_name}-stderr.log`: WARNING, ERROR, and CRITICAL messages
- Keep the library quiet: query modules only emit DEBUG records, which reach the
  console only in verbose mode

Features:

- Multi-stream console logging: Uses separate stream handlers for stdout and stderr with level filters.
- File logging: Uses `FileHandler`s to persist logs per severity level when a log directory is configured.
- Emoji support: Prepend emojis to messages by default or via optional overrides.
- One logger instance per (name, log directory, verbosity), so repeated queries do not
  accumulate handlers.
"""

import logging
import sys

from logging import StreamHandler, FileHandler
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pywhoami import __package_name__
from pywhoami.config import config
from pywhoami.exceptions.exceptions import ConfigurationError


class EmojiFormatter(logging.Formatter):
    """Formatter that prepends emoji and uses millisecond timestamps."""

    EMOJI_MAP = {
        logging.ERROR: "❌",
        logging.WARNING: "⚠️",
        logging.INFO: "ℹ️",
        logging.DEBUG: "🔍",
    }

    def __init__(self, include_exc_info=True):
        super().__init__()
        self.include_exc_info = include_exc_info

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        return (
            f"{ct.tm_year:04d}-{ct.tm_mon:02d}-{ct.tm_mday:02d} "
            f"{ct.tm_hour:02d}:{ct.tm_min:02d}:{ct.tm_sec:02d},{int(record.msecs):03d}"
        )

    def format(self, record):
        emoji = getattr(record, "emoji", None)
        if emoji is None:
            emoji = self.EMOJI_MAP.get(record.levelno, "")
        level = record.levelname.upper()
        msg = record.getMessage()

        formatted = f"{self.formatTime(record)} - {level} - {emoji} {msg}"
        if self.include_exc_info and record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class StdStreamHandler(StreamHandler):
    """StreamHandler bound to ``sys.<name>`` at emit time rather than at creation."""

    def __init__(self, stream_name: str):
        self.stream_name = stream_name
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.stream_name)

    @stream.setter
    def stream(self, value):
        # Always follow the live sys stream.
        pass


class WhoamiLogger:
    """Logger with emoji support, console streams, and optional per-instance and combined log files."""

    _shared_stdout_handler: FileHandler | None = None
    _shared_stderr_handler: FileHandler | None = None
    _shared_log_dir: Path | None = None

    def __init__(self, log_name: str, log_dir: Optional[Path] = None, verbose: bool = False):
        self.logger = logging.getLogger(f"{__package_name__}-{log_name}")

        if self.logger.hasHandlers():
            self.logger.handlers.clear()

        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False  # prevent duplication to root

        console_formatter = EmojiFormatter(include_exc_info=verbose)

        sh_out = StdStreamHandler("stdout")
        sh_out.setLevel(logging.DEBUG if verbose else logging.INFO)
        sh_out.addFilter(lambda r: r.levelno <= logging.INFO)
        sh_out.setFormatter(console_formatter)

        sh_err = StdStreamHandler("stderr")
        sh_err.setLevel(logging.WARNING)
        sh_err.setFormatter(console_formatter)

        self.logger.addHandler(sh_out)
        self.logger.addHandler(sh_err)

        if log_dir is not None:
            self._add_file_handlers(Path(log_dir), log_name)

    def _add_file_handlers(self, log_dir: Path, log_name: str) -> None:
        log_path = log_dir / f"{log_name}-stdout.log"
        error_path = log_dir / f"{log_name}-stderr.log"

        file_formatter = EmojiFormatter(include_exc_info=True)

        try:
            fh = FileHandler(log_path, mode="a", encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.addFilter(lambda r: r.levelno <= logging.INFO)
            fh.setFormatter(file_formatter)

            eh = FileHandler(error_path, mode="a", encoding="utf-8")
            eh.setLevel(logging.WARNING)
            eh.setFormatter(file_formatter)

        except OSError as e:
            raise ConfigurationError(
                message="Failed to initialize per-instance file logging.",
                step="logging",
                context={"log_dir": str(log_dir), "error": str(e)},
            ) from e

        self.logger.addHandler(fh)
        self.logger.addHandler(eh)

        try:
            if self.__class__._shared_log_dir != log_dir:
                combined_stdout = FileHandler(
                    log_dir / f"{__package_name__}-stdout.log",
                    mode="a",
                    encoding="utf-8",
                )
                combined_stdout.setLevel(logging.DEBUG)
                combined_stdout.addFilter(lambda r: r.levelno <= logging.INFO)
                combined_stdout.setFormatter(file_formatter)

                combined_stderr = FileHandler(
                    log_dir / f"{__package_name__}-stderr.log",
                    mode="a",
                    encoding="utf-8",
                )
                combined_stderr.setLevel(logging.WARNING)
                combined_stderr.setFormatter(file_formatter)

                self.__class__._shared_stdout_handler = combined_stdout
                self.__class__._shared_stderr_handler = combined_stderr
                self.__class__._shared_log_dir = log_dir

            self.logger.addHandler(self.__class__._shared_stdout_handler)
            self.logger.addHandler(self.__class__._shared_stderr_handler)

        except OSError as e:
            raise ConfigurationError(
                message=f"Failed to initialize shared combined {__package_name__} stdout/stderr logs.",
                step="logging",
                context={"log_dir": str(log_dir), "error": str(e)},
            ) from e

    def log_debug(self, msg, emoji=None):
        """
        Log a debug message.

        Args:
            msg: The message to log.
            emoji: Optional custom emoji to override the default 🔍.
        """
        self.logger.debug(msg, extra={"emoji": emoji} if emoji else {})

    def log_info(self, msg, emoji=None):
        """
        Log an info message.

        Args:
            msg: The message to log.
            emoji: Optional custom emoji to override the default ℹ️.
        """
        self.logger.info(msg, extra={"emoji": emoji} if emoji else {})

    def log_warning(self, msg, emoji=None):
        """
        Log a warning message.

        Args:
            msg: The message to log.
            emoji: Optional custom emoji to override the default ⚠️.
        """
        self.logger.warning(msg, extra={"emoji": emoji} if emoji else {})

    def log_error(self, msg, emoji=None, exc_info=False):
        """
        Log an error message.

        Args:
            msg: The message to log.
            emoji: Optional custom emoji to override the default ❌.
            exc_info: If True, include exception traceback in file logs
                      (not console to make logs clean).
        """
        self.logger.error(
            msg, extra={"emoji": emoji} if emoji else {}, exc_info=exc_info
        )


# One live instance per name; settings are (log_dir, verbose).
_loggers: Dict[str, Tuple[Tuple[Optional[Path], bool], WhoamiLogger]] = {}


def get_logger(
    log_name: str,
    log_dir: Optional[Union[str, Path]] = None,
    verbose: Optional[bool] = False,
) -> WhoamiLogger:
    """
    Create or retrieve a configured WhoamiLogger instance.

    A logger is reused while its settings are unchanged, so that query functions,
    which may be called many times, do not stack up handlers. Asking for the same
    name with new settings rebuilds it.

    Note: log_dir, when given, MUST exist.

    Args:
        log_name (str): Name for the logger and its log files.
        log_dir (Optional[str, Path]): Directory where log files will be stored.
            Console-only logging when None.
        verbose (Optional[bool]): If True, DEBUG records and tracebacks reach the console.

    Returns:
        WhoamiLogger: A configured logger instance with:
            - Console logging split by stream (stdout/stderr)
            - File logging split by severity when a directory is given
            - Emoji-prefixed messages
            - Millisecond-precision timestamps
    """
    if not log_name:
        raise ConfigurationError(
            message="log_name is required and cannot be empty",
            step="logging",
            invalid_key="log_name",
        )

    p = Path(log_dir) if log_dir is not None else None
    settings = (p, bool(verbose))
    cached = _loggers.get(log_name)
    if cached is None or cached[0] != settings:
        cached = (settings, WhoamiLogger(log_name, p, bool(verbose)))
        _loggers[log_name] = cached
    return cached[1]


def get_package_logger(log_name: str) -> WhoamiLogger:
    """Return the logger for a pywhoami module, following the package-wide config."""
    return get_logger(log_name, config.log_dir, verbose=config.verbose)
