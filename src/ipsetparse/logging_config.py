"""
Logging configuration for ipsetparse.

Console logging plus optional rotating file logging, by default to
~/.ipsetparse/logs/ipsetparse.log.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_DIR = Path("~/.ipsetparse/logs")
LOG_FILE_NAME = "ipsetparse.log"


class ParserLogFormatter(logging.Formatter):
    """File formatter that tags each record with its parser component.

    The component is the logger name below the package, so records of
    ipsetparse.parsers.port show up as parsers.port.
    """

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("ipsetparse."):
            name = name[len("ipsetparse."):]
        record.component = name
        return super().format(record)


def default_log_path(log_dir: str | None = None) -> Path:
    """Get the log file path inside log_dir or the default log directory."""
    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    return directory.expanduser() / LOG_FILE_NAME


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_dir: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Set up logging for ipsetparse.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path, turns on file logging (overrides log_dir)
        log_dir: Directory for the log file (defaults to ~/.ipsetparse/logs)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging
        enable_file: Enable file logging at the default location

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("ipsetparse")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_fmt = ParserLogFormatter(
        fmt='%(asctime)s | %(levelname)-8s | %(component)-18s | '
            '%(lineno)-4d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logger.level)
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    if log_file or enable_file:
        if log_file:
            log_path = Path(log_file).expanduser()
        else:
            log_path = default_log_path(log_dir)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., 'ipsetparse.parsers.address')

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(debug: bool = False, log_file: str | None = None,
                      level: str = "WARNING") -> None:
    """
    Quick logging configuration for the command line.

    Args:
        debug: Enable debug logging
        log_file: Optional log file path
        level: Level used when debug is off
    """
    setup_logging(
        level="DEBUG" if debug else level,
        log_file=log_file,
        enable_console=True,
    )
