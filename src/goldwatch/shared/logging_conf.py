# src/goldwatch/shared/logging_conf.py
"""
Logging Configuration - Ticker Logging Setup

The refresh job fires every few seconds, so the libraries underneath it
(APScheduler announcing each run, httpx logging each Telegram edit) would
drown the ticker's own messages. setup_logging() installs the stdout and
optional rotating-file handlers and turns those per-tick loggers down to
WARNING.

Files that USE this module:
- goldwatch.app (setup_logging at startup)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "goldwatch.log"

# Loggers that emit a line for every refresh tick
NOISY_LOGGERS = ("httpx", "apscheduler.executors.default", "apscheduler.scheduler")


def resolve_log_path(log_file: Optional[Union[str, Path]] = None,
                     log_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Work out where the log file goes, creating its directory.

    log_dir wins over log_file; inside it the file is named goldwatch.log.
    Returns None when file logging is off.
    """
    if log_dir:
        path = Path(log_dir) / LOG_FILENAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _build_handlers(log_path: Optional[Path], max_bytes: int, backup_count: int) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    # Supervisors that capture output can disable stdout logging
    if os.environ.get("GOLDWATCH_LOG_STDOUT", "true").lower() == "true":
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_path is not None:
        handlers.append(RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ))

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> Optional[Path]:
    """
    Configure logging for the ticker process.

    Args:
        level: Root level, as a logging constant or a name such as "DEBUG"
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; goldwatch.log is created inside it
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)

    Returns:
        Path of the log file, or None when logging to stdout only
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    log_path = resolve_log_path(log_file, log_dir)
    logging.basicConfig(
        level=level,
        handlers=_build_handlers(log_path, max_bytes, backup_count),
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging configured: %s, level=%s",
                f"file={log_path}" if log_path else "stdout", logging.getLevelName(level))
    return log_path
