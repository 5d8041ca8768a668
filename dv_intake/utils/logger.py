# -*- coding: utf-8 -*-
"""
Logging for the intake pipeline

Each run logs to the console and to a dated file under the configured logs
folder. Extraction runs on worker threads, so records carry the thread name.
The entry point calls setup_logging() once; every module then uses
logger = get_logger(__name__).

Examples:
setup_logging()                      # data/logs/intake_<YYYYMMDD>.log
    setup_logging(log_file=None)         # console only
    logger = get_logger(__name__)

"""
# Standard library
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

# Local
from config.intake_config import LOGS_PATH

LOG_FORMAT = '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'

# Marks an omitted log_file, since None means console only
DEFAULT = object()

_logging_configured = False


def default_log_file(when: Optional[datetime] = None) -> Path:
    """Dated log file for a run, e.g. data/logs/intake_20240905.log."""
    when = when or datetime.now()
    return LOGS_PATH / f"intake_{when.strftime('%Y%m%d')}.log"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = DEFAULT,
    format_string: str = LOG_FORMAT,
) -> Optional[Path]:
    """
    Configure the root logger once per process.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Log file path, default_log_file() when omitted, None for
                  console only
        format_string: Log record format

    Returns:
        The log file in use, or None
    """
    global _logging_configured

    if _logging_configured:
        return None

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    log_path = default_log_file() if log_file is DEFAULT else log_file
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    _logging_configured = True
    return log_path


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
