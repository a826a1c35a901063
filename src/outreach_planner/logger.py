"""
Logging infrastructure for the Outreach Planner.
"""

import copy
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so file handlers see the plain level name
        if record.levelname in self.COLORS:
            record = copy.copy(record)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """Structured formatter for file output, prefixing planning context."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = ""
        if getattr(record, 'scenario', None):
            prefix += f"[SCENARIO:{record.scenario}] "
        if getattr(record, 'window_id', None):
            prefix += f"[{record.window_id}] "
        if getattr(record, 'horizon_days', None) is not None:
            prefix += f"[horizon={record.horizon_days}d] "

        if prefix:
            record = copy.copy(record)
            record.msg = f"{prefix}{record.msg}"
        return super().format(record)


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: str = "10MB",
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    Set up a logger with file rotation and optional console output.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        max_size: Maximum log file size before rotation
        backup_count: Number of backup files to keep
        console_output: Whether to output to console (stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    # Console goes to stderr so command output on stdout stays parseable
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_size),
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str = "outreach_planner", level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with default configuration.

    Child loggers of the package (outreach_planner.temporal.*, ...) inherit
    these handlers through propagation.
    """
    return setup_logger(
        name=name,
        level=level,
        log_file=log_file,
        console_output=True
    )


def _parse_size(size_str: str) -> int:
    """
    Parse size string (e.g., '10MB', '1GB') to bytes.

    Unparseable values fall back to 10MB.
    """
    size_str = size_str.upper().strip()

    # Longest suffixes first so 'MB' is not read as 'B'
    size_map = {
        'KB': 1024,
        'MB': 1024 * 1024,
        'GB': 1024 * 1024 * 1024,
        'B': 1,
    }

    for unit, multiplier in size_map.items():
        if size_str.endswith(unit):
            number = size_str[:-len(unit)].strip()
            try:
                return int(float(number) * multiplier)
            except ValueError:
                break

    try:
        return int(size_str)
    except ValueError:
        return 10 * 1024 * 1024


class PlannerLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter carrying window/scenario context."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        extra = dict(self.extra)
        extra.update(kwargs.get('extra', {}))
        kwargs['extra'] = extra
        return msg, kwargs


def get_planner_adapter(
    logger: Optional[logging.Logger] = None,
    scenario: Optional[str] = None,
    window_id: Optional[str] = None,
    horizon_days: Optional[float] = None
) -> PlannerLoggerAdapter:
    """
    Get a planner logger adapter with context.

    Args:
        logger: Base logger (defaults to the package logger)
        scenario: Scenario tag
        window_id: Window identifier
        horizon_days: Planning horizon in days

    Returns:
        Logger adapter with planning context
    """
    extra = {}
    if scenario:
        extra['scenario'] = scenario
    if window_id:
        extra['window_id'] = window_id
    if horizon_days is not None:
        extra['horizon_days'] = horizon_days

    return PlannerLoggerAdapter(logger or logging.getLogger("outreach_planner"), extra)
