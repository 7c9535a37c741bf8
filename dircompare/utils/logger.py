"""Logging utilities for dircompare.

Provides thin wrappers around the standard library logger that append
keyword context as a compact JSON blob, so log lines stay greppable.
"""
import json
import logging
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=DEFAULT_FORMAT,
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger('dircompare')


def configure_logging(level: str = "INFO", fmt: str = None) -> None:
    """Apply level and format settings to the dircompare logger.

    Args:
        level: Logging level name (DEBUG, INFO, ...)
        fmt: Optional format string for a dedicated handler
    """
    logger.setLevel(level.upper())
    if fmt and fmt != DEFAULT_FORMAT:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.handlers = [handler]
        logger.propagate = False


def safe_json(obj: Any, max_length: int = 1000) -> str:
    """Serialize context to JSON, truncating overly long payloads.

    Args:
        obj: Object to serialize
        max_length: Maximum length of output string

    Returns:
        JSON string
    """
    try:
        json_str = json.dumps(obj, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return "<unable to serialize>"

    if len(json_str) > max_length:
        json_str = json_str[:max_length] + "... [truncated]"

    return json_str


def log_info(message: str, **kwargs) -> None:
    """Log info message with optional context."""
    if kwargs:
        logger.info(f"{message} | Context: {safe_json(kwargs)}")
    else:
        logger.info(message)


def log_warning(message: str, **kwargs) -> None:
    """Log warning message with optional context."""
    if kwargs:
        logger.warning(f"{message} | Context: {safe_json(kwargs)}")
    else:
        logger.warning(message)


def log_error(message: str, **kwargs) -> None:
    """Log error message with optional context."""
    if kwargs:
        logger.error(f"{message} | Context: {safe_json(kwargs)}")
    else:
        logger.error(message)


def log_debug(message: str, **kwargs) -> None:
    """Log debug message with optional context."""
    if kwargs:
        logger.debug(f"{message} | Context: {safe_json(kwargs)}")
    else:
        logger.debug(message)


def log_stage(stage: str, **kwargs) -> None:
    """Log progress through the comparison stages.

    Args:
        stage: Current stage of processing
        **kwargs: Additional context
    """
    log_info(f"Comparison progress: {stage}", **kwargs)
