"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="intake", log_dir=log_dir)


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_config_candidates(candidates: list) -> None:
    """Log the config paths that will be tried, in order."""
    _log_debug(f"Config candidates: {', '.join(str(path) for path in candidates)}")


def log_config_loaded(source: str) -> None:
    _log_info(f"Loaded configuration from {source}")


def log_schema_detected(schema: str) -> None:
    _log_debug(f"Detected {schema} configuration schema")


def log_dropped_entry(module: str, index: int) -> None:
    """Dropped entries are expected input noise, so they only reach the debug log."""
    _log_debug(f"Dropped {module} entry #{index}: missing identifying field")


def log_normalization_result(document) -> None:
    """Log which modules survived normalization."""
    present = [module for module in document.site.order if document.section(module) is not None]
    absent = [module for module in document.site.order if document.section(module) is None]
    _log_info(f"Normalized resume for {document.basic.name}: {len(present)} module(s) present")
    _log_debug(f"  Order: {', '.join(document.site.order)}")
    if absent:
        _log_debug(f"  Absent: {', '.join(absent)}")
