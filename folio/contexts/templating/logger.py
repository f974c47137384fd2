"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, output_format: str = "markdown") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        output_format: Output being produced ("markdown" or "html"), for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Format": output_format},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_output_written(output_format: str, output_path: Path, size: int) -> None:
    """Log a written markdown/HTML file."""
    _log_success(f"Wrote {output_format} ({size} characters)")
    _log_info(f"  Output: {output_path}")
