"""
Session logging for FOLIO runs.

Every CLI run gets its own directory under FOLIO_LOGS_PATH holding one log file
per context. The file keeps everything down to DEBUG (dropped entries, page
plans); the console shows FOLIO_LOG_LEVEL and above on stderr, since stdout
carries rendered markdown, HTML, or YAML.

Context-specific prefixes live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))
DEFAULT_CONSOLE_LEVEL = "INFO"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"

# Environment variables worth recording in every session header
ENV_PREFIX = "FOLIO_"


def session_log_dir(command: str, logs_path: Optional[Path] = None) -> Path:
    """
    Directory for one CLI run, e.g. outs/logs/export_20251114_123456.

    Args:
        command: CLI command name
        logs_path: Root of all session directories (default: FOLIO_LOGS_PATH)
    """
    root = logs_path if logs_path is not None else LOGS_PATH
    return root / f"{command}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any handlers installed by an earlier setup, so the most recent
    context owns the session.

    Args:
        context_name: Context identifier ("intake", "template", "render"); names the log file
        log_dir: Session directory (see session_log_dir())
        extra_provenance: Context-specific lines for the session header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=os.getenv("FOLIO_LOG_LEVEL", DEFAULT_CONSOLE_LEVEL).upper(),
        colorize=True,
    )

    log_session_header(context_name, extra_provenance)
    return log_file


def folio_environment() -> dict:
    """FOLIO_* settings in effect for this process, sorted by name."""
    return {key: value for key, value in sorted(os.environ.items()) if key.startswith(ENV_PREFIX)}


def log_session_header(context_name: str, extra_context: Optional[dict] = None) -> None:
    """
    Log what produced this session: FOLIO version, command line and FOLIO_* settings.

    The header goes to the file at DEBUG so the console stays quiet.
    """
    logger.debug("=" * 80)
    logger.debug(f"FOLIO {__version__} ({context_name})")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in {**folio_environment(), **(extra_context or {})}.items():
        logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
