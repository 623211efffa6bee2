"""
Loguru sink configuration shared by the vitae contexts.

A run always logs INFO and above to stdout. A DEBUG log file is added only when
the caller names a log directory, so a plain render leaves nothing on disk
besides its output document.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    run_details: Optional[Dict[str, object]] = None,
) -> Optional[Path]:
    """
    Replace loguru's sinks for one run of a context.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Directory for <context_name>.log; None logs to stdout only
        run_details: Key-value pairs written as the run header (paths, format, ...)

    Returns:
        Path to the log file, or None when no file sink was added

    Example:
        setup_logger("render", run_details={"Input": "cv/cv.json"})
    """
    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    log_run_header(run_details or {})
    return log_file


def log_run_header(details: Dict[str, object]) -> None:
    """Log the invoking command at INFO and each run detail at DEBUG."""
    logger.info(f"$ {' '.join(sys.argv)}")
    for key, value in details.items():
        logger.debug(f"{key}: {value}")
