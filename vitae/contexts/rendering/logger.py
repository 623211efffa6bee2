"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    input_path: Path,
    output_path: Path,
    output_format: str = "text",
    style_source: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> Optional[Path]:
    """
    Setup logger for one render.

    The run header records where the résumé is read from and written to, and
    which text style applies (text output only).

    Args:
        input_path: Résumé document being rendered
        output_path: Destination document
        output_format: "text" or "html"
        style_source: Style file in effect, or None for the built-in defaults
        log_dir: Directory for render.log; None keeps logging on stdout only

    Returns:
        Path to log file, or None without log_dir
    """
    details = {
        "Input": input_path,
        "Output": output_path,
        "Format": output_format,
    }
    if output_format == "text":
        details["Style"] = style_source or "defaults"

    return _setup_logger(context_name="render", log_dir=log_dir, run_details=details)


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(input_path: Path, output_path: Path, output_format: str) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering {input_path.name} as {output_format}")
    _log_debug(f"Source: {input_path}")
    _log_debug(f"Destination: {output_path}")


def log_render_result(result, elapsed_time: float) -> None:
    """
    Log a completed render.

    Args:
        result: RenderResult from render_cv_file()
        elapsed_time: Time taken in seconds
    """
    _log_success(f"Wrote {result.output_format} output ({elapsed_time:.2f}s)")
    _log_info(f"  Output: {result.output_path}")
    _log_info(f"  Characters: {result.characters}")
    if result.sections:
        _log_debug(f"  Sections: {', '.join(result.sections)}")
