"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_load(input_path: Path, data: dict) -> None:
    """Log a loaded CV document and the top-level sections it carries."""
    _log_info(f"Loaded CV data: {input_path}")
    sections = ", ".join(str(key) for key in data) if data else "(none)"
    _log_debug(f"  Sections: {sections}")


def log_composition(line_count: int, headings: list) -> None:
    """Log the outcome of composing a document."""
    _log_info(f"Composed {line_count} lines")
    _log_debug(f"  Headings: {', '.join(headings)}")
