"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from cvpress.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, renderer: str = None, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        renderer: Resolved renderer command, recorded in the provenance header
        verbose: Also show DEBUG messages on the console

    Returns:
        Path to log file

    Example:
        from cvpress.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, renderer="/usr/bin/pandoc")
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Renderer": renderer or "(not found)",
            "PDF engine": os.getenv("CVPRESS_PDF_ENGINE", "pdflatex"),
        },
        verbose=verbose,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(command: list, markdown_path: Path, output_path: Path) -> None:
    """Log the renderer command about to run."""
    _log_info(f"Running: {' '.join(str(part) for part in command)}")
    _log_debug(f"  Intermediate: {markdown_path}")
    _log_debug(f"  Output: {output_path}")


def log_render_result(
    result,  # RenderResult
    elapsed_time: float,
    verbose: bool = False,
) -> None:
    """
    Log render result with diagnostics.

    Args:
        result: RenderResult from render_pdf()
        elapsed_time: Time taken to render
        verbose: Always dump renderer output (default: only on failure)
    """
    if result.success:
        _log_success(f"Successfully generated: {result.output_path} ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Error generating PDF ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > 5:
            _log_error(f"  ... and {len(result.errors) - 5} more errors")

    # opt(raw=True) keeps multi-line renderer output free of per-line prefixes
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDOUT:\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDERR:\n{'=' * 80}\n{result.stderr}\n"
            )
