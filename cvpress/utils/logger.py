"""
Generic logger setup utilities.

One loguru configuration per run: a DEBUG log file in the run's log directory
and a console sink whose level follows the CLI's verbosity.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from loguru import logger

from cvpress import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def console_level(verbose: bool) -> str:
    """Console sink level for the given verbosity."""
    return "DEBUG" if verbose else "INFO"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    verbose: bool = False,
) -> Path:
    """
    Configure loguru for one run and log where it came from.

    Args:
        context_name: Context identifier, used as the log file stem (e.g., "render")
        log_dir: Directory for this run, created if missing
        extra_provenance: Additional key-value pairs for provenance header
        verbose: Show DEBUG messages on the console too (file always gets DEBUG)

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level(verbose), colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Log cvpress version, command line and working directory, plus any extras."""
    logger.debug("=" * 80)
    logger.debug(f"cvpress: {__version__}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
