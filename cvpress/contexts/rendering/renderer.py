"""
PDF Rendering Module

Hands composed Markdown to pandoc, which typesets it to PDF through a LaTeX engine.
"""

import os
import shutil
import subprocess
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from cvpress.contexts.rendering.front_matter import wrap_front_matter
from cvpress.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    _log_warning,
    log_render_result,
    log_render_start,
)
from cvpress.contexts.templating.composer import to_markdown

load_dotenv()

RENDERER_COMMAND = os.getenv("CVPRESS_RENDERER", "pandoc")
PDF_ENGINE = os.getenv("CVPRESS_PDF_ENGINE", "pdflatex")


@dataclass
class RenderResult:
    """
    Result of rendering a composed document to PDF.

    Attributes:
        success: Whether the PDF was produced
        output_path: Path to generated PDF (None if failed)
        command: Renderer command line that ran (empty if nothing ran)
        returncode: Renderer exit status (None if it never started)
        stdout: Standard output from the renderer
        stderr: Standard error from the renderer
        errors: Human-readable failure reasons
        markdown_path: Transient Markdown file handed to the renderer (removed afterwards)
    """

    success: bool
    output_path: Optional[Path] = None
    command: List[str] = field(default_factory=list)
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    markdown_path: Optional[Path] = None


def resolve_renderer(command: Optional[str] = None) -> Optional[str]:
    """
    Resolve the renderer executable once, up front.

    Args:
        command: Renderer command or path (default: CVPRESS_RENDERER env, else "pandoc")

    Returns:
        Absolute path of the executable, or None if it cannot be found
    """
    command = command or RENDERER_COMMAND
    resolved = shutil.which(command)
    if resolved is None:
        _log_warning(f"Renderer not found: {command}")
    else:
        _log_debug(f"Resolved renderer {command} -> {resolved}")
    return resolved


def _write_transient_markdown(document: str) -> Path:
    """Write the full document to a new temporary .md file and return its path."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".md", prefix="cvpress_", encoding="utf-8", delete=False
    ) as handle:
        path = Path(handle.name)
        try:
            handle.write(document)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
    return path


def _run_renderer(command: List[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        command,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
    )


def render_pdf(
    lines: List[str],
    output_path: Path,
    renderer: Optional[str],
    pdf_engine: str = PDF_ENGINE,
    verbose: bool = False,
) -> RenderResult:
    """
    Render composed Markdown lines to a PDF file.

    The lines are wrapped with the fixed front-matter and written to a
    transient Markdown file, which is deleted on every exit path, including
    exceptions raised while the renderer runs.

    A missing renderer or a failing renderer is reported through the result,
    not raised.

    Args:
        lines: Composed Markdown lines
        output_path: Destination PDF path (parent directories are created)
        renderer: Resolved renderer executable (see resolve_renderer()); None if unavailable
        pdf_engine: LaTeX engine passed to --pdf-engine
        verbose: Log renderer output even on success

    Returns:
        RenderResult with success status and diagnostic information
    """
    output_path = Path(output_path).resolve()

    if renderer is None:
        _log_error("No renderer available; set CVPRESS_RENDERER or install pandoc")
        return RenderResult(
            success=False,
            errors=["Renderer not found (set CVPRESS_RENDERER or install pandoc)"],
        )

    document = wrap_front_matter(to_markdown(lines))

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        markdown_path = _write_transient_markdown(document)
    except OSError as e:
        _log_error(f"Could not prepare render: {e}")
        return RenderResult(success=False, errors=[f"Could not prepare render: {e}"])

    command = [
        renderer,
        str(markdown_path),
        "-o",
        str(output_path),
        f"--pdf-engine={pdf_engine}",
    ]

    start_time = time.time()
    try:
        log_render_start(command, markdown_path, output_path)
        try:
            completed = _run_renderer(command)
        except OSError as e:
            result = RenderResult(
                success=False,
                command=command,
                errors=[f"Could not start renderer {renderer}: {e}"],
                markdown_path=markdown_path,
            )
        else:
            result = _collect_result(completed, command, output_path, markdown_path)
    finally:
        markdown_path.unlink(missing_ok=True)
        _log_debug(f"Removed intermediate file: {markdown_path}")

    log_render_result(result, elapsed_time=time.time() - start_time, verbose=verbose)
    return result


def _collect_result(
    completed: subprocess.CompletedProcess,
    command: List[str],
    output_path: Path,
    markdown_path: Path,
) -> RenderResult:
    """Interpret the renderer's exit status and output."""
    errors = []

    if completed.returncode != 0:
        errors.append(f"{command[0]} exited with code {completed.returncode}")
        errors.extend(line.strip() for line in completed.stderr.splitlines() if line.strip())
    elif not output_path.exists():
        errors.append("PDF file was not generated")
    elif completed.stderr.strip():
        _log_warning("Renderer reported warnings")
        _log_debug(completed.stderr.strip())

    success = not errors
    return RenderResult(
        success=success,
        output_path=output_path if success else None,
        command=command,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        errors=errors,
        markdown_path=markdown_path,
    )
