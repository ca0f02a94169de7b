#!/usr/bin/env python3
"""
CV Generation CLI

Reads a YAML CV data document, composes it to Markdown and renders a PDF with pandoc.

Commands:
    build    - Compose and render a CV to PDF
    markdown - Compose a CV and write the Markdown without rendering

Examples:\n

    generate_cv.py build                               # scripts/data.yml -> scripts/cv.pdf

    generate_cv.py build my_cv.yml out/my_cv.pdf       # Custom input and output

    generate_cv.py markdown my_cv.yml -o my_cv.md      # Preview the composed Markdown
"""

import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from cvpress.contexts.rendering import render_pdf, resolve_renderer
from cvpress.contexts.rendering.logger import setup_rendering_logger
from cvpress.contexts.templating import (
    compose,
    load_cv_data,
    section_headings,
    to_markdown,
)
from cvpress.contexts.templating.logger import log_composition
from cvpress.utils import now

load_dotenv()
SCRIPT_DIR = Path(__file__).resolve().parent
DEFAULT_INPUT = SCRIPT_DIR / "data.yml"
DEFAULT_OUTPUT = SCRIPT_DIR / "cv.pdf"
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Generate a PDF CV from a YAML data document",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _compose_from(input_path: Path) -> list:
    """Load and compose, exiting with code 1 on unreadable or malformed data."""
    try:
        data = load_cv_data(input_path)
        return compose(data)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("build")
def build_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="YAML CV data document (default: data.yml beside this script)"),
    ] = DEFAULT_INPUT,
    output_path: Annotated[
        Path,
        typer.Argument(help="Output PDF path (default: cv.pdf beside this script)"),
    ] = DEFAULT_OUTPUT,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug messages and renderer stdout/stderr on the console",
        ),
    ] = False,
):
    """
    Compose a CV and render it to PDF.

    Examples:\n

        $ generate_cv.py build                              # Default input and output

        $ generate_cv.py build data.yml cv.pdf --verbose    # Custom paths, verbose log
    """
    renderer = resolve_renderer()
    log_file = setup_rendering_logger(
        LOGS_PATH / f"render_{now()}", renderer=renderer, verbose=verbose
    )

    typer.secho(f"\nReading: {input_path}", fg=typer.colors.BLUE, bold=True)
    start_time = time.time()
    lines = _compose_from(input_path)
    log_composition(len(lines), section_headings(lines))

    result = render_pdf(lines, output_path, renderer=renderer, verbose=verbose)

    typer.echo("")
    if result.success:
        typer.secho("✓ Rendering succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {result.output_path}")
        typer.echo(f"  Time: {time.time() - start_time:.2f}s")
    else:
        ran = " ".join(result.command) if result.command else "renderer"
        typer.secho(f"✗ Rendering failed: {ran}", fg=typer.colors.RED, bold=True, err=True)
        for error in result.errors[:10]:
            typer.secho(f"  - {error}", fg=typer.colors.RED, err=True)
        if len(result.errors) > 10:
            typer.echo(f"  ... and {len(result.errors) - 10} more", err=True)

    typer.echo(f"  Log: {log_file}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("markdown")
def markdown_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="YAML CV data document (default: data.yml beside this script)"),
    ] = DEFAULT_INPUT,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write Markdown to this file instead of stdout",
        ),
    ] = None,
):
    """
    Compose a CV and write the Markdown without invoking the renderer.

    Examples:\n

        $ generate_cv.py markdown                     # Print to stdout

        $ generate_cv.py markdown data.yml -o cv.md   # Write to file
    """
    markdown = to_markdown(_compose_from(input_path))

    if output is None:
        typer.echo(markdown)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown + "\n", encoding="utf-8")
        typer.secho(f"✓ Markdown written to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
