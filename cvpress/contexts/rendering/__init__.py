"""
Rendering Context

Responsibilities:
- Prepends the fixed front-matter to composed Markdown
- Runs the renderer (pandoc) to produce the PDF
- Removes the transient Markdown file on every exit path
- Reports renderer failures as results rather than exceptions

Owns: Front-matter, renderer invocation, PDF output
Never: Modifies composed content
"""

from cvpress.contexts.rendering.front_matter import FRONT_MATTER, wrap_front_matter
from cvpress.contexts.rendering.renderer import RenderResult, render_pdf, resolve_renderer

__all__ = [
    "FRONT_MATTER",
    "wrap_front_matter",
    "RenderResult",
    "render_pdf",
    "resolve_renderer",
]
