"""
Templating Context

Responsibilities:
- Loads CV data documents (YAML) into plain data trees
- Composes the ordered Markdown lines of a CV from the data tree
- Reports malformed sections instead of producing partial output

Owns: CV data loading, section ordering and inclusion rules, Markdown layout
Never: Invokes the renderer or writes output files
"""

from cvpress.contexts.templating.composer import compose, section_headings, to_markdown
from cvpress.contexts.templating.exceptions import DocumentLoadError, MalformedInputError
from cvpress.contexts.templating.loader import load_cv_data

__all__ = [
    # Loading and composition
    "load_cv_data",
    "compose",
    "to_markdown",
    "section_headings",
    # Errors
    "DocumentLoadError",
    "MalformedInputError",
]
