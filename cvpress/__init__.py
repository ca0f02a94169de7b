"""
cvpress - YAML curriculum vitae to PDF

Turns a structured CV data document into Markdown and typesets it to PDF
with pandoc.

Architecture:
- Templating Context: YAML loading and Markdown composition
- Rendering Context: front-matter, pandoc invocation and output management
"""

__version__ = "0.1.0"
