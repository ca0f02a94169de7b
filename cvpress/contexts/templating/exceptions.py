"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class MalformedInputError(ValueError):
    """
    Exception raised when a CV data section has the wrong shape.

    Raised when a section expected to be a mapping, or a field expected to be a
    list of mappings, holds something else (e.g., a plain string where
    ``experiences.info`` should be a list).

    Attributes:
        message: Error description
        key_path: Dotted path of the offending value (e.g., 'experiences.info')
        expected: Description of the expected shape
        actual: Name of the type actually found
    """

    def __init__(
        self,
        message: str,
        key_path: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        self.message = message
        self.key_path = key_path
        self.expected = expected
        self.actual = actual

        parts = [message]

        if key_path:
            parts.append(f"Key: {key_path}")
        if expected and actual:
            parts.append(f"Expected {expected}, got {actual}")

        super().__init__("\n".join(parts))


class DocumentLoadError(ValueError):
    """
    Exception raised when the CV data document cannot be read.

    Covers a missing file as well as YAML that fails to parse.

    Attributes:
        message: Error description
        path: Path of the document that failed to load
        original_error: The underlying I/O or parser error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"Document: {path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
