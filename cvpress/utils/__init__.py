"""
Shared utilities for cvpress.

Common functionality used across contexts:
- Logger configuration
- Timestamps
"""

from cvpress.utils.timestamp import now

__all__ = ["now"]
