"""
Shared utilities for vitae.

Common functionality used across contexts:
- Text layout helpers (wrapping, underlines)
- Logger configuration
"""

from vitae.utils.text_processing import underline, wrap

__all__ = ["underline", "wrap"]
