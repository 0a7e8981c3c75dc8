"""Utility modules for roffhtml.

Provides:
- text: slugify, escape_html, is_blank for text processing
- logger: get_logger for logging
"""

from roffhtml.utils.logger import get_logger
from roffhtml.utils.text import escape_html, is_blank, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "is_blank",
    "slugify",
]
