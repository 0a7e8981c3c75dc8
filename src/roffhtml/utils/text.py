"""Text processing utilities for roffhtml.

Example:
    >>> from roffhtml.utils.text import slugify
    >>> slugify("SEE ALSO")
    'see-also'
"""

from __future__ import annotations

import html as html_module
import re


def slugify(text: str, separator: str = "-") -> str:
    """Convert a section name to an anchor-safe slug.

    Keeps Unicode word characters, lowercases, and collapses runs of
    whitespace and hyphens into ``separator``.

    Examples:
        >>> slugify("NAME")
        'name'
        >>> slugify("See Also!")
        'see-also'
        >>> slugify("Café")
        'café'
    """
    if not text:
        return ""

    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", separator, text)
    return text.strip(separator)


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in text and attributes.

    Examples:
        >>> escape_html("<b>\\"x\\" & 'y'</b>")
        '&lt;b&gt;&quot;x&quot; &amp; &#x27;y&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def is_blank(text: str) -> bool:
    """Return True for empty or whitespace-only text."""
    return not text or text.isspace()
