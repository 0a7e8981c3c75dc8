"""roffhtml renderers.

Available Renderers:
- HtmlRenderer: Renders a Document to an HTML page using StringBuilder
- SummaryRenderer: Renders a Document to a diagnostic text listing

Thread Safety:
All renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from roffhtml.renderers.html import HtmlRenderer, render
from roffhtml.renderers.protocol import DocumentRenderer
from roffhtml.renderers.summary import SummaryRenderer, render_summary

__all__ = [
    "DocumentRenderer",
    "HtmlRenderer",
    "SummaryRenderer",
    "render",
    "render_summary",
]
