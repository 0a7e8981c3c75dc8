"""DocumentRenderer protocol: stable interface for Document renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
``HtmlRenderer`` and ``SummaryRenderer`` both do.

Example:
    from roffhtml.renderers.protocol import DocumentRenderer

    def render_page(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from roffhtml.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for Document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string.

        Args:
            node: The parsed document.

        Returns:
            Rendered string output.

        """
        ...
