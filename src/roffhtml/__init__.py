"""
roffhtml: man-page markup to HTML

Converts a small roff-like dialect (``.TH``, ``.SH``, ``.LN`` and body text)
into a standalone HTML page. Typed, immutable Document; zero runtime
dependencies.

Quick Start:
    >>> from roffhtml import parse, render
    >>> doc = parse(".TH ls 1 2024-01-01 GNU User\\\\ Commands\\n.SH NAME\\nls")
    >>> doc.title.manual_section
    'User Commands'
    >>> html = render(doc, stylesheet="body { margin: 0 }")

    >>> # Or use the high-level ManPage class
    >>> from roffhtml import ManPage, Theme
    >>> page = ManPage(theme=Theme(accent="120"))
    >>> html = page(".SH NAME\\nls")
"""

from collections.abc import Iterable

from roffhtml.config import (
    ParseConfig,
    Theme,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from roffhtml.errors import (
    ParseError,
    RoffHtmlError,
    StructuralError,
    UnrecognizedDirectiveError,
)
from roffhtml.lexer import Lexer
from roffhtml.location import SourceLocation
from roffhtml.nodes import (
    Command,
    CommandKind,
    Document,
    Link,
    Section,
    Text,
    TitleFields,
)
from roffhtml.parser import Parser
from roffhtml.renderers.html import HtmlRenderer, render
from roffhtml.renderers.protocol import DocumentRenderer
from roffhtml.renderers.summary import SummaryRenderer, render_summary
from roffhtml.title import split_title
from roffhtml.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    strict_directives: bool = False,
) -> Document:
    """Parse page source into a Document.

    Args:
        source: Page source text
        source_file: Optional source file path for diagnostics
        strict_directives: Raise on unrecognized directives instead of
            logging a warning

    Returns:
        Immutable Document

    Raises:
        StructuralError: Body text or a link before the first ``.SH``
        UnrecognizedDirectiveError: Unknown directive with strict_directives

    Example:
        >>> doc = parse(".SH NAME\\nhello")
        >>> doc.sections[0].name
        'NAME'
    """
    with parse_config_context(ParseConfig(strict_directives=strict_directives)):
        return Parser(source, source_file=source_file).parse()


class ManPage:
    """High-level processor combining parser and renderers.

    Usage:
        >>> page = ManPage()
        >>> html = page(".SH NAME\\nhello")

        >>> # Access the Document
        >>> doc = page.parse(".SH NAME\\nhello")
        >>> print(page.summary(doc), end="")  # doctest: +NORMALIZE_WHITESPACE
        title:
        section:
        date:
        source:
        manual_section:
        SECTION NAME
          COMMAND(0) hello

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        ManPage instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        theme: Theme | None = None,
        strict_directives: bool = False,
    ) -> None:
        """Initialize processor.

        Args:
            theme: Stylesheet and color tokens for HTML output
            strict_directives: Raise on unrecognized directives
        """
        self._config = ParseConfig(strict_directives=strict_directives)
        self._renderer = HtmlRenderer(theme)

    @property
    def theme(self) -> Theme:
        return self._renderer.theme

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render to HTML in one call."""
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document using this processor's config."""
        with parse_config_context(self._config):
            return Parser(source, source_file=source_file).parse()

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple sources under one configuration.

        Stops at the first source that raises.
        """
        with parse_config_context(self._config):
            return [Parser(source, source_file=source_file).parse() for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._renderer.render(doc)

    def summary(self, doc: Document) -> str:
        """Render a Document to its diagnostic text listing."""
        return render_summary(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_summary",
    "split_title",
    # Nodes
    "Command",
    "CommandKind",
    "Document",
    "Link",
    "Section",
    "Text",
    "TitleFields",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    # Renderers
    "DocumentRenderer",
    "HtmlRenderer",
    "SummaryRenderer",
    # Errors
    "ParseError",
    "RoffHtmlError",
    "StructuralError",
    "UnrecognizedDirectiveError",
    # Configuration
    "ParseConfig",
    "Theme",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
    # High-level
    "ManPage",
]
