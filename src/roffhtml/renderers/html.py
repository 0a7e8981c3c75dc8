"""HTML renderer using StringBuilder pattern.

Renders a parsed Document to a standalone HTML page: preamble with the
theme's style blocks, a man-page style header, one <section> per Section,
and a footer repeating the source field around the date.

Thread Safety:
All per-render state is the StringBuilder created inside render(). Multiple
threads can safely share a single HtmlRenderer instance.

Escaping:
Page content is emitted verbatim by default, so body text may carry inline
markup. ``Theme(escape_html=True)`` escapes every piece of page content.
Theme values are never escaped.
"""

from __future__ import annotations

from collections.abc import Callable

from roffhtml.config import Theme
from roffhtml.nodes import Command, Document, Link, Section, Text, TitleFields
from roffhtml.stringbuilder import StringBuilder
from roffhtml.utils.logger import get_logger
from roffhtml.utils.text import escape_html, is_blank
from roffhtml.utils.text import slugify as default_slugify

logger = get_logger(__name__)

PARAGRAPH_BREAK = "<br /><br />"


def _identity(s: str) -> str:
    return s


class HtmlRenderer:
    """Render a Document to an HTML page.

    Usage:
        >>> from roffhtml import parse
        >>> doc = parse(".TH ls 1\\n.SH NAME\\nls - list directory contents")
        >>> html = HtmlRenderer().render(doc)
        >>> "<h2>NAME</h2>" in html
        True

    """

    __slots__ = ("_theme", "_escape", "_slugify")

    def __init__(
        self,
        theme: Theme | None = None,
        *,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            theme: Stylesheet and color tokens (defaults to ``Theme()``)
            slugify: Optional custom slugify function for section ids
        """
        self._theme = theme or Theme()
        self._escape = escape_html if self._theme.escape_html else _identity
        self._slugify = slugify or default_slugify

    @property
    def theme(self) -> Theme:
        return self._theme

    def render(self, node: Document) -> str:
        """Render document to an HTML string."""
        return self._render_page(node).build()

    def render_lines(self, node: Document) -> list[str]:
        """Render document and return the output as ordered lines.

        Lines are split on newlines only, so carriage returns and form
        feeds from the source stay inside their line.
        """
        return self._render_page(node).lines()

    def _render_page(self, node: Document) -> StringBuilder:
        sb = StringBuilder()
        self._render_preamble(node.title, sb)
        self._render_header(node.title, sb)
        for section in node.sections:
            self._render_section(section, sb)
        self._render_footer(node.title, sb)
        sb.append_line("    </div>")
        sb.append_line("  </body>")
        sb.append_line("</html>")
        logger.debug(
            "rendered %s: %d sections",
            node.source_file or "<string>",
            len(node.sections),
        )
        return sb

    # =========================================================================
    # Page furniture
    # =========================================================================

    def _render_preamble(self, title: TitleFields, sb: StringBuilder) -> None:
        theme = self._theme
        sb.append_line("<!DOCTYPE html>")
        sb.append_line("<html>")
        sb.append_line("  <head>")
        sb.append_line('    <meta charset="utf-8" />')
        sb.append_line(f"    <title>{self._escape(title.manual_section)}</title>")
        sb.append_line("    <style>")
        sb.append_line("      :root {")
        sb.append_line(f"        --background-hue: {theme.background}deg;")
        sb.append_line(f"        --text-hue: {theme.text}deg;")
        sb.append_line(f"        --accent-hue: {theme.accent}deg;")
        sb.append_line("      }")
        sb.append_line("    </style>")
        sb.append_line("    <style>")
        sb.append(theme.stylesheet)
        if theme.stylesheet and not theme.stylesheet.endswith("\n"):
            sb.append_line()
        sb.append_line("    </style>")
        sb.append_line("  </head>")
        sb.append_line("  <body>")
        sb.append_line('    <div class="page">')

    def _identity_line(self, title: TitleFields) -> str:
        name = self._escape(title.title)
        section = self._escape(title.section)
        return (
            '<div class="identity">'
            f'<span class="title">{name}</span>'
            f'<span class="section">({section})</span>'
            "</div>"
        )

    def _render_header(self, title: TitleFields, sb: StringBuilder) -> None:
        """Identity line, long title heading, identity line again."""
        identity = self._identity_line(title)
        sb.append_line("      <header>")
        sb.append_line(f"        {identity}")
        sb.append_line(f"        <h1>{self._escape(title.manual_section)}</h1>")
        sb.append_line(f"        {identity}")
        sb.append_line("      </header>")

    def _render_footer(self, title: TitleFields, sb: StringBuilder) -> None:
        """Source, date, source."""
        source = self._escape(title.source)
        sb.append_line("      <footer>")
        sb.append_line(f'        <span class="source">{source}</span>')
        sb.append_line(f'        <span class="date">{self._escape(title.date)}</span>')
        sb.append_line(f'        <span class="source">{source}</span>')
        sb.append_line("      </footer>")

    # =========================================================================
    # Sections and commands
    # =========================================================================

    def _render_section(self, section: Section, sb: StringBuilder) -> None:
        slug = self._slugify(section.name)
        opening = f'<section id="{escape_html(slug)}">' if slug else "<section>"
        sb.append_line(f"      {opening}")
        sb.append_line(f"        <h2>{self._escape(section.name)}</h2>")
        for command in section.commands:
            sb.append("        ")
            self._render_command(command, sb)
            sb.append_line()
        sb.append_line("      </section>")

    def _render_command(self, command: Command, sb: StringBuilder) -> None:
        """Render a single command."""
        match command:
            case Link():
                href = self._escape(command.target)
                sb.append(f'<a href="{href}">{self._escape(command.label)}</a>')
            case Text():
                if is_blank(command.content):
                    sb.append(PARAGRAPH_BREAK)
                else:
                    sb.append(self._escape(command.content))


def render(
    doc: Document,
    stylesheet: str | None = None,
    background: str | None = None,
    text: str | None = None,
    accent: str | None = None,
    *,
    theme: Theme | None = None,
    escape: bool = False,
) -> str:
    """Render a Document to HTML.

    Presentation parameters may be given individually or as a ``theme``;
    individual values override the theme's.

    Args:
        doc: Document to render
        stylesheet: CSS text embedded verbatim
        background: Background hue token
        text: Text hue token
        accent: Accent hue token
        theme: Base theme (defaults to ``Theme()``)
        escape: Escape page content

    Returns:
        HTML string

    Example:
        >>> from roffhtml import parse
        >>> doc = parse(".SH SEE ALSO\\n.LN https://example.com Example")
        >>> '<a href="https://example.com">Example</a>' in render(doc)
        True
    """
    base = theme or Theme()
    resolved = Theme(
        stylesheet=base.stylesheet if stylesheet is None else stylesheet,
        background=base.background if background is None else background,
        text=base.text if text is None else text,
        accent=base.accent if accent is None else accent,
        escape_html=escape or base.escape_html,
    )
    return HtmlRenderer(resolved).render(doc)
