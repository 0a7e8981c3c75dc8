"""Summary renderer: a plain-text projection of a Document.

Prints every title field, then each section with its commands. No HTML.
The output is deterministic, which makes it a convenient canonical form
for tests and debugging.

Example:
    >>> from roffhtml import parse, render_summary
    >>> src = ".TH ls 1 2024-01-01 GNU User Commands\\n.SH NAME\\nls"
    >>> print(render_summary(parse(src)), end="")
    title: ls
    section: 1
    date: 2024-01-01
    source: GNU
    manual_section: User Commands
    SECTION NAME
      COMMAND(0) ls
"""

from roffhtml.nodes import Command, Document, Section
from roffhtml.stringbuilder import StringBuilder


class SummaryRenderer:
    """Render a Document as ``name: value`` / ``SECTION`` / ``COMMAND`` lines."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        sb = StringBuilder()
        for name, value in node.title.items():
            sb.append_line(f"{name}: {value}")
        for section in node.sections:
            self._render_section(section, sb)
        return sb.build()

    def _render_section(self, section: Section, sb: StringBuilder) -> None:
        sb.append_line(f"SECTION {section.name}")
        for command in section.commands:
            sb.append_line(self._command_line(command))

    @staticmethod
    def _command_line(command: Command) -> str:
        return f"  COMMAND({int(command.kind)}) {command.content}"


def render_summary(doc: Document) -> str:
    """Render a Document to its diagnostic text listing."""
    return SummaryRenderer().render(doc)
