"""Line-dispatch parser producing a typed Document.

Consumes the token stream from Lexer and builds Section and Command nodes.
Sections and their commands are collected in lists while parsing and frozen
into tuples once the whole source has been read.

Thread Safety:
- Parser produces an immutable Document (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from dataclasses import dataclass, field

from roffhtml.config import ParseConfig, get_parse_config
from roffhtml.errors import StructuralError, UnrecognizedDirectiveError
from roffhtml.lexer import Lexer
from roffhtml.location import SourceLocation
from roffhtml.nodes import Command, Document, Link, Section, Text, TitleFields
from roffhtml.title import split_title
from roffhtml.tokens import Token, TokenType
from roffhtml.utils.logger import get_logger

logger = get_logger(__name__)

UNNAMED_SOURCE = "<string>"


@dataclass(slots=True)
class _OpenSection:
    """Mutable section under construction."""

    name: str
    location: SourceLocation
    commands: list[Command] = field(default_factory=list)

    def freeze(self) -> Section:
        return Section(name=self.name, commands=tuple(self.commands), location=self.location)


class Parser:
    """Parser for the roff page dialect.

    Usage:
            >>> parser = Parser(".SH NAME\\nhello")
            >>> doc = parser.parse()
            >>> doc.sections[0].commands
            (Text(content='hello'),)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting Document is immutable.

    """

    __slots__ = ("_source", "_source_file", "_title", "_sections")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Page source text
            source_file: Optional source file path for diagnostics

        """
        self._source = source
        self._source_file = source_file
        self._title = TitleFields()
        self._sections: list[_OpenSection] = []

    @property
    def _source_name(self) -> str:
        """Source identifier for diagnostics."""
        return self._source_file or UNNAMED_SOURCE

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Document:
        """Parse source into a Document.

        Raises:
            StructuralError: Body text or a link before the first section
            UnrecognizedDirectiveError: Unknown directive in strict mode

        """
        for token in Lexer(self._source, self._source_file).tokenize():
            self._dispatch(token)

        return Document(
            title=self._title,
            sections=tuple(section.freeze() for section in self._sections),
            source_file=self._source_file,
        )

    def _dispatch(self, token: Token) -> None:
        match token.type:
            case TokenType.TITLE:
                self._title = TitleFields.from_fields(split_title(token.value))
            case TokenType.SECTION:
                self._sections.append(_OpenSection(token.value, token.location))
            case TokenType.LINK:
                section = self._current_section(token, "link directive .LN")
                section.commands.append(Link(token.value, token.location))
            case TokenType.UNKNOWN_DIRECTIVE:
                self._unrecognized(token)
            case TokenType.TEXT:
                section = self._current_section(token, "text")
                section.commands.append(Text(token.value, token.location))

    def _current_section(self, token: Token, what: str) -> _OpenSection:
        """Return the most recently opened section, or fail."""
        if not self._sections:
            raise StructuralError(
                f"trying to add {what} without specifying section header .SH",
                lineno=token.lineno,
                source_file=self._source_name,
            )
        return self._sections[-1]

    def _unrecognized(self, token: Token) -> None:
        if self._config.strict_directives:
            raise UnrecognizedDirectiveError(
                token.value, lineno=token.lineno, source_file=self._source_name
            )
        logger.warning(
            "%s: unrecognized directive: %s",
            self._source_name,
            token.value,
        )
