"""Line classifier for the roff page dialect.

Splits the source on newlines and classifies each line by its prefix.
No regex, one forward pass, one token per line.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from roffhtml.tokens import Token, TokenType

DIRECTIVE_PREFIX = "."

# Directives whose payload is left-trimmed before use.
_TRIMMED_DIRECTIVES: dict[str, TokenType] = {
    ".TH": TokenType.TITLE,
    ".SH": TokenType.SECTION,
}

# Directives whose payload is kept raw.
_RAW_DIRECTIVES: dict[str, TokenType] = {
    ".LN": TokenType.LINK,
}


def split_lines(source: str) -> list[str]:
    """Split source on ``\\n``.

    A trailing newline does not produce an extra empty line, but a final
    line without one is still returned. Carriage returns are kept.

    Examples:
        >>> split_lines("a\\n\\nb\\n")
        ['a', '', 'b']
        >>> split_lines("")
        []
    """
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Lexer:
    """Classify page source lines into tokens.

    Usage:
            >>> lexer = Lexer(".SH NAME\\nhello")
            >>> for token in lexer.tokenize():
            ...     print(token)
            Token(SECTION, 'NAME', 1)
            Token(TEXT, 'hello', 2)

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Page source text
            source_file: Optional source file path for diagnostics
        """
        self._source = source
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Yield one Token per source line, in order."""
        for lineno, line in enumerate(split_lines(self._source), start=1):
            yield self._classify(line, lineno)

    def _classify(self, line: str, lineno: int) -> Token:
        """Classify a single line by its prefix."""
        if line.startswith(DIRECTIVE_PREFIX):
            prefix = line[:3]
            token_type = _TRIMMED_DIRECTIVES.get(prefix)
            if token_type is not None:
                return self._token(token_type, line[3:].lstrip(), lineno)
            token_type = _RAW_DIRECTIVES.get(prefix)
            if token_type is not None:
                return self._token(token_type, line[3:], lineno)
            return self._token(TokenType.UNKNOWN_DIRECTIVE, line, lineno)
        return self._token(TokenType.TEXT, line, lineno)

    def _token(self, token_type: TokenType, value: str, lineno: int) -> Token:
        return Token(token_type, value, lineno, self._source_file)
