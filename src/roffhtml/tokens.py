"""Token and TokenType definitions for the roffhtml lexer.

The lexer classifies each source line into one Token that the parser
consumes. Each Token has a type, value, and line number.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto

from roffhtml.location import SourceLocation


class TokenType(Enum):
    """Line classes produced by the lexer."""

    TITLE = auto()  # .TH
    SECTION = auto()  # .SH
    LINK = auto()  # .LN
    UNKNOWN_DIRECTIVE = auto()  # any other .-prefixed line
    TEXT = auto()  # body text


@dataclass(frozen=True, slots=True)
class Token:
    """A classified source line.

    Attributes:
        type: Line class
        value: Payload after the directive prefix (the whole line for TEXT
            and UNKNOWN_DIRECTIVE)
        lineno: 1-indexed line number
        source_file: Optional source file path for diagnostics

    """

    type: TokenType
    value: str
    lineno: int
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.lineno, self.source_file)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lineno})"
