"""Exception classes for roffhtml.

Provides standardized exceptions for error handling throughout roffhtml.
"""

from __future__ import annotations


class RoffHtmlError(Exception):
    """Base exception for all roffhtml errors.
    
    Subclass this for specific error categories.
    """

    pass


class ParseError(RoffHtmlError):
    """Error during page parsing.
    
    Raised when the parser encounters input it cannot place in a Document.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.
        
        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class StructuralError(ParseError):
    """Content found outside of any section.

    Raised for body text or a ``.LN`` link before the first ``.SH`` header.
    Parsing stops at the offending line.
    """

    pass


class UnrecognizedDirectiveError(ParseError):
    """Unknown ``.``-prefixed directive in strict mode.

    Outside strict mode the line is logged as a warning and dropped.
    """

    def __init__(
        self,
        line: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.line = line
        super().__init__(f"unrecognized directive: {line}", lineno, source_file)
