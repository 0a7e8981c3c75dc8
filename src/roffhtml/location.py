"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line-level source location.
    
    The dialect is line oriented, so a location is just the 1-indexed line
    number plus the optional source file path used in diagnostics.
    
    Examples:
            >>> loc = SourceLocation(3, "index.1")
            >>> str(loc)
            'index.1:3'
        
    """

    lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "index.1:10" or "10"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return f"{self.lineno}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0)
