"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient line-aware string accumulator.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append_line("<h1>Hello</h1>")
            >>> sb.build()
            '<h1>Hello</h1>\\n'
        
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline (empty = just newline)."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def lines(self) -> list[str]:
        """Return the built output split into lines, without terminators.

        Splits on "\\n" only; other line-break characters stay in the line.
        """
        lines = self.build().split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

