"""Escape-aware tokenizer for ``.TH`` title lines.

The ``.TH`` payload holds up to five space-separated fields:
``title section date source manual_section``. A backslash escapes the next
character's delimiter role, so ``Foo\\ Bar`` is one field.

Rules:
- An unescaped space closes the current field.
- A backslash sets the escape state and is dropped from the field. The
  escape state is cleared by the next character that is not a backslash.
- The final character of the line always closes the current field.
- The fifth field takes the rest of the line, spaces included.
- Consecutive unescaped spaces produce empty fields.
- Fields are trimmed on both sides.

Thread Safety:
Pure functions, safe to call from any thread.

"""

from __future__ import annotations

TITLE_FIELDS = 5
ESCAPE = "\\"
DELIMITER = " "


def split_title(line: str) -> tuple[str, ...]:
    """Split a ``.TH`` payload into at most five trimmed fields.

    Args:
        line: The payload after ``.TH`` (leading whitespace already trimmed)

    Returns:
        Between zero and five fields, in order

    Examples:
        >>> split_title("A B C D E")
        ('A', 'B', 'C', 'D', 'E')
        >>> split_title("A\\\\ B C D E")
        ('A B', 'C', 'D', 'E')
        >>> split_title("Prog 1 2024-01-01 SourceX My Program")
        ('Prog', '1', '2024-01-01', 'SourceX', 'My Program')
    """
    fields: list[str] = []
    buf: list[str] = []
    escape = False
    last = len(line) - 1

    for i, ch in enumerate(line):
        splits = not escape and ch == DELIMITER and len(fields) < TITLE_FIELDS - 1
        if splits or i == last:
            buf.append(ch)
            fields.append("".join(buf).strip())
            buf = []
            continue
        if ch == ESCAPE:
            escape = True
            continue
        escape = False
        buf.append(ch)

    return tuple(fields)


def pad_fields(fields: tuple[str, ...]) -> tuple[str, ...]:
    """Pad ``fields`` with empty strings up to five entries."""
    return fields + ("",) * (TITLE_FIELDS - len(fields))
