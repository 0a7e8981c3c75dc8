"""Typed document nodes for roffhtml.

All nodes are frozen dataclasses with slots:
- Immutability: the Document never changes after parsing
- Pattern matching: renderers dispatch with ``match`` statements

Node Hierarchy:
Document
├── TitleFields
└── Section
    └── Command
        ├── Text
        └── Link

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from roffhtml.location import SourceLocation
from roffhtml.title import TITLE_FIELDS, pad_fields

# =============================================================================
# Title
# =============================================================================


@dataclass(frozen=True, slots=True)
class TitleFields:
    """The five ``.TH`` metadata fields. Unset fields are empty.

    ``manual_section`` doubles as the page's long title: the HTML renderer
    uses it for ``<title>`` and the header ``<h1>``.

    """

    FIELD_NAMES: ClassVar[tuple[str, ...]] = (
        "title",
        "section",
        "date",
        "source",
        "manual_section",
    )

    title: str = ""
    section: str = ""
    date: str = ""
    source: str = ""
    manual_section: str = ""

    @classmethod
    def from_fields(cls, fields: tuple[str, ...]) -> TitleFields:
        """Build from up to five positional fields; extra fields are ignored."""
        return cls(*pad_fields(fields[:TITLE_FIELDS]))

    def as_tuple(self) -> tuple[str, ...]:
        return (self.title, self.section, self.date, self.source, self.manual_section)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in declaration order."""
        return zip(self.FIELD_NAMES, self.as_tuple())

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_tuple())


# =============================================================================
# Commands
# =============================================================================


class CommandKind(IntEnum):
    """Command tag. The ordinal is what the summary renderer prints."""

    TEXT = 0
    LINK = 1


@dataclass(frozen=True, slots=True)
class Command:
    """Base class for section content.

    Attributes:
        content: Raw payload from the source line
        location: Where the line was parsed from

    """

    kind: ClassVar[CommandKind]

    content: str
    location: SourceLocation = field(
        default_factory=SourceLocation.unknown, compare=False, repr=False
    )


@dataclass(frozen=True, slots=True)
class Text(Command):
    """A literal body text line.

    Empty or whitespace-only content renders as a paragraph break.

    """

    kind: ClassVar[CommandKind] = CommandKind.TEXT


@dataclass(frozen=True, slots=True)
class Link(Command):
    """A hyperlink from a ``.LN <target> <label...>`` line.

    ``content`` keeps the raw payload, leading space included. ``target``
    and ``label`` split it on the first space.

    """

    kind: ClassVar[CommandKind] = CommandKind.LINK

    @property
    def target(self) -> str:
        return self._split()[0]

    @property
    def label(self) -> str:
        return self._split()[1]

    def _split(self) -> tuple[str, str]:
        target, _, label = self.content.strip().partition(" ")
        return target.strip(), label.strip()


# =============================================================================
# Structure
# =============================================================================


@dataclass(frozen=True, slots=True)
class Section:
    """A named group of commands opened by ``.SH``."""

    name: str
    commands: tuple[Command, ...] = ()
    location: SourceLocation = field(
        default_factory=SourceLocation.unknown, compare=False, repr=False
    )


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed page: title fields plus sections in source order.

    Attributes:
        title: The ``.TH`` fields
        sections: Sections in the order their ``.SH`` lines appeared
        source_file: Path used in diagnostics (optional)

    """

    title: TitleFields = field(default_factory=TitleFields)
    sections: tuple[Section, ...] = ()
    source_file: str | None = None


__all__ = [
    "Command",
    "CommandKind",
    "Document",
    "Link",
    "Section",
    "Text",
    "TitleFields",
]
