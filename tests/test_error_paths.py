"""Error-path and malformed input tests.

Structural failures abort parsing; unrecognized directives are logged and
dropped unless strict mode is on.
"""

import logging

import pytest

from roffhtml import ManPage, parse
from roffhtml.errors import (
    ParseError,
    RoffHtmlError,
    StructuralError,
    UnrecognizedDirectiveError,
)

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    def test_message_only(self) -> None:
        err = ParseError("unexpected line")
        assert str(err) == "unexpected line"
        assert err.lineno is None
        assert err.source_file is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad", lineno=42)
        assert str(err) == "42 bad"

    def test_with_source_file(self) -> None:
        err = ParseError("bad", lineno=3, source_file="ls.1")
        assert str(err) == "ls.1:3 bad"

    def test_source_file_only(self) -> None:
        assert str(ParseError("bad", source_file="ls.1")) == "ls.1 bad"

    def test_hierarchy(self) -> None:
        assert issubclass(StructuralError, ParseError)
        assert issubclass(UnrecognizedDirectiveError, ParseError)
        assert issubclass(ParseError, RoffHtmlError)


# =========================================================================
# Structural errors
# =========================================================================


class TestStructuralErrors:
    def test_text_before_section(self) -> None:
        with pytest.raises(StructuralError, match="text"):
            parse("hello\n.SH NAME\n")

    def test_link_before_section(self) -> None:
        with pytest.raises(StructuralError, match=r"\.LN"):
            parse(".LN https://example.com Example\n")

    def test_blank_line_before_section(self) -> None:
        with pytest.raises(StructuralError):
            parse(".TH ls 1\n\n.SH NAME\n")

    def test_error_names_source_and_line(self) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse(".TH ls 1\noops\n", source_file="ls.1")
        err = exc_info.value
        assert err.lineno == 2
        assert err.source_file == "ls.1"
        assert str(err).startswith("ls.1:2 ")
        assert ".SH" in str(err)

    def test_error_names_unnamed_source(self) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse("oops\n")
        assert exc_info.value.source_file == "<string>"
        assert str(exc_info.value).startswith("<string>:1 ")

    def test_strict_error_names_unnamed_source(self) -> None:
        with pytest.raises(UnrecognizedDirectiveError) as exc_info:
            parse(".ZZ\n", strict_directives=True)
        assert str(exc_info.value).startswith("<string>:1 ")

    def test_title_and_unknown_directives_allowed_before_section(self) -> None:
        doc = parse(".TH ls 1\n.\\\" comment\n.SH NAME\n")
        assert [s.name for s in doc.sections] == ["NAME"]

    def test_valid_prefix_then_invalid_link(self) -> None:
        """A link is only valid once a section has been opened."""
        assert parse(".SH NAME\nhello\n").sections[0].commands
        with pytest.raises(StructuralError):
            parse(".LN x y\n.SH NAME\nhello\n")


# =========================================================================
# Unrecognized directives
# =========================================================================


class TestUnrecognizedDirectives:
    def test_dropped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roffhtml"):
            doc = parse(".SH NAME\n.B bold\nafter\n", source_file="ls.1")

        assert [c.content for c in doc.sections[0].commands] == ["after"]
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "ls.1" in message
        assert ".B bold" in message

    def test_warning_without_source_file(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roffhtml"):
            parse(".XX\n")
        assert "<string>" in caplog.records[0].getMessage()

    def test_each_directive_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roffhtml"):
            parse(".SH A\n.B x\n.I y\n")
        assert len(caplog.records) == 2

    def test_strict_mode_raises(self) -> None:
        with pytest.raises(UnrecognizedDirectiveError) as exc_info:
            parse(".SH A\nok\n.PP\n", strict_directives=True)
        assert exc_info.value.line == ".PP"
        assert exc_info.value.lineno == 3

    def test_strict_mode_via_manpage(self) -> None:
        page = ManPage(strict_directives=True)
        with pytest.raises(UnrecognizedDirectiveError):
            page.parse(".IP\n")

    def test_known_directives_never_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roffhtml"):
            parse(".TH a\n.SH B\n.LN c d\ntext\n", strict_directives=True)
        assert caplog.records == []
