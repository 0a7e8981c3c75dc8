"""Tests for roffhtml utility modules."""


class TestSlugify:
    def test_basic(self) -> None:
        from roffhtml.utils.text import slugify

        assert slugify("NAME") == "name"
        assert slugify("SEE ALSO") == "see-also"
        assert slugify("Exit Status!") == "exit-status"

    def test_unicode(self) -> None:
        from roffhtml.utils.text import slugify

        assert slugify("Café") == "café"

    def test_custom_separator(self) -> None:
        from roffhtml.utils.text import slugify

        assert slugify("see also", separator="_") == "see_also"

    def test_empty(self) -> None:
        from roffhtml.utils.text import slugify

        assert slugify("") == ""
        assert slugify("  --  ") == ""


class TestEscapeHtml:
    def test_reserved_characters(self) -> None:
        from roffhtml.utils.text import escape_html

        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
        )

    def test_empty(self) -> None:
        from roffhtml.utils.text import escape_html

        assert escape_html("") == ""


class TestIsBlank:
    def test_values(self) -> None:
        from roffhtml.utils.text import is_blank

        assert is_blank("")
        assert is_blank(" \t ")
        assert not is_blank(" x ")


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from roffhtml.utils.logger import get_logger

        assert get_logger("mymodule").name == "roffhtml.mymodule"

    def test_prefix_kept(self) -> None:
        from roffhtml.utils.logger import get_logger

        assert get_logger("roffhtml.parser").name == "roffhtml.parser"
        assert get_logger("roffhtml").name == "roffhtml"


class TestStringBuilder:
    def test_append_and_build(self) -> None:
        from roffhtml.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append("").append_line("b").append_line()
        assert sb.build() == "ab\n\n"
        assert sb.lines() == ["ab", ""]

    def test_lines_split_on_newline_only(self) -> None:
        from roffhtml.stringbuilder import StringBuilder

        sb = StringBuilder().append_line("a\rb").append_line("c\x0cd\u2028e")
        assert sb.lines() == ["a\rb", "c\x0cd\u2028e"]

    def test_lines_empty(self) -> None:
        from roffhtml.stringbuilder import StringBuilder

        assert StringBuilder().lines() == []

    def test_lines_keep_unterminated_tail(self) -> None:
        from roffhtml.stringbuilder import StringBuilder

        assert StringBuilder().append_line("a").append("b").lines() == ["a", "b"]
