"""Tests for bordered table rendering."""
from rich.text import Text
from getnews.formatters.table import RenderContext, attribution, render_table
from conftest import plain


def _lines(rendered):
    assert rendered.endswith("\n")
    return rendered[:-1].split("\n")


class TestRenderContext:
    def test_default_widths(self):
        ctx = RenderContext()
        assert ctx.width == 80
        assert ctx.content_width == 78
        assert ctx.wrap_width == 76

    def test_wrap_width_leaves_room_for_padding(self):
        for width in (40, 80, 120):
            ctx = RenderContext(width=width)
            assert ctx.wrap_width == ctx.content_width - 2


class TestRenderTable:
    def test_every_line_is_full_width(self):
        out = render_table("Heading", lambda t: t.push("hello"), no_color=True)
        for line in _lines(out):
            assert len(line) == 80

    def test_custom_width(self):
        out = render_table("Heading", lambda t: t.push("hello"), no_color=True, width=50)
        for line in _lines(out):
            assert len(line) == 50

    def test_overlong_token_folded_inside_border(self):
        url = "https://example.com/" + "z" * 200
        out = render_table(None, lambda t: t.push(url), no_color=True)
        for line in _lines(out):
            assert len(line) == 80
        assert "".join(line[2:-2].strip() for line in _lines(out)).count("z") == 200

    def test_single_trailing_newline(self):
        out = render_table(None, lambda t: None, no_color=True)
        assert out.endswith("\n")
        assert not out.endswith("\n\n")

    def test_header_row(self):
        out = render_table("Articles", lambda t: t.push("body"), no_color=True)
        lines = _lines(out)
        assert lines[1].startswith("│ Articles")
        assert lines[2].startswith("├")

    def test_no_header_row_when_none(self):
        out = render_table(None, lambda t: t.push("body"), no_color=True)
        lines = _lines(out)
        assert lines[0].startswith("┌")
        assert lines[1].startswith("│ body")

    def test_footer_always_appended(self):
        out = render_table(None, lambda t: None, no_color=True)
        assert "Powered by the News API (https://newsapi.org)." in out
        assert "Open source contributions are welcome!" in out
        assert "https://github.com/omgimanerd/getnews.tech" in out

    def test_footer_is_centered(self):
        out = render_table(None, lambda t: None, no_color=True)
        line = next(l for l in _lines(out) if "Open source" in l)
        inner = line[1:-1]
        left = len(inner) - len(inner.lstrip())
        right = len(inner) - len(inner.rstrip())
        assert abs(left - right) <= 1

    def test_populate_receives_context(self):
        seen = []
        render_table(None, lambda t: seen.append(t.context), no_color=True, width=60)
        assert seen == [RenderContext(width=60, color=False)]

    def test_rows_keep_push_order(self):
        def populate(table):
            table.push("first")
            table.push(Text("second"))
        out = render_table(None, populate, no_color=True)
        assert out.index("first") < out.index("second")


class TestColor:
    def test_color_emits_escape_sequences(self):
        out = render_table("Heading", lambda t: t.push(Text("x", style="red")))
        assert "\x1b[" in out

    def test_no_color_has_no_escape_sequences(self):
        out = render_table("Heading", lambda t: t.push(Text("x", style="red")), no_color=True)
        assert "\x1b[" not in out

    def test_color_available_after_no_color_render(self):
        render_table(None, lambda t: None, no_color=True)
        out = render_table(None, lambda t: None)
        assert "\x1b[" in out

    def test_nested_render_does_not_leak_styling(self):
        inner = []

        def populate(table):
            inner.append(render_table(None, lambda t: None, no_color=False))
            table.push("outer")

        out = render_table(None, populate, no_color=True)
        assert "\x1b[" not in out
        assert "\x1b[" in inner[0]

    def test_styled_and_plain_text_match(self):
        styled = render_table("Heading", lambda t: t.push("body"))
        unstyled = render_table("Heading", lambda t: t.push("body"), no_color=True)
        assert plain(styled).rstrip("\n") == unstyled.rstrip("\n")

    def test_attribution_styles(self):
        styles = {str(span.style) for span in attribution().spans}
        assert "green" in styles
        assert "underline blue" in styles


class TestBlankLines:
    def test_blank_lines_around_row(self):
        out = render_table(None, lambda t: t.push("body", blank_lines=1), no_color=True)
        lines = _lines(out)
        assert lines[1].strip("│ ") == ""
        assert lines[2].startswith("│ body")
        assert lines[3].strip("│ ") == ""
        assert lines[4].startswith("├")
        assert all(len(line) == 80 for line in lines)

    def test_centered_row_with_blank_lines(self):
        out = render_table(None, lambda t: t.push("mid", center=True, blank_lines=2), no_color=True)
        lines = _lines(out)
        assert lines[1].strip("│ ") == "" and lines[2].strip("│ ") == ""
        assert lines[3].index("mid") > 30
        assert lines[4].strip("│ ") == "" and lines[5].strip("│ ") == ""
