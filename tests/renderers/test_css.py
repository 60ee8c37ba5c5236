"""
Tests for CSS text generation.
"""

import pytest

from docx_preview.models.parts import ColorScheme, FontInfo, FontScheme, Theme
from docx_preview.models.styles import NumberingPicBullet, NumberingStyle, Style, SubStyle
from docx_preview.renderers import css


@pytest.mark.unit
class TestStyleRules:
    """Test cases for rule formatting and document styles."""

    def test_style_to_string(self):
        """Test rule layout."""
        text = css.style_to_string("p.x", {"color": "red", "margin": "0"}, "  extra: 1;\r\n")

        assert text == "p.x {\r\n  color: red;\r\n  margin: 0;\r\n  extra: 1;\r\n}\r\n"

    def test_default_style_uses_class_name(self):
        """Test the predefined layout rules."""
        text = css.default_style("doc")

        assert ".doc-wrapper {" in text
        assert "section.doc {" in text
        assert ".doc p { margin: 0pt; min-height: 1em; }" in text

    def test_theme_variables(self):
        """Test theme fonts and colours as custom properties."""
        theme = Theme(
            color_scheme=ColorScheme(colors={"accent1": "4472C4"}),
            font_scheme=FontScheme(major_font=FontInfo(latin_typeface="Cambria"),
                                   minor_font=FontInfo(latin_typeface="Calibri")),
        )

        variables = css.theme_variables(theme)

        assert variables == {
            "--docx-majorHAnsi-font": "Cambria",
            "--docx-minorHAnsi-font": "Calibri",
            "--docx-accent1-color": "#4472C4",
        }
        assert css.theme_variables(None) == {}
        assert css.theme_style(theme, "word").startswith(".word {\r\n")

    def test_styles_to_css(self):
        """Test selectors for own, nested and default styles."""
        normal = Style(id="Normal", css_name="word_normal", target="p", is_default=True,
                       styles=[SubStyle("p", {"margin-top": "0"}), SubStyle("span", {"font-size": "11pt"})])
        strong = Style(id="Strong", css_name="word_strong", target="span",
                       styles=[SubStyle("span", {"font-weight": "bold"})])
        styles = [normal, strong]

        text = css.styles_to_css(styles, {s.id: s for s in styles}, "word")

        assert ".word p, p.word_normal {\r\n  margin-top: 0;" in text
        assert ".word p, p.word_normal span {\r\n  font-size: 11pt;" in text
        assert "span.word_strong {\r\n  font-weight: bold;" in text

    def test_table_style_modifier_selectors(self):
        """Test conditional table formatting selectors."""
        grid = Style(id="Grid", css_name="word_grid", target="table",
                     styles=[SubStyle("tr.first-row td", {"font-weight": "bold"}, ".first-row")])

        text = css.styles_to_css([grid], {"Grid": grid}, "word")

        assert text.startswith("table.word_grid tr.first-row td {")

    def test_linked_style(self, caplog):
        """Test that linked styles contribute their rules."""
        heading = Style(id="H1", css_name="word_h1", target="p", linked="H1Char")
        char = Style(id="H1Char", css_name="word_h1char", target="span",
                     styles=[SubStyle("span", {"color": "blue"})])
        broken = Style(id="X", css_name="word_x", target="p", linked="Nope")

        text = css.styles_to_css([heading, char, broken], {"H1": heading, "H1Char": char, "X": broken},
                                 "word", debug=True)

        assert "p.word_h1 span {\r\n  color: blue;" in text
        assert "Can't find linked style Nope" in caplog.text


@pytest.mark.unit
class TestNumberingCss:
    """Test cases for numbering rules."""

    def test_level_text_single_placeholder(self):
        """Test a level text with one counter."""
        content = css.level_text_to_content("%1.", "tab", "1", "decimal", "word")

        assert content == '""counter(word-num-1-0, decimal)".\\9"'

    def test_level_text_two_placeholders(self):
        """Test a second level text referencing both levels."""
        content = css.level_text_to_content("%1.%2", "space", "7", "lower-alpha", "word")

        assert content.count("counter(") == 2
        assert "counter(word-num-7-0, lower-alpha)" in content
        assert "counter(word-num-7-1, lower-alpha)" in content
        assert content.endswith('\\a0"')

    def test_level_text_escapes_quotes(self):
        """Test escaping literal text."""
        content = css.level_text_to_content('"%1"', "nothing", "1", "decimal", "word")

        assert content.startswith('"\\"')
        assert content.endswith('\\""')

    @pytest.mark.parametrize("fmt,expected", [
        ("decimal", "decimal"),
        ("lowerLetter", "lower-alpha"),
        ("upperRoman", "upper-roman"),
        ("bullet", "disc"),
        ("ordinal", "ordinal"),
    ])
    def test_num_format_to_css_value(self, fmt, expected):
        """Test numbering format mapping."""
        assert css.num_format_to_css_value(fmt) == expected

    def test_numbering_to_css(self):
        """Test counters, resets and list items."""
        numberings = [
            NumberingStyle(id="1", level=0, level_text="%1.", format="decimal", start=1,
                           p_style={"margin-left": "36.00pt"}),
            NumberingStyle(id="1", level=1, level_text="%1.%2", format="lowerLetter", start=3,
                           r_style={"font-weight": "bold"}),
        ]

        text, bullets = css.numbering_to_css(numberings, "word", ".word-wrapper")

        assert bullets == []
        assert "p.word-num-1-0:before {\r\n  content: " in text
        assert "counter-increment: word-num-1-0;" in text
        assert "p.word-num-1-0 {\r\n  counter-reset: word-num-1-1 2;\r\n}" in text
        assert "p.word-num-1-1:before {" in text
        assert "font-weight: bold;" in text
        assert "p.word-num-1-0 {\r\n  display: list-item;\r\n  list-style-position: inside;\r\n" \
               "  list-style-type: none;\r\n  margin-left: 36.00pt;" in text
        assert text.endswith(".word-wrapper {\r\n  counter-reset: word-num-1-0;\r\n}\r\n")

    def test_numbering_without_level_text(self):
        """Test native list markers when no level text exists."""
        text, _ = css.numbering_to_css([NumberingStyle(id="2", level=0, format="upperRoman")], "word", ":root")

        assert "list-style-type: upper-roman;" in text
        assert "counter-reset" not in text

    def test_picture_bullet(self):
        """Test picture bullets become variables to load."""
        bullet = NumberingPicBullet(id=0, src="rId1", style="width:9pt;")
        text, bullets = css.numbering_to_css([NumberingStyle(id="3", level=0, bullet=bullet)], "Word", ":root")

        assert bullets == [("--word-rid1", "rId1")]
        assert "background: var(--word-rid1);" in text
        assert "width:9pt;" in text

    def test_font_face(self):
        """Test font-face rules by embedding type."""
        assert "font-weight: bold;" in css.font_face("F", "data:x", "bold")
        assert "font-style: italic;" in css.font_face("F", "data:x", "boldItalic")
        regular = css.font_face("F", "data:x", "regular")
        assert regular == "@font-face {\r\n  font-family: F;\r\n  src: url(data:x);\r\n}\r\n"
