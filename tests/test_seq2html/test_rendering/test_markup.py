"""Tests for string-mode rendering of element descriptions."""

import pytest
from lxml import etree

from seq2html.rendering.markup import (
    VOID_ELEMENTS,
    MarkupRenderer,
    escape_attribute,
    escape_text,
    is_void_element,
)
from seq2html.rendering.writer import RenderState
from seq2html.shared.errors import (
    EmptyElementError,
    InvalidAttributeTypeError,
    InvalidElementTypeError,
    InvalidPreContentError,
)
from seq2html.shared.result import RenderMetrics


def render_markup(item, indent_unit="  ", indent_depth=0):
    """Render one content item into a fresh state and return the text."""
    state = RenderState(indent_unit, indent_depth)
    renderer = MarkupRenderer(state)
    renderer.visit(item)
    return renderer.finish()


class TestEscaping:
    """Test text and attribute escaping."""

    def test_escape_text(self):
        """Test escaping of the three markup characters."""
        assert escape_text("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"

    def test_escape_text_keeps_quotes(self):
        """Test that text escaping leaves quotes alone."""
        assert escape_text("\"it's\"") == "\"it's\""

    def test_escape_applied_once(self):
        """Test that existing entities are escaped again, not preserved."""
        assert escape_text("&amp;") == "&amp;amp;"

    def test_escape_attribute(self):
        """Test that attribute escaping also handles double quotes."""
        assert escape_attribute('say "<hi>" & \'bye\'') == (
            "say &quot;&lt;hi&gt;&quot; &amp; 'bye'"
        )

    @pytest.mark.parametrize("text", ["", "plain text", "ünïcödé", "it's 100%"])
    def test_escaping_is_identity_without_special_characters(self, text):
        """Test that clean text is unchanged by both escapers."""
        assert escape_text(text) == text
        assert escape_attribute(text) == text


class TestChildlessElements:
    """Test elements without children."""

    def test_void_element(self):
        """Test that void elements self-close."""
        assert render_markup(["br"]) == "<br />\n"

    def test_void_element_case_insensitive(self):
        """Test that void detection ignores case but keeps the written tag."""
        assert render_markup(["IMG", {"src": "a.png"}]) == '<IMG src="a.png" />\n'

    def test_non_void_element(self):
        """Test that other elements get an explicit closing tag."""
        assert render_markup(["div"]) == "<div></div>\n"

    def test_attributes_only(self):
        """Test that an attribute map alone leaves the element childless."""
        assert render_markup(["div", {"a": 1}]) == '<div a="1"></div>\n'

    def test_void_set(self):
        """Test the void element set and helper."""
        assert len(VOID_ELEMENTS) == 16
        assert is_void_element("Wbr")
        assert not is_void_element("div")


class TestAttributes:
    """Test attribute rendering."""

    def test_attribute_order_and_types(self):
        """Test insertion order and stringification of values."""
        output = render_markup(["input", {"type": "number", "min": 0, "step": 0.5}])

        assert output == '<input type="number" min="0" step="0.5" />\n'

    def test_boolean_attributes(self):
        """Test that booleans are written as true/false."""
        output = render_markup(["div", {"draggable": True, "hidden": False}])

        assert output == '<div draggable="true" hidden="false"></div>\n'

    def test_attribute_value_escaping(self):
        """Test escaping inside attribute values."""
        output = render_markup(["a", {"title": 'x "y" <z> & w'}])

        assert output == '<a title="x &quot;y&quot; &lt;z&gt; &amp; w"></a>\n'

    def test_attribute_names_are_verbatim(self):
        """Test that attribute names are not validated or escaped."""
        output = render_markup(["div", {"data-x:y": "1"}])

        assert output == '<div data-x:y="1"></div>\n'

    @pytest.mark.parametrize("value", [None, ["a"], {"k": "v"}, object()])
    def test_invalid_attribute_type(self, value):
        """Test that unsupported attribute values are rejected."""
        with pytest.raises(InvalidAttributeTypeError, match="Invalid type for attribute 'x'"):
            render_markup(["div", {"x": value}])


class TestChildren:
    """Test rendering of element children."""

    def test_text_child(self):
        """Test a text child on its own indented line."""
        output = render_markup(["div", {"id": "x", "n": 5}, "hi"])

        assert output == '<div id="x" n="5">\n  hi\n</div>\n'

    def test_number_children(self):
        """Test numeric children."""
        assert render_markup(["td", 42, 1.5]) == "<td>\n  42\n  1.5\n</td>\n"

    @pytest.mark.parametrize("number, expected", [
        (1.0, "1"),
        (-0.0, "0"),
        (2.5, "2.5"),
        (1e21, "1e+21"),
        (float("inf"), "inf"),
    ])
    def test_float_formatting(self, number, expected):
        """Test that integral floats are written without a fraction."""
        assert render_markup(["p", number]) == f"<p>\n  {expected}\n</p>\n"

    def test_integral_float_attribute(self):
        """Test integral float attribute values."""
        assert render_markup(["col", {"span": 2.0}]) == '<col span="2" />\n'

    def test_text_child_escaped(self):
        """Test escaping of text children."""
        assert render_markup(["p", "1 < 2 & 3 > 2"]) == "<p>\n  1 &lt; 2 &amp; 3 &gt; 2\n</p>\n"

    def test_nested_indentation(self):
        """Test that each nesting level adds one indent unit."""
        output = render_markup(["ul", ["li", "one"], ["li", ["b", "two"]]])

        assert output == (
            "<ul>\n"
            "  <li>\n"
            "    one\n"
            "  </li>\n"
            "  <li>\n"
            "    <b>\n"
            "      two\n"
            "    </b>\n"
            "  </li>\n"
            "</ul>\n"
        )

    def test_custom_indent_and_start_depth(self):
        """Test custom indent unit and starting depth."""
        output = render_markup(["div", ["br"]], indent_unit="\t", indent_depth=2)

        assert output == "\t\t<div>\n\t\t\t<br />\n\t\t</div>\n"

    def test_generator_children(self):
        """Test callable children receiving the tag factory."""
        output = render_markup(["nav", lambda h: h.a({"href": "/"}, "Home")])

        assert output == '<nav>\n  <a href="/">\n    Home\n  </a>\n</nav>\n'

    def test_generator_at_top_level(self):
        """Test a callable as the top-level item."""
        assert render_markup(lambda h: h.hr()) == "<hr />\n"

    def test_mapping_in_later_position_is_rejected(self):
        """Test that a mapping after other children is not an attribute map."""
        with pytest.raises(InvalidElementTypeError, match="incompatible type"):
            render_markup(["div", "hi", {"a": 1}])

    @pytest.mark.parametrize("child", [None, True, b"raw", 3j])
    def test_invalid_child(self, child):
        """Test that unsupported children are rejected."""
        with pytest.raises(InvalidElementTypeError):
            render_markup(["div", child])

    def test_empty_child(self):
        """Test that empty nested descriptions are rejected."""
        with pytest.raises(EmptyElementError):
            render_markup(["div", []])


class TestPreElement:
    """Test the pre element special case."""

    def test_pre_inline_content(self):
        """Test that pre content is written inline and escaped."""
        assert render_markup(["pre", "a < b"]) == "<pre>a &lt; b</pre>\n"

    def test_pre_preserves_whitespace(self):
        """Test that pre text is not indented or reflowed."""
        output = render_markup(["div", ["pre", {"class": "code"}, "x = 1\n  y = 2"]])

        assert output == '<div>\n  <pre class="code">x = 1\n  y = 2</pre>\n</div>\n'

    def test_pre_case_insensitive(self):
        """Test that PRE is handled like pre."""
        assert render_markup(["PRE", "x"]) == "<PRE>x</PRE>\n"

    def test_empty_pre(self):
        """Test that a childless pre is an ordinary closed element."""
        assert render_markup(["pre"]) == "<pre></pre>\n"

    @pytest.mark.parametrize(
        "description",
        [["pre", "x", "y"], ["pre", ["b", "x"]], ["pre", 5], ["pre", {"a": "1"}, "x", "y"]],
    )
    def test_invalid_pre_content(self, description):
        """Test that pre requires exactly one string child."""
        with pytest.raises(InvalidPreContentError, match="exactly one child"):
            render_markup(description)


class TestMetrics:
    """Test metrics collected by the markup renderer."""

    def test_counts(self):
        """Test element, text, attribute and depth counters."""
        metrics = RenderMetrics()
        state = RenderState(indent_depth=3)
        renderer = MarkupRenderer(state, metrics=metrics)

        renderer.visit(["div", {"id": "a"}, "x", ["p", ["br"], 1]])
        output = renderer.finish()

        assert metrics.elements_rendered == 3
        assert metrics.text_nodes_rendered == 2
        assert metrics.attributes_rendered == 1
        assert metrics.void_elements_rendered == 1
        assert metrics.max_depth == 2
        assert metrics.output_length == len(output)


class TestWellFormedness:
    """Test that rendered markup parses back as well-formed XML."""

    @pytest.mark.parametrize(
        "description",
        [
            ["html", ["head", ["meta", {"charset": "utf-8"}], ["title", "T & C"]],
             ["body", ["p", {"class": 'a "b"'}, "x < y"], ["br"], ["pre", "<code>"]]],
            ["table", ["tr", ["td", 1], ["td", 2.5]], ["tr", ["td", {"colspan": 2}, "total"]]],
            ["div", lambda h: h.span({"title": "it's"}, "ok")],
        ],
    )
    def test_parses_with_lxml(self, description):
        """Test that output is accepted by a strict XML parser."""
        output = render_markup(description)

        root = etree.fromstring(output)

        assert root.tag == description[0]
