"""Tests for rendering element trees."""

import pytest

from htmltree import Component, Doctype, Element, File, IncludeError, Text, render
from htmltree.tags import Body, Div, Em, Html, Img, Input, P, Root, Span


class TestPseudoRoot:
    """Tests for the transparent (empty tag) root."""

    @pytest.mark.parametrize("depth", [0, 1, 3])
    def test_children_at_same_depth(self, depth):
        """Test the root renders its children unindented plus one newline."""
        children = [Text("a"), Div(), P(Text("x"))]
        root = Root(*children)
        expected = "".join(c.render(depth) for c in children) + "\n"
        assert root.render(depth) == expected

    def test_empty_root(self):
        assert Root().render() == "\n"

    def test_doctype_and_html(self):
        root = Root(Doctype(), Html())
        assert root.render() == "<!DOCTYPE html>\n<html></html>\n"


class TestSelfClosing:
    """Tests for self closing elements."""

    @pytest.mark.parametrize("depth", [0, 1, 4])
    def test_render_at_depth(self, depth):
        assert Img().render(depth) == "\n" + " " * 2 * depth + "<img />"

    def test_children_are_ignored(self):
        """Test appending to a self closing element never changes its output."""
        e = Img().setAttribute("src", "a.png")
        before = e.render(2)
        e.append(Text("x"), Div(P()))
        assert e.render(2) == before

    def test_attributes(self):
        e = Input().setAttribute("disabled").setAttribute("value", 'a"b')
        assert e.render() == '\n<input disabled value="a"b" />'


class TestStandard:
    """Tests for standard elements and line breaking."""

    def test_empty_element(self):
        assert Div().render(1) == "\n  <div></div>"

    def test_inline_child_stays_on_line(self):
        e = Div(Span(Text("hi")))
        assert e.render() == "\n<div>\n  <span>hi</span></div>"

    def test_block_child_gets_closing_line(self):
        e = Div(P(Text("x")))
        assert e.render() == "\n<div>\n  <p>x</p>\n</div>"

    def test_text_only(self):
        assert P(Text("a "), Text("b")).render() == "\n<p>a b</p>"

    def test_inline_with_inline_children(self):
        """Test inline tags nested in inline tags keep the closing tag inline."""
        e = P(Text("a "), Em(Text("word")), Text(" b"))
        assert e.render() == "\n<p>a \n  <em>word</em> b</p>"

    def test_nested_indentation(self):
        e = Html(Body(Div()))
        assert e.render() == (
            "\n<html>\n  <body>\n    <div></div>\n  </body>\n</html>"
        )

    def test_closing_aligned_with_depth(self):
        e = Div(P())
        assert e.render(2) == "\n    <div>\n      <p></p>\n    </div>"

    def test_attributes_in_order(self):
        e = Div().setAttribute("id", "a").setAttribute("hidden", "")
        assert e.render() == '\n<div id="a" hidden></div>'

    def test_leaves_ignore_depth(self):
        """Test multi-line text is not re-indented."""
        e = Div(Div(Text("line1\nline2")))
        assert e.render() == "\n<div>\n  <div>line1\nline2</div>\n</div>"

    def test_custom_block_element(self):
        e = Element("x-card").append(Element("x-body"))
        assert e.render() == "\n<x-card>\n  <x-body></x-body>\n</x-card>"

    def test_deterministic(self):
        e = Root(Doctype(), Html(Body(Div(Span(Text("a")), P(Text("b"))))))
        assert e.render() == e.render()
        assert str(e) == e.render()


class Badge(Component):
    def __init__(self, label):
        self.label = label

    def rootElement(self):
        return Span(Text(self.label)).setAttribute("class", "badge")


class Card(Component):
    def rootElement(self):
        return Div(P(Text("card")))


class TestComponentChildren:
    """Tests for Components appended as children."""

    def test_inline_component(self):
        e = Div(Badge("new"))
        assert e.render() == '\n<div>\n  <span class="badge">new</span></div>'

    def test_block_component(self):
        e = Div(Card())
        assert e.render() == "\n<div>\n  <div>\n    <p>card</p>\n  </div>\n</div>"

    def test_component_render(self):
        assert Card().render(1) == Card().rootElement().render(1)


class TestRenderFunction:
    """Tests for the module level render function."""

    def test_render_element(self):
        e = Div(P())
        assert render(e) == e.render()
        assert render(e, 2) == e.render(2)

    def test_render_leaf(self):
        assert render(Text("x"), 5) == "x"

    def test_render_component(self):
        assert render(Badge("a")) == '\n<span class="badge">a</span>'

    def test_include_failure_aborts_render(self, tmp_path):
        """Test a failing include raises out of the enclosing render."""
        root = Root(Doctype(), Html(Body(Div(File(str(tmp_path / "missing.html"))))))
        with pytest.raises(IncludeError):
            render(root)
