"""
element - the Element tree node and the indenting renderer

An Element has a tag, optionally attributes and optionally children. Children
are anything renderable: other Elements, text leaves, the doctype marker, raw
file includes or Components.

Does not escape attribute values or text content.
Does not enforce correct html structure.
Does not prevent self referential structures (be careful with creation,
circular structures will recurse until the interpreter gives up).
"""
from __future__ import annotations
from typing import List, NamedTuple, Optional, Protocol, runtime_checkable

from .leaves import Text

# number of spaces per nesting level
INDENT_WIDTH = 2


@runtime_checkable
class Renderable(Protocol):
    """
    Renderable - anything that, given a nesting depth, returns html text
    """

    def render(self, depth: int = 0) -> str:
        ...


def padding(depth: int) -> str:
    """
    padding - return the indentation for a given nesting depth
    """
    return " " * (depth * INDENT_WIDTH)


class Attribute(NamedTuple):
    """
    Attribute - a key/value pair on the start tag of an element.
    An empty value is rendered as a bare key (boolean attribute form)
    """

    key: str
    value: str = ""

    def render(self) -> str:
        # TODO: escape the value
        if not self.value:
            return self.key
        return f'{self.key}="{self.value}"'


class Element:
    """
    An HTML element. Has a tag, optionally attributes, optionally children

    When rendered, the open tag is placed on a new line, indented by its
    depth. The closing tag gets its own line only if at least one child is a
    block (non-inline) element; text and inline content stays on one line.
    """

    def __init__(self, tag: str, selfClosing: bool = False, inline: bool = False):
        """
        tag: type of this tag. If tag is empty, this is a pseudo-root: the
            opening/closing tags are not emitted, only the children
        selfClosing: rendered as <tag />, children are never rendered
        inline: tells a parent element not to break the line for this child
        """
        self._tag = tag
        self._selfClosing = selfClosing
        self._inline = inline
        self._attributes: List[Attribute] = []
        self._children: List[Renderable] = []

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def selfClosing(self) -> bool:
        return self._selfClosing

    @property
    def inline(self) -> bool:
        return self._inline

    @property
    def attributes(self) -> List[Attribute]:
        return self._attributes

    @property
    def children(self) -> List[Renderable]:
        return self._children

    def setAttribute(self, key: str, value: str = "") -> Element:
        """
        setAttribute - set (create or overwrite) an attribute of this Element.
            An existing attribute keeps its position, a new one is appended.
        key: name of attribute
        value: value of attribute, "" for a bare (boolean) attribute

        returns self (for chaining)
        """
        for i, a in enumerate(self._attributes):
            if a.key == key:
                self._attributes[i] = Attribute(key, value)
                return self
        self._attributes.append(Attribute(key, value))
        return self

    def getAttribute(self, key: str) -> Optional[str]:
        """
        getAttribute - return the value of an attribute if it exists
        """
        for a in self._attributes:
            if a.key == key:
                return a.value
        return None

    def append(self, *children: Renderable) -> Element:
        """
        append - add renderables to the end of this element's children, in
            order. Children of a self closing element are kept but not
            rendered.

        returns self (for chaining)
        """
        self._children.extend(children)
        return self

    def addText(self, text: str) -> Element:
        """
        addText - append a text leaf, shorthand for append(Text(text))
        """
        return self.append(Text(text))

    def renderattributes(self) -> str:
        return "".join(" " + a.render() for a in self._attributes)

    def renderlist(self, depth: int = 0) -> list[str]:
        """
        renderlist - render this element and recursively, all child elements

        returns a list of strings that can be joined to create the rendered html
        (or can be appended to parent's html list)
        """
        dest: list[str] = []

        if not self._tag:
            # pseudo-root, children stay at our depth
            for c in self._children:
                _renderchild(c, depth, dest)
            dest.append("\n")
            return dest

        dest.append("\n" + padding(depth) + "<" + self._tag)
        dest.append(self.renderattributes())

        if self._selfClosing:
            dest.append(" />")
            return dest

        dest.append(">")

        blocks = 0
        for c in self._children:
            if not _renderchild(c, depth + 1, dest):
                blocks += 1

        if blocks:
            dest.append("\n" + padding(depth))
        dest.append(f"</{self._tag}>")

        return dest

    def render(self, depth: int = 0) -> str:
        """
        render - render this element (and its children) to a string of html
        """
        return "".join(self.renderlist(depth))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Element({self._tag!r}, selfClosing={self._selfClosing}, "
            f"inline={self._inline}, attributes={len(self._attributes)}, "
            f"children={len(self._children)})"
        )


def _renderchild(child: Renderable, depth: int, dest: list[str]) -> bool:
    """
    _renderchild - render a child into dest at the given depth

    returns True if the child is inline for line breaking purposes: leaves
    and inline elements. A Component is judged by its root element, which is
    materialized once here.
    """
    from .document import Component

    if isinstance(child, Component):
        child = child.rootElement()

    if isinstance(child, Element):
        dest.extend(child.renderlist(depth))
        return child.inline

    dest.append(child.render(depth))
    return True


def render(node: Renderable, depth: int = 0) -> str:
    """
    render - render any renderable (Element, leaf or Component) at a depth
    """
    dest: list[str] = []
    _renderchild(node, depth, dest)
    return "".join(dest)
