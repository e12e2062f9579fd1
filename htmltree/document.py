"""
document - whole documents and Components

A Component is anything that can produce the root Element of a (possibly
large) element tree when asked. It is materialized only when rendered, so
document fragments can be passed around as plain values.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from .element import Element, Renderable
from .leaves import Doctype
from .tags import Body, Head, Html, Root, Title


class Component(ABC):
    """
    Component - produces the root Element of an element tree on demand.
    A Component can be appended as a child anywhere a Renderable can.
    """

    @abstractmethod
    def rootElement(self) -> Element:
        ...

    def render(self, depth: int = 0) -> str:
        return self.rootElement().render(depth)

    def __str__(self) -> str:
        return self.render()


def renderDocument(component: Component) -> str:
    """
    renderDocument - render a component as a complete document, from depth 0
    """
    return component.rootElement().render(0)


def makedocument(title: Optional[str] = None) -> Element:
    """
    makedocument - create a basic html document

    returns the pseudo-root holding the doctype and the html element
    """
    head = Head()
    if title:
        head.append(Title().addText(title))
    return Root(Doctype(), Html(head, Body()))


class Document(Component):
    """
    Document - a page as a Component. Build into head and body, the tree
    (doctype, html, head with title, body) is assembled by rootElement().
    """

    def __init__(self, title: Optional[str] = None, lang: Optional[str] = None):
        self.title = title
        self.lang = lang
        self.head: List[Renderable] = []
        self.body = Body()

    def addHead(self, *children: Renderable) -> Document:
        """
        addHead - add elements (meta, link, script...) to the document head,
            after the title
        """
        self.head.extend(children)
        return self

    def rootElement(self) -> Element:
        head = Head()
        if self.title:
            head.append(Title().addText(self.title))
        head.append(*self.head)

        html = Html(head, self.body)
        if self.lang:
            html.setAttribute("lang", self.lang)
        return Root(Doctype(), html)


if __name__ == "__main__":
    print(renderDocument(Document("htmltree")), end="")
