"""
tags - the tag catalog

Each HTML tag is described by a TagConfig (name, selfClosing, inline) in the
TAGS table. make() builds an Element from the table; the capitalised
functions below (Div, Span, H1, ...) are thin wrappers over make(), one per
tag.

Tags are grouped as in https://developer.mozilla.org/en-US/docs/Web/HTML/Element
"""
from __future__ import annotations
from typing import Any, Iterable, NamedTuple, Optional, Tuple

from .element import Element, Renderable


class TagConfig(NamedTuple):
    name: str
    selfClosing: bool = False
    inline: bool = False


# in html5 these elements can not have a closing tags (or content)
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "source",
    "track",
    "wbr",
}

# phrasing content, does not force a line break in its parent
INLINE_ELEMENTS = {
    "a",
    "abbr",
    "b",
    "bdi",
    "bdo",
    "br",
    "button",
    "cite",
    "code",
    "data",
    "del",
    "dfn",
    "em",
    "i",
    "img",
    "input",
    "ins",
    "kbd",
    "label",
    "mark",
    "meter",
    "output",
    "progress",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "select",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "textarea",
    "time",
    "u",
    "var",
    "wbr",
}

# everything else that has a factory below
BLOCK_ELEMENTS = {
    # main root, metadata and sectioning root
    "html",
    "head",
    "link",
    "meta",
    "base",
    "style",
    "title",
    "body",
    # content sectioning
    "address",
    "article",
    "aside",
    "footer",
    "header",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hgroup",
    "main",
    "nav",
    "section",
    "search",
    # text content
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "figcaption",
    "figure",
    "hr",
    "li",
    "menu",
    "ol",
    "p",
    "pre",
    "ul",
    # multimedia and embedded content
    "area",
    "audio",
    "map",
    "track",
    "video",
    "embed",
    "iframe",
    "object",
    "picture",
    "source",
    "svg",
    "math",
    # scripting
    "canvas",
    "noscript",
    "script",
    # tables
    "caption",
    "col",
    "colgroup",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    # forms
    "datalist",
    "fieldset",
    "form",
    "legend",
    "optgroup",
    "option",
    # interactive and web components
    "details",
    "dialog",
    "summary",
    "slot",
    "template",
}

TAGS: dict[str, TagConfig] = {
    name: TagConfig(name, name in VOID_ELEMENTS, name in INLINE_ELEMENTS)
    for name in sorted(BLOCK_ELEMENTS | INLINE_ELEMENTS)
}


def make(
    name: str,
    *children: Renderable,
    id: Optional[str] = None,
    classname: Optional[str] = None,
    attributes: Optional[Iterable[Tuple[str, str]]] = None,
) -> Element:
    """
    make - create an Element for a tag from the TAGS table. Tags that are not
        in the table are created as standard block elements

    name: tag name
    children: renderables appended to the new element, in order
    id: id for the element (optional)
    classname: class(es) for this element
    attributes: an iterable of (name, value) pairs to be set as
        attributes. If source is a dict, pass d.items()
    """
    config = TAGS.get(name) or TagConfig(name)
    e = Element(config.name, config.selfClosing, config.inline)
    if attributes:
        for key, value in attributes:
            e.setAttribute(key, value)
    if id:
        e.setAttribute("id", id)
    if classname:
        e.setAttribute("class", classname)
    return e.append(*children)


def Root(*children: Renderable) -> Element:
    """
    Root - the pseudo-root of a document. Has no tag so only its children are
        rendered; lets a doctype and the html element sit side by side.
    """
    return Element("").append(*children)


# main root and document metadata


def Html(*children: Renderable, **kwargs: Any) -> Element:
    """html - the root element of a document"""
    return make("html", *children, **kwargs)


def Head(*children: Renderable, **kwargs: Any) -> Element:
    """head - metadata about the document"""
    return make("head", *children, **kwargs)


def Base(*children: Renderable, **kwargs: Any) -> Element:
    """base - base URL for relative URLs (self closing)"""
    return make("base", *children, **kwargs)


def Link(*children: Renderable, **kwargs: Any) -> Element:
    """link - link to an external resource such as a stylesheet (self closing)"""
    return make("link", *children, **kwargs)


def Meta(*children: Renderable, **kwargs: Any) -> Element:
    """meta - document metadata (self closing)"""
    return make("meta", *children, **kwargs)


def Style(*children: Renderable, **kwargs: Any) -> Element:
    return make("style", *children, **kwargs)


def Title(*children: Renderable, **kwargs: Any) -> Element:
    return make("title", *children, **kwargs)


def Body(*children: Renderable, **kwargs: Any) -> Element:
    """body - the content of the document"""
    return make("body", *children, **kwargs)


# content sectioning


def Address(*children: Renderable, **kwargs: Any) -> Element:
    return make("address", *children, **kwargs)


def Article(*children: Renderable, **kwargs: Any) -> Element:
    return make("article", *children, **kwargs)


def Aside(*children: Renderable, **kwargs: Any) -> Element:
    return make("aside", *children, **kwargs)


def Footer(*children: Renderable, **kwargs: Any) -> Element:
    return make("footer", *children, **kwargs)


def Header(*children: Renderable, **kwargs: Any) -> Element:
    return make("header", *children, **kwargs)


def H1(*children: Renderable, **kwargs: Any) -> Element:
    """h1 - level 1 section heading"""
    return make("h1", *children, **kwargs)


def H2(*children: Renderable, **kwargs: Any) -> Element:
    return make("h2", *children, **kwargs)


def H3(*children: Renderable, **kwargs: Any) -> Element:
    return make("h3", *children, **kwargs)


def H4(*children: Renderable, **kwargs: Any) -> Element:
    return make("h4", *children, **kwargs)


def H5(*children: Renderable, **kwargs: Any) -> Element:
    return make("h5", *children, **kwargs)


def H6(*children: Renderable, **kwargs: Any) -> Element:
    return make("h6", *children, **kwargs)


def Hgroup(*children: Renderable, **kwargs: Any) -> Element:
    return make("hgroup", *children, **kwargs)


def Main(*children: Renderable, **kwargs: Any) -> Element:
    return make("main", *children, **kwargs)


def Nav(*children: Renderable, **kwargs: Any) -> Element:
    return make("nav", *children, **kwargs)


def Section(*children: Renderable, **kwargs: Any) -> Element:
    return make("section", *children, **kwargs)


def Search(*children: Renderable, **kwargs: Any) -> Element:
    return make("search", *children, **kwargs)


# text content


def Blockquote(*children: Renderable, **kwargs: Any) -> Element:
    return make("blockquote", *children, **kwargs)


def Dd(*children: Renderable, **kwargs: Any) -> Element:
    return make("dd", *children, **kwargs)


def Div(*children: Renderable, **kwargs: Any) -> Element:
    """div - generic container for flow content"""
    return make("div", *children, **kwargs)


def Dl(*children: Renderable, **kwargs: Any) -> Element:
    return make("dl", *children, **kwargs)


def Dt(*children: Renderable, **kwargs: Any) -> Element:
    return make("dt", *children, **kwargs)


def Figcaption(*children: Renderable, **kwargs: Any) -> Element:
    return make("figcaption", *children, **kwargs)


def Figure(*children: Renderable, **kwargs: Any) -> Element:
    return make("figure", *children, **kwargs)


def Hr(*children: Renderable, **kwargs: Any) -> Element:
    """hr - thematic break (self closing)"""
    return make("hr", *children, **kwargs)


def Li(*children: Renderable, **kwargs: Any) -> Element:
    return make("li", *children, **kwargs)


def Menu(*children: Renderable, **kwargs: Any) -> Element:
    return make("menu", *children, **kwargs)


def Ol(*children: Renderable, **kwargs: Any) -> Element:
    return make("ol", *children, **kwargs)


def P(*children: Renderable, **kwargs: Any) -> Element:
    """p - a paragraph"""
    return make("p", *children, **kwargs)


def Pre(*children: Renderable, **kwargs: Any) -> Element:
    """pre - preformatted text. Children are not re-indented"""
    return make("pre", *children, **kwargs)


def Ul(*children: Renderable, **kwargs: Any) -> Element:
    return make("ul", *children, **kwargs)


# inline text semantics


def A(*children: Renderable, **kwargs: Any) -> Element:
    """a - anchor (hyperlink), inline"""
    return make("a", *children, **kwargs)


def Abbr(*children: Renderable, **kwargs: Any) -> Element:
    return make("abbr", *children, **kwargs)


def B(*children: Renderable, **kwargs: Any) -> Element:
    return make("b", *children, **kwargs)


def Bdi(*children: Renderable, **kwargs: Any) -> Element:
    return make("bdi", *children, **kwargs)


def Bdo(*children: Renderable, **kwargs: Any) -> Element:
    return make("bdo", *children, **kwargs)


def Br(*children: Renderable, **kwargs: Any) -> Element:
    """br - line break (self closing, inline)"""
    return make("br", *children, **kwargs)


def Cite(*children: Renderable, **kwargs: Any) -> Element:
    return make("cite", *children, **kwargs)


def Code(*children: Renderable, **kwargs: Any) -> Element:
    return make("code", *children, **kwargs)


def Data(*children: Renderable, **kwargs: Any) -> Element:
    return make("data", *children, **kwargs)


def Dfn(*children: Renderable, **kwargs: Any) -> Element:
    return make("dfn", *children, **kwargs)


def Em(*children: Renderable, **kwargs: Any) -> Element:
    """em - emphasis, inline"""
    return make("em", *children, **kwargs)


def I(*children: Renderable, **kwargs: Any) -> Element:
    return make("i", *children, **kwargs)


def Kbd(*children: Renderable, **kwargs: Any) -> Element:
    return make("kbd", *children, **kwargs)


def Mark(*children: Renderable, **kwargs: Any) -> Element:
    return make("mark", *children, **kwargs)


def Q(*children: Renderable, **kwargs: Any) -> Element:
    return make("q", *children, **kwargs)


def Rp(*children: Renderable, **kwargs: Any) -> Element:
    return make("rp", *children, **kwargs)


def Rt(*children: Renderable, **kwargs: Any) -> Element:
    return make("rt", *children, **kwargs)


def Ruby(*children: Renderable, **kwargs: Any) -> Element:
    return make("ruby", *children, **kwargs)


def S(*children: Renderable, **kwargs: Any) -> Element:
    return make("s", *children, **kwargs)


def Samp(*children: Renderable, **kwargs: Any) -> Element:
    return make("samp", *children, **kwargs)


def Small(*children: Renderable, **kwargs: Any) -> Element:
    return make("small", *children, **kwargs)


def Span(*children: Renderable, **kwargs: Any) -> Element:
    """span - generic inline container"""
    return make("span", *children, **kwargs)


def Strong(*children: Renderable, **kwargs: Any) -> Element:
    return make("strong", *children, **kwargs)


def Sub(*children: Renderable, **kwargs: Any) -> Element:
    return make("sub", *children, **kwargs)


def Sup(*children: Renderable, **kwargs: Any) -> Element:
    return make("sup", *children, **kwargs)


def Time(*children: Renderable, **kwargs: Any) -> Element:
    return make("time", *children, **kwargs)


def U(*children: Renderable, **kwargs: Any) -> Element:
    return make("u", *children, **kwargs)


def Var(*children: Renderable, **kwargs: Any) -> Element:
    return make("var", *children, **kwargs)


def Wbr(*children: Renderable, **kwargs: Any) -> Element:
    return make("wbr", *children, **kwargs)


# image, multimedia and embedded content


def Area(*children: Renderable, **kwargs: Any) -> Element:
    return make("area", *children, **kwargs)


def Audio(*children: Renderable, **kwargs: Any) -> Element:
    return make("audio", *children, **kwargs)


def Img(*children: Renderable, **kwargs: Any) -> Element:
    """img - an image (self closing, inline)"""
    return make("img", *children, **kwargs)


def Map(*children: Renderable, **kwargs: Any) -> Element:
    return make("map", *children, **kwargs)


def Track(*children: Renderable, **kwargs: Any) -> Element:
    return make("track", *children, **kwargs)


def Video(*children: Renderable, **kwargs: Any) -> Element:
    return make("video", *children, **kwargs)


def Embed(*children: Renderable, **kwargs: Any) -> Element:
    return make("embed", *children, **kwargs)


def Iframe(*children: Renderable, **kwargs: Any) -> Element:
    return make("iframe", *children, **kwargs)


def Object(*children: Renderable, **kwargs: Any) -> Element:
    return make("object", *children, **kwargs)


def Picture(*children: Renderable, **kwargs: Any) -> Element:
    return make("picture", *children, **kwargs)


def Source(*children: Renderable, **kwargs: Any) -> Element:
    return make("source", *children, **kwargs)


def Svg(*children: Renderable, **kwargs: Any) -> Element:
    return make("svg", *children, **kwargs)


def Math(*children: Renderable, **kwargs: Any) -> Element:
    return make("math", *children, **kwargs)


# scripting


def Canvas(*children: Renderable, **kwargs: Any) -> Element:
    return make("canvas", *children, **kwargs)


def Noscript(*children: Renderable, **kwargs: Any) -> Element:
    return make("noscript", *children, **kwargs)


def Script(*children: Renderable, **kwargs: Any) -> Element:
    """script - embedded or referenced executable code"""
    return make("script", *children, **kwargs)


# demarcating edits


def Del(*children: Renderable, **kwargs: Any) -> Element:
    return make("del", *children, **kwargs)


def Ins(*children: Renderable, **kwargs: Any) -> Element:
    return make("ins", *children, **kwargs)


# tables


def Caption(*children: Renderable, **kwargs: Any) -> Element:
    return make("caption", *children, **kwargs)


def Col(*children: Renderable, **kwargs: Any) -> Element:
    return make("col", *children, **kwargs)


def Colgroup(*children: Renderable, **kwargs: Any) -> Element:
    return make("colgroup", *children, **kwargs)


def Table(*children: Renderable, **kwargs: Any) -> Element:
    return make("table", *children, **kwargs)


def Tbody(*children: Renderable, **kwargs: Any) -> Element:
    return make("tbody", *children, **kwargs)


def Td(*children: Renderable, **kwargs: Any) -> Element:
    return make("td", *children, **kwargs)


def Tfoot(*children: Renderable, **kwargs: Any) -> Element:
    return make("tfoot", *children, **kwargs)


def Th(*children: Renderable, **kwargs: Any) -> Element:
    return make("th", *children, **kwargs)


def Thead(*children: Renderable, **kwargs: Any) -> Element:
    return make("thead", *children, **kwargs)


def Tr(*children: Renderable, **kwargs: Any) -> Element:
    return make("tr", *children, **kwargs)


# forms


def Button(*children: Renderable, **kwargs: Any) -> Element:
    return make("button", *children, **kwargs)


def Datalist(*children: Renderable, **kwargs: Any) -> Element:
    return make("datalist", *children, **kwargs)


def Fieldset(*children: Renderable, **kwargs: Any) -> Element:
    return make("fieldset", *children, **kwargs)


def Form(*children: Renderable, **kwargs: Any) -> Element:
    return make("form", *children, **kwargs)


def Input(*children: Renderable, **kwargs: Any) -> Element:
    """input - form control (self closing, inline)"""
    return make("input", *children, **kwargs)


def Label(*children: Renderable, **kwargs: Any) -> Element:
    return make("label", *children, **kwargs)


def Legend(*children: Renderable, **kwargs: Any) -> Element:
    return make("legend", *children, **kwargs)


def Meter(*children: Renderable, **kwargs: Any) -> Element:
    return make("meter", *children, **kwargs)


def Optgroup(*children: Renderable, **kwargs: Any) -> Element:
    return make("optgroup", *children, **kwargs)


def Option(*children: Renderable, **kwargs: Any) -> Element:
    return make("option", *children, **kwargs)


def Output(*children: Renderable, **kwargs: Any) -> Element:
    return make("output", *children, **kwargs)


def Progress(*children: Renderable, **kwargs: Any) -> Element:
    return make("progress", *children, **kwargs)


def Select(*children: Renderable, **kwargs: Any) -> Element:
    return make("select", *children, **kwargs)


def Textarea(*children: Renderable, **kwargs: Any) -> Element:
    return make("textarea", *children, **kwargs)


# interactive elements and web components


def Details(*children: Renderable, **kwargs: Any) -> Element:
    return make("details", *children, **kwargs)


def Dialog(*children: Renderable, **kwargs: Any) -> Element:
    return make("dialog", *children, **kwargs)


def Summary(*children: Renderable, **kwargs: Any) -> Element:
    return make("summary", *children, **kwargs)


def Slot(*children: Renderable, **kwargs: Any) -> Element:
    return make("slot", *children, **kwargs)


def Template(*children: Renderable, **kwargs: Any) -> Element:
    return make("template", *children, **kwargs)
