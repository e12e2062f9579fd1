"""
htmltree - build html documents in python and render them as indented,
human readable html
"""

__version__ = "0.1.0"

from .document import Component, Document, makedocument, renderDocument
from .element import INDENT_WIDTH, Attribute, Element, Renderable, padding, render
from .exceptions import HtmlTreeError, IncludeError
from .leaves import DOCTYPE, Doctype, File, Text
from .tags import (
    INLINE_ELEMENTS,
    TAGS,
    VOID_ELEMENTS,
    TagConfig,
    make,
    Root,
)
from . import tags
