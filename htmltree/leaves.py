"""
leaves - renderables with no children and no attributes

Leaves ignore the nesting depth and return their content unmodified (no
escaping, no re-indentation of multi-line content).
"""
from __future__ import annotations
import logging

from .exceptions import IncludeError

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"


class Text:
    """
    Text - literal text, emitted verbatim

    TODO: escape the text
    """

    def __init__(self, text: str):
        self.text = text

    def render(self, depth: int = 0) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class Doctype:
    """
    Doctype - the document type declaration

    text: the full text of the doctype, defaults to the standard
        short doctype
    """

    def __init__(self, text: str = DOCTYPE):
        self.text = text

    def render(self, depth: int = 0) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Doctype({self.text!r})"


class File:
    """
    File - raw include. The content of the file at path is substituted
    verbatim each time this leaf is rendered (unsafe, not re-indented).

    A file that can not be read raises IncludeError, which aborts the whole
    render.
    """

    def __init__(self, path: str):
        self.path = path

    def render(self, depth: int = 0) -> str:
        logger.debug("including %s", self.path)
        try:
            with open(self.path, "rb") as f:
                content = f.read()
        except OSError as err:
            raise IncludeError(self.path, err.strerror or str(err)) from err
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as err:
            raise IncludeError(self.path, str(err)) from err

    def __repr__(self) -> str:
        return f"File({self.path!r})"
