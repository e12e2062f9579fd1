"""
exceptions - errors raised by htmltree
"""


class HtmlTreeError(Exception):
    """Base exception for htmltree errors."""

    pass


class IncludeError(HtmlTreeError):
    """Raised when a raw include file can not be read while rendering."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot include {path!r}: {reason}")
        self.path = path
