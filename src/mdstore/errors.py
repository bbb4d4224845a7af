"""Exceptions raised by the document store and front-matter codec"""


class StoreError(Exception):
    """Base class for mdstore errors."""


class NotFound(StoreError, LookupError):
    """A requested document path is not in the store."""

    def __init__(self, path: str):
        super().__init__(f"document not found: {path}")
        self.path = path


class FrontMatterError(StoreError, ValueError):
    """A front-matter block is not a flat key-value mapping."""


class UnreadableDocument(StoreError):
    """A listed document could not be decoded as UTF-8 text."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
