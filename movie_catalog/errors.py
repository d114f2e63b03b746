"""Error taxonomy for the catalog.

Storage failures are wrapped into these types (the underlying ``sqlite3``
exception is kept as ``__cause__``). A failed call never leaves the store
unusable; only ``close()`` ends its life.
"""
from __future__ import annotations


class CatalogError(Exception):
    """Base class for every catalog failure."""


class CatalogConnectionError(CatalogError, ConnectionError):
    """The database location could not be opened."""


class CloseError(CatalogError):
    pass


class UseAfterCloseError(CatalogError):
    """Operation attempted on a store whose connection was already closed."""


class SchemaError(CatalogError):
    pass


class WriteError(CatalogError):
    pass


class ReadError(CatalogError):
    pass


class NotFoundError(CatalogError, FileNotFoundError):
    """CSV source path does not exist."""


class ParseError(CatalogError, ValueError):
    """A CSV row carries a year that is not an integer."""

    def __init__(self, message: str, line_no: int | None = None):
        super().__init__(message)
        self.line_no = line_no


class MalformedRowError(CatalogError, ValueError):
    """A CSV row has fewer than 3 fields. The loader skips these."""

    def __init__(self, message: str, line_no: int | None = None):
        super().__init__(message)
        self.line_no = line_no
