"""Errors raised by the film backends and caught at the catalog boundary."""


class CatalogError(Exception):
    """Base class for backend failures that end in a user notice."""


class RemoteError(CatalogError):
    """Spreadsheet endpoint answered with a non-success status or could not be reached."""


class NotFoundError(CatalogError):
    """Target film is unknown or lacks the handle the active backend needs."""


class StorageError(CatalogError):
    """Local JSON store could not be read or written."""


class ParseError(CatalogError):
    """Endpoint response was not the expected JSON shape."""
