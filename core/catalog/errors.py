# core/catalog/errors.py


class CatalogError(Exception):
    """Base class for errors raised by the catalog repositories."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(CatalogError):
    """The identifier does not resolve within the targeted table."""


class ValidationFailedError(CatalogError):
    """A payload is missing a field, is malformed, or references a missing row."""
