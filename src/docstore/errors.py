"""Exceptions raised by the document store"""


class InvalidArgumentError(ValueError):
    """A required argument was missing (e.g. save() called with None)."""
