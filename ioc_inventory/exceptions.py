"""Exceptions raised while resolving an IOC inventory.

Only two reads are fatal: the redirect table and the builder directory.
Everything else (non-matching lines, unreadable READMEs) is skipped.
"""


class InventoryError(Exception):
    """Base class for inventory failures that abort the run."""


class RedirectTableError(InventoryError):
    """The redirect table could not be opened or read."""


class BuilderDirectoryError(InventoryError):
    """The builder descriptor directory could not be listed."""


class InvalidPatternError(InventoryError, ValueError):
    """A query or name pattern is not a valid regular expression."""
