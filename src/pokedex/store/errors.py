"""
Store error types
"""


class PokedexError(Exception):
    """Base class for errors raised by the Pokemon store."""


class UnknownAttackCategoryError(PokedexError):
    """Raised when an attack bucket other than 'fast' or 'special' is requested."""

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"Unknown attack category: {category!r} (expected 'fast' or 'special')")


class SeedDataError(PokedexError):
    """Raised when the seed document cannot be read or does not validate."""
