"""Exceptions subpackage."""

from seed_exchange.exceptions.exceptions import (
    DuplicateEntryError,
    EntryNotFoundError,
    MissingRequiredConfigError,
    SeedExchangeError,
    StorageError,
)

__all__ = [
    "DuplicateEntryError",
    "EntryNotFoundError",
    "MissingRequiredConfigError",
    "SeedExchangeError",
    "StorageError",
]
