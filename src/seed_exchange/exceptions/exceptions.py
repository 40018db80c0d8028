"""Custom exceptions for the seed exchange ledger and configuration."""

from __future__ import annotations

from uuid import UUID


class SeedExchangeError(Exception):
    """Base exception for seed exchange errors."""

    pass


class MissingRequiredConfigError(SeedExchangeError):
    """Raised when a required configuration value is missing."""

    pass


class StorageError(SeedExchangeError):
    """Raised when a ledger store operation fails."""

    def __init__(
        self,
        message: str,
        *,
        entry_id: UUID | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.entry_id = entry_id
        self.cause = cause


class DuplicateEntryError(StorageError):
    """Raised when inserting an entry whose id is already stored."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Entry {entry_id} already exists", entry_id=entry_id)


class EntryNotFoundError(StorageError):
    """Raised when updating an entry that is not stored."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Entry {entry_id} not found", entry_id=entry_id)
