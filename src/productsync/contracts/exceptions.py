"""Exception hierarchy for productsync."""

from __future__ import annotations


class ProductSyncError(Exception):
    """Base exception for all productsync errors."""


class ConfigError(ProductSyncError):
    """Configuration loading or validation failure."""


class SourceUnavailableError(ProductSyncError):
    """Remote product source could not be loaded."""


class StoreError(ProductSyncError):
    """Base local store failure."""


class StoreLookupError(StoreError):
    """Store lookup failed for a reason other than the product being absent."""

    def __init__(self, message: str, *, external_id: str | None = None) -> None:
        super().__init__(message)
        self.external_id = external_id


class PersistenceError(StoreError):
    """Batch persistence failed; nothing from the batch was written."""


class SyncError(ProductSyncError):
    """Engine-level synchronization failure."""
