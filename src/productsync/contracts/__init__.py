"""Public contracts for productsync."""

from productsync.contracts.config import ProductSyncConfig, SourceConfig
from productsync.contracts.exceptions import (
    ConfigError,
    PersistenceError,
    ProductSyncError,
    SourceUnavailableError,
    StoreError,
    StoreLookupError,
    SyncError,
)
from productsync.contracts.feedback import Feedback
from productsync.contracts.product import NOT_FOUND, Found, LookupResult, NotFound, Product, RemoteProduct
from productsync.contracts.source import ProductSource
from productsync.contracts.store import ProductStore
from productsync.contracts.sync import SyncResult

__all__ = [
    "NOT_FOUND",
    "ConfigError",
    "Feedback",
    "Found",
    "LookupResult",
    "NotFound",
    "PersistenceError",
    "Product",
    "ProductSource",
    "ProductStore",
    "ProductSyncConfig",
    "ProductSyncError",
    "RemoteProduct",
    "SourceConfig",
    "SourceUnavailableError",
    "StoreError",
    "StoreLookupError",
    "SyncError",
    "SyncResult",
]
