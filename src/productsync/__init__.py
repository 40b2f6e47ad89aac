"""Public API surface for productsync."""

__version__ = "1.0.0"

from productsync.config import load_config
from productsync.contracts import (
    NOT_FOUND,
    ConfigError,
    Feedback,
    Found,
    LookupResult,
    NotFound,
    PersistenceError,
    Product,
    ProductSource,
    ProductStore,
    ProductSyncConfig,
    ProductSyncError,
    RemoteProduct,
    SourceConfig,
    SourceUnavailableError,
    StoreError,
    StoreLookupError,
    SyncError,
    SyncResult,
)
from productsync.engine import Synchronizer
from productsync.feedback import CallbackFeedback, CompositeFeedback, LoggingFeedback, NoFeedback
from productsync.sdk import ProductSync
from productsync.sources import HttpProductSource, JsonFileProductSource, StaticProductSource, create_source
from productsync.stores import DryRunProductStore, InMemoryProductStore, JsonFileProductStore

__all__ = [
    "NOT_FOUND",
    "CallbackFeedback",
    "CompositeFeedback",
    "ConfigError",
    "DryRunProductStore",
    "Feedback",
    "Found",
    "HttpProductSource",
    "InMemoryProductStore",
    "JsonFileProductSource",
    "JsonFileProductStore",
    "LoggingFeedback",
    "LookupResult",
    "NoFeedback",
    "NotFound",
    "PersistenceError",
    "Product",
    "ProductSource",
    "ProductStore",
    "ProductSync",
    "ProductSyncConfig",
    "ProductSyncError",
    "RemoteProduct",
    "SourceConfig",
    "SourceUnavailableError",
    "StaticProductSource",
    "StoreError",
    "StoreLookupError",
    "SyncError",
    "SyncResult",
    "Synchronizer",
    "create_source",
    "load_config",
]
