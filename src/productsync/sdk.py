"""SDK composition root for productsync."""

from __future__ import annotations

from productsync.contracts.config import ProductSyncConfig
from productsync.contracts.feedback import Feedback
from productsync.contracts.source import ProductSource
from productsync.contracts.store import ProductStore
from productsync.contracts.sync import SyncResult
from productsync.engine import Synchronizer
from productsync.sources import create_source
from productsync.stores import DryRunProductStore, JsonFileProductStore


class ProductSync:
    """productsync SDK public API."""

    def __init__(
        self,
        *,
        source: ProductSource,
        store: ProductStore,
        feedback: Feedback | None = None,
        dry_run: bool = False,
    ) -> None:
        self._source = source
        self._store: ProductStore = DryRunProductStore(store) if dry_run else store
        self._feedback = feedback
        self._dry_run = dry_run

    @classmethod
    def from_config(
        cls,
        config: ProductSyncConfig,
        *,
        feedback: Feedback | None = None,
        dry_run: bool = False,
    ) -> ProductSync:
        return cls(
            source=create_source(config.source),
            store=JsonFileProductStore(config.store_path),
            feedback=feedback,
            dry_run=dry_run,
        )

    @property
    def store(self) -> ProductStore:
        return self._store

    def sync(self) -> SyncResult:
        result = Synchronizer(self._source, self._store, feedback=self._feedback).run()
        if self._dry_run:
            return result.model_copy(update={"dry_run": True})
        return result
