"""Product reconciliation pass."""

from __future__ import annotations

import logging

from productsync.contracts.exceptions import ProductSyncError, StoreLookupError, SyncError
from productsync.contracts.feedback import Feedback
from productsync.contracts.product import Found, NotFound, Product, RemoteProduct
from productsync.contracts.source import ProductSource
from productsync.contracts.store import ProductStore
from productsync.contracts.sync import SyncResult
from productsync.feedback.null import NoFeedback

logger = logging.getLogger(__name__)


class Synchronizer:
    """Upserts remote products into a local store, keyed by external id.

    One :meth:`run` call is one reconciliation pass:

    1. Load every remote product from the source.
    2. Resolve each one to an existing local product or a new one.
    3. Copy title and price onto it.
    4. Persist all touched products in a single batch.

    Feedback receives ``info``, ``info``, ``progress_start``, one
    ``progress_advance`` per record, ``progress_stop`` and a final ``info``.
    Source and lookup failures abort the pass before anything is stored.

    Args:
        source: Where remote products come from.
        store: Where local products live.
        feedback: Optional observer; defaults to :class:`NoFeedback`.
    """

    def __init__(
        self,
        source: ProductSource,
        store: ProductStore,
        *,
        feedback: Feedback | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._feedback: Feedback = feedback or NoFeedback()

    def run(self) -> SyncResult:
        self._feedback.info("Starting synchronization")

        records = self._source.load()
        total = len(records)
        self._feedback.info(f"Loaded {total} records")

        # Insertion order is first-seen order; repeated ids reuse the same entity.
        touched: dict[str, Product] = {}
        created = 0
        updated = 0

        self._feedback.progress_start(total)
        for record in records:
            product = touched.get(record.external_id)
            if product is None:
                product = self._resolve(record.external_id)
                touched[record.external_id] = product
                if product.is_new:
                    created += 1
                else:
                    updated += 1
            else:
                logger.debug("Duplicate external id %r in batch; later record wins", record.external_id)

            self._apply(product, record)
            self._feedback.progress_advance(1)
        self._feedback.progress_stop()

        products = list(touched.values())
        self._store.store_all(products)

        logger.info("Synchronized %d records: %d created, %d updated", total, created, updated)
        self._feedback.info("Done synchronizing")
        return SyncResult(records=total, created=created, updated=updated, products=products)

    def _resolve(self, external_id: str) -> Product:
        try:
            result = self._store.find_by_external_id(external_id)
        except ProductSyncError:
            raise
        except Exception as exc:
            raise StoreLookupError(f"lookup failed for {external_id!r}: {exc}", external_id=external_id) from exc
        if isinstance(result, Found):
            logger.debug("Updating product %r (id=%s)", external_id, result.product.id)
            return result.product
        if isinstance(result, NotFound):
            logger.debug("Creating product %r", external_id)
            return Product(external_id)
        raise SyncError(f"Store returned unexpected lookup result for {external_id!r}: {result!r}")

    @staticmethod
    def _apply(product: Product, record: RemoteProduct) -> None:
        product.title = record.title
        product.price = record.price
