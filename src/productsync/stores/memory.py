"""Dict-backed product store."""

from __future__ import annotations

from collections.abc import Sequence

from productsync.contracts.product import NOT_FOUND, Found, LookupResult, Product
from productsync.contracts.store import ProductStore
from productsync.stores.records import StoreState, StoredProduct, assign_ids, stage_batch


class InMemoryProductStore(ProductStore):
    """Process-local store; ids are assigned sequentially from 1."""

    def __init__(self) -> None:
        self._state = StoreState()
        self.store_calls: int = 0

    def find_by_external_id(self, external_id: str) -> LookupResult:
        row = self._state.products.get(external_id)
        if row is None:
            return NOT_FOUND
        return Found(row.to_product())

    def store_all(self, products: Sequence[Product]) -> None:
        self.store_calls += 1
        new_state, assignments = stage_batch(self._state, products)
        self._state = new_state
        assign_ids(assignments)

    def all(self) -> list[Product]:
        return [row.to_product() for row in self._state.products.values()]

    def rows(self) -> dict[str, StoredProduct]:
        return dict(self._state.products)
