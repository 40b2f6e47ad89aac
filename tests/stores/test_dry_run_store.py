from __future__ import annotations

from decimal import Decimal

from productsync.contracts.product import Found, Product
from productsync.stores.dry_run import DryRunBatch, DryRunProductStore
from productsync.stores.memory import InMemoryProductStore


def test_lookups_are_delegated(memory_store: InMemoryProductStore) -> None:
    memory_store.store_all([Product("a", title="A", price=Decimal("1"))])

    result = DryRunProductStore(memory_store).find_by_external_id("a")

    assert isinstance(result, Found)
    assert result.product.id == 1


def test_store_all_records_without_writing(memory_store: InMemoryProductStore) -> None:
    memory_store.store_all([Product("a", title="A", price=Decimal("1"))])
    found = memory_store.find_by_external_id("a")
    assert isinstance(found, Found)
    found.product.title = "changed"
    fresh = Product("b", title="B")
    store = DryRunProductStore(memory_store)

    store.store_all([found.product, fresh])

    assert store.batches == (DryRunBatch(sequence=1, created=("b",), updated=("a",)),)
    assert fresh.id is None
    assert [p.title for p in memory_store.all()] == ["A"]
