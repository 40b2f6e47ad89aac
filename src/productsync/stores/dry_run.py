"""Store wrapper that never writes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from productsync.contracts.product import LookupResult, Product
from productsync.contracts.store import ProductStore


@dataclass(frozen=True)
class DryRunBatch:
    """A batch that would have been stored."""

    sequence: int
    created: tuple[str, ...]
    updated: tuple[str, ...]


class DryRunProductStore(ProductStore):
    """Answers lookups from *inner* but only records ``store_all`` calls.

    Products passed to ``store_all`` keep ``id=None`` when new.
    """

    def __init__(self, inner: ProductStore) -> None:
        self._inner = inner
        self._batches: list[DryRunBatch] = []

    @property
    def batches(self) -> tuple[DryRunBatch, ...]:
        return tuple(self._batches)

    def find_by_external_id(self, external_id: str) -> LookupResult:
        return self._inner.find_by_external_id(external_id)

    def store_all(self, products: Sequence[Product]) -> None:
        self._batches.append(
            DryRunBatch(
                sequence=len(self._batches) + 1,
                created=tuple(p.external_id for p in products if p.id is None),
                updated=tuple(p.external_id for p in products if p.id is not None),
            )
        )
