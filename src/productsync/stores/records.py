"""Stored product records and all-or-nothing batch staging."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel, Field

from productsync.contracts.exceptions import PersistenceError
from productsync.contracts.product import Product


class StoredProduct(BaseModel):
    """A product row as held by a store."""

    id: int
    external_id: str
    title: str
    price: Decimal

    model_config = {"frozen": True}

    def to_product(self) -> Product:
        return Product(self.external_id, title=self.title, price=self.price, id=self.id)


class StoreState(BaseModel):
    """Full store contents, keyed by external id."""

    next_id: int = 1
    products: dict[str, StoredProduct] = Field(default_factory=dict)


def stage_batch(state: StoreState, products: Sequence[Product]) -> tuple[StoreState, list[tuple[Product, int]]]:
    """Compute the state after persisting *products* without touching *state*.

    Returns the new state and the ``(product, id)`` pairs still to assign to
    new products once the new state has been committed.

    Raises:
        PersistenceError: If any product conflicts with stored state or with
            another product of the same batch.
    """
    rows = dict(state.products)
    next_id = state.next_id
    assignments: list[tuple[Product, int]] = []
    seen: set[str] = set()

    for product in products:
        external_id = product.external_id
        if external_id in seen:
            raise PersistenceError(f"duplicate external id in batch: {external_id!r}")
        seen.add(external_id)

        existing = rows.get(external_id)
        if product.id is None:
            if existing is not None:
                raise PersistenceError(
                    f"product with external id {external_id!r} already exists (id={existing.id})"
                )
            product_id = next_id
            next_id += 1
            assignments.append((product, product_id))
        else:
            if existing is None or existing.id != product.id:
                raise PersistenceError(f"unknown product id {product.id} for external id {external_id!r}")
            product_id = product.id

        rows[external_id] = StoredProduct(
            id=product_id,
            external_id=external_id,
            title=product.title,
            price=product.price,
        )

    return StoreState(next_id=next_id, products=rows), assignments


def assign_ids(assignments: Sequence[tuple[Product, int]]) -> None:
    for product, product_id in assignments:
        product.assign_id(product_id)
