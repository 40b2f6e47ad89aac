"""Sync result contract."""

from __future__ import annotations

from pydantic import BaseModel, Field

from productsync.contracts.product import Product


class SyncResult(BaseModel):
    """Value returned by :meth:`Synchronizer.run`."""

    records: int = 0
    created: int = 0
    updated: int = 0
    products: list[Product] = Field(default_factory=list, repr=False)
    dry_run: bool = False

    model_config = {"arbitrary_types_allowed": True}

    @property
    def total(self) -> int:
        return self.created + self.updated
