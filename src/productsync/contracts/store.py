"""Local product store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from productsync.contracts.product import LookupResult, Product


class ProductStore(ABC):
    """Persistence boundary for local products.

    Products handed out by ``find_by_external_id`` are detached copies:
    mutating them does not change stored state until ``store_all`` succeeds.
    """

    @abstractmethod
    def find_by_external_id(self, external_id: str) -> LookupResult:
        """Return ``Found(product)`` or ``NOT_FOUND``.

        Raises:
            StoreLookupError: If the store cannot answer the lookup.
        """
        ...  # pragma: no cover

    @abstractmethod
    def store_all(self, products: Sequence[Product]) -> None:
        """Persist *products* as one all-or-nothing batch.

        New products receive their ``id`` only once the whole batch succeeds.

        Raises:
            PersistenceError: If any product cannot be saved. Nothing is written.
        """
        ...  # pragma: no cover
