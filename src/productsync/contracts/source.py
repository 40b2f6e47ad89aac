"""Remote product source contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from productsync.contracts.product import RemoteProduct


class ProductSource(ABC):
    @abstractmethod
    def load(self) -> list[RemoteProduct]:
        """Fetch the full remote product set.

        Raises:
            SourceUnavailableError: If the products cannot be fetched.
        """
        ...  # pragma: no cover
