"""In-memory product source."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from productsync.contracts.product import RemoteProduct
from productsync.contracts.source import ProductSource
from productsync.sources.payload import parse_products


class StaticProductSource(ProductSource):
    """Serves a fixed list of products, e.g. for tests or embedding.

    Raw mappings are validated the same way remote payloads are.
    """

    def __init__(self, records: Iterable[RemoteProduct | Mapping[str, Any]] = ()) -> None:
        self._records: tuple[RemoteProduct, ...] = tuple(
            record if isinstance(record, RemoteProduct) else parse_products([record], origin="static records")[0]
            for record in records
        )

    def load(self) -> list[RemoteProduct]:
        return list(self._records)
