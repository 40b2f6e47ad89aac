"""Product source reading a local JSON export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from productsync.contracts.exceptions import SourceUnavailableError
from productsync.contracts.product import RemoteProduct
from productsync.contracts.source import ProductSource
from productsync.sources.payload import parse_products


class JsonFileProductSource(ProductSource):
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[RemoteProduct]:
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SourceUnavailableError(f"failed reading product file: {self._path}") from exc
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SourceUnavailableError(f"invalid JSON in product file: {self._path}") from exc
        return parse_products(payload, origin=str(self._path))
