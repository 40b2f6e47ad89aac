"""Product store persisted as a single JSON document."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from productsync.contracts.exceptions import PersistenceError, StoreLookupError
from productsync.contracts.product import NOT_FOUND, Found, LookupResult, Product
from productsync.contracts.store import ProductStore
from productsync.stores.records import StoreState, assign_ids, stage_batch

_LOG = logging.getLogger(__name__)


class JsonFileProductStore(ProductStore):
    """Keeps every product in one JSON file.

    A missing file is an empty store. Each batch rewrites the whole document
    into a temporary sibling and atomically replaces the original, so a crash
    mid-write leaves either the previous or the new contents.

    The parsed document is reused while the file's modification time and size
    are unchanged, so a pass reads the file once rather than once per lookup.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._cached: tuple[tuple[int, int], StoreState] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def find_by_external_id(self, external_id: str) -> LookupResult:
        try:
            state = self._read()
        except (OSError, ValidationError) as exc:
            raise StoreLookupError(
                f"failed reading product store: {self._path}", external_id=external_id
            ) from exc
        row = state.products.get(external_id)
        if row is None:
            return NOT_FOUND
        return Found(row.to_product())

    def store_all(self, products: Sequence[Product]) -> None:
        try:
            state = self._read()
        except (OSError, ValidationError) as exc:
            raise PersistenceError(f"failed reading product store: {self._path}") from exc

        new_state, assignments = stage_batch(state, products)
        self._write(new_state)
        self._cached = None
        assign_ids(assignments)
        _LOG.debug("Stored %d products to %s", len(products), self._path)

    def all(self) -> list[Product]:
        return [row.to_product() for row in self._read().products.values()]

    def _read(self) -> StoreState:
        try:
            stat = self._path.stat()
        except FileNotFoundError:
            self._cached = None
            return StoreState()

        key = (stat.st_mtime_ns, stat.st_size)
        if self._cached is not None and self._cached[0] == key:
            return self._cached[1]
        # Raw bytes: pydantic rejects undecodable input as a ValidationError.
        state = StoreState.model_validate_json(self._path.read_bytes())
        self._cached = (key, state)
        return state

    def _write(self, state: StoreState) -> None:
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(state.model_dump_json(indent=2))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"failed to persist product store: {self._path}") from exc
