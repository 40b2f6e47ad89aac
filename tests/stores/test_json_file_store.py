from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from productsync.contracts.exceptions import PersistenceError, StoreLookupError
from productsync.contracts.product import NOT_FOUND, Found, Product
from productsync.stores.json_file import JsonFileProductStore


def test_missing_file_is_empty_store(tmp_path: Path) -> None:
    store = JsonFileProductStore(tmp_path / "store.json")

    assert store.find_by_external_id("a") is NOT_FOUND
    assert store.all() == []


def test_round_trip_through_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonFileProductStore(path)
    product = Product("a", title="Widget", price=Decimal("10.95"))

    store.store_all([product])

    assert product.id == 1
    reopened = JsonFileProductStore(path)
    result = reopened.find_by_external_id("a")
    assert isinstance(result, Found)
    assert result.product == Product("a", title="Widget", price=Decimal("10.95"), id=1)
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["next_id"] == 2
    assert payload["products"]["a"]["title"] == "Widget"


def test_ids_continue_across_batches(tmp_path: Path) -> None:
    store = JsonFileProductStore(tmp_path / "store.json")
    store.store_all([Product("a", title="A", price=Decimal("1"))])
    second = Product("b", title="B", price=Decimal("2"))

    store.store_all([second])

    assert second.id == 2


def test_no_temporary_files_left_behind(tmp_path: Path) -> None:
    store = JsonFileProductStore(tmp_path / "store.json")

    store.store_all([Product("a", title="A", price=Decimal("1"))])

    assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]


def test_corrupt_file_raises_lookup_error(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreLookupError) as exc_info:
        JsonFileProductStore(path).find_by_external_id("a")

    assert exc_info.value.external_id == "a"


def test_corrupt_file_raises_persistence_error_on_store(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(PersistenceError, match="failed reading"):
        JsonFileProductStore(path).store_all([Product("a")])


def test_rejected_batch_leaves_file_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileProductStore(path)
    store.store_all([Product("a", title="A", price=Decimal("1"))])
    before = path.read_bytes()

    with pytest.raises(PersistenceError):
        store.store_all([Product("b", title="B"), Product("a", title="dup")])

    assert path.read_bytes() == before


def test_write_failure_raises_persistence_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "store.json"
    store = JsonFileProductStore(path)
    product = Product("a", title="A", price=Decimal("1"))

    def fail_replace(src: str, dst: str) -> None:
        raise OSError("read-only file system")

    monkeypatch.setattr("productsync.stores.json_file.os.replace", fail_replace)

    with pytest.raises(PersistenceError, match="failed to persist"):
        store.store_all([product])

    assert product.id is None
    assert not path.exists()
    assert list(tmp_path.iterdir()) == []


def test_undecodable_file_raises_store_errors(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_bytes(b"\xff\xfe{bad")
    store = JsonFileProductStore(path)

    with pytest.raises(StoreLookupError) as exc_info:
        store.find_by_external_id("p1")
    with pytest.raises(PersistenceError, match="failed reading"):
        store.store_all([Product("p1")])

    assert exc_info.value.external_id == "p1"
    assert path.read_bytes() == b"\xff\xfe{bad"


def test_pass_reads_file_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "store.json"
    JsonFileProductStore(path).store_all([Product(f"p{n}", title="Old", price=Decimal("1")) for n in range(5)])
    reads: list[Path] = []
    original = Path.read_bytes

    def counting_read_bytes(self: Path) -> bytes:
        reads.append(self)
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", counting_read_bytes)
    store = JsonFileProductStore(path)

    found = [store.find_by_external_id(f"p{n}") for n in range(5)]
    store.find_by_external_id("missing")
    store.store_all([result.product for result in found if isinstance(result, Found)])

    assert reads == [path]


def test_external_rewrite_is_picked_up(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileProductStore(path)
    store.store_all([Product("a", title="A", price=Decimal("1"))])
    assert isinstance(store.find_by_external_id("a"), Found)

    JsonFileProductStore(path).store_all([Product("b", title="Longer title", price=Decimal("2"))])

    result = store.find_by_external_id("b")
    assert isinstance(result, Found)
    assert result.product.id == 2
