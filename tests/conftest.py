"""Shared test fixtures for productsync tests."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from productsync.contracts.product import RemoteProduct
from productsync.stores.memory import InMemoryProductStore
from tests.fakes.feedback import RecordingFeedback


@pytest.fixture
def remote_products() -> list[RemoteProduct]:
    """Two distinct remote products."""
    return [
        RemoteProduct(external_id="product_1", title="Product 1", price=Decimal("10.95")),
        RemoteProduct(external_id="product_2", title="Product 2", price=Decimal("9.45")),
    ]


@pytest.fixture
def memory_store() -> InMemoryProductStore:
    return InMemoryProductStore()


@pytest.fixture
def recorder() -> RecordingFeedback:
    return RecordingFeedback()


@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """A JSON product export in the remote wire format."""
    path = tmp_path / "export.json"
    path.write_text(
        json.dumps(
            [
                {"id": "product_1", "title": "Product 1", "price": "10.95"},
                {"id": "product_2", "title": "Product 2", "price": "9.45"},
            ]
        ),
        encoding="utf-8",
    )
    return path
