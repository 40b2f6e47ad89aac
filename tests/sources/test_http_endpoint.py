from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest

from productsync.contracts.exceptions import SourceUnavailableError
from productsync.sources.http_endpoint import HttpProductSource

_URL = "https://shop.example.com/api/products"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_loads_products_from_list_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {"id": "product_1", "title": "Product 1", "price": "10.95"},
                {"id": "product_2", "title": "Product 2", "price": 9.45},
            ],
        )

    source = HttpProductSource(_URL, headers={"Authorization": "Bearer t"}, client=_client(handler))
    products = source.load()

    assert [p.external_id for p in products] == ["product_1", "product_2"]
    assert products[0].price == Decimal("10.95")
    assert seen[0].method == "GET"
    assert seen[0].headers["Authorization"] == "Bearer t"
    assert seen[0].headers["Accept"] == "application/json"


def test_loads_products_from_wrapped_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"products": [{"id": "a", "title": "A", "price": "1"}]})

    products = HttpProductSource(_URL, client=_client(handler)).load()

    assert [p.external_id for p in products] == ["a"]


def test_empty_list() -> None:
    products = HttpProductSource(_URL, client=_client(lambda request: httpx.Response(200, json=[]))).load()

    assert products == []


def test_http_error_status_raises_source_unavailable() -> None:
    source = HttpProductSource(_URL, client=_client(lambda request: httpx.Response(404)))

    with pytest.raises(SourceUnavailableError, match="HTTP 404"):
        source.load()


def test_transport_error_raises_source_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SourceUnavailableError, match="connection refused") as exc_info:
        HttpProductSource(_URL, client=_client(handler)).load()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_invalid_json_raises_source_unavailable() -> None:
    source = HttpProductSource(_URL, client=_client(lambda request: httpx.Response(200, content=b"<html>")))

    with pytest.raises(SourceUnavailableError, match="invalid JSON"):
        source.load()


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        [{"id": "a", "title": "A"}],
        [{"id": "", "title": "A", "price": "1"}],
        [{"id": "a", "title": "A", "price": "not-a-number"}],
    ],
)
def test_malformed_payload_raises_source_unavailable(payload: object) -> None:
    source = HttpProductSource(
        _URL,
        client=_client(lambda request: httpx.Response(200, content=json.dumps(payload).encode())),
    )

    with pytest.raises(SourceUnavailableError):
        source.load()


def test_builds_retrying_client_when_none_given(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": "a", "title": "A", "price": "1"}])

    monkeypatch.setattr(httpx, "HTTPTransport", lambda *args, **kwargs: httpx.MockTransport(handler))

    products = HttpProductSource(_URL, max_retries=0).load()

    assert [p.external_id for p in products] == ["a"]
    assert HttpProductSource(_URL).url == _URL
