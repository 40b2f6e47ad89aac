"""Product source backed by an HTTP JSON endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from productsync.contracts.exceptions import SourceUnavailableError
from productsync.contracts.product import RemoteProduct
from productsync.contracts.source import ProductSource
from productsync.sources._retrying_transport import RetryingTransport
from productsync.sources.payload import parse_products

_LOG = logging.getLogger(__name__)


class HttpProductSource(ProductSource):
    """Fetches the product list with a single ``GET``.

    The endpoint returns a JSON list of ``{"id", "title", "price"}`` objects,
    or an object wrapping that list under ``products``. Transient failures are
    retried by :class:`RetryingTransport`; whatever still fails surfaces as
    :class:`SourceUnavailableError`.

    Pass *client* to supply a preconfigured :class:`httpx.Client` (it is then
    not closed by this source).
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        max_retries: int = 3,
        headers: Mapping[str, str] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._max_retries = max_retries
        self._headers = dict(headers or {})
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    def load(self) -> list[RemoteProduct]:
        if self._client is not None:
            return self._fetch(self._client)
        transport = RetryingTransport(max_retries=self._max_retries)
        with httpx.Client(transport=transport, timeout=self._timeout) as client:
            return self._fetch(client)

    def _fetch(self, client: httpx.Client) -> list[RemoteProduct]:
        _LOG.debug("GET %s", self._url)
        try:
            response = client.get(self._url, headers={"Accept": "application/json", **self._headers})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailableError(
                f"product endpoint returned HTTP {exc.response.status_code}: {self._url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(f"failed fetching products from {self._url}: {exc}") from exc

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise SourceUnavailableError(f"invalid JSON from product endpoint: {self._url}") from exc
        return parse_products(payload, origin=self._url)
