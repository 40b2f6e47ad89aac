"""Decoding of remote product payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from productsync.contracts.exceptions import SourceUnavailableError
from productsync.contracts.product import RemoteProduct

_PRODUCTS = TypeAdapter(list[RemoteProduct])


def parse_products(payload: Any, *, origin: str) -> list[RemoteProduct]:
    """Validate a decoded JSON payload into remote products.

    Accepts a bare list of product objects or an object with a ``products`` list.
    """
    if isinstance(payload, Mapping) and "products" in payload:
        payload = payload["products"]
    if not isinstance(payload, list):
        raise SourceUnavailableError(f"expected a list of products from {origin}")
    try:
        return _PRODUCTS.validate_python(payload)
    except ValidationError as exc:
        raise SourceUnavailableError(f"invalid product payload from {origin}: {exc}") from exc
