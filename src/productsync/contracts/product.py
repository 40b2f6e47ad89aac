"""Product contracts: remote records, local entities and lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field


class RemoteProduct(BaseModel):
    """A product as delivered by the remote source.

    Wire payloads carry the external identifier under ``id``.
    """

    external_id: str = Field(alias="id", min_length=1)
    title: str
    price: Decimal

    model_config = {"frozen": True, "populate_by_name": True}


class Product:
    """Local, persistable counterpart of a :class:`RemoteProduct`.

    ``id`` stays ``None`` until a store persists the product for the first
    time. ``external_id`` is fixed at construction.
    """

    __slots__ = ("_id", "_external_id", "title", "price")

    def __init__(
        self,
        external_id: str,
        *,
        title: str = "",
        price: Decimal = Decimal("0"),
        id: int | None = None,
    ) -> None:
        self._id = id
        self._external_id = external_id
        self.title = title
        self.price = price

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def external_id(self) -> str:
        return self._external_id

    @property
    def is_new(self) -> bool:
        return self._id is None

    def assign_id(self, id: int) -> None:
        if self._id is not None:
            raise ValueError(f"product {self._external_id!r} already has id {self._id}")
        self._id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (self._id, self._external_id, self.title, self.price) == (
            other._id,
            other._external_id,
            other.title,
            other.price,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, external_id={self._external_id!r}, "
            f"title={self.title!r}, price={self.price!r})"
        )


@dataclass(frozen=True)
class Found:
    """Lookup hit."""

    product: Product


class NotFound:
    """Lookup miss. Use the :data:`NOT_FOUND` singleton."""

    _instance: NotFound | None = None

    def __new__(cls) -> NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = NotFound()

LookupResult = Found | NotFound
