"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class SourceConfig(BaseModel):
    kind: Literal["http", "file"]
    url: str | None = None
    path: Path | None = None
    timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_location(self) -> SourceConfig:
        if self.kind == "http":
            if not (self.url or "").strip():
                raise ValueError("http source requires a non-empty url")
            if self.path is not None:
                raise ValueError("http source does not accept a path")
        else:
            if self.path is None:
                raise ValueError("file source requires a path")
            if self.url is not None:
                raise ValueError("file source does not accept a url")
        return self


class ProductSyncConfig(BaseModel):
    source: SourceConfig
    store_path: Path = Path("products.json")

    model_config = {"frozen": True}
