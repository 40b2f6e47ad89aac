"""Source factory."""

from __future__ import annotations

from productsync.contracts.config import SourceConfig
from productsync.contracts.exceptions import ConfigError
from productsync.contracts.source import ProductSource
from productsync.sources.http_endpoint import HttpProductSource
from productsync.sources.json_file import JsonFileProductSource


def create_source(config: SourceConfig) -> ProductSource:
    if config.kind == "http" and config.url:
        return HttpProductSource(
            config.url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            headers=config.headers,
        )
    if config.kind == "file" and config.path is not None:
        return JsonFileProductSource(config.path)
    raise ConfigError(f"Unsupported source configuration: {config.kind!r}")
