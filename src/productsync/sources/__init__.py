"""Remote product sources."""

from productsync.sources.factory import create_source
from productsync.sources.http_endpoint import HttpProductSource
from productsync.sources.json_file import JsonFileProductSource
from productsync.sources.static import StaticProductSource

__all__ = ["HttpProductSource", "JsonFileProductSource", "StaticProductSource", "create_source"]
