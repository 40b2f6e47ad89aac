"""Local product stores."""

from productsync.stores.dry_run import DryRunProductStore
from productsync.stores.json_file import JsonFileProductStore
from productsync.stores.memory import InMemoryProductStore

__all__ = ["DryRunProductStore", "InMemoryProductStore", "JsonFileProductStore"]
