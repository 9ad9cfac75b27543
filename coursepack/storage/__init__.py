"""Storage media the curriculum loader can read from."""

from .base import (
    Storage,
    StorageEntry,
    StorageError,
    StorageMountError,
    StorageReadError,
)
from .local import LocalDirectoryStorage, open_storage
from .memory import InMemoryStorage

__all__ = [
    "Storage",
    "StorageEntry",
    "StorageError",
    "StorageMountError",
    "StorageReadError",
    "LocalDirectoryStorage",
    "InMemoryStorage",
    "open_storage",
]
