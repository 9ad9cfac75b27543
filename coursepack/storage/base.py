"""
Storage interface.

The loader only needs three things from a storage medium: enumerate the
entries of a directory, read a file fully as text, and check whether a path
exists. No write interface is required.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class StorageError(Exception):
    """Base class for storage failures."""


class StorageMountError(StorageError):
    """Raised when the storage root cannot be opened."""


class StorageReadError(StorageError):
    """Raised when a single entry cannot be read."""


@dataclass(frozen=True)
class StorageEntry:
    """A directory listing entry."""

    name: str
    is_dir: bool = False
    size: int = 0

    @property
    def base_name(self) -> str:
        """Entry name without any leading directory components or slash."""
        return self.name.rstrip("/").rsplit("/", 1)[-1]


class Storage(ABC):
    """Read-only storage medium."""

    @abstractmethod
    def list_entries(self, path: str = "") -> list[StorageEntry]:
        """
        List the entries directly under path ("" is the root).

        Returned names are relative to path.

        Raises:
            StorageReadError: If path is not a readable directory.
        """

    @abstractmethod
    def read_text(self, name: str) -> str:
        """
        Read a file completely.

        Raises:
            StorageReadError: If the file cannot be opened or decoded.
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if path names a file or directory."""

    @staticmethod
    def join(*parts: str) -> str:
        return "/".join(part.strip("/") for part in parts if part.strip("/"))
