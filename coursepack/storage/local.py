"""Filesystem-backed storage rooted at a local directory."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .base import Storage, StorageEntry, StorageMountError, StorageReadError


class LocalDirectoryStorage(Storage):
    """Read content files from a directory on disk."""

    def __init__(self, root: Path | str):
        """
        Mount a directory.

        Args:
            root: Directory holding the content files.

        Raises:
            StorageMountError: If root does not exist or is not a directory.
        """
        self.root = Path(root)

        if not self.root.exists():
            raise StorageMountError(f"Content root not found: {self.root}")
        if not self.root.is_dir():
            raise StorageMountError(f"Content root is not a directory: {self.root}")

    def _resolve(self, name: str) -> Path:
        return self.root / name.lstrip("/") if name else self.root

    def list_entries(self, path: str = "") -> list[StorageEntry]:
        directory = self._resolve(path)
        try:
            children = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise StorageReadError(f"Cannot list {directory}: {e}") from e

        entries = []
        for child in children:
            try:
                is_dir = child.is_dir()
                size = 0 if is_dir else child.stat().st_size
            except OSError as e:
                logger.warning(f"Cannot stat {child}: {e}")
                continue
            entries.append(StorageEntry(name=child.name, is_dir=is_dir, size=size))
        return entries

    def read_text(self, name: str) -> str:
        file_path = self._resolve(name)
        try:
            return file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise StorageReadError(f"Cannot read {file_path}: {e}") from e

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()


def open_storage(root: Path | str) -> LocalDirectoryStorage | None:
    """
    Mount a content directory, reporting failure as None.

    Mount failure is the only fatal condition of a load, so callers get a
    simple success/failure signal instead of an exception.
    """
    try:
        storage = LocalDirectoryStorage(root)
    except StorageMountError as e:
        logger.error(f"Storage mount failed: {e}")
        return None

    logger.info(f"Storage mounted at {storage.root}")
    return storage
