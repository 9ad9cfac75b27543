"""In-memory storage, used for tests and for embedding content in code."""

from __future__ import annotations

from .base import Storage, StorageEntry, StorageReadError


class InMemoryStorage(Storage):
    """
    Storage backed by a dict of path -> content.

    Paths use "/" separators; directories are implied by the paths of the
    files they contain. Entries are listed in insertion order, which stands
    in for the enumeration order of a real medium.

    Content may be str or bytes; bytes are decoded as UTF-8 with replacement.
    """

    def __init__(self, files: dict[str, str | bytes] | None = None):
        self.files: dict[str, str | bytes] = {}
        for name, content in (files or {}).items():
            self.add(name, content)

    def add(self, name: str, content: str | bytes) -> None:
        self.files[name.strip("/")] = content

    def list_entries(self, path: str = "") -> list[StorageEntry]:
        prefix = path.strip("/")
        if prefix and not self._is_dir(prefix):
            raise StorageReadError(f"Not a directory: {path}")

        entries: dict[str, StorageEntry] = {}
        for name, content in self.files.items():
            if prefix:
                if not name.startswith(prefix + "/"):
                    continue
                relative = name[len(prefix) + 1 :]
            else:
                relative = name

            head, sep, _ = relative.partition("/")
            if head in entries:
                continue
            if sep:
                entries[head] = StorageEntry(name=head, is_dir=True)
            else:
                entries[head] = StorageEntry(name=head, size=len(self._as_bytes(content)))
        return list(entries.values())

    def read_text(self, name: str) -> str:
        key = name.strip("/")
        if key not in self.files:
            raise StorageReadError(f"No such file: {name}")

        content = self.files[key]
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        return content

    def exists(self, path: str) -> bool:
        key = path.strip("/")
        return not key or key in self.files or self._is_dir(key)

    def _is_dir(self, path: str) -> bool:
        return any(name.startswith(path + "/") for name in self.files)

    @staticmethod
    def _as_bytes(content: str | bytes) -> bytes:
        return content if isinstance(content, bytes) else content.encode("utf-8")
