"""
Unit tests for the storage backends.
"""
import pytest

from coursepack.storage import (
    InMemoryStorage,
    LocalDirectoryStorage,
    StorageEntry,
    StorageMountError,
    StorageReadError,
    open_storage,
)


@pytest.fixture
def content_dir(tmp_path):
    (tmp_path / "math_1.intro.content").write_text("# Intro\n", encoding="utf-8")
    (tmp_path / "math_quiz.quiz").write_bytes(b"### Q1\nCaf\xc3\xa9?\n\na) yes\n")
    (tmp_path / "bad.md").write_bytes(b"# Broken \xff byte\n")
    (tmp_path / "assets").mkdir()
    return tmp_path


class TestLocalDirectoryStorage:
    def test_list_entries(self, content_dir):
        storage = LocalDirectoryStorage(content_dir)
        entries = {e.name: e for e in storage.list_entries()}

        assert set(entries) == {"math_1.intro.content", "math_quiz.quiz", "bad.md", "assets"}
        assert entries["assets"].is_dir is True
        assert entries["math_1.intro.content"].size == len("# Intro\n")

    def test_read_text_decodes_utf8(self, content_dir):
        storage = LocalDirectoryStorage(content_dir)
        assert "Café?" in storage.read_text("math_quiz.quiz")

    def test_invalid_bytes_are_replaced(self, content_dir):
        storage = LocalDirectoryStorage(content_dir)
        assert storage.read_text("bad.md") == "# Broken � byte\n"

    def test_missing_file_raises(self, content_dir):
        with pytest.raises(StorageReadError):
            LocalDirectoryStorage(content_dir).read_text("nope.md")

    def test_exists(self, content_dir):
        storage = LocalDirectoryStorage(content_dir)
        assert storage.exists("assets")
        assert not storage.exists("storage")

    def test_missing_root(self, tmp_path):
        with pytest.raises(StorageMountError):
            LocalDirectoryStorage(tmp_path / "missing")

    def test_root_is_file(self, content_dir):
        with pytest.raises(StorageMountError):
            LocalDirectoryStorage(content_dir / "bad.md")

    def test_open_storage_reports_failure_as_none(self, tmp_path):
        assert open_storage(tmp_path / "missing") is None
        assert isinstance(open_storage(tmp_path), LocalDirectoryStorage)


class TestInMemoryStorage:
    def test_root_listing_implies_directories(self):
        storage = InMemoryStorage({"a.md": "x", "dir/b.md": "yy", "dir/c.md": "z"})

        assert storage.list_entries() == [
            StorageEntry(name="a.md", size=1),
            StorageEntry(name="dir", is_dir=True),
        ]

    def test_subdirectory_listing(self):
        storage = InMemoryStorage({"dir/b.md": "yy", "dir/sub/c.md": "z"})

        assert storage.list_entries("dir") == [
            StorageEntry(name="b.md", size=2),
            StorageEntry(name="sub", is_dir=True),
        ]

    def test_listing_a_file_raises(self):
        with pytest.raises(StorageReadError):
            InMemoryStorage({"a.md": "x"}).list_entries("a.md")

    def test_read_text(self):
        storage = InMemoryStorage({"/a.md": b"caf\xc3\xa9"})
        assert storage.read_text("a.md") == "café"

    def test_read_missing_raises(self):
        with pytest.raises(StorageReadError):
            InMemoryStorage().read_text("a.md")

    def test_base_name(self):
        assert StorageEntry(name="storage/math/1.a.md").base_name == "1.a.md"
        assert StorageEntry(name="/math_1.a.md").base_name == "math_1.a.md"
