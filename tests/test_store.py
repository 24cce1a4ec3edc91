"""Tests for featuredocs.docs.store module."""

import os
import stat
from unittest.mock import patch

import pytest

from featuredocs.docs.store import FileDocumentStore, MemoryDocumentStore


class TestFileDocumentStore:
    """Tests for FileDocumentStore."""

    def test_write_and_read(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CHANGELOG.md"

        store.write(target, "# Log\n✓ unicode\n")

        assert store.read(target) == "# Log\n✓ unicode\n"
        assert list(tmp_path.iterdir()) == [target]

    def test_write_replaces_content(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CLAUDE.md"
        target.write_text("old\n")

        store.write(target, "new\n")

        assert target.read_text() == "new\n"

    def test_failed_write_keeps_original(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CHANGELOG.md"
        target.write_text("original\n")

        with patch("featuredocs.docs.store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                store.write(target, "partial")

        assert target.read_text() == "original\n"
        assert list(tmp_path.iterdir()) == [target]

    def test_new_file_gets_umask_default_mode(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CHANGELOG.md"

        old_mask = os.umask(0o022)
        try:
            store.write(target, "x\n")
        finally:
            os.umask(old_mask)

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_rewrite_keeps_existing_mode(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CLAUDE.md"
        target.write_text("old\n")
        target.chmod(0o640)

        store.write(target, "new\n")

        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_append(self, tmp_path):
        store = FileDocumentStore()
        target = tmp_path / "CHANGELOG.md"
        target.write_text("# Changelog\n")

        store.append(target, "\n## Feature 001 - Completed 2025-01-01\n")

        assert target.read_text() == "# Changelog\n\n## Feature 001 - Completed 2025-01-01\n"

    def test_exists_and_is_dir(self, tmp_path):
        store = FileDocumentStore()
        (tmp_path / "file.md").write_text("x")

        assert store.exists(tmp_path / "file.md")
        assert not store.exists(tmp_path)
        assert not store.exists(tmp_path / "missing.md")
        assert store.is_dir(tmp_path)
        assert not store.is_dir(tmp_path / "file.md")


class TestMemoryDocumentStore:
    """Tests for MemoryDocumentStore."""

    def test_initial_files_create_parent_dirs(self):
        store = MemoryDocumentStore(files={"/proj/specs/001/CHANGELOG.md": "x"})
        assert store.is_dir("/proj/specs/001")
        assert store.is_dir("/proj")
        assert store.read("/proj/specs/001/CHANGELOG.md") == "x"

    def test_write_requires_directory(self):
        store = MemoryDocumentStore()
        with pytest.raises(FileNotFoundError):
            store.write("/nowhere/file.md", "x")

    def test_read_missing(self):
        with pytest.raises(FileNotFoundError):
            MemoryDocumentStore().read("/missing.md")

    def test_append_accumulates(self):
        store = MemoryDocumentStore(dirs=["/proj"])
        store.append("/proj/CHANGELOG.md", "a")
        store.append("/proj/CHANGELOG.md", "b")
        assert store.read("/proj/CHANGELOG.md") == "ab"
