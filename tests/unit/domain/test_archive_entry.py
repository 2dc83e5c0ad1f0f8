"""Tests for ArchiveEntry and EntrySet."""

import pytest

from nupkg_builder.domain.archive_entry import ArchiveEntry, EntrySet


class TestArchiveEntry:
    """Test ArchiveEntry construction."""

    def test_from_bytes(self):
        """Test an in-memory entry produces its payload."""
        entry = ArchiveEntry.from_bytes("_rels/.rels", b"<xml/>")

        assert entry.is_file is False
        assert entry.data() == b"<xml/>"

    def test_from_file(self):
        """Test a file-backed entry keeps its source path."""
        entry = ArchiveEntry.from_file("lib/a.dll", "/work/bin/a.dll")

        assert entry.is_file is True
        assert entry.source_path == "/work/bin/a.dll"

    def test_requires_exactly_one_source(self):
        """Test that an entry needs data or a source path, not both."""
        with pytest.raises(ValueError, match="exactly one"):
            ArchiveEntry(path="a.txt")
        with pytest.raises(ValueError, match="exactly one"):
            ArchiveEntry(path="a.txt", data=lambda: b"", source_path="/a.txt")

    def test_empty_path_rejected(self):
        """Test validation fails for an empty path."""
        with pytest.raises(ValueError, match="path cannot be empty"):
            ArchiveEntry.from_bytes("", b"")


class TestEntrySet:
    """Test dedup-by-first-write registration."""

    def test_first_registration_wins(self):
        """Test that re-registering a path is refused."""
        entries = EntrySet()

        assert entries.register("a.dll") is True
        assert entries.register("a.dll") is False
        assert len(entries) == 1

    def test_preserves_registration_order(self):
        """Test that paths iterate in registration order."""
        entries = EntrySet()
        for path in ["b.txt", "a.dll", "b.txt", "c.xml"]:
            entries.register(path)

        assert list(entries) == ["b.txt", "a.dll", "c.xml"]
        assert entries.paths == ["b.txt", "a.dll", "c.xml"]
        assert "a.dll" in entries
        assert "missing" not in entries
