"""Tests for the ZIP archive writing service."""

import zipfile

import pytest

from nupkg_builder.config import WriterConfig
from nupkg_builder.services.archive_writer import ArchiveWriter, zip_datetime


class TestZipDatetime:
    """Test epoch to ZIP timestamp conversion."""

    @pytest.mark.parametrize("epoch", [0, -5, 86400])
    def test_pre_1980_clamps(self, epoch):
        assert zip_datetime(epoch) == (1980, 1, 1, 0, 0, 0)

    def test_converts_utc(self):
        assert zip_datetime(946684800) == (2000, 1, 1, 0, 0, 0)


class TestArchiveWriter:
    """Test adding streams and files to an archive."""

    def test_add_stream_and_file(self, tmp_path):
        source = tmp_path / "a.dll"
        source.write_bytes(b"payload")
        output = tmp_path / "out.zip"

        with ArchiveWriter(str(output)) as writer:
            writer.add_stream("doc.xml", b"<doc/>")
            writer.add_file("lib/a.dll", str(source))
            assert writer.entry_count == 2

        with zipfile.ZipFile(output) as zf:
            assert zf.namelist() == ["doc.xml", "lib/a.dll"]
            assert zf.read("doc.xml") == b"<doc/>"
            assert zf.read("lib/a.dll") == b"payload"
            assert zf.getinfo("lib/a.dll").compress_type == zipfile.ZIP_DEFLATED

    def test_fixed_timestamp_and_store(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("text", encoding="utf-8")
        output = tmp_path / "out.zip"
        config = WriterConfig(compression="store", source_date_epoch=946684800)

        with ArchiveWriter(str(output), config) as writer:
            writer.add_stream("doc.xml", b"<doc/>")
            writer.add_file("a.txt", str(source))

        with zipfile.ZipFile(output) as zf:
            for info in zf.infolist():
                assert info.date_time == (2000, 1, 1, 0, 0, 0)
                assert info.compress_type == zipfile.ZIP_STORED

    def test_truncates_existing_file(self, tmp_path):
        output = tmp_path / "out.zip"
        output.write_bytes(b"not a zip" * 100)

        with ArchiveWriter(str(output)) as writer:
            writer.add_stream("a.txt", b"a")

        with zipfile.ZipFile(output) as zf:
            assert zf.namelist() == ["a.txt"]
