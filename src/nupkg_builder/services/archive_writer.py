"""ZIP archive writing service.

Wraps ``zipfile`` with the two operations package assembly needs: add a named
byte stream and add a file from disk. Compression and timestamps come from
``WriterConfig``.
"""

from __future__ import annotations

import logging
import shutil
import time
import zipfile
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..config import WriterConfig

logger = logging.getLogger(__name__)

ZipDateTime = Tuple[int, int, int, int, int, int]


def zip_datetime(epoch: int) -> ZipDateTime:
    """Convert seconds since the epoch to a ZIP timestamp.

    ZIP timestamps cannot represent dates before 1980, so earlier values clamp
    to 1980-01-01 00:00:00.
    """
    if epoch <= 0:
        return (1980, 1, 1, 0, 0, 0)
    t = time.gmtime(epoch)
    if t.tm_year < 1980:
        return (1980, 1, 1, 0, 0, 0)
    return (t.tm_year, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec)


class ArchiveWriter:
    """Writes entries into a new ZIP archive.

    Opening truncates any existing file at ``output_path``. Use as a context
    manager so the central directory is written on exit.
    """

    def __init__(self, output_path: str, config: Optional[WriterConfig] = None) -> None:
        self._config = config or WriterConfig()
        self._compress_type = self._config.compress_type
        self.output_path = output_path
        self._zip = zipfile.ZipFile(
            output_path,
            mode="w",
            compression=self._compress_type,
            strict_timestamps=False,
        )
        self.entry_count = 0

    def __enter__(self) -> ArchiveWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def _fixed_timestamp(self) -> Optional[ZipDateTime]:
        if self._config.source_date_epoch is None:
            return None
        return zip_datetime(self._config.source_date_epoch)

    def add_stream(self, path: str, data: bytes) -> None:
        """Add ``data`` as a new entry named ``path``."""
        date_time = self._fixed_timestamp() or datetime.now(timezone.utc).timetuple()[:6]
        info = zipfile.ZipInfo(path, date_time=date_time)
        info.compress_type = self._compress_type
        info.external_attr = (0o644 & 0xFFFF) << 16
        self._zip.writestr(info, data)
        self.entry_count += 1
        logger.debug(f"Added {path} ({len(data)} bytes)")

    def add_file(self, path: str, source: str) -> None:
        """Copy the file at ``source`` into a new entry named ``path``."""
        info = zipfile.ZipInfo.from_file(source, arcname=path, strict_timestamps=False)
        info.compress_type = self._compress_type
        fixed = self._fixed_timestamp()
        if fixed is not None:
            info.date_time = fixed
        with open(source, "rb") as src, self._zip.open(info, "w") as dst:
            shutil.copyfileobj(src, dst)
        self.entry_count += 1
        logger.debug(f"Added {path} from {source}")
