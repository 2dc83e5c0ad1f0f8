"""Archive entry domain objects for package assembly.

An entry is an archive-internal path plus where its bytes come from: either a
callable producing them or a file on disk. ``EntrySet`` keeps registered
paths in order and implements dedup-by-first-write.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional


@dataclass(frozen=True)
class ArchiveEntry:
    """A single entry to be written into the package archive.

    Attributes:
        path: Archive-internal path using "/" separators
        data: Callable returning the entry bytes (generated documents)
        source_path: File-system path copied into the archive (payload files)
    """

    path: str
    data: Optional[Callable[[], bytes]] = None
    source_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Archive entry path cannot be empty")
        if (self.data is None) == (self.source_path is None):
            raise ValueError("Archive entry needs exactly one of data or source_path")

    @property
    def is_file(self) -> bool:
        return self.source_path is not None

    @classmethod
    def from_bytes(cls, path: str, payload: bytes) -> "ArchiveEntry":
        return cls(path=path, data=lambda: payload)

    @classmethod
    def from_file(cls, path: str, source_path: str) -> "ArchiveEntry":
        return cls(path=path, source_path=source_path)


class EntrySet:
    """Ordered set of archive paths registered during one write."""

    def __init__(self) -> None:
        self._paths: dict[str, None] = {}

    def register(self, path: str) -> bool:
        """Register ``path``; return False if it was already registered."""
        if path in self._paths:
            return False
        self._paths[path] = None
        return True

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> List[str]:
        return list(self._paths)
