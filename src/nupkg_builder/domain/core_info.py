"""CoreInfo domain object.

This module defines the identity every package needs before it can be written:
id, version, description, authors and the two file names the archive uses.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class CoreInfo:
    """Identity and required fields of a package.

    Attributes:
        id: Package identifier (e.g., "Newtonsoft.Json")
        version: Package version; optional at construction, required at write time
        description: Package description written to the manifest
        authors: Ordered, non-empty sequence of author names
        package_file_name: File name of the produced archive (e.g., "Foo.1.0.0.nupkg")
        manifest_file_name: Archive path of the manifest document (e.g., "Foo.nuspec")
    """

    id: str
    version: Optional[str]
    description: str
    authors: Tuple[str, ...]
    package_file_name: str
    manifest_file_name: str

    def __post_init__(self) -> None:
        """Validate CoreInfo fields after initialization."""
        # Accept any sequence of authors but store an immutable tuple
        object.__setattr__(self, "authors", tuple(self.authors))
        self._validate_id()
        self._validate_authors()
        self._validate_file_names()

    def _validate_id(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Package id cannot be empty")

    def _validate_authors(self) -> None:
        if not self.authors:
            raise ValueError("Package must have at least one author")
        if any(not author or not author.strip() for author in self.authors):
            raise ValueError("Author names cannot be empty")

    def _validate_file_names(self) -> None:
        if not self.package_file_name:
            raise ValueError("Package file name cannot be empty")
        if not self.manifest_file_name:
            raise ValueError("Manifest file name cannot be empty")

    @classmethod
    def create(
        cls,
        id: str,
        version: Optional[str],
        description: str,
        authors: Sequence[str],
        package_file_name: Optional[str] = None,
        manifest_file_name: Optional[str] = None,
    ) -> "CoreInfo":
        """Create CoreInfo deriving the conventional file names.

        The archive defaults to ``<id>.<version>.nupkg`` and the manifest to
        ``<id>.nuspec``.
        """
        if package_file_name is None:
            package_file_name = f"{id}.{version}.nupkg" if version is not None else f"{id}.nupkg"
        if manifest_file_name is None:
            manifest_file_name = f"{id}.nuspec"
        return cls(
            id=id,
            version=version,
            description=description,
            authors=tuple(authors),
            package_file_name=package_file_name,
            manifest_file_name=manifest_file_name,
        )
