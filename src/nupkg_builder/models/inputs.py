"""Pydantic models for package write parameters.

These models validate a plain dictionary (for example one loaded from JSON)
describing a package and convert it into the ``CoreInfo`` / ``OptionalInfo``
domain objects consumed by the archive assembler.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain import CoreInfo, Dependency, OptionalInfo


class DependencyParams(BaseModel):
    """A dependency with an already-formatted version requirement."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[
        str,
        Field(min_length=1, description="Dependency package id", examples=["Newtonsoft.Json"]),
    ]
    version: Annotated[
        str,
        Field(
            description="Version requirement in NuGet range syntax",
            examples=["1.2.3", "[1.0.0, 2.0.0)"],
        ),
    ]

    def to_dependency(self) -> Dependency:
        return Dependency(id=self.id, version_requirement=self.version)


class FileMappingParams(BaseModel):
    """Maps a source path (relative to the working directory) to an archive folder."""

    model_config = ConfigDict(frozen=True)

    source: Annotated[
        str,
        Field(min_length=1, description="File or directory to include", examples=["bin/Release", "README.md"]),
    ]
    target: Annotated[
        str,
        Field(default="", description="Archive folder receiving the files", examples=["", "lib/net45"]),
    ]


class PackageWriteParams(BaseModel):
    """Parameters describing a package to write."""

    id: Annotated[str, Field(min_length=1, description="Package id", examples=["Foo"])]
    version: Annotated[
        Optional[str],
        Field(default=None, description="Package version; required when writing", examples=["1.0.0"]),
    ]
    description: Annotated[str, Field(description="Package description")]
    authors: Annotated[list[str], Field(min_length=1, description="Package authors, in order")]
    package_file_name: Annotated[
        Optional[str],
        Field(default=None, description="Archive file name; defaults to <id>.<version>.nupkg"),
    ]
    manifest_file_name: Annotated[
        Optional[str],
        Field(default=None, description="Manifest archive path; defaults to <id>.nuspec"),
    ]

    title: Optional[str] = None
    owners: list[str] = Field(default_factory=list)
    license_url: Optional[str] = None
    project_url: Optional[str] = None
    icon_url: Optional[str] = None
    require_license_acceptance: bool = False
    summary: Optional[str] = None
    release_notes: Optional[str] = None
    copyright: Optional[str] = None
    language: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    development_dependency: bool = False
    references: list[str] = Field(default_factory=list)
    framework_assembly_references: list[str] = Field(default_factory=list)
    dependencies: list[DependencyParams] = Field(default_factory=list)
    excluded_dependencies: list[str] = Field(default_factory=list)
    files: list[FileMappingParams] = Field(default_factory=list)
    files_excluded: list[str] = Field(default_factory=list)

    @field_validator("authors")
    @classmethod
    def validate_authors(cls, v: list[str]) -> list[str]:
        authors = [author.strip() for author in v]
        if any(not author for author in authors):
            raise ValueError("Author names cannot be empty")
        return authors

    @field_validator("files", mode="before")
    @classmethod
    def coerce_file_pairs(cls, v: Any) -> Any:
        """Accept ``[source, target]`` pairs alongside mapping objects."""
        if not isinstance(v, list):
            return v
        return [
            {"source": item[0], "target": item[1]} if isinstance(item, (list, tuple)) and len(item) == 2 else item
            for item in v
        ]

    def to_core_info(self) -> CoreInfo:
        return CoreInfo.create(
            id=self.id,
            version=self.version,
            description=self.description,
            authors=self.authors,
            package_file_name=self.package_file_name,
            manifest_file_name=self.manifest_file_name,
        )

    def to_optional_info(self) -> OptionalInfo:
        return OptionalInfo(
            title=self.title,
            owners=tuple(self.owners),
            license_url=self.license_url,
            project_url=self.project_url,
            icon_url=self.icon_url,
            require_license_acceptance=self.require_license_acceptance,
            summary=self.summary,
            release_notes=self.release_notes,
            copyright=self.copyright,
            language=self.language,
            tags=tuple(self.tags),
            development_dependency=self.development_dependency,
            references=tuple(self.references),
            framework_assembly_references=tuple(self.framework_assembly_references),
            dependencies=tuple(dep.to_dependency() for dep in self.dependencies),
            excluded_dependencies=frozenset(self.excluded_dependencies),
            files=tuple((mapping.source, mapping.target) for mapping in self.files),
            files_excluded=tuple(self.files_excluded),
        )
