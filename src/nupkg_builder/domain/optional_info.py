"""OptionalInfo domain object and dependency descriptors.

Optional scalar fields are ``None`` when absent; the manifest builder omits
their element entirely instead of writing an empty one.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Protocol, Tuple, Union, runtime_checkable


@runtime_checkable
class VersionRequirement(Protocol):
    """A resolved version constraint that can render itself for the manifest."""

    def format_in_nuget_syntax(self) -> str:
        ...


def format_version_requirement(requirement: Union[str, VersionRequirement]) -> str:
    """Render a dependency version requirement in NuGet range syntax.

    Plain strings are assumed to be already formatted and pass through.
    """
    if isinstance(requirement, str):
        return requirement
    if isinstance(requirement, VersionRequirement):
        return requirement.format_in_nuget_syntax()
    raise TypeError(f"Unsupported version requirement type: {type(requirement).__name__}")


@dataclass(frozen=True)
class Dependency:
    """A package dependency: identifier plus version requirement."""

    id: str
    version_requirement: Union[str, VersionRequirement]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Dependency id cannot be empty")

    @property
    def formatted_version(self) -> str:
        return format_version_requirement(self.version_requirement)


@dataclass(frozen=True)
class OptionalInfo:
    """Descriptive and structural package fields that may be omitted.

    Attributes:
        title: Human-friendly package title
        owners: Package owners, comma-joined in the manifest
        license_url / project_url / icon_url: Package URLs
        require_license_acceptance: Emit requireLicenseAcceptance when True
        summary / release_notes / copyright / language: Descriptive text
        tags: Tags, space-joined in the manifest
        development_dependency: Emit developmentDependency when True
        references: Assembly file names listed under <references>
        framework_assembly_references: Names listed under <frameworkAssemblies>
        dependencies: Dependencies listed under <dependencies>
        excluded_dependencies: Dependency ids never written to the manifest
        files: (source, target) mappings relative to the working directory
        files_excluded: Exclusion glob patterns relative to the working directory
    """

    title: Optional[str] = None
    owners: Tuple[str, ...] = ()
    license_url: Optional[str] = None
    project_url: Optional[str] = None
    icon_url: Optional[str] = None
    require_license_acceptance: bool = False
    summary: Optional[str] = None
    release_notes: Optional[str] = None
    copyright: Optional[str] = None
    language: Optional[str] = None
    tags: Tuple[str, ...] = ()
    development_dependency: bool = False
    references: Tuple[str, ...] = ()
    framework_assembly_references: Tuple[str, ...] = ()
    dependencies: Tuple[Dependency, ...] = ()
    excluded_dependencies: FrozenSet[str] = field(default_factory=frozenset)
    files: Tuple[Tuple[str, str], ...] = ()
    files_excluded: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Freeze list arguments so the instance stays immutable."""
        for name in (
            "owners",
            "tags",
            "references",
            "framework_assembly_references",
            "dependencies",
            "files_excluded",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "files", tuple((source, target) for source, target in self.files))
        object.__setattr__(self, "excluded_dependencies", frozenset(self.excluded_dependencies))

    @property
    def included_dependencies(self) -> Tuple[Dependency, ...]:
        """Dependencies whose id is not in the exclusion set, in declared order."""
        return tuple(dep for dep in self.dependencies if dep.id not in self.excluded_dependencies)
