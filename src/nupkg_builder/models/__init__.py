"""Input models for the nupkg builder."""

from .inputs import DependencyParams, FileMappingParams, PackageWriteParams

__all__ = ["DependencyParams", "FileMappingParams", "PackageWriteParams"]
