"""nupkg builder - writes NuGet packages as Open Packaging Conventions archives.

A package archive is a ZIP file holding the nuspec manifest, a core-properties
part, a relationships part, a content-types map and the caller's payload
files.
"""

from __future__ import annotations

from .config import WriterConfig
from .domain import CoreInfo, Dependency, OptionalInfo
from .exceptions import (
    FatalConfigurationError,
    InvalidPathError,
    InvalidXmlCharacterError,
    MissingVersionError,
    NupkgError,
    OutputPathError,
    SourceNotFoundError,
)
from .models import PackageWriteParams
from .services import ArchiveAssembler, write_package

__version__ = "0.1.0"

__all__ = [
    "write_package",
    "ArchiveAssembler",
    "CoreInfo",
    "OptionalInfo",
    "Dependency",
    "WriterConfig",
    "PackageWriteParams",
    "NupkgError",
    "FatalConfigurationError",
    "MissingVersionError",
    "SourceNotFoundError",
    "InvalidPathError",
    "InvalidXmlCharacterError",
    "OutputPathError",
]
