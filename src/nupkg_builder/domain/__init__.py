"""Domain objects for package archive assembly.

This module contains the immutable data structures passed between the path
normalizer, the metadata document builders and the archive assembler.
"""

from .core_info import CoreInfo
from .optional_info import Dependency, OptionalInfo, VersionRequirement, format_version_requirement
from .archive_entry import ArchiveEntry, EntrySet
from .xml_node import XmlNode, element

__all__ = [
    "CoreInfo",
    "OptionalInfo",
    "Dependency",
    "VersionRequirement",
    "format_version_requirement",
    "ArchiveEntry",
    "EntrySet",
    "XmlNode",
    "element",
]
