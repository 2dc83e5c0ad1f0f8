"""Services for package archive assembly."""

from .archive_assembler import ArchiveAssembler, write_package
from .archive_writer import ArchiveWriter
from .exclusion_matcher import ExclusionMatcher, ExclusionRule
from .globbing import compile_glob
from .metadata_documents import (
    build_content_types,
    build_core_properties,
    build_manifest,
    build_relationships,
    serialize_document,
)
from .path_normalizer import ensure_valid_name, ensure_valid_target_name, normalize_path

__all__ = [
    "ArchiveAssembler",
    "write_package",
    "ArchiveWriter",
    "ExclusionMatcher",
    "ExclusionRule",
    "compile_glob",
    "build_manifest",
    "build_core_properties",
    "build_relationships",
    "build_content_types",
    "serialize_document",
    "normalize_path",
    "ensure_valid_name",
    "ensure_valid_target_name",
]
