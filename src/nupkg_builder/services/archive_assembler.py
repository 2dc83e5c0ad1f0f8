"""Package archive assembly.

Drives one package write from start to finish:

1. Render the metadata documents and compile exclusion rules, so invalid
   inputs fail before any file is touched.
2. Recreate the output archive.
3. Register payload entries from every (source, target) mapping in order,
   skipping excluded paths and dropping duplicate archive paths.
4. Register the manifest, core-properties and relationships documents.
5. Write the content-types document last, derived from every registered path.

If anything fails after the archive was created, the partial file is removed
before the error propagates.
"""

from __future__ import annotations

import logging
import os
from typing import FrozenSet, Optional

from ..config import WriterConfig
from ..constants import CONTENT_TYPES_PATH
from ..domain import ArchiveEntry, CoreInfo, EntrySet, OptionalInfo
from ..exceptions import OutputPathError, SourceNotFoundError
from .archive_writer import ArchiveWriter
from .exclusion_matcher import ExclusionMatcher
from .metadata_documents import build_content_types, build_package_metadata, serialize_document
from .path_normalizer import ensure_valid_name, ensure_valid_target_name

logger = logging.getLogger(__name__)


class ArchiveAssembler:
    """Writes one package archive from core and optional package information.

    Every call to ``write`` builds its own entry set and archive handle, so an
    assembler can be reused for repeated writes.
    """

    def __init__(
        self,
        core: CoreInfo,
        optional: OptionalInfo,
        working_dir: str,
        output_dir: str,
        config: Optional[WriterConfig] = None,
    ) -> None:
        self.core = core
        self.optional = optional
        self.working_dir = os.path.abspath(working_dir)
        self.output_dir = os.path.abspath(output_dir)
        self.config = config or WriterConfig()

    @property
    def output_path(self) -> str:
        return os.path.join(self.output_dir, self.core.package_file_name)

    def write(self) -> str:
        """Write the package archive and return its path.

        Raises:
            MissingVersionError: If the package has no version
            InvalidXmlCharacterError: If a metadata value cannot be written as XML
            InvalidPathError: If an exclusion pattern is blank
            SourceNotFoundError: If a mapped source is neither file nor directory
            OutputPathError: If the output archive cannot be (re)created
        """
        output_path = self.output_path
        self.config.validate_or_raise()
        metadata = build_package_metadata(self.core, self.optional, self.config.last_modified_by)
        exclusions = ExclusionMatcher.from_patterns(self.optional.files_excluded, self.working_dir)

        logger.info(f"Writing package {self.core.id} {self.core.version} to {output_path}")
        writer = self._create_archive(output_path)
        try:
            with writer:
                entries = EntrySet()
                for source, target in self.optional.files:
                    self._add_mapping(writer, entries, exclusions, source, target)

                for path, payload in metadata:
                    self._add_entry(writer, entries, ArchiveEntry.from_bytes(path, payload))

                content_types = serialize_document(build_content_types(entries))
                writer.add_stream(CONTENT_TYPES_PATH, content_types)
                entries.register(CONTENT_TYPES_PATH)
        except Exception as e:
            logger.error(f"Failed to write package {self.core.id}: {e}")
            self._discard(output_path)
            raise

        logger.info(f"Wrote {writer.entry_count} entries to {output_path}")
        return output_path

    def _create_archive(self, output_path: str) -> ArchiveWriter:
        try:
            if os.path.isfile(output_path):
                os.remove(output_path)
            return ArchiveWriter(output_path, self.config)
        except OSError as e:
            raise OutputPathError(output_path, str(e)) from e

    @staticmethod
    def _discard(output_path: str) -> None:
        try:
            os.remove(output_path)
        except FileNotFoundError:
            pass

    def _add_entry(self, writer: ArchiveWriter, entries: EntrySet, entry: ArchiveEntry) -> None:
        if entry.path == CONTENT_TYPES_PATH:
            logger.debug(f"Skipping {entry.path}: reserved for the generated content types")
            return
        if not entries.register(entry.path):
            logger.debug(f"Skipping duplicate archive entry {entry.path}")
            return
        if entry.is_file:
            writer.add_file(entry.path, entry.source_path)
        else:
            writer.add_stream(entry.path, entry.data())

    def _add_mapping(
        self,
        writer: ArchiveWriter,
        entries: EntrySet,
        exclusions: ExclusionMatcher,
        source: str,
        target: str,
    ) -> None:
        target_prefix = ensure_valid_target_name(target)
        source_path = os.path.abspath(os.path.join(self.working_dir, source))

        if os.path.isdir(source_path):
            self._add_directory(writer, entries, exclusions, source_path, target_prefix, frozenset())
        elif os.path.isfile(source_path):
            if exclusions.is_excluded(source_path):
                return
            path = target_prefix + ensure_valid_name(os.path.basename(source_path))
            self._add_entry(writer, entries, ArchiveEntry.from_file(path, source_path))
        else:
            raise SourceNotFoundError(source_path)

    def _add_directory(
        self,
        writer: ArchiveWriter,
        entries: EntrySet,
        exclusions: ExclusionMatcher,
        source_dir: str,
        target_prefix: str,
        ancestors: FrozenSet[str],
    ) -> None:
        if exclusions.is_excluded(source_dir):
            return

        real_dir = os.path.realpath(source_dir)
        if real_dir in ancestors:
            logger.warning(f"Skipping {source_dir}: links back to {real_dir}")
            return
        ancestors = ancestors | {real_dir}

        with os.scandir(source_dir) as it:
            children = sorted(it, key=lambda child: child.name)

        for child in children:
            if child.is_file() and not exclusions.is_excluded(child.path):
                path = target_prefix + ensure_valid_name(child.name)
                self._add_entry(writer, entries, ArchiveEntry.from_file(path, os.path.abspath(child.path)))

        for child in children:
            if child.is_dir():
                sub_prefix = target_prefix + ensure_valid_name(child.name) + "/"
                self._add_directory(writer, entries, exclusions, child.path, sub_prefix, ancestors)


def write_package(
    core: CoreInfo,
    optional: OptionalInfo,
    working_dir: str,
    output_dir: str,
    config: Optional[WriterConfig] = None,
) -> str:
    """Write a package archive into ``output_dir`` and return its path.

    Source paths and exclusion patterns are resolved against ``working_dir``.
    """
    return ArchiveAssembler(core, optional, working_dir, output_dir, config).write()
