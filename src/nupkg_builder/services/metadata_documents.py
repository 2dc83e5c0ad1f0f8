"""Metadata documents written into every package archive.

Each builder is a pure function returning an immutable ``XmlNode`` tree:

- manifest (nuspec): package identity, descriptive fields and dependencies
- core properties: the OPC core-properties part
- relationships: links from the package root to the two parts above
- content types: default content type per extension found in the archive

``serialize_document`` turns any of them into UTF-8 bytes.
Values holding characters XML 1.0 cannot carry are rejected while building.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple
import re
import xml.etree.ElementTree as ET

from ..constants import (
    CONTENT_TYPES_NAMESPACE,
    CORE_PROPERTIES_NAMESPACE,
    CORE_PROPERTIES_PATH,
    CORE_PROPERTIES_RELATIONSHIP_ID,
    CORE_PROPERTIES_RELATIONSHIP_TYPE,
    DC_NAMESPACE,
    DCTERMS_NAMESPACE,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LAST_MODIFIED_BY,
    KNOWN_CONTENT_TYPES,
    MANIFEST_RELATIONSHIP_ID,
    MANIFEST_RELATIONSHIP_TYPE,
    NUSPEC_NAMESPACE,
    RELATIONSHIPS_NAMESPACE,
    RELATIONSHIPS_PATH,
    XSI_NAMESPACE,
)
from ..domain import CoreInfo, OptionalInfo, XmlNode, element
from ..exceptions import InvalidXmlCharacterError, MissingVersionError

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8" standalone="yes"?>'

# Anything outside the XML 1.0 Char production
INVALID_XML_CHARACTER = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def serialize_document(node: XmlNode) -> bytes:
    """Serialize ``node`` as an indented UTF-8 XML document with declaration."""
    root = node.to_element()
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}".encode("utf-8")


def _values(node: XmlNode) -> Iterator[Tuple[str, str]]:
    for name, value in node.attributes:
        yield f"{node.tag}/@{name}", value
    if node.text is not None:
        yield node.tag, node.text
    for child in node.children:
        yield from _values(child)


def ensure_well_formed(node: XmlNode, package: str) -> XmlNode:
    """Return ``node`` unchanged if every text and attribute value is legal XML.

    Raises:
        InvalidXmlCharacterError: Naming the first offending element or attribute
    """
    for field, value in _values(node):
        if INVALID_XML_CHARACTER.search(value):
            raise InvalidXmlCharacterError(package, field)
    return node


def _require_version(core: CoreInfo) -> str:
    if core.version is None:
        raise MissingVersionError(core.id)
    return str(core.version)


def _optional_element(tag: str, value: Optional[str]) -> Tuple[XmlNode, ...]:
    return (element(tag, text=value),) if value is not None else ()


def _flag_element(tag: str, value: bool) -> Tuple[XmlNode, ...]:
    return (element(tag, text="true"),) if value else ()


def _list_element(tag: str, values: Tuple[str, ...], separator: str) -> Tuple[XmlNode, ...]:
    return (element(tag, text=separator.join(values)),) if values else ()


def _references(optional: OptionalInfo) -> Tuple[XmlNode, ...]:
    if not optional.references:
        return ()
    return (element("references", *(element("reference", file=name) for name in optional.references)),)


def _framework_assemblies(optional: OptionalInfo) -> Tuple[XmlNode, ...]:
    if not optional.framework_assembly_references:
        return ()
    return (
        element(
            "frameworkAssemblies",
            *(element("frameworkAssembly", assemblyName=name) for name in optional.framework_assembly_references),
        ),
    )


def _dependencies(optional: OptionalInfo) -> Tuple[XmlNode, ...]:
    # The block is kept even when every dependency is excluded
    if not optional.dependencies:
        return ()
    return (
        element(
            "dependencies",
            *(
                element("dependency", id=dep.id, version=dep.formatted_version)
                for dep in optional.included_dependencies
            ),
        ),
    )


def build_manifest(core: CoreInfo, optional: OptionalInfo) -> XmlNode:
    """Build the nuspec manifest document.

    Raises:
        MissingVersionError: If ``core.version`` is None
    """
    version = _require_version(core)
    metadata = element(
        "metadata",
        element("id", text=core.id),
        element("version", text=version),
        *_optional_element("title", optional.title),
        element("authors", text=", ".join(core.authors)),
        *_list_element("owners", optional.owners, ", "),
        *_optional_element("licenseUrl", optional.license_url),
        *_optional_element("projectUrl", optional.project_url),
        *_optional_element("iconUrl", optional.icon_url),
        *_flag_element("requireLicenseAcceptance", optional.require_license_acceptance),
        element("description", text=core.description),
        *_optional_element("summary", optional.summary),
        *_optional_element("releaseNotes", optional.release_notes),
        *_optional_element("copyright", optional.copyright),
        *_optional_element("language", optional.language),
        *_list_element("tags", optional.tags, " "),
        *_flag_element("developmentDependency", optional.development_dependency),
        *_references(optional),
        *_framework_assemblies(optional),
        *_dependencies(optional),
    )
    manifest = XmlNode(tag="package", attributes=(("xmlns", NUSPEC_NAMESPACE),), children=(metadata,))
    return ensure_well_formed(manifest, core.id)


def build_core_properties(core: CoreInfo, last_modified_by: str = DEFAULT_LAST_MODIFIED_BY) -> XmlNode:
    """Build the OPC core-properties document."""
    version = _require_version(core)
    properties = XmlNode(
        tag="coreProperties",
        attributes=(
            ("xmlns", CORE_PROPERTIES_NAMESPACE),
            ("xmlns:dc", DC_NAMESPACE),
            ("xmlns:dcterms", DCTERMS_NAMESPACE),
            ("xmlns:xsi", XSI_NAMESPACE),
        ),
        children=(
            element("dc:creator", text=", ".join(core.authors)),
            element("dc:description", text=core.description),
            element("dc:identifier", text=core.id),
            element("version", text=version),
            element("keywords"),
            element("dc:title", text=core.id),
            element("lastModifiedBy", text=last_modified_by),
        ),
    )
    return ensure_well_formed(properties, core.id)


def build_relationships(core: CoreInfo) -> XmlNode:
    """Build the package-level relationships document."""
    relationships = XmlNode(
        tag="Relationships",
        attributes=(("xmlns", RELATIONSHIPS_NAMESPACE),),
        children=(
            element(
                "Relationship",
                Type=MANIFEST_RELATIONSHIP_TYPE,
                Target=f"/{core.manifest_file_name}",
                Id=MANIFEST_RELATIONSHIP_ID,
            ),
            element(
                "Relationship",
                Type=CORE_PROPERTIES_RELATIONSHIP_TYPE,
                Target=f"/{CORE_PROPERTIES_PATH}",
                Id=CORE_PROPERTIES_RELATIONSHIP_ID,
            ),
        ),
    )
    return ensure_well_formed(relationships, core.id)


def extension_of(path: str) -> str:
    """Lower-cased extension of the last segment of ``path``, without the dot.

    A name that starts with a dot (``.rels``) is all extension; a name without
    a dot, or ending in one, has none.
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    index = name.rfind(".")
    if index < 0 or index == len(name) - 1:
        return ""
    return name[index + 1 :].lower()


def content_type_for(extension: str) -> str:
    return KNOWN_CONTENT_TYPES.get(extension.lower(), DEFAULT_CONTENT_TYPE)


def content_type_table(paths: Iterable[str]) -> List[Tuple[str, str]]:
    """Distinct (extension, content type) rows in first-seen order."""
    seen = {}
    for path in paths:
        extension = extension_of(path)
        if extension and extension not in seen:
            seen[extension] = content_type_for(extension)
    return list(seen.items())


def build_content_types(paths: Iterable[str]) -> XmlNode:
    """Build the content-types document for the archive paths written."""
    return XmlNode(
        tag="Types",
        attributes=(("xmlns", CONTENT_TYPES_NAMESPACE),),
        children=tuple(
            element("Default", Extension=extension, ContentType=content_type)
            for extension, content_type in content_type_table(paths)
        ),
    )


def build_package_metadata(
    core: CoreInfo,
    optional: OptionalInfo,
    last_modified_by: str = DEFAULT_LAST_MODIFIED_BY,
) -> List[Tuple[str, bytes]]:
    """Serialize manifest, core properties and relationships with their archive paths.

    Raises:
        MissingVersionError: If ``core.version`` is None
    """
    return [
        (core.manifest_file_name, serialize_document(build_manifest(core, optional))),
        (CORE_PROPERTIES_PATH, serialize_document(build_core_properties(core, last_modified_by))),
        (RELATIONSHIPS_PATH, serialize_document(build_relationships(core))),
    ]
