"""Constants used throughout the nupkg builder."""

# ============================================================================
# Fixed archive paths
# ============================================================================

MANIFEST_RELATIONSHIP_ID = "nuspec"
CORE_PROPERTIES_RELATIONSHIP_ID = "coreProp"

CONTENT_TYPES_PATH = "[Content_Types].xml"
CORE_PROPERTIES_PATH = f"package/services/metadata/core-properties/{CORE_PROPERTIES_RELATIONSHIP_ID}.psmdcp"
RELATIONSHIPS_PATH = "_rels/.rels"

# ============================================================================
# XML namespaces
# ============================================================================

NUSPEC_NAMESPACE = "http://schemas.microsoft.com/packaging/2011/10/nuspec.xsd"
CONTENT_TYPES_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/content-types"
RELATIONSHIPS_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/relationships"
CORE_PROPERTIES_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
DCTERMS_NAMESPACE = "http://purl.org/dc/terms/"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

MANIFEST_RELATIONSHIP_TYPE = "http://schemas.microsoft.com/packaging/2010/07/manifest"
CORE_PROPERTIES_RELATIONSHIP_TYPE = (
    "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
)

# ============================================================================
# Content types
# ============================================================================

KNOWN_CONTENT_TYPES = {
    "rels": "application/vnd.openxmlformats-package.relationships+xml",
    "psmdcp": "application/vnd.openxmlformats-package.core-properties+xml",
}
DEFAULT_CONTENT_TYPE = "application/octet"

# Marker written to the core-properties lastModifiedBy element
DEFAULT_LAST_MODIFIED_BY = "nupkg-builder"
