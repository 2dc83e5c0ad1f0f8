"""Archive writer configuration.

This module provides WriterConfig, which controls how entries are stored in
the package archive:

- Compression method ("deflate" or "store")
- Optional fixed timestamp for reproducible archives (SOURCE_DATE_EPOCH)
- The tool marker written to the core-properties lastModifiedBy element

Values resolve with explicit parameter > environment variable > default.
"""

from __future__ import annotations

import os
import zipfile
from typing import Any, Dict, Optional

from ..constants import DEFAULT_LAST_MODIFIED_BY
from .base import Configuration, ConfigValidationResult, SerializationError, ValidationError

COMPRESSION_METHODS = {
    "deflate": zipfile.ZIP_DEFLATED,
    "store": zipfile.ZIP_STORED,
}
DEFAULT_COMPRESSION = "deflate"


class WriterConfig(Configuration):
    """Configuration for writing package archives.

    Example usage:
        # Direct instantiation
        config = WriterConfig(compression="store")

        # From environment variables
        config = WriterConfig.from_environment()

        # From dictionary
        config = WriterConfig.from_dict({"source_date_epoch": 315532800})
    """

    def __init__(
        self,
        compression: str = DEFAULT_COMPRESSION,
        source_date_epoch: Optional[int] = None,
        last_modified_by: str = DEFAULT_LAST_MODIFIED_BY,
    ):
        """Initialize WriterConfig.

        Args:
            compression: Compression method name, "deflate" or "store"
            source_date_epoch: Fixed entry timestamp in seconds since the epoch;
                None uses the current time for generated entries and the file
                modification time for payload files
            last_modified_by: Tool marker for the core-properties document
        """
        self.compression = compression
        self.source_date_epoch = source_date_epoch
        self.last_modified_by = last_modified_by

    @property
    def compress_type(self) -> int:
        """zipfile compression constant for the configured method."""
        self.validate_or_raise()
        return COMPRESSION_METHODS[self.compression]

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()

        if self.compression not in COMPRESSION_METHODS:
            result.add_error(
                f"Unknown compression method '{self.compression}' "
                f"(expected one of: {', '.join(sorted(COMPRESSION_METHODS))})"
            )

        if self.source_date_epoch is not None and self.source_date_epoch < 0:
            result.add_error("source_date_epoch cannot be negative")

        if not self.last_modified_by or not self.last_modified_by.strip():
            result.add_error("last_modified_by cannot be empty")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compression": self.compression,
            "source_date_epoch": self.source_date_epoch,
            "last_modified_by": self.last_modified_by,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> WriterConfig:
        if not isinstance(data, dict):
            raise SerializationError(f"Expected dictionary, got {type(data).__name__}")

        epoch = data.get("source_date_epoch")
        if epoch is not None and not isinstance(epoch, int):
            raise SerializationError("source_date_epoch must be an integer or null")

        config = cls(
            compression=data.get("compression", DEFAULT_COMPRESSION),
            source_date_epoch=epoch,
            last_modified_by=data.get("last_modified_by", DEFAULT_LAST_MODIFIED_BY),
        )
        config.validate_or_raise()
        return config

    @classmethod
    def from_environment(
        cls,
        compression: Optional[str] = None,
        source_date_epoch: Optional[int] = None,
        last_modified_by: Optional[str] = None,
    ) -> WriterConfig:
        """Load configuration from environment variables.

        Reads NUPKG_COMPRESSION, SOURCE_DATE_EPOCH and NUPKG_LAST_MODIFIED_BY.
        Explicit arguments take precedence over the environment.

        Raises:
            ValidationError: If SOURCE_DATE_EPOCH is not an integer
        """
        if compression is None:
            compression = os.getenv("NUPKG_COMPRESSION", "").strip().lower() or DEFAULT_COMPRESSION

        if source_date_epoch is None:
            raw_epoch = os.getenv("SOURCE_DATE_EPOCH", "").strip()
            if raw_epoch:
                try:
                    source_date_epoch = int(raw_epoch)
                except ValueError as e:
                    raise ValidationError(f"SOURCE_DATE_EPOCH must be an integer, got '{raw_epoch}'") from e

        if last_modified_by is None:
            last_modified_by = os.getenv("NUPKG_LAST_MODIFIED_BY", "").strip() or DEFAULT_LAST_MODIFIED_BY

        return cls(
            compression=compression,
            source_date_epoch=source_date_epoch,
            last_modified_by=last_modified_by,
        )

    def __repr__(self) -> str:
        return (
            f"WriterConfig(compression={self.compression!r}, "
            f"source_date_epoch={self.source_date_epoch!r}, "
            f"last_modified_by={self.last_modified_by!r})"
        )
