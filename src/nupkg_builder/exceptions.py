"""Shared exception types for the nupkg builder.

Every failure raised while assembling a package archive derives from
``NupkgError``. Each exception carries an ``error_code`` and a ``context``
dictionary so callers can report which package or path caused the failure.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class NupkgError(RuntimeError):
    """Base exception for package archive errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "nupkg_error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}


class FatalConfigurationError(NupkgError):
    """Exception raised when the package inputs cannot produce an archive.

    These failures are deterministic for a given set of inputs; retrying
    without changing the inputs will fail the same way.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "FATAL_CONFIGURATION",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code=error_code, context=context)


class MissingVersionError(FatalConfigurationError):
    """No version was supplied for the package being written."""

    def __init__(self, package: str) -> None:
        super().__init__(
            f"No version was given for {package}",
            error_code="MISSING_VERSION",
            context={"package": package},
        )


class SourceNotFoundError(FatalConfigurationError):
    """A declared file mapping points at neither a file nor a directory."""

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Could not find source file {source}",
            error_code="SOURCE_NOT_FOUND",
            context={"source": source},
        )


class InvalidPathError(FatalConfigurationError):
    """A path (usually an exclusion pattern) is blank."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, error_code="INVALID_PATH", context={"path": path})


class InvalidXmlCharacterError(FatalConfigurationError):
    """A metadata value holds a character that XML 1.0 does not allow."""

    def __init__(self, package: str, field: str) -> None:
        super().__init__(
            f"Package {package} has a character not allowed in XML in {field}",
            error_code="INVALID_XML_CHARACTER",
            context={"package": package, "field": field},
        )


class OutputPathError(NupkgError):
    """The output archive could not be (re)created."""

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Could not create package archive at {output_path}: {reason}",
            error_code="OUTPUT_PATH",
            context={"output_path": output_path},
        )
