"""Configuration base class and validation result.

``WriterConfig`` implements ``Configuration``; validation collects every
problem into a ``ConfigValidationResult`` before ``validate_or_raise`` turns
them into a single ``ValidationError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from dataclasses import dataclass, field


class ConfigurationError(Exception):
    """Base exception for writer configuration errors."""

    pass


class ValidationError(ConfigurationError):
    """An unknown compression method, a negative timestamp or a blank marker."""

    pass


class SerializationError(ConfigurationError):
    """A configuration dictionary with the wrong shape or value types."""

    pass


@dataclass
class ConfigValidationResult:
    """Outcome of ``Configuration.validate``.

    Attributes:
        success: True until the first error is added
        errors: Messages for every failed check, in check order
    """

    success: bool = True
    errors: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        return cls()


class Configuration(ABC):
    """Validated, dictionary-serializable settings."""

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        """Check every setting and return all failures at once."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        """Create an instance from ``to_dict`` output.

        Raises:
            SerializationError: If data has the wrong shape or types
        """

    def validate_or_raise(self) -> None:
        """Raise ValidationError listing every failed check.

        Raises:
            ValidationError: If configuration validation fails
        """
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise ValidationError(error_msg)
