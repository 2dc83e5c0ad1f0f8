"""Configuration for the nupkg builder."""

from .base import (
    ConfigValidationResult,
    Configuration,
    ConfigurationError,
    SerializationError,
    ValidationError,
)
from .writer import WriterConfig

__all__ = [
    "Configuration",
    "ConfigValidationResult",
    "ConfigurationError",
    "ValidationError",
    "SerializationError",
    "WriterConfig",
]
