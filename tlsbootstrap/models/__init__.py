"""Data models for tlsbootstrap."""

from .config import GenerationResult, GeneratorConfig, KeyEncoding, LoggingSettings
from .errors import ErrorKind, GenerationError
from .subject import Subject

__all__ = [
    "KeyEncoding",
    "Subject",
    "LoggingSettings",
    "GeneratorConfig",
    "GenerationResult",
    "ErrorKind",
    "GenerationError",
]
