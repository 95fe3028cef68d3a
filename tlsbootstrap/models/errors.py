"""Error types raised by the generation pipeline."""

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    """Failure kinds a pipeline stage can report."""

    # Input and filesystem validation
    MISSING_INPUT = "missing required input"
    INVALID_INPUT = "invalid input"
    OUTPUT_EXISTS = "output already exists"
    PATH_CHECK = "path check error"

    # Cryptographic operations
    KEY_GENERATION = "key generation failed"
    KEY_ENCODING = "key encoding failed"
    REQUEST_CONSTRUCTION = "request construction failed"
    CERTIFICATE_CONSTRUCTION = "certificate construction failed"

    # PEM output
    OPEN_DESTINATION = "cannot open destination"
    ENCODE_BLOCK = "cannot encode block"
    FILE_WRITE = "file write failed"


class GenerationError(ValueError):
    """
    Raised when a pipeline stage fails.

    Attributes:
        kind: Failure kind
        path: Output path the failure relates to, if any
    """

    def __init__(self, kind: ErrorKind, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.kind = kind
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{self.kind.value}: {message} [{self.path}]"
        return f"{self.kind.value}: {message}"
