"""Generator configuration models."""

from datetime import datetime, timedelta, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .subject import Subject

DEFAULT_KEY_SIZE = 2048
DEFAULT_SELF_SIGN_VALID_DAYS = 366

# Latest not-after time an X.509 GeneralizedTime can carry
MAX_NOT_AFTER = datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


class KeyEncoding(str, Enum):
    """Private key encodings."""

    PKCS1 = "pkcs1"
    PKCS8 = "pkcs8"

    @property
    def pem_label(self) -> str:
        """PEM block label used for this encoding."""
        if self is KeyEncoding.PKCS1:
            return "RSA PRIVATE KEY"
        return "PRIVATE KEY"


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        v = str(v or "INFO").upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @field_validator("file", mode="before")
    @classmethod
    def empty_file_disables(cls, v):
        return v or None


class GeneratorConfig(BaseModel):
    """Resolved configuration of a single generator run."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "key_size": 2048,
                "subject": {"organization": ["ACME Corp"], "common_name": "dev.example.com"},
                "dns_names": ["dev.example.com", "localhost"],
                "key_encoding": "pkcs8",
                "self_sign_valid_days": 366,
                "key_path": "/tmp/cert-key.pem",
            }
        },
    )

    key_size: int = Field(DEFAULT_KEY_SIZE, gt=0)
    subject: Subject = Field(default_factory=Subject)
    dns_names: List[str] = Field(default_factory=list)
    key_encoding: KeyEncoding = KeyEncoding.PKCS8
    self_sign_valid_days: int = Field(DEFAULT_SELF_SIGN_VALID_DAYS, gt=0)
    key_path: Path
    req_path: Optional[Path] = None  # None disables CSR generation
    self_sign_path: Optional[Path] = None  # None disables self-signed certificate
    overwrite: bool = False
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("dns_names", mode="before")
    @classmethod
    def strip_dns_names(cls, v):
        """Trim DNS names and drop empty ones, keeping order."""
        if v is None:
            return []
        return [name.strip() for name in v if name and name.strip()]

    @field_validator("self_sign_valid_days")
    @classmethod
    def check_not_after_representable(cls, v):
        """Reject validity periods ending after the last encodable not-after time."""
        max_days = (MAX_NOT_AFTER - datetime.now(timezone.utc)).days
        if v > max_days:
            raise ValueError(f"Validity of {v} days ends after {MAX_NOT_AFTER.year}; at most {max_days} days allowed")
        return v

    @property
    def self_sign_valid_duration(self) -> timedelta:
        """Validity period of the self-signed certificate."""
        return timedelta(hours=24 * self.self_sign_valid_days)


class GenerationResult(BaseModel):
    """Artifacts written by a generator run."""

    key_path: Path
    req_path: Optional[Path] = None
    self_sign_path: Optional[Path] = None
    fingerprint_sha256: Optional[str] = None
