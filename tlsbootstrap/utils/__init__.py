"""Utility modules."""

from .file_utils import FileUtils
from .pem import decode_pem, encode_pem
from .validators import validate_common_name, validate_country_code, validate_domain

__all__ = [
    "FileUtils",
    "encode_pem",
    "decode_pem",
    "validate_common_name",
    "validate_country_code",
    "validate_domain",
]
