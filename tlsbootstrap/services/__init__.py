"""Service layer for key and certificate generation."""

from .cert_service import CertificateService
from .config_service import ConfigResolver
from .csr_service import CSRService
from .generator_service import GeneratorService
from .key_service import KeyService
from .parser_service import CertificateParser

__all__ = [
    "ConfigResolver",
    "KeyService",
    "CSRService",
    "CertificateService",
    "CertificateParser",
    "GeneratorService",
]
