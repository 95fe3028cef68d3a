"""CSR (Certificate Signing Request) generation service."""

import logging
from pathlib import Path
from typing import List

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.models.subject import Subject
from tlsbootstrap.services.x509_names import build_name, build_san
from tlsbootstrap.utils.file_utils import FileUtils

logger = logging.getLogger("tlsbootstrap")

CSR_PEM_LABEL = "CERTIFICATE REQUEST"


class CSRService:
    """Service for building PKCS#10 certificate requests."""

    @staticmethod
    def build_csr(
        subject: Subject, dns_names: List[str], private_key: rsa.RSAPrivateKey
    ) -> x509.CertificateSigningRequest:
        """
        Build a certificate request signed by the given key.

        Args:
            subject: Subject DN of the request
            dns_names: DNS names requested as subject alternative names
            private_key: Key that signs the request

        Returns:
            Signed certificate request

        Raises:
            GenerationError: If the request cannot be built
        """
        try:
            builder = x509.CertificateSigningRequestBuilder().subject_name(build_name(subject))
            if dns_names:
                builder = builder.add_extension(build_san(dns_names), critical=False)
            return builder.sign(private_key, hashes.SHA256())
        except (ValueError, TypeError) as e:
            logger.error(f"Cannot generate certificate request: {e}")
            raise GenerationError(ErrorKind.REQUEST_CONSTRUCTION, f"Cannot generate certificate request: {e}") from e

    @classmethod
    def create_csr(
        cls, req_path: Path, subject: Subject, dns_names: List[str], private_key: rsa.RSAPrivateKey
    ) -> x509.CertificateSigningRequest:
        """
        Build a certificate request and write it as a PEM file.

        Args:
            req_path: Destination file
            subject: Subject DN of the request
            dns_names: DNS names requested as subject alternative names
            private_key: Key that signs the request

        Returns:
            Signed certificate request
        """
        csr = cls.build_csr(subject, dns_names, private_key)
        FileUtils.write_pem_file(req_path, CSR_PEM_LABEL, csr.public_bytes(serialization.Encoding.DER))
        return csr
