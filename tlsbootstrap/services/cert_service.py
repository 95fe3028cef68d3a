"""Self-signed certificate generation service."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import ExtendedKeyUsageOID

from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.models.subject import Subject
from tlsbootstrap.services.x509_names import build_name, build_san
from tlsbootstrap.utils.file_utils import FileUtils

logger = logging.getLogger("tlsbootstrap")

CERTIFICATE_PEM_LABEL = "CERTIFICATE"

SELF_SIGNED_KEY_USAGE = x509.KeyUsage(
    digital_signature=True,
    content_commitment=False,
    key_encipherment=True,
    data_encipherment=False,
    key_agreement=False,
    key_cert_sign=True,
    crl_sign=False,
    encipher_only=False,
    decipher_only=False,
)


class CertificateService:
    """Service for building self-signed certificates."""

    @staticmethod
    def build_self_signed_certificate(
        subject: Subject,
        dns_names: List[str],
        valid_duration: timedelta,
        private_key: rsa.RSAPrivateKey,
        now: Optional[datetime] = None,
    ) -> x509.Certificate:
        """
        Build a certificate whose issuer is its own subject.

        Args:
            subject: Subject (and issuer) DN
            dns_names: DNS names listed as subject alternative names
            valid_duration: Time between not-before and not-after
            private_key: Key certified by, and signing, the certificate
            now: Generation time (default: current UTC time)

        Returns:
            Signed certificate

        Raises:
            GenerationError: If the certificate cannot be built
        """
        if now is None:
            now = datetime.now(timezone.utc)

        try:
            name = build_name(subject)
            builder = (
                x509.CertificateBuilder()
                .subject_name(name)
                .issuer_name(name)
                .public_key(private_key.public_key())
                .serial_number(x509.random_serial_number())
                .not_valid_before(now)
                .not_valid_after(now + valid_duration)
                .add_extension(SELF_SIGNED_KEY_USAGE, critical=True)
                .add_extension(x509.ExtendedKeyUsage([ExtendedKeyUsageOID.SERVER_AUTH]), critical=False)
            )
            if dns_names:
                builder = builder.add_extension(build_san(dns_names), critical=False)
            return builder.sign(private_key, hashes.SHA256())
        except (ValueError, TypeError, OverflowError) as e:
            logger.error(f"Cannot generate self-signed certificate: {e}")
            raise GenerationError(
                ErrorKind.CERTIFICATE_CONSTRUCTION, f"Cannot generate self-signed certificate: {e}"
            ) from e

    @classmethod
    def create_self_signed_certificate(
        cls,
        cert_path: Path,
        subject: Subject,
        dns_names: List[str],
        valid_duration: timedelta,
        private_key: rsa.RSAPrivateKey,
    ) -> x509.Certificate:
        """
        Build a self-signed certificate and write it as a PEM file.

        Args:
            cert_path: Destination file
            subject: Subject (and issuer) DN
            dns_names: DNS names listed as subject alternative names
            valid_duration: Validity period
            private_key: Key certified by, and signing, the certificate

        Returns:
            Signed certificate
        """
        cert = cls.build_self_signed_certificate(subject, dns_names, valid_duration, private_key)
        FileUtils.write_pem_file(cert_path, CERTIFICATE_PEM_LABEL, cert.public_bytes(serialization.Encoding.DER))
        return cert
