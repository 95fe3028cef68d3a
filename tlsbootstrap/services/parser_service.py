"""Parsing and inspection of generated artifacts."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from tlsbootstrap.utils.file_utils import FileUtils

logger = logging.getLogger("tlsbootstrap")


class CertificateParser:
    """Service for loading and inspecting PEM artifacts."""

    @staticmethod
    def load_private_key(key_path: Path) -> rsa.RSAPrivateKey:
        """
        Load an unencrypted PEM private key (PKCS#1 or PKCS#8).

        Args:
            key_path: Path to key file

        Returns:
            Private key object

        Raises:
            FileNotFoundError: If key file not found
            ValueError: If key cannot be parsed
        """
        if not key_path.exists():
            raise FileNotFoundError(f"Private key not found: {key_path}")
        return serialization.load_pem_private_key(FileUtils.read_binary_file(key_path), password=None)

    @staticmethod
    def load_csr(csr_path: Path) -> x509.CertificateSigningRequest:
        """Load a PEM certificate request."""
        if not csr_path.exists():
            raise FileNotFoundError(f"CSR not found: {csr_path}")
        return x509.load_pem_x509_csr(FileUtils.read_binary_file(csr_path))

    @staticmethod
    def load_certificate(cert_path: Path) -> x509.Certificate:
        """Load a PEM certificate."""
        if not cert_path.exists():
            raise FileNotFoundError(f"Certificate not found: {cert_path}")
        return x509.load_pem_x509_certificate(FileUtils.read_binary_file(cert_path))

    @staticmethod
    def extract_subject(name: x509.Name) -> Dict[str, Union[str, List[str], None]]:
        """
        Extract Subject/Issuer DN.

        Args:
            name: X.509 Name object

        Returns:
            Dictionary with all values of each multi-valued field and the common name
        """

        def get_values(oid) -> List[str]:
            return [attr.value for attr in name.get_attributes_for_oid(oid)]

        common_names = get_values(x509.NameOID.COMMON_NAME)
        return {
            "common_name": common_names[0] if common_names else None,
            "organization": get_values(x509.NameOID.ORGANIZATION_NAME),
            "organizational_unit": get_values(x509.NameOID.ORGANIZATIONAL_UNIT_NAME),
            "country": get_values(x509.NameOID.COUNTRY_NAME),
            "province": get_values(x509.NameOID.STATE_OR_PROVINCE_NAME),
            "locality": get_values(x509.NameOID.LOCALITY_NAME),
        }

    @staticmethod
    def extract_sans(obj: Union[x509.Certificate, x509.CertificateSigningRequest]) -> List[str]:
        """
        Extract DNS subject alternative names from a certificate or request.

        Args:
            obj: Certificate or certificate request

        Returns:
            List of DNS names (empty if the extension is absent)
        """
        try:
            san_ext = obj.extensions.get_extension_for_oid(x509.ExtensionOID.SUBJECT_ALTERNATIVE_NAME)
        except x509.ExtensionNotFound:
            return []
        return san_ext.value.get_values_for_type(x509.DNSName)

    @staticmethod
    def fingerprint_sha256(cert: x509.Certificate) -> str:
        """Return the SHA-256 fingerprint as colon-separated uppercase hex."""
        return cert.fingerprint(hashes.SHA256()).hex(":").upper()

    @staticmethod
    def verify_key_pair(cert_path: Path, key_path: Path) -> bool:
        """
        Verify that a certificate's public key matches a private key.

        Args:
            cert_path: Path to certificate file
            key_path: Path to private key file

        Returns:
            True if the key pair matches, False otherwise
        """
        try:
            cert = CertificateParser.load_certificate(cert_path)
            private_key = CertificateParser.load_private_key(key_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error verifying key pair: {e}")
            return False

        pub_from_private_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM, format=serialization.PublicFormat.SubjectPublicKeyInfo
        )
        pub_from_cert_bytes = cert.public_key().public_bytes(
            encoding=serialization.Encoding.PEM, format=serialization.PublicFormat.SubjectPublicKeyInfo
        )
        return pub_from_private_bytes == pub_from_cert_bytes

    @staticmethod
    def describe_certificate(cert: x509.Certificate) -> Dict[str, Optional[object]]:
        """
        Summarize a certificate for logging.

        Args:
            cert: Certificate object

        Returns:
            Dictionary with subject, issuer, validity window, serial and fingerprint
        """
        return {
            "subject": cert.subject.rfc4514_string(),
            "issuer": cert.issuer.rfc4514_string(),
            "not_before": cert.not_valid_before_utc,
            "not_after": cert.not_valid_after_utc,
            "serial_number": format(cert.serial_number, "X"),
            "fingerprint_sha256": CertificateParser.fingerprint_sha256(cert),
            "sans": CertificateParser.extract_sans(cert),
        }
