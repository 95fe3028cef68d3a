"""RSA private key generation service."""

import logging
from pathlib import Path
from typing import Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from tlsbootstrap.models.config import KeyEncoding
from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.utils.file_utils import FileUtils

logger = logging.getLogger("tlsbootstrap")

PUBLIC_EXPONENT = 65537
MIN_KEY_SIZE = 1024
KEY_FILE_MODE = 0o600


class KeyService:
    """Service for RSA private key operations."""

    @staticmethod
    def generate_private_key(key_size: int) -> rsa.RSAPrivateKey:
        """
        Generate a new RSA private key.

        Args:
            key_size: Modulus size in bits

        Returns:
            Generated private key

        Raises:
            GenerationError: If the size is too small or generation fails
        """
        if key_size < MIN_KEY_SIZE:
            logger.error(f"Cannot generate private key: key size {key_size} is below {MIN_KEY_SIZE} bits")
            raise GenerationError(ErrorKind.KEY_GENERATION, f"Key size must be at least {MIN_KEY_SIZE} bits")

        try:
            return rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=key_size)
        except (ValueError, TypeError) as e:
            logger.error(f"Cannot generate private key: {e}")
            raise GenerationError(ErrorKind.KEY_GENERATION, f"Cannot generate private key: {e}") from e

    @staticmethod
    def encode_private_key(private_key: rsa.RSAPrivateKey, encoding: KeyEncoding) -> Tuple[str, bytes]:
        """
        Serialize a private key to unencrypted DER.

        Args:
            private_key: Key to serialize
            encoding: PKCS#1 (legacy) or PKCS#8 (generic)

        Returns:
            Tuple of (PEM label, DER bytes)

        Raises:
            GenerationError: If serialization fails
        """
        if encoding is KeyEncoding.PKCS1:
            private_format = serialization.PrivateFormat.TraditionalOpenSSL
        else:
            private_format = serialization.PrivateFormat.PKCS8

        try:
            der = private_key.private_bytes(
                encoding=serialization.Encoding.DER,
                format=private_format,
                encryption_algorithm=serialization.NoEncryption(),
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Cannot marshal private key into {encoding.value} DER form: {e}")
            raise GenerationError(ErrorKind.KEY_ENCODING, f"Cannot encode private key: {e}") from e

        return encoding.pem_label, der

    @classmethod
    def create_private_key(cls, key_path: Path, key_size: int, encoding: KeyEncoding) -> rsa.RSAPrivateKey:
        """
        Generate a private key and write it as a single PEM block.

        Args:
            key_path: Destination file
            key_size: Modulus size in bits
            encoding: Private key encoding

        Returns:
            Generated private key
        """
        private_key = cls.generate_private_key(key_size)
        label, der = cls.encode_private_key(private_key, encoding)
        FileUtils.write_pem_file(key_path, label, der, mode=KEY_FILE_MODE)
        return private_key
