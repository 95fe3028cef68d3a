"""Key and certificate generation pipeline."""

import logging

from tlsbootstrap.models.config import GenerationResult, GeneratorConfig
from tlsbootstrap.services.cert_service import CertificateService
from tlsbootstrap.services.csr_service import CSRService
from tlsbootstrap.services.key_service import KeyService
from tlsbootstrap.services.parser_service import CertificateParser

logger = logging.getLogger("tlsbootstrap")


class GeneratorService:
    """Runs key, request and self-signed certificate generation in order."""

    def run(self, config: GeneratorConfig) -> GenerationResult:
        """
        Generate all configured artifacts.

        The private key is always written first. The request and the
        self-signed certificate are skipped when their path is unset. The
        first failure stops the run; files already written are kept.

        Args:
            config: Resolved generator configuration

        Returns:
            Paths of the written artifacts

        Raises:
            GenerationError: If any stage fails
        """
        private_key = KeyService.create_private_key(config.key_path, config.key_size, config.key_encoding)
        logger.info(f"Generated private key: [{config.key_path}]")
        result = GenerationResult(key_path=config.key_path)

        if config.req_path is not None:
            CSRService.create_csr(config.req_path, config.subject, config.dns_names, private_key)
            logger.info(f"Generated certificate request: [{config.req_path}]")
            result.req_path = config.req_path
        else:
            logger.info("Skip certificate request generation.")

        if config.self_sign_path is not None:
            cert = CertificateService.create_self_signed_certificate(
                config.self_sign_path,
                config.subject,
                config.dns_names,
                config.self_sign_valid_duration,
                private_key,
            )
            details = CertificateParser.describe_certificate(cert)
            logger.info(f"Generated self-signed certificate: [{config.self_sign_path}]")
            logger.info(
                f"Self-signed certificate valid {details['not_before']} - {details['not_after']}, "
                f"SHA-256 fingerprint {details['fingerprint_sha256']}"
            )
            result.self_sign_path = config.self_sign_path
            result.fingerprint_sha256 = details["fingerprint_sha256"]
        else:
            logger.info("Skip self-signed certificate generation.")

        return result
