"""Command-line configuration resolution."""

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from tlsbootstrap.models.config import (
    DEFAULT_KEY_SIZE,
    DEFAULT_SELF_SIGN_VALID_DAYS,
    GeneratorConfig,
    KeyEncoding,
    LoggingSettings,
)
from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.models.subject import Subject
from tlsbootstrap.utils.validators import validate_domain

logger = logging.getLogger("tlsbootstrap")


class ConfigResolver:
    """Turns an argument list into a validated generator configuration."""

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """
        Build the argument parser.

        Returns:
            A new parser instance; nothing is registered globally
        """
        parser = argparse.ArgumentParser(
            prog="tlsbootstrap",
            description="Generate an RSA private key, a certificate request and a self-signed certificate",
            allow_abbrev=False,
        )
        parser.add_argument("-keySize", "--keySize", type=int, default=DEFAULT_KEY_SIZE, help="key size in bits")
        parser.add_argument(
            "-C", "--C", action="append", default=[], help="country name of certificate subject DN"
        )
        parser.add_argument(
            "-O", "--O", action="append", default=[], help="organization of certificate subject DN"
        )
        parser.add_argument(
            "-OU", "--OU", action="append", default=[], help="organizational unit of certificate subject DN"
        )
        parser.add_argument(
            "-L", "--L", action="append", default=[], help="locality of certificate subject DN"
        )
        parser.add_argument(
            "-ST", "--ST", action="append", default=[], help="state or province name of certificate subject DN"
        )
        parser.add_argument("-CN", "--CN", default="", help="common name of certificate subject DN")
        parser.add_argument(
            "-dnsName", "--dnsName", action="append", default=[], help="DNS names of certificate (*Required*)"
        )
        parser.add_argument("-pkcs1", "--pkcs1", action="store_true", help="write private key in PKCS#1 format")
        parser.add_argument(
            "-selfSignValidDays",
            "--selfSignValidDays",
            type=int,
            default=DEFAULT_SELF_SIGN_VALID_DAYS,
            help="valid days of self signed certificate",
        )
        parser.add_argument("-key", "--key", default="cert-key.pem", help="path of private key (*Required*)")
        parser.add_argument("-req", "--req", default="cert-req.pem", help="path of certificate request")
        parser.add_argument(
            "-selfSign", "--selfSign", default="cert-selfsigned.pem", help="path of self-signed certificate"
        )
        parser.add_argument("-overwrite", "--overwrite", action="store_true", help="overwrite existed files")
        parser.add_argument(
            "-logLevel", "--logLevel", default="INFO", help="log level (DEBUG, INFO, WARNING, ERROR)"
        )
        parser.add_argument("-logFile", "--logFile", default="", help="also write log lines to this file")
        return parser

    @staticmethod
    def prepare_file_path(usage_text: str, target_path: str, overwrite: bool) -> Path:
        """
        Resolve an output path and check it against existing files.

        Args:
            usage_text: Human readable artifact name used in log lines
            target_path: Path given on the command line
            overwrite: Whether replacing an existing file is allowed

        Returns:
            Absolute output path

        Raises:
            GenerationError: If the file exists without overwrite or cannot be checked
        """
        try:
            abs_path = Path(os.path.abspath(target_path))
        except (OSError, ValueError) as e:
            logger.error(f"Cannot have absolute representation of given {usage_text} path [{target_path}]: {e}")
            raise GenerationError(ErrorKind.PATH_CHECK, f"Cannot resolve {usage_text} path: {e}") from e

        try:
            abs_path.stat()
        except FileNotFoundError:
            return abs_path
        except (OSError, ValueError) as e:
            logger.error(f"Cannot check existence of given {usage_text} path [{abs_path}]: {e}")
            raise GenerationError(
                ErrorKind.PATH_CHECK, f"Cannot check existence of {usage_text} path: {e}", abs_path
            ) from e

        if not overwrite:
            logger.error(f"File existed at given {usage_text} path: {abs_path}")
            raise GenerationError(ErrorKind.OUTPUT_EXISTS, f"File existed for {usage_text}", abs_path)

        logger.warning(f"File existed at given {usage_text} path: {abs_path}")
        return abs_path

    @classmethod
    def resolve(cls, argv: Optional[Sequence[str]] = None) -> GeneratorConfig:
        """
        Parse arguments into a generator configuration.

        Args:
            argv: Argument list (defaults to the process arguments)

        Returns:
            Immutable generator configuration

        Raises:
            GenerationError: If required input is missing or invalid, or an output path is unusable
            SystemExit: On command-line usage errors (raised by argparse)
        """
        args = cls.build_parser().parse_args(argv)
        return cls.resolve_namespace(args)

    @classmethod
    def resolve_namespace(cls, args: argparse.Namespace) -> GeneratorConfig:
        """
        Build a generator configuration from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Immutable generator configuration
        """
        if not args.key:
            logger.error("Path of private key is required")
            raise GenerationError(ErrorKind.MISSING_INPUT, "Path of private key is required")

        key_path = cls.prepare_file_path("private key", args.key, args.overwrite)
        req_path = None
        if args.req:
            req_path = cls.prepare_file_path("certificate request", args.req, args.overwrite)
        self_sign_path = None
        if args.selfSign:
            self_sign_path = cls.prepare_file_path("self-signed certificate", args.selfSign, args.overwrite)

        dns_names: List[str] = [name.strip() for name in args.dnsName if name.strip()]
        for name in dns_names:
            try:
                validate_domain(name)
            except ValueError as e:
                logger.warning(f"{e} (used as given)")

        common_name = args.CN.strip()
        if not common_name and dns_names:
            common_name = dns_names[0]

        try:
            subject = Subject(
                country=args.C,
                organization=args.O,
                organizational_unit=args.OU,
                locality=args.L,
                province=args.ST,
                common_name=common_name,
            )
            config = GeneratorConfig(
                key_size=args.keySize,
                subject=subject,
                dns_names=dns_names,
                key_encoding=KeyEncoding.PKCS1 if args.pkcs1 else KeyEncoding.PKCS8,
                self_sign_valid_days=args.selfSignValidDays,
                key_path=key_path,
                req_path=req_path,
                self_sign_path=self_sign_path,
                overwrite=args.overwrite,
                logging=LoggingSettings(level=args.logLevel, file=args.logFile),
            )
        except ValidationError as e:
            messages = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
            logger.error(f"Invalid command options: {messages}")
            raise GenerationError(ErrorKind.INVALID_INPUT, messages) from e

        if not config.dns_names:
            logger.warning("No DNS name given; certificate will carry no subject alternative names")

        return config
