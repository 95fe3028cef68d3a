"""Command-line entry point."""

import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from tlsbootstrap.models.config import LoggingSettings
from tlsbootstrap.models.errors import GenerationError
from tlsbootstrap.services.config_service import ConfigResolver
from tlsbootstrap.services.generator_service import GeneratorService
from tlsbootstrap.utils.logger import setup_logger

logger = logging.getLogger("tlsbootstrap")

EXIT_OK = 0
EXIT_FAILURE = 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the generator.

    Args:
        argv: Argument list (defaults to the process arguments)

    Returns:
        Process exit code (argparse exits with 2 on usage errors)
    """
    args = ConfigResolver.build_parser().parse_args(argv)

    # An invalid level is reported by config resolution below
    try:
        log_settings = LoggingSettings(level=args.logLevel, file=args.logFile)
    except ValidationError:
        log_settings = LoggingSettings(file=args.logFile)
    setup_logger(log_settings)

    try:
        config = ConfigResolver.resolve_namespace(args)
    except GenerationError as e:
        logger.error(f"Cannot have valid command options: {e}")
        return EXIT_FAILURE

    try:
        GeneratorService().run(config)
    except GenerationError as e:
        logger.error(f"Failed on generating artifacts: {e}")
        return EXIT_FAILURE

    return EXIT_OK
