"""File system utilities."""

import logging
import os
from pathlib import Path
from typing import Optional

from tlsbootstrap.models.errors import ErrorKind, GenerationError
from tlsbootstrap.utils.pem import encode_pem

logger = logging.getLogger("tlsbootstrap")


class FileUtils:
    """Utility class for file operations."""

    @staticmethod
    def ensure_directory(path: Path) -> None:
        """
        Ensure directory exists, create if not.

        Args:
            path: Directory path to ensure
        """
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory exists: {path}")

    @staticmethod
    def read_binary_file(path: Path) -> bytes:
        """
        Read file contents as bytes.

        Args:
            path: File path to read

        Returns:
            File contents as bytes
        """
        with open(path, "rb") as f:
            return f.read()

    @staticmethod
    def write_pem_file(path: Path, label: str, content: bytes, mode: Optional[int] = None) -> None:
        """
        Create (or truncate) a file holding a single PEM block.

        Args:
            path: Destination file path
            label: PEM block label
            content: DER bytes to wrap
            mode: Permission bits for a newly created file (default: umask)

        Raises:
            GenerationError: If the block cannot be encoded or the file cannot be written
        """
        try:
            pem = encode_pem(label, content)
        except GenerationError as e:
            logger.error(f"Cannot pack {label} PEM block: {e}")
            raise

        try:
            FileUtils.ensure_directory(path.parent)
            flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
            fd = os.open(path, flags, mode if mode is not None else 0o666)
            f = os.fdopen(fd, "wb")
        except OSError as e:
            logger.error(f"Cannot open {label} file for writing [{path}]: {e}")
            raise GenerationError(ErrorKind.OPEN_DESTINATION, f"Cannot open {label} file: {e}", path) from e

        try:
            with f:
                if mode is not None and hasattr(os, "fchmod"):
                    # O_CREAT only applies the mode to new files
                    os.fchmod(f.fileno(), mode)
                f.write(pem)
        except OSError as e:
            logger.error(f"Cannot write {label} file [{path}]: {e}")
            raise GenerationError(ErrorKind.FILE_WRITE, f"Cannot write {label} file: {e}", path) from e

        logger.debug(f"Wrote {label} file: {path}")
