"""PEM block encoding and decoding."""

import base64
import binascii
import re
from typing import Tuple

from tlsbootstrap.models.errors import ErrorKind, GenerationError

# Base64 characters per body line
PEM_LINE_LENGTH = 64

_PEM_BLOCK = re.compile(
    rb"^-----BEGIN (?P<label>[^\r\n-]+)-----\r?\n(?P<body>[A-Za-z0-9+/=\r\n]*?)-----END (?P=label)-----\r?\n?$"
)


def encode_pem(label: str, content: bytes) -> bytes:
    """
    Wrap binary content in a single PEM block.

    Args:
        label: Block label, e.g. "CERTIFICATE"
        content: DER bytes to encode

    Returns:
        PEM-encoded block terminated by a newline

    Raises:
        GenerationError: If label or content cannot be encoded
    """
    if not label or "-" in label or "\n" in label or "\r" in label:
        raise GenerationError(ErrorKind.ENCODE_BLOCK, f"Invalid PEM label: {label!r}")
    if not isinstance(content, (bytes, bytearray)):
        raise GenerationError(ErrorKind.ENCODE_BLOCK, f"PEM content must be bytes, got {type(content).__name__}")

    body = base64.b64encode(bytes(content))
    lines = [body[i : i + PEM_LINE_LENGTH] for i in range(0, len(body), PEM_LINE_LENGTH)]

    pem = f"-----BEGIN {label}-----\n".encode("ascii")
    for line in lines:
        pem += line + b"\n"
    pem += f"-----END {label}-----\n".encode("ascii")
    return pem


def decode_pem(data: bytes) -> Tuple[str, bytes]:
    """
    Decode a single PEM block.

    Args:
        data: PEM-encoded data holding exactly one block

    Returns:
        Tuple of (label, content)

    Raises:
        ValueError: If data is not a single well-formed PEM block
    """
    match = _PEM_BLOCK.match(data)
    if match is None:
        raise ValueError("Data is not a single PEM block")

    body = re.sub(rb"\s+", b"", match.group("body"))
    try:
        content = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 in PEM body: {e}") from e

    return match.group("label").decode("ascii"), content
