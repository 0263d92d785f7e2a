"""
Hex String Interface

Exposes Keccak-256 as a single callable that takes a hex-encoded input and
returns a hex-encoded digest:

    >>> keccak256_hex_string("68656c6c6f20776f726c64")
    '47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad'

Input rules:
- Empty string is valid and hashes the empty message
- Length must be even
- Only [0-9A-Fa-f] characters (upper or lower case)

Malformed input raises HexValidationError before any hashing happens.
Output is always 64 lowercase hex characters.
"""

import logging
import re

from ..core_crypto.keccak import keccak256


logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r'[0-9A-Fa-f]*')


class HexValidationError(ValueError):
    """Raised when an input string is not valid even-length hex."""
    pass


class KeccakResourceError(RuntimeError):
    """Raised when memory for the input or output buffers cannot be obtained."""
    pass


def validate_hex(text: str) -> None:
    """
    Check that text is even-length hex.

    Raises:
        TypeError: If text is not a str
        HexValidationError: If the length is odd or a character is not hex
    """
    if not isinstance(text, str):
        raise TypeError(f"Hex input must be a str, got {type(text).__name__}")
    if len(text) % 2 != 0:
        raise HexValidationError("Input must be even-length hex string")
    if not _HEX_PATTERN.fullmatch(text):
        raise HexValidationError("Input contains non-hexadecimal characters")


def decode_hex(text: str) -> bytes:
    """
    Decode a validated hex string to bytes.

    Args:
        text: Even-length hex string, may be empty

    Returns:
        Decoded bytes (b"" for the empty string)
    """
    validate_hex(text)
    return bytes.fromhex(text)


def encode_hex(digest: bytes) -> str:
    """Render bytes as lowercase hex, high nibble first."""
    return digest.hex()


def keccak256_hex_string(text: str) -> str:
    """
    Hash hex-encoded input with Keccak-256.

    Args:
        text: Hex-encoded input

    Returns:
        64-character lowercase hex digest

    Raises:
        TypeError: If text is not a str
        HexValidationError: If text is not valid hex
        KeccakResourceError: If buffers could not be allocated
    """
    try:
        data = decode_hex(text)
        digest = keccak256(data)
        result = encode_hex(digest)
    except MemoryError as e:
        logger.error("out of memory hashing %d hex characters", len(text))
        raise KeccakResourceError("Memory allocation failed") from e

    return result
