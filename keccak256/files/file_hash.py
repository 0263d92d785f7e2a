"""
File Hashing Module

Streaming Keccak-256 over files and binary streams:
- Chunked reads (doesn't load entire file into RAM)
- One KeccakContext per file, so the digest equals keccak256(file contents)
- Constant-time digest comparison for verification
"""

import hmac
import logging
from pathlib import Path
from typing import BinaryIO, Union

from ..core_crypto.sponge import KeccakContext


logger = logging.getLogger(__name__)

# Chunk size for streaming (1 MB default)
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MB


def hash_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Compute Keccak-256 of everything remaining in a binary stream.

    Args:
        stream: Binary file-like object opened for reading
        chunk_size: Read chunk size

    Returns:
        32-byte Keccak-256 digest

    Raises:
        ValueError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    ctx = KeccakContext()
    total = 0
    while chunk := stream.read(chunk_size):
        ctx.update(chunk)
        total += len(chunk)

    logger.debug("hashed %d byte(s) from stream", total)
    return ctx.finalize()


def compute_file_hash(file_path: Union[str, Path],
                      chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Compute Keccak-256 hash of a file (streaming).

    Args:
        file_path: Path to file
        chunk_size: Read chunk size

    Returns:
        32-byte Keccak-256 hash
    """
    with open(file_path, 'rb') as f:
        return hash_stream(f, chunk_size)


def verify_file_hash(file_path: Union[str, Path], expected_hash: bytes,
                     chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Check a file against an expected digest using constant-time comparison."""
    computed = compute_file_hash(file_path, chunk_size)
    return hmac.compare_digest(computed, expected_hash)
