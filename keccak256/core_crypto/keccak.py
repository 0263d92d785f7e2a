"""
Keccak-256 Hash (From Scratch)

One-shot Keccak-256 as used by Ethereum: the original Keccak submission
padding, 256-bit output. This is not NIST SHA3-256; the two differ only in
the padding suffix and so give different digests for every input.

Components:
- Permutation: Keccak-f[1600], 24 rounds (keccak_f.py)
- Sponge: absorb with carry-over, pad10*1, squeeze (sponge.py)
- Output: 256-bit (32-byte) digest
"""

from .sponge import BytesLike, KeccakContext


def keccak256(data: BytesLike) -> bytes:
    """
    Compute the Keccak-256 hash of the input data.

    Args:
        data: Input bytes to hash (may be empty)

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")

    ctx = KeccakContext()
    if len(data):
        ctx.update(data)
    return ctx.finalize()


def keccak256_hex(data: BytesLike) -> str:
    """
    Compute Keccak-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character lowercase hexadecimal string
    """
    return keccak256(data).hex()


def keccak256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute Keccak-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return keccak256(text.encode(encoding))
