"""
keccak256 - Keccak-256 hashing (original Keccak padding, as used by Ethereum).

    >>> from keccak256 import keccak256
    >>> keccak256(b"").hex()
    'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
"""

import logging

from .core_crypto.keccak import keccak256, keccak256_hex, keccak256_string
from .core_crypto.sponge import (
    KeccakContext, SpongePhase, ContextFinalizedError,
    init, update, finalize, DIGEST_SIZE,
)
from .integration.hex_interface import (
    HexValidationError, KeccakResourceError, keccak256_hex_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0"

__all__ = [
    'keccak256',
    'keccak256_hex',
    'keccak256_string',
    'keccak256_hex_string',
    'KeccakContext',
    'SpongePhase',
    'ContextFinalizedError',
    'HexValidationError',
    'KeccakResourceError',
    'init',
    'update',
    'finalize',
    'DIGEST_SIZE',
]
