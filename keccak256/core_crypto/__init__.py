# Core Cryptography Module
"""
Core Keccak-256 implementation:
- Lane helpers (little-endian pack/unpack, 64-bit rotate)
- Keccak-f[1600] permutation
- Sponge context (init / update / finalize)
- One-shot keccak256 hashing
"""

from .keccak import keccak256, keccak256_hex, keccak256_string
from .keccak_f import keccak_f1600
from .sponge import (
    KeccakContext, SpongePhase, ContextFinalizedError,
    init, update, finalize,
    DIGEST_SIZE, RATE_BYTES, RATE_WORDS, CAPACITY_WORDS,
)

__all__ = [
    'keccak256',
    'keccak256_hex',
    'keccak256_string',
    'keccak_f1600',
    'KeccakContext',
    'SpongePhase',
    'ContextFinalizedError',
    'init',
    'update',
    'finalize',
    'DIGEST_SIZE',
    'RATE_BYTES',
    'RATE_WORDS',
    'CAPACITY_WORDS',
]
