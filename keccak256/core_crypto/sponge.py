"""
Keccak Sponge (Absorb / Squeeze)

Implements the sponge construction over Keccak-f[1600] with the original
Keccak padding (pad10*1: a single 0x01 byte after the message, 0x80 in the
last byte of the rate). This is the padding used by Ethereum's keccak256,
and it is NOT the NIST SHA3-256 padding, which appends the 0x06 suffix.

Geometry (256-bit output):
- Capacity: 8 lanes (512 bits)
- Rate: 17 lanes (136 bytes) XORed with input per permutation

Input arrives in arbitrary chunks. Bytes are assembled into little-endian
lanes; a partial lane is carried over between update() calls in a cursor
(word_index, byte_index, saved) so that the result does not depend on how
the input was split.

Lifecycle:
    ctx = KeccakContext()       # absorbing
    ctx.update(b"...")          # any number of times
    digest = ctx.finalize()     # finalized, terminal
"""

import logging
from enum import Enum
from typing import List, Tuple, Union

from .keccak_f import LANE_COUNT, keccak_f1600
from .lanes import LANE_BYTES, bytes_to_lane, bytes_to_lanes, lanes_to_bytes


logger = logging.getLogger(__name__)

# Sponge parameters for Keccak-256
OUTPUT_BITS = 256
CAPACITY_WORDS = 2 * OUTPUT_BITS // (8 * LANE_BYTES)   # 8 lanes
RATE_WORDS = LANE_COUNT - CAPACITY_WORDS                # 17 lanes
RATE_BYTES = RATE_WORDS * LANE_BYTES                    # 136 bytes
DIGEST_SIZE = OUTPUT_BITS // 8                          # 32 bytes
DIGEST_LANES = DIGEST_SIZE // LANE_BYTES                # 4 lanes

# pad10*1 end marker, top bit of the last rate lane
PAD_LAST_BIT = 0x8000000000000000

BytesLike = Union[bytes, bytearray, memoryview]


class SpongePhase(Enum):
    """Lifecycle phase of a KeccakContext."""
    ABSORBING = "absorbing"
    FINALIZED = "finalized"


class ContextFinalizedError(RuntimeError):
    """Raised when a finalized context is updated or finalized again."""
    pass


class KeccakContext:
    """
    Streaming Keccak-256 context.

    Example:
        >>> ctx = KeccakContext()
        >>> _ = ctx.update(b"hello ").update(b"world")
        >>> ctx.finalize().hex()[:16]
        '47173285a8d7341e'
    """

    def __init__(self):
        """Create a zeroed context in the absorbing phase."""
        self._state: List[int] = [0] * LANE_COUNT
        self._word_index = 0
        self._byte_index = 0
        self._saved = 0
        self._phase = SpongePhase.ABSORBING

    @property
    def phase(self) -> SpongePhase:
        return self._phase

    @property
    def is_finalized(self) -> bool:
        return self._phase is SpongePhase.FINALIZED

    @property
    def word_index(self) -> int:
        """Next rate lane that will receive a completed input lane."""
        return self._word_index

    @property
    def byte_index(self) -> int:
        """Number of bytes buffered in the partially assembled lane (0-7)."""
        return self._byte_index

    @property
    def lanes(self) -> Tuple[int, ...]:
        """Read-only snapshot of the 25 state lanes."""
        return tuple(self._state)

    def _ensure_absorbing(self, operation: str) -> None:
        if self._phase is not SpongePhase.ABSORBING:
            raise ContextFinalizedError(
                f"Cannot {operation}: context already finalized. Create a new KeccakContext."
            )

    def _absorb_lane(self, lane: int) -> None:
        """XOR one complete lane into the rate, permuting when the rate is full."""
        self._state[self._word_index] ^= lane
        self._word_index += 1
        if self._word_index == RATE_WORDS:
            keccak_f1600(self._state)
            self._word_index = 0

    def update(self, data: BytesLike) -> 'KeccakContext':
        """
        Absorb more input.

        Splitting the input across several calls gives the same digest as
        one call with the concatenation.

        Args:
            data: Bytes-like input, may be empty

        Returns:
            The context itself, for chaining

        Raises:
            TypeError: If data is not bytes-like
            ContextFinalizedError: If the context was already finalized
        """
        self._ensure_absorbing("update")
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")

        length = len(data)
        if not length:
            return self

        # Bytes still needed to complete the lane being assembled (0 if none)
        old_tail = (LANE_BYTES - self._byte_index) & 7

        if length < old_tail:
            self._saved |= bytes_to_lane(data) << (self._byte_index * 8)
            self._byte_index += length
            logger.debug("buffered %d byte(s), %d now pending", length, self._byte_index)
            return self

        pos = 0
        if old_tail:
            self._saved |= bytes_to_lane(data[:old_tail]) << (self._byte_index * 8)
            pos = old_tail
            self._absorb_lane(self._saved)
            self._saved = 0
            self._byte_index = 0

        # Full lanes straight from the input
        words = (length - pos) // LANE_BYTES
        end = pos + words * LANE_BYTES
        for lane in bytes_to_lanes(data[pos:end]):
            self._absorb_lane(lane)

        # Keep the partial trailing lane for the next call
        tail = data[end:]
        self._saved = bytes_to_lane(tail)
        self._byte_index = len(tail)

        logger.debug(
            "absorbed %d byte(s): %d full lane(s), %d byte(s) pending, word_index=%d",
            length, words + (1 if old_tail else 0), self._byte_index, self._word_index,
        )
        return self

    def finalize(self) -> bytes:
        """
        Apply the Keccak padding, permute once and return the digest.

        The digest is the first 4 lanes of the state, each serialized
        little-endian. The state is wiped afterwards and the context can no
        longer be used.

        Returns:
            32-byte digest

        Raises:
            ContextFinalizedError: If called more than once
        """
        self._ensure_absorbing("finalize")
        logger.debug("finalizing with %d buffered byte(s)", self._byte_index)

        # 0x01 right after the last message byte, then 0x80 at the end of the rate
        self._state[self._word_index] ^= self._saved ^ (1 << (self._byte_index * 8))
        self._state[RATE_WORDS - 1] ^= PAD_LAST_BIT
        keccak_f1600(self._state)

        digest = lanes_to_bytes(self._state[:DIGEST_LANES])

        self._wipe()
        self._phase = SpongePhase.FINALIZED
        return digest

    def _wipe(self) -> None:
        """Zero the state and cursor so no input fragments remain."""
        for i in range(LANE_COUNT):
            self._state[i] = 0
        self._saved = 0
        self._byte_index = 0
        self._word_index = 0

    def __repr__(self) -> str:
        return (
            f"KeccakContext(phase={self._phase.value}, "
            f"word_index={self._word_index}, byte_index={self._byte_index})"
        )


def init() -> KeccakContext:
    """Create a fresh Keccak-256 context."""
    return KeccakContext()


def update(ctx: KeccakContext, data: BytesLike) -> KeccakContext:
    """Absorb data into ctx and return it. See KeccakContext.update."""
    return ctx.update(data)


def finalize(ctx: KeccakContext) -> bytes:
    """Finalize ctx and return the 32-byte digest. See KeccakContext.finalize."""
    return ctx.finalize()
