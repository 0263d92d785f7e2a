"""
Lane Helpers

A Keccak lane is a 64-bit unsigned integer. Python integers are unbounded,
so every operation here masks its result back to 64 bits.

Byte order is always little-endian (byte 0 is the least-significant byte of
the lane), independent of the host's native byte order.
"""

from typing import Iterable, List


# Lane geometry
LANE_BITS = 64
LANE_BYTES = 8
MASK_64 = 0xFFFFFFFFFFFFFFFF


def rotl64(value: int, amount: int) -> int:
    """Circular left rotate of a 64-bit lane, amount in [1, 63]."""
    return ((value << amount) | (value >> (LANE_BITS - amount))) & MASK_64


def bytes_to_lane(data: bytes) -> int:
    """
    Pack up to 8 bytes into one little-endian lane.

    Missing high-order bytes are zero, so a short slice yields a partially
    assembled lane.

    Raises:
        ValueError: If more than 8 bytes are given
    """
    if len(data) > LANE_BYTES:
        raise ValueError(f"A lane holds at most {LANE_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder='little')


def lane_to_bytes(lane: int) -> bytes:
    """Unpack one lane into exactly 8 little-endian bytes."""
    return (lane & MASK_64).to_bytes(LANE_BYTES, byteorder='little')


def bytes_to_lanes(data: bytes) -> List[int]:
    """
    Split a byte string whose length is a multiple of 8 into lanes.

    Raises:
        ValueError: If the length is not a multiple of 8
    """
    if len(data) % LANE_BYTES:
        raise ValueError(f"Length must be a multiple of {LANE_BYTES}, got {len(data)}")
    return [
        int.from_bytes(data[i:i + LANE_BYTES], byteorder='little')
        for i in range(0, len(data), LANE_BYTES)
    ]


def lanes_to_bytes(lanes: Iterable[int]) -> bytes:
    """Serialize lanes back to back, each little-endian."""
    return b''.join(lane_to_bytes(lane) for lane in lanes)
