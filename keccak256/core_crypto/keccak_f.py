"""
Keccak-f[1600] Permutation

The 24-round permutation underlying Keccak-256. The state is a list of 25
64-bit lanes laid out as a 5x5 grid, lane (x, y) at index x + 5*y.

Each round applies five steps:
- Theta: XOR every lane with the parities of two neighbouring columns
- Rho + Pi: rotate each lane and move it to a new position (fused)
- Chi: non-linear row mixing
- Iota: XOR a round constant into lane (0, 0)

The tables below are the published Keccak constants. Changing any entry
produces a different hash function.
"""

from typing import List

from .lanes import MASK_64, rotl64


LANE_COUNT = 25
ROUNDS = 24

# Iota round constants, generated by the Keccak LFSR
ROUND_CONSTANTS = [
    0x0000000000000001, 0x0000000000008082,
    0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001,
    0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088,
    0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B,
    0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080,
    0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080,
    0x0000000080000001, 0x8000000080008008,
]

# Rho rotation amounts, in the order lanes are visited by the pi chain
ROTATION_OFFSETS = [
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
]

# Pi destination indices; lane 0 is a fixed point and never appears
PI_LANES = [
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
]


def _theta(state: List[int]) -> None:
    bc = [
        state[i] ^ state[i + 5] ^ state[i + 10] ^ state[i + 15] ^ state[i + 20]
        for i in range(5)
    ]
    for i in range(5):
        t = bc[(i + 4) % 5] ^ rotl64(bc[(i + 1) % 5], 1)
        for j in range(0, LANE_COUNT, 5):
            state[j + i] ^= t


def _rho_pi(state: List[int]) -> None:
    # Walk the single 24-lane pi cycle starting from lane 1, carrying the
    # displaced lane forward
    t = state[1]
    for i in range(24):
        j = PI_LANES[i]
        displaced = state[j]
        state[j] = rotl64(t, ROTATION_OFFSETS[i])
        t = displaced


def _chi(state: List[int]) -> None:
    for j in range(0, LANE_COUNT, 5):
        row = state[j:j + 5]
        for i in range(5):
            state[j + i] ^= (~row[(i + 1) % 5] & MASK_64) & row[(i + 2) % 5]


def keccak_f1600(state: List[int]) -> None:
    """
    Apply the Keccak-f[1600] permutation to the state in place.

    Args:
        state: 25 lanes, each an int in [0, 2**64)

    Raises:
        ValueError: If the state does not hold exactly 25 lanes
    """
    if len(state) != LANE_COUNT:
        raise ValueError(f"Keccak state must have {LANE_COUNT} lanes, got {len(state)}")

    for round_index in range(ROUNDS):
        _theta(state)
        _rho_pi(state)
        _chi(state)
        # Iota
        state[0] ^= ROUND_CONSTANTS[round_index]
