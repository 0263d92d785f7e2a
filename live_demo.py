#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                          KECCAK-256 LIVE DEMO                                 ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through the Keccak-256 implementation:
- Known-answer vectors (Ethereum keccak256, not NIST SHA3-256)
- Streaming updates in arbitrary chunks
- Rate-boundary inputs
- Hex interface validation errors
"""

from keccak256 import (
    KeccakContext, keccak256, keccak256_hex, keccak256_hex_string,
    HexValidationError, ContextFinalizedError,
)
from keccak256.core_crypto.sponge import RATE_BYTES


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def main():
    print("\n")
    print("╔" + "═" * 68 + "╗")
    print("║" + "KECCAK-256 - ORIGINAL KECCAK PADDING".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    print_header("PART 1: KNOWN VECTORS")
    vectors = [
        ("", "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"),
        ("68656c6c6f20776f726c64",
         "47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad"),
        ("cc", "eead6dbfc7340a56caedc044696a168870549a6a7f6f56961e84a54bd9970b8a"),
    ]
    for step, (hex_input, expected) in enumerate(vectors, 1):
        result = keccak256_hex_string(hex_input)
        status = "✓" if result == expected else "✗"
        print_step(step, f"keccak256(0x{hex_input or '(empty)'})")
        print(f"      {result} {status}")

    print_header("PART 2: STREAMING")
    message = b"The quick brown fox jumps over the lazy dog"
    ctx = KeccakContext()
    for i in range(0, len(message), 5):
        ctx.update(message[i:i + 5])
    streamed = ctx.finalize().hex()
    print_step(1, "Message fed in 5-byte chunks")
    print(f"      streamed: {streamed}")
    print(f"      one-shot: {keccak256_hex(message)}")
    print(f"      equal:    {streamed == keccak256_hex(message)}")

    print_step(2, "Reusing a finalized context")
    try:
        ctx.update(b"more")
    except ContextFinalizedError as e:
        print(f"      rejected: {e}")

    print_header("PART 3: RATE BOUNDARY")
    for length in (RATE_BYTES - 1, RATE_BYTES, RATE_BYTES + 1, 2 * RATE_BYTES):
        print(f"  {length:4d} bytes -> {keccak256(bytes(length)).hex()}")

    print_header("PART 4: HEX VALIDATION")
    for bad in ("abc", "zz", "0x00"):
        try:
            keccak256_hex_string(bad)
        except HexValidationError as e:
            print(f"  {bad!r:8} -> {e}")

    print("\n" + "═" * 70)
    print("  Demo complete")
    print("═" * 70 + "\n")


if __name__ == "__main__":
    main()
