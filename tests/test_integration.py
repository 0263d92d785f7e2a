"""
Integration tests for keccak256.

Tests end-to-end workflows combining multiple modules:
- Hex string interface over the core hash
- Package-level API
- Concurrent hashing
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

import keccak256 as keccak_pkg
from keccak256 import keccak256, keccak256_hex, keccak256_hex_string, KeccakContext
from keccak256.integration.hex_interface import decode_hex, encode_hex


class TestHexInterface:
    """Hex in, hex out."""

    def test_empty_string(self):
        """Empty hex hashes the empty message."""
        assert keccak256_hex_string("") == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )

    def test_hello_world(self):
        """Hex of 'hello world'."""
        assert keccak256_hex_string("68656c6c6f20776f726c64") == (
            "47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad"
        )

    def test_uppercase_accepted(self):
        """Upper and lower case hex decode to the same bytes."""
        assert keccak256_hex_string("DEADBEEF") == keccak256_hex_string("deadbeef")
        assert keccak256_hex_string("DeAdBeEf") == keccak256_hex_string("deadbeef")

    def test_output_is_lowercase_hex(self):
        """Output is always 64 lowercase hex characters."""
        for text in ("", "00", "ff" * 200):
            result = keccak256_hex_string(text)
            assert len(result) == 64
            assert result == result.lower()
            int(result, 16)

    def test_matches_byte_interface(self):
        """Hex interface agrees with hashing the raw bytes."""
        data = bytes(range(256))
        assert keccak256_hex_string(data.hex()) == keccak256(data).hex()

    def test_decode_encode(self):
        """decode_hex and encode_hex agree with the builtins."""
        assert decode_hex("") == b""
        assert decode_hex("00ff10") == b"\x00\xff\x10"
        assert encode_hex(b"\x00\xff\x10") == "00ff10"
        assert encode_hex(keccak256(b"abc")) == keccak256_hex(b"abc")

    def test_encode_hex_every_byte_value(self):
        """Every byte value renders as two lowercase hex digits, high nibble first."""
        data = bytes(range(256))
        encoded = encode_hex(data)
        assert encoded == data.hex()
        assert encoded[:4] == "0001"
        assert encoded[-4:] == "feff"
        assert decode_hex(encoded) == data

    def test_long_input(self):
        """10KB of input through the hex interface."""
        text = "ab" * 10240
        assert keccak256_hex_string(text) == keccak256(b"\xab" * 10240).hex()

    def test_all_zero_input(self):
        """Repeated zero bytes hash like the raw bytes."""
        assert keccak256_hex_string("00" * 100) == keccak256(bytes(100)).hex()


class TestPackageAPI:
    """The top-level package exposes the main entry points."""

    def test_exports(self):
        """Public names are importable from the package."""
        for name in keccak_pkg.__all__:
            assert hasattr(keccak_pkg, name), name

    def test_streaming_equals_one_shot(self):
        """Package-level init/update/finalize equal keccak256."""
        ctx = keccak_pkg.init()
        keccak_pkg.update(ctx, b"The quick brown fox ")
        keccak_pkg.update(ctx, b"jumps over the lazy dog")
        assert keccak_pkg.finalize(ctx) == keccak256(
            b"The quick brown fox jumps over the lazy dog"
        )


class TestConcurrency:
    """Independent contexts can hash in parallel threads."""

    def test_parallel_hashing_is_deterministic(self):
        """Threads hashing the same inputs get the serial results."""
        rng = random.Random(7)
        inputs = [bytes(rng.getrandbits(8) for _ in range(rng.randint(0, 400)))
                  for _ in range(32)]
        expected = [keccak256(data) for data in inputs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(keccak256, inputs))

        assert results == expected

    def test_parallel_streaming_contexts(self):
        """Interleaved chunked contexts on separate threads stay independent."""
        def chunked(seed: int) -> bytes:
            data = bytes([seed]) * 500
            ctx = KeccakContext()
            for i in range(0, len(data), 37):
                ctx.update(data[i:i + 37])
            return ctx.finalize()

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(chunked, range(16)))

        assert results == [keccak256(bytes([s]) * 500) for s in range(16)]
        assert len(set(results)) == 16


@pytest.mark.parametrize("text", ["", "00", "01", "cc", "deadbeef"])
def test_hex_interface_repeatable(text):
    """Repeated calls return identical output."""
    assert keccak256_hex_string(text) == keccak256_hex_string(text)
