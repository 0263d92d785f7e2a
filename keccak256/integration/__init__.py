# Integration Module
"""
Hex string interface around the Keccak-256 core.

Validates hex input, hashes the decoded bytes and returns a lowercase hex
digest. Malformed input raises HexValidationError.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import hex_interface
    return getattr(hex_interface, name)

__all__ = [
    'HexValidationError',
    'KeccakResourceError',
    'validate_hex',
    'decode_hex',
    'encode_hex',
    'keccak256_hex_string',
]
