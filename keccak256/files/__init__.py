# File Hashing Module
"""
Streaming Keccak-256 digests of files and binary streams.

Files are read in chunks and fed to one KeccakContext, so large files are
never loaded into RAM.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues when running module directly."""
    from . import file_hash
    return getattr(file_hash, name)

__all__ = [
    'compute_file_hash',
    'hash_stream',
    'verify_file_hash',
    'DEFAULT_CHUNK_SIZE',
]
