# keccak256 Test Suite
"""
Test suite including:
- Unit tests (lanes, permutation, sponge, hash)
- Integration tests (hex interface, files, threads)
- Security tests (misuse, invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
