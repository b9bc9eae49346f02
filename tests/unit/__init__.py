"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Citation footer splitting and URL extraction
    - client/: Config validation, transport failures, store transitions
    - models/: Turn immutability

Uses in-memory transports instead of a live chat service.
Leverages pytest-check for multiple assertions per test.
"""
