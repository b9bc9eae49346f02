"""Integration tests for components working together as a system.

No mocks for core functionality - the store talks through the real
ChatTransport to an in-process FastAPI chat service over ASGITransport.
"""
