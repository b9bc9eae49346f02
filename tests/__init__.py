"""Test package for the citation chat client.

Structure:
    - unit/: Individual function and class tests
    - integration/: Store, transport and host wired together

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
