"""FastAPI host for the chat client.

Endpoints:
    - GET /health: Host health status
    - GET /: NiceGUI chat page (mounted by src.main)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
