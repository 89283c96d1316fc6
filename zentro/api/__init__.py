"""FastAPI host for the Zentro chat interface.

Endpoints:
    - GET /health: Service health, model and credential status
    - GET /: NiceGUI chat page (mounted in zentro.main)
"""

from zentro.api.app import create_app

__all__ = ["create_app"]
