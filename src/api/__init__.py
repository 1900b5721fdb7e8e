"""FastAPI endpoints for Ask PDF.

The NiceGUI pages are mounted on the same application in integrated mode.

Endpoints:
    - GET /health: Service health status
    - POST /ask: Answer a question about uploaded PDFs
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
