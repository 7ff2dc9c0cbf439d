"""
Task Store Service package.

Exposes the FastAPI application factory and a default app instance
(importable as task_api.app, e.g. for 'uvicorn task_api:app').
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
