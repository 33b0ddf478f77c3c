"""FastAPI dependencies for the league calendar API."""

from app.dependencies.auth import verify_api_key

__all__ = ["verify_api_key"]
