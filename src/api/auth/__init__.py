"""
Auth API package.

Contains the account registration routes, mounted under /api/auth.
"""

from src.api.auth.routes import router

__all__ = ["router"]
